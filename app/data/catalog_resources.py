CATALOG_RESOURCES = [
    {
        "name": "binnenunits",
        "table": "Binnenunits",
        "id_field": "id",
        "searchable_fields": ["Product", "Merk:", "Serie:"],
        "filterable_fields": [
            "Merk:",
            "Type:",
            "Energielabel Koelen:",
            "Energielabel Verwarmen",
            "Multisplit compatibel",
            "Kleur:",
            "Smart-Functies",
        ],
        "range_fields": ["Prijs (EUR)", "SEER", "SCOP"],
        "single_select_fields": ["Multisplit compatibel"],
        "sortable_fields": ["Vermogen (kW):"],
    },
    {
        "name": "buitenunits",
        "table": "Buitenunits",
        "id_field": "Id",
        "searchable_fields": ["Name", "Merk", "Serie"],
        "filterable_fields": ["Merk", "Single/Multi-Split", "Energielabel_koelen"],
        "range_fields": ["Prijs_EUR", "SEER", "SCOP"],
        "sortable_fields": ["Geluidsdruk (dB)"],
        "param_aliases": {"split_type": "Single/Multi-Split"},
    },
    {
        "name": "omvormers",
        "table": "Omvormers",
        "id_field": "Id",
        "searchable_fields": ["Name", "Merk", "SKU"],
        "filterable_fields": ["Merk", "Type omvormer", "Aantal fases"],
        "range_fields": ["Prijs (EUR)", "Vermogen", "MPPTs", "Garantie (jaren)"],
    },
    {
        "name": "zonnepanelen",
        "table": "Zonnepanelen",
        "id_field": "Id",
        "searchable_fields": ["Product", "Merk", "Product code"],
        "filterable_fields": [
            "Merk",
            "Cell type",
            "Celtechnologie type",
            "Bi-Facial",
            "Glas type",
            "Glas-glas",
            "Celmateriaal",
        ],
        "range_fields": ["Prijs_EUR", "Vermogen_Wp", "Productgarantie (jaren)"],
        "single_select_fields": ["Bi-Facial", "Glas-glas"],
    },
    {
        "name": "thuisbatterijen",
        "table": "Thuisbatterijen",
        "id_field": "Id",
        "searchable_fields": ["Product", "Merk", "Product code"],
        "filterable_fields": ["Merk", "Soort batterij", "Aantal fases", "Categorie", "Compatibility list"],
        "range_fields": ["Prijs", "Batterij Capaciteit (kWh)", "Cyclus levensduur bij 25℃"],
    },
]
