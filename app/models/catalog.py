from sqlalchemy import Float, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base

# Column names are the raw catalog labels; attribute names are python-safe.


class Binnenunit(Base):
    __tablename__ = "Binnenunits"
    id: Mapped[int] = mapped_column("id", Integer, primary_key=True)
    product: Mapped[str | None] = mapped_column("Product", String(300), nullable=True)
    logo: Mapped[str | None] = mapped_column("Logo:", Text, nullable=True)
    foto_unit: Mapped[str | None] = mapped_column("Foto unit:", Text, nullable=True)
    kleur: Mapped[str | None] = mapped_column("Kleur:", String(100), nullable=True)
    merk: Mapped[str | None] = mapped_column("Merk:", String(100), nullable=True)
    serie: Mapped[str | None] = mapped_column("Serie:", String(200), nullable=True)
    unit_type: Mapped[str | None] = mapped_column("Type:", String(100), nullable=True)
    modelvariant: Mapped[str | None] = mapped_column("Modelvariant:", String(200), nullable=True)
    prijs: Mapped[str | None] = mapped_column("Prijs (EUR)", String(50), nullable=True)
    vermogen_categorie: Mapped[str | None] = mapped_column("Vermogen categorie", String(50), nullable=True)
    seer: Mapped[str | None] = mapped_column("SEER", String(20), nullable=True)
    scop: Mapped[str | None] = mapped_column("SCOP", String(20), nullable=True)
    energielabel_koelen: Mapped[str | None] = mapped_column("Energielabel Koelen:", String(10), nullable=True)
    energielabel_verwarmen: Mapped[str | None] = mapped_column("Energielabel Verwarmen", String(10), nullable=True)
    multisplit_compatibel: Mapped[str | None] = mapped_column("Multisplit compatibel", String(20), nullable=True)
    smart_functies: Mapped[str | None] = mapped_column("Smart-Functies", String(200), nullable=True)
    vermogen_kw: Mapped[float | None] = mapped_column("Vermogen (kW):", Float, nullable=True)
    datasheet: Mapped[list | None] = mapped_column("Datasheet/Brochure", JSON, nullable=True)


class Buitenunit(Base):
    __tablename__ = "Buitenunits"
    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True)
    name: Mapped[str | None] = mapped_column("Name", String(300), nullable=True)
    merk: Mapped[str | None] = mapped_column("Merk", String(100), nullable=True)
    serie: Mapped[str | None] = mapped_column("Serie", String(200), nullable=True)
    split_type: Mapped[str | None] = mapped_column("Single/Multi-Split", String(50), nullable=True)
    modelvariant: Mapped[str | None] = mapped_column("Modelvariant:", String(200), nullable=True)
    prijs: Mapped[float | None] = mapped_column("Prijs_EUR", Float, nullable=True)
    vermogen_kw: Mapped[str | None] = mapped_column("Vermogen (kW)", String(50), nullable=True)
    vermogen_categorie: Mapped[str | None] = mapped_column("Vermogen categorie", String(50), nullable=True)
    seer: Mapped[float | None] = mapped_column("SEER", Float, nullable=True)
    scop: Mapped[float | None] = mapped_column("SCOP", Float, nullable=True)
    energielabel_koelen: Mapped[str | None] = mapped_column("Energielabel_koelen", String(10), nullable=True)
    geluidsdruk: Mapped[float | None] = mapped_column("Geluidsdruk (dB)", Float, nullable=True)
    datasheet: Mapped[list | None] = mapped_column("Datasheet:", JSON, nullable=True)


class Omvormer(Base):
    __tablename__ = "Omvormers"
    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True)
    name: Mapped[str | None] = mapped_column("Name", String(300), nullable=True)
    afbeelding: Mapped[str | None] = mapped_column("Afbeelding", Text, nullable=True)
    logo: Mapped[str | None] = mapped_column("Logo", Text, nullable=True)
    merk: Mapped[str | None] = mapped_column("Merk", String(100), nullable=True)
    type_omvormer: Mapped[str | None] = mapped_column("Type omvormer", String(100), nullable=True)
    vermogen: Mapped[float | None] = mapped_column("Vermogen", Float, nullable=True)
    aantal_fases: Mapped[str | None] = mapped_column("Aantal fases", String(20), nullable=True)
    mppts: Mapped[int | None] = mapped_column("MPPTs", Integer, nullable=True)
    strings_per_mppt: Mapped[int | None] = mapped_column("Strings per MPPT", Integer, nullable=True)
    prijs: Mapped[str | None] = mapped_column("Prijs (EUR)", String(50), nullable=True)
    currency: Mapped[str | None] = mapped_column("Currency", String(10), nullable=True)
    garantie_jaren: Mapped[int | None] = mapped_column("Garantie (jaren)", Integer, nullable=True)
    sku: Mapped[str | None] = mapped_column("SKU", String(100), nullable=True)
    datasheet: Mapped[list | None] = mapped_column("Datasheet", JSON, nullable=True)


class Zonnepaneel(Base):
    __tablename__ = "Zonnepanelen"
    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True)
    product: Mapped[str | None] = mapped_column("Product", String(300), nullable=True)
    afbeelding: Mapped[str | None] = mapped_column("Afbeelding", Text, nullable=True)
    product_code: Mapped[str | None] = mapped_column("Product code", String(100), nullable=True)
    merk: Mapped[str | None] = mapped_column("Merk", String(100), nullable=True)
    vermogen_wp: Mapped[float | None] = mapped_column("Vermogen_Wp", Float, nullable=True)
    lengte_mm: Mapped[int | None] = mapped_column("Lengte (mm)", Integer, nullable=True)
    breedte_mm: Mapped[int | None] = mapped_column("Breedte (mm)", Integer, nullable=True)
    celtechnologie_type: Mapped[str | None] = mapped_column("Celtechnologie type", String(100), nullable=True)
    bi_facial: Mapped[str | None] = mapped_column("Bi-Facial", String(10), nullable=True)
    glas_type: Mapped[str | None] = mapped_column("Glas type", String(100), nullable=True)
    glas_glas: Mapped[str | None] = mapped_column("Glas-glas", String(10), nullable=True)
    cell_type: Mapped[str | None] = mapped_column("Cell type", String(100), nullable=True)
    celmateriaal: Mapped[str | None] = mapped_column("Celmateriaal", String(100), nullable=True)
    productgarantie_jaren: Mapped[int | None] = mapped_column("Productgarantie (jaren)", Integer, nullable=True)
    prijs: Mapped[float | None] = mapped_column("Prijs_EUR", Float, nullable=True)
    datasheet: Mapped[str | None] = mapped_column("Datasheet", Text, nullable=True)


class Thuisbatterij(Base):
    __tablename__ = "Thuisbatterijen"
    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True)
    product: Mapped[str | None] = mapped_column("Product", String(300), nullable=True)
    product_code: Mapped[str | None] = mapped_column("Product code", String(100), nullable=True)
    merk: Mapped[str | None] = mapped_column("Merk", String(100), nullable=True)
    soort_batterij: Mapped[str | None] = mapped_column("Soort batterij", String(100), nullable=True)
    aantal_fases: Mapped[str | None] = mapped_column("Aantal fases", String(20), nullable=True)
    categorie: Mapped[str | None] = mapped_column("Categorie", String(100), nullable=True)
    vermogen_categorie: Mapped[str | None] = mapped_column("Vermogen categorie", String(50), nullable=True)
    capaciteit_kwh: Mapped[str | None] = mapped_column("Batterij Capaciteit (kWh)", String(50), nullable=True)
    ontladingsvermogen_kw: Mapped[str | None] = mapped_column("Ontladingsvermogen (kW)", String(50), nullable=True)
    cyclus_levensduur: Mapped[int | None] = mapped_column("Cyclus levensduur bij 25℃", Integer, nullable=True)
    prijs: Mapped[str | None] = mapped_column("Prijs", String(50), nullable=True)
    datasheet: Mapped[list | None] = mapped_column("Datasheet", JSON, nullable=True)
    compatibility_list: Mapped[list | None] = mapped_column("Compatibility list", JSON, nullable=True)


CATALOG_MODELS = {
    model.__tablename__: model
    for model in (Binnenunit, Buitenunit, Omvormer, Zonnepaneel, Thuisbatterij)
}
