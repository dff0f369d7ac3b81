"""catalog tables
Revision ID: 0001_catalog_tables
Revises:
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa

revision = "0001_catalog_tables"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "Binnenunits",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("Product", sa.String(length=300), nullable=True),
        sa.Column("Logo:", sa.Text(), nullable=True),
        sa.Column("Foto unit:", sa.Text(), nullable=True),
        sa.Column("Kleur:", sa.String(length=100), nullable=True),
        sa.Column("Merk:", sa.String(length=100), nullable=True),
        sa.Column("Serie:", sa.String(length=200), nullable=True),
        sa.Column("Type:", sa.String(length=100), nullable=True),
        sa.Column("Modelvariant:", sa.String(length=200), nullable=True),
        sa.Column("Prijs (EUR)", sa.String(length=50), nullable=True),
        sa.Column("Vermogen categorie", sa.String(length=50), nullable=True),
        sa.Column("SEER", sa.String(length=20), nullable=True),
        sa.Column("SCOP", sa.String(length=20), nullable=True),
        sa.Column("Energielabel Koelen:", sa.String(length=10), nullable=True),
        sa.Column("Energielabel Verwarmen", sa.String(length=10), nullable=True),
        sa.Column("Multisplit compatibel", sa.String(length=20), nullable=True),
        sa.Column("Smart-Functies", sa.String(length=200), nullable=True),
        sa.Column("Vermogen (kW):", sa.Float(), nullable=True),
        sa.Column("Datasheet/Brochure", sa.JSON(), nullable=True),
    )

    op.create_table(
        "Buitenunits",
        sa.Column("Id", sa.Integer(), primary_key=True),
        sa.Column("Name", sa.String(length=300), nullable=True),
        sa.Column("Merk", sa.String(length=100), nullable=True),
        sa.Column("Serie", sa.String(length=200), nullable=True),
        sa.Column("Single/Multi-Split", sa.String(length=50), nullable=True),
        sa.Column("Modelvariant:", sa.String(length=200), nullable=True),
        sa.Column("Prijs_EUR", sa.Float(), nullable=True),
        sa.Column("Vermogen (kW)", sa.String(length=50), nullable=True),
        sa.Column("Vermogen categorie", sa.String(length=50), nullable=True),
        sa.Column("SEER", sa.Float(), nullable=True),
        sa.Column("SCOP", sa.Float(), nullable=True),
        sa.Column("Energielabel_koelen", sa.String(length=10), nullable=True),
        sa.Column("Geluidsdruk (dB)", sa.Float(), nullable=True),
        sa.Column("Datasheet:", sa.JSON(), nullable=True),
    )

    op.create_table(
        "Omvormers",
        sa.Column("Id", sa.Integer(), primary_key=True),
        sa.Column("Name", sa.String(length=300), nullable=True),
        sa.Column("Afbeelding", sa.Text(), nullable=True),
        sa.Column("Logo", sa.Text(), nullable=True),
        sa.Column("Merk", sa.String(length=100), nullable=True),
        sa.Column("Type omvormer", sa.String(length=100), nullable=True),
        sa.Column("Vermogen", sa.Float(), nullable=True),
        sa.Column("Aantal fases", sa.String(length=20), nullable=True),
        sa.Column("MPPTs", sa.Integer(), nullable=True),
        sa.Column("Strings per MPPT", sa.Integer(), nullable=True),
        sa.Column("Prijs (EUR)", sa.String(length=50), nullable=True),
        sa.Column("Currency", sa.String(length=10), nullable=True),
        sa.Column("Garantie (jaren)", sa.Integer(), nullable=True),
        sa.Column("SKU", sa.String(length=100), nullable=True),
        sa.Column("Datasheet", sa.JSON(), nullable=True),
    )

    op.create_table(
        "Zonnepanelen",
        sa.Column("Id", sa.Integer(), primary_key=True),
        sa.Column("Product", sa.String(length=300), nullable=True),
        sa.Column("Afbeelding", sa.Text(), nullable=True),
        sa.Column("Product code", sa.String(length=100), nullable=True),
        sa.Column("Merk", sa.String(length=100), nullable=True),
        sa.Column("Vermogen_Wp", sa.Float(), nullable=True),
        sa.Column("Lengte (mm)", sa.Integer(), nullable=True),
        sa.Column("Breedte (mm)", sa.Integer(), nullable=True),
        sa.Column("Celtechnologie type", sa.String(length=100), nullable=True),
        sa.Column("Bi-Facial", sa.String(length=10), nullable=True),
        sa.Column("Glas type", sa.String(length=100), nullable=True),
        sa.Column("Glas-glas", sa.String(length=10), nullable=True),
        sa.Column("Cell type", sa.String(length=100), nullable=True),
        sa.Column("Celmateriaal", sa.String(length=100), nullable=True),
        sa.Column("Productgarantie (jaren)", sa.Integer(), nullable=True),
        sa.Column("Prijs_EUR", sa.Float(), nullable=True),
        sa.Column("Datasheet", sa.Text(), nullable=True),
    )

    op.create_table(
        "Thuisbatterijen",
        sa.Column("Id", sa.Integer(), primary_key=True),
        sa.Column("Product", sa.String(length=300), nullable=True),
        sa.Column("Product code", sa.String(length=100), nullable=True),
        sa.Column("Merk", sa.String(length=100), nullable=True),
        sa.Column("Soort batterij", sa.String(length=100), nullable=True),
        sa.Column("Aantal fases", sa.String(length=20), nullable=True),
        sa.Column("Categorie", sa.String(length=100), nullable=True),
        sa.Column("Vermogen categorie", sa.String(length=50), nullable=True),
        sa.Column("Batterij Capaciteit (kWh)", sa.String(length=50), nullable=True),
        sa.Column("Ontladingsvermogen (kW)", sa.String(length=50), nullable=True),
        sa.Column("Cyclus levensduur bij 25℃", sa.Integer(), nullable=True),
        sa.Column("Prijs", sa.String(length=50), nullable=True),
        sa.Column("Datasheet", sa.JSON(), nullable=True),
        sa.Column("Compatibility list", sa.JSON(), nullable=True),
    )

def downgrade():
    op.drop_table("Thuisbatterijen")
    op.drop_table("Zonnepanelen")
    op.drop_table("Omvormers")
    op.drop_table("Buitenunits")
    op.drop_table("Binnenunits")
