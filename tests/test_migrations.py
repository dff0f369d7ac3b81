import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

# Ensure settings can be initialized in test environments
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from app.models.catalog import CATALOG_MODELS


class MigrationTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.project_root = Path(__file__).resolve().parents[1]
        cls.tmp = tempfile.TemporaryDirectory()
        cls.db_url = f"sqlite+pysqlite:///{Path(cls.tmp.name) / 'migrations.db'}"

        cfg = Config(str(cls.project_root / "alembic.ini"))
        cfg.set_main_option("script_location", str(cls.project_root / "alembic"))
        with mock.patch.dict(os.environ, {"DATABASE_URL": cls.db_url}):
            command.upgrade(cfg, "head")

        cls.engine = create_engine(cls.db_url)
        cls.inspector = inspect(cls.engine)

    @classmethod
    def tearDownClass(cls):
        cls.engine.dispose()
        cls.tmp.cleanup()

    def test_every_catalog_table_exists(self):
        tables = set(self.inspector.get_table_names())
        for table_name in CATALOG_MODELS:
            self.assertIn(table_name, tables)

    def test_columns_match_models(self):
        for table_name, model in CATALOG_MODELS.items():
            migrated = {column["name"] for column in self.inspector.get_columns(table_name)}
            declared = {column.name for column in model.__table__.columns}
            self.assertEqual(migrated, declared, table_name)


if __name__ == "__main__":
    unittest.main()
