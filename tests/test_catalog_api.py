import os
import unittest

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Ensure settings can be initialized in test environments
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from app.core.deps import get_catalog_engine, get_registry
from app.db.session import get_db
from app.main import app
from app.models.catalog import Buitenunit, Omvormer, Thuisbatterij
from app.services.catalog_engine import CatalogEngine


class _UnreachableAdapter:
    def fetch_all(self, config):
        raise ConnectionError("connection refused")

    def fetch_one(self, config, item_id):
        raise ConnectionError("connection refused")


class CatalogApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.engine = create_engine(
            "sqlite+pysqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        cls.SessionLocal = sessionmaker(bind=cls.engine, autocommit=False, autoflush=False)
        Omvormer.__table__.create(bind=cls.engine)
        Buitenunit.__table__.create(bind=cls.engine)
        Thuisbatterij.__table__.create(bind=cls.engine)

        with cls.SessionLocal() as db:
            db.add_all(
                [
                    Omvormer(id=1, name="SolarEdge SE3K", merk="SolarEdge", type_omvormer="String", vermogen=3000, aantal_fases="1", mppts=1, prijs="€ 899,00", garantie_jaren=12, sku="SE3K"),
                    Omvormer(id=2, name="SolarEdge SE5K", merk="SolarEdge", type_omvormer="String", vermogen=5000, aantal_fases="1", mppts=1, prijs="€ 1.149,00", garantie_jaren=12, sku="SE5K"),
                    Omvormer(id=3, name="Growatt MIN 3000", merk="Growatt", type_omvormer="String", vermogen=3000, aantal_fases="1", mppts=2, prijs="€ 599,00", garantie_jaren=10, sku="GW-3000"),
                    Omvormer(id=4, name="Growatt MOD 10K", merk="Growatt", type_omvormer="Hybride", vermogen=10000, aantal_fases="3", mppts=2, prijs="€ 1.899,00", garantie_jaren=10, sku="GW-10K"),
                    Omvormer(id=5, name="Enphase IQ8", merk="Enphase", type_omvormer="Micro", vermogen=300, aantal_fases="1", mppts=1, prijs="op aanvraag", garantie_jaren=25, sku="IQ8"),
                ]
            )
            db.add_all(
                [
                    Buitenunit(id=1, name="Daikin 2MXM", merk="Daikin", split_type="Multi-Split", prijs=1450.0, seer=7.1, scop=4.6),
                    Buitenunit(id=2, name="Daikin RXM25", merk="Daikin", split_type="Single-Split", prijs=899.0, seer=8.6, scop=5.1),
                    Buitenunit(id=3, name="Mitsubishi MUZ", merk="Mitsubishi", split_type="Single-Split", prijs=1020.0, seer=8.5, scop=4.7),
                ]
            )
            db.add_all(
                [
                    Thuisbatterij(id=1, product="Huawei LUNA 5", merk="Huawei", prijs="€ 3.250,00", compatibility_list=["Huawei", "SolarEdge"]),
                    Thuisbatterij(id=2, product="BYD HVS 7.7", merk="BYD", prijs="€ 4.100,00", compatibility_list=["SolarEdge", "Fronius", "Growatt"]),
                    Thuisbatterij(id=3, product="Growatt ARK", merk="Growatt", prijs="€ 2.800,00", compatibility_list=["Growatt"]),
                ]
            )
            db.commit()

    @classmethod
    def tearDownClass(cls):
        Thuisbatterij.__table__.drop(bind=cls.engine)
        Buitenunit.__table__.drop(bind=cls.engine)
        Omvormer.__table__.drop(bind=cls.engine)
        cls.engine.dispose()

    def setUp(self):
        def override_get_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self):
        self.client.close()
        app.dependency_overrides.clear()

    def test_lists_configured_resources(self):
        response = self.client.get("/api/catalog")
        self.assertEqual(response.status_code, 200)
        names = [row["name"] for row in response.json()["resources"]]
        self.assertIn("omvormers", names)
        self.assertIn("thuisbatterijen", names)

    def test_query_with_price_string_range_and_brand_filter(self):
        response = self.client.get(
            "/api/catalog/omvormers",
            params={"Merk": "SolarEdge,Growatt", "Prijs (EUR)_min": "800", "sortBy": "Vermogen", "sortOrder": "desc"},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertEqual([row["Id"] for row in body["data"]], [4, 2, 1])
        self.assertEqual(body["data"][0]["Prijs (EUR)"], "€ 1.899,00")
        self.assertEqual(body["pagination"], {"page": 1, "limit": 10, "total": 3, "totalPages": 1})

        merk = body["filterMetadata"]["Merk"]
        self.assertEqual(merk["type"], "multiselect")
        # Enphase has no parseable price, so it never passes the price bound
        self.assertEqual(merk["optionsWithCounts"], [{"value": "SolarEdge", "count": 2}, {"value": "Growatt", "count": 1}])

        prijs = body["filterMetadata"]["Prijs (EUR)"]
        self.assertEqual((prijs["type"], prijs["min"], prijs["max"], prijs["step"]), ("range", 599, 1899, 50))

    def test_sort_by_price_text_is_numeric(self):
        response = self.client.get("/api/catalog/omvormers", params={"sortBy": "Prijs (EUR)"})
        self.assertEqual(response.status_code, 200)
        # Enphase has no parseable price and goes last
        self.assertEqual([row["Id"] for row in response.json()["data"]], [3, 1, 2, 4, 5])

        response = self.client.get("/api/catalog/omvormers", params={"sortBy": "Prijs (EUR)", "sortOrder": "desc"})
        self.assertEqual([row["Id"] for row in response.json()["data"]], [4, 2, 1, 3, 5])

    def test_registry_is_loaded_at_startup(self):
        self.assertIs(app.state.catalog_registry, get_registry())
        self.assertIn("omvormers", app.state.catalog_registry.names())

    def test_pagination_past_the_end(self):
        response = self.client.get("/api/catalog/omvormers", params={"page": "10", "limit": "10"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["data"], [])
        self.assertEqual(body["pagination"], {"page": 10, "limit": 10, "total": 5, "totalPages": 1})

    def test_malformed_parameters_degrade_to_defaults(self):
        response = self.client.get(
            "/api/catalog/omvormers",
            params={"page": "-1", "limit": "lots", "sortBy": "nope", "sortOrder": "sideways", "Vermogen_min": "big"},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual([row["Id"] for row in body["data"]], [1, 2, 3, 4, 5])
        self.assertEqual(body["pagination"]["limit"], 10)

    def test_alias_parameter_for_split_type(self):
        response = self.client.get("/api/catalog/buitenunits", params={"split_type": "Single-Split"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual([row["Id"] for row in response.json()["data"]], [2, 3])

    def test_multi_valued_compatibility_filter(self):
        response = self.client.get("/api/catalog/thuisbatterijen", params={"Compatibility list": "Growatt"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual([row["Id"] for row in body["data"]], [2, 3])
        counts = {row["value"]: row["count"] for row in body["filterMetadata"]["Compatibility list"]["optionsWithCounts"]}
        self.assertEqual(counts, {"SolarEdge": 2, "Huawei": 1, "Fronius": 1, "Growatt": 2})
        self.assertEqual(body["filterMetadata"]["Prijs"]["min"], 2800)

    def test_search(self):
        response = self.client.get("/api/catalog/omvormers", params={"search": "gw-"})
        self.assertEqual([row["Id"] for row in response.json()["data"]], [3, 4])

    def test_unknown_resource_is_404(self):
        response = self.client.get("/api/catalog/warmtepompen")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["error"], "Resource not found")
        self.assertIn("warmtepompen", response.json()["message"])

    def test_get_item(self):
        response = self.client.get("/api/catalog/omvormers/3")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["SKU"], "GW-3000")

    def test_get_missing_item_is_404(self):
        for item_id in ["42", "abc"]:
            response = self.client.get(f"/api/catalog/omvormers/{item_id}")
            self.assertEqual(response.status_code, 404)
            self.assertEqual(response.json()["error"], "Item not found")

    def test_store_failure_is_500_json(self):
        app.dependency_overrides[get_catalog_engine] = lambda: CatalogEngine(get_registry(), _UnreachableAdapter())
        response = self.client.get("/api/catalog/omvormers")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "Failed to fetch omvormers", "message": "connection refused"})
        self.assertTrue(bool(response.headers.get("x-request-id")))

    def test_missing_table_is_500_json(self):
        response = self.client.get("/api/catalog/zonnepanelen")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["error"], "Failed to fetch zonnepanelen")


if __name__ == "__main__":
    unittest.main()
