from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.session import get_db
from app.services.catalog_adapter import SqlCatalogAdapter
from app.services.catalog_engine import CatalogEngine
from app.services.catalog_registry import CatalogRegistry, load_registry


@lru_cache(maxsize=1)
def get_registry() -> CatalogRegistry:
    return load_registry(settings.CATALOG_RESOURCES_PATH or None)


def get_catalog_engine(
    db: Session = Depends(get_db),
    registry: CatalogRegistry = Depends(get_registry),
) -> CatalogEngine:
    return CatalogEngine(registry, SqlCatalogAdapter(db))
