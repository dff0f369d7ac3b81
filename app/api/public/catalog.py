from fastapi import APIRouter, Depends, Request

from app.core.deps import get_catalog_engine
from app.services.catalog_engine import CatalogEngine

router = APIRouter()


@router.get("")
def list_resources(engine: CatalogEngine = Depends(get_catalog_engine)):
    return {"resources": engine.describe()}


@router.get("/{resource}")
def query_resource(resource: str, request: Request, engine: CatalogEngine = Depends(get_catalog_engine)):
    # Raw labels such as "Merk:" or "Prijs (EUR)_min" arrive as free-form query keys.
    result = engine.query(resource, dict(request.query_params))
    return result.to_payload()


@router.get("/{resource}/{item_id}")
def get_item(resource: str, item_id: str, engine: CatalogEngine = Depends(get_catalog_engine)):
    return engine.get_item(resource, item_id)
