from fastapi import APIRouter
from app.api.public import catalog

router = APIRouter()
router.include_router(catalog.router, prefix="/catalog", tags=["Catalog"])
