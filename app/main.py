import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.core.deps import get_registry
from app.core.errors import install_error_handlers
from app.core.http_hardening import install_http_hardening
from app.api.public.router import router as public_router

logging.getLogger("app").setLevel(settings.LOG_LEVEL.upper())

app = FastAPI(title=settings.APP_NAME, version="0.1.0")
# resource table loads at import; a bad CATALOG_RESOURCES_PATH fails here
app.state.catalog_registry = get_registry()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)
install_http_hardening(app)
install_error_handlers(app)

app.include_router(public_router, prefix="/api")

@app.get("/", include_in_schema=False)
def landing():
    return JSONResponse({"service": settings.APP_NAME, "status": "ok"})

@app.get("/health")
def health():
    return {"status": "ok"}
