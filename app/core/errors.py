from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

_LOG = logging.getLogger("app.catalog")


class CatalogError(Exception):
    """Base error surfaced by the catalog engine to its callers."""

    status_code = 500

    def __init__(self, message: str, *, error: str | None = None):
        super().__init__(message)
        self.message = message
        self.error = error or message


class CatalogResourceNotFoundError(CatalogError):
    status_code = 404

    def __init__(self, resource_name: str):
        super().__init__(
            f'Unknown catalog resource "{resource_name}"',
            error="Resource not found",
        )
        self.resource_name = resource_name


class CatalogItemNotFoundError(CatalogError):
    status_code = 404

    def __init__(self, resource_name: str, item_id: str):
        super().__init__(
            f'Item "{item_id}" does not exist in {resource_name}',
            error="Item not found",
        )
        self.resource_name = resource_name
        self.item_id = item_id


class CatalogDependencyError(CatalogError):
    """The backing store could not deliver the item collection."""

    status_code = 500

    def __init__(self, resource_name: str, cause: BaseException):
        super().__init__(
            str(cause) or cause.__class__.__name__,
            error=f"Failed to fetch {resource_name}",
        )
        self.resource_name = resource_name
        self.cause = cause


def error_payload(error: str, message: str) -> dict[str, str]:
    return {"error": error, "message": message}


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(CatalogError)
    async def _catalog_error_handler(request: Request, exc: CatalogError):
        if isinstance(exc, CatalogDependencyError):
            _LOG.error(
                "catalog store failure resource=%s path=%s request_id=%s",
                exc.resource_name,
                request.url.path,
                getattr(request.state, "request_id", "-"),
                exc_info=exc.cause,
            )
        return JSONResponse(status_code=exc.status_code, content=error_payload(exc.error, exc.message))

    @app.exception_handler(Exception)
    async def _unexpected_error_handler(request: Request, exc: Exception):
        _LOG.exception("unhandled error path=%s", request.url.path)
        return JSONResponse(status_code=500, content=error_payload("Internal server error", str(exc) or "Unknown error"))
