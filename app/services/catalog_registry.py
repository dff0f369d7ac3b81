from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from app.core.errors import CatalogResourceNotFoundError
from app.data.catalog_resources import CATALOG_RESOURCES
from app.schemas.catalog import ResourceConfig

_LOG = logging.getLogger("app.catalog")


def _normalize_resource_name(name: str | None) -> str:
    return str(name or "").strip().lower()


class CatalogRegistry:
    """Resource name -> ResourceConfig table, built once at startup."""

    def __init__(self, configs: Iterable[ResourceConfig]):
        self._configs: dict[str, ResourceConfig] = {}
        for config in configs:
            key = _normalize_resource_name(config.name)
            if key in self._configs:
                raise ValueError(f'Duplicate catalog resource "{config.name}"')
            self._configs[key] = config

    def get(self, name: str) -> ResourceConfig:
        config = self._configs.get(_normalize_resource_name(name))
        if config is None:
            raise CatalogResourceNotFoundError(str(name))
        return config

    def names(self) -> list[str]:
        return [config.name for config in self._configs.values()]

    def __iter__(self):
        return iter(self._configs.values())

    def __len__(self) -> int:
        return len(self._configs)


def registry_from_rows(rows: Iterable[dict[str, Any]]) -> CatalogRegistry:
    return CatalogRegistry(ResourceConfig.model_validate(row) for row in rows)


def load_registry(path: str | None = None) -> CatalogRegistry:
    """Build the registry from a JSON file, or from the built-in table when no path is set."""
    if not path:
        return registry_from_rows(CATALOG_RESOURCES)
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    rows = raw.get("resources", []) if isinstance(raw, dict) else raw
    registry = registry_from_rows(rows)
    _LOG.info("loaded %s catalog resources from %s", len(registry), path)
    return registry
