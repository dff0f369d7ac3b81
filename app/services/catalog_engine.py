from __future__ import annotations

import logging
from dataclasses import dataclass
from time import perf_counter
from typing import Any, Mapping

from app.core.errors import CatalogDependencyError, CatalogItemNotFoundError
from app.schemas.catalog import ResourceConfig, ResourceSummary
from app.services.catalog_adapter import CatalogAdapter
from app.services.catalog_facets import FacetSet, compute_facets
from app.services.catalog_pagination import PageResult, paginate
from app.services.catalog_predicates import build_predicate
from app.services.catalog_query import CanonicalQuery, normalize_query
from app.services.catalog_registry import CatalogRegistry
from app.services.catalog_values import Item

_LOG = logging.getLogger("app.catalog")


@dataclass(frozen=True)
class CatalogResult:
    config: ResourceConfig
    query: CanonicalQuery
    page: PageResult
    facets: FacetSet

    def to_payload(self) -> dict[str, Any]:
        return {
            "data": list(self.page.items),
            "pagination": self.page.pagination(),
            "filterOptions": self.facets.filter_options(),
            "filterMetadata": self.facets.filter_metadata(self.config),
        }


class CatalogEngine:
    """query(resource, params) for every catalog resource.

    Stateless between calls: the only shared pieces are the read-only
    registry and the adapter, and the adapter is asked for one snapshot per
    request. Filtering, sorting, paging and faceting all run over that list.
    """

    def __init__(self, registry: CatalogRegistry, adapter: CatalogAdapter):
        self.registry = registry
        self.adapter = adapter

    def _snapshot(self, config: ResourceConfig) -> list[Item]:
        try:
            return list(self.adapter.fetch_all(config))
        except CatalogDependencyError:
            raise
        except Exception as exc:
            raise CatalogDependencyError(config.name, exc) from exc

    def query(self, resource_name: str, raw_params: Mapping[str, str]) -> CatalogResult:
        config = self.registry.get(resource_name)
        started_at = perf_counter()
        items = self._snapshot(config)

        query = normalize_query(raw_params, config)
        predicate = build_predicate(config, query)
        page = paginate(items, predicate, query, config.id_field, numeric_fields=config.range_fields)
        facets = compute_facets(config, predicate, items)

        _LOG.debug(
            "catalog query resource=%s items=%s matched=%s page=%s limit=%s duration_ms=%.2f",
            config.name,
            len(items),
            page.total,
            page.page,
            page.limit,
            (perf_counter() - started_at) * 1000.0,
        )
        return CatalogResult(config=config, query=query, page=page, facets=facets)

    def get_item(self, resource_name: str, item_id: str) -> Item:
        config = self.registry.get(resource_name)
        try:
            item = self.adapter.fetch_one(config, item_id)
        except CatalogDependencyError:
            raise
        except Exception as exc:
            raise CatalogDependencyError(config.name, exc) from exc
        if item is None:
            raise CatalogItemNotFoundError(config.name, item_id)
        return item

    def describe(self) -> list[dict[str, Any]]:
        return [
            ResourceSummary(
                name=config.name,
                id_field=config.id_field,
                searchable_fields=config.searchable_fields,
                filterable_fields=config.filterable_fields,
                range_fields=config.range_fields,
            ).model_dump()
            for config in self.registry
        ]
