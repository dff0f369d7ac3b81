from __future__ import annotations

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterable, Mapping, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.inspection import inspect as sa_inspect
from sqlalchemy.orm import Session

from app.core.errors import CatalogDependencyError
from app.models.catalog import CATALOG_MODELS
from app.schemas.catalog import ResourceConfig
from app.services.catalog_pagination import sort_items
from app.services.catalog_values import Item, scalar_token


class CatalogAdapter(Protocol):
    def fetch_all(self, config: ResourceConfig) -> list[Item]:
        ...

    def fetch_one(self, config: ResourceConfig, item_id: str) -> Item | None:
        ...


def _serialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _serialize_value(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serialize_value(item) for item in value]
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, Decimal):
        return float(value)
    return value


def _row_to_item(row: Any) -> dict[str, Any]:
    mapper = sa_inspect(type(row))
    return {attr.columns[0].name: _serialize_value(getattr(row, attr.key)) for attr in mapper.column_attrs}


class SqlCatalogAdapter:
    """Reads catalog tables through the request's SQLAlchemy session."""

    def __init__(self, db: Session, models: Mapping[str, type] | None = None):
        self.db = db
        self.models = dict(models if models is not None else CATALOG_MODELS)

    def _model(self, config: ResourceConfig):
        model = self.models.get(config.table)
        if model is None:
            raise CatalogDependencyError(config.name, LookupError(f'No table mapped for "{config.table}"'))
        return model

    def _id_column(self, model, config: ResourceConfig):
        for attr in sa_inspect(model).column_attrs:
            if attr.columns[0].name == config.id_field:
                return getattr(model, attr.key)
        raise CatalogDependencyError(config.name, LookupError(f'Table "{config.table}" has no column "{config.id_field}"'))

    def fetch_all(self, config: ResourceConfig) -> list[Item]:
        model = self._model(config)
        id_column = self._id_column(model, config)
        try:
            rows = self.db.query(model).order_by(id_column.asc()).all()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise CatalogDependencyError(config.name, exc) from exc
        return [_row_to_item(row) for row in rows]

    def fetch_one(self, config: ResourceConfig, item_id: str) -> Item | None:
        model = self._model(config)
        id_column = self._id_column(model, config)
        try:
            python_type = id_column.property.columns[0].type.python_type
        except NotImplementedError:
            python_type = str
        try:
            key = python_type(str(item_id).strip())
        except (TypeError, ValueError):
            return None
        try:
            row = self.db.query(model).filter(id_column == key).first()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise CatalogDependencyError(config.name, exc) from exc
        return _row_to_item(row) if row is not None else None


class InMemoryCatalogAdapter:
    """Serves fixed item lists keyed by resource name."""

    def __init__(self, collections: Mapping[str, Iterable[Mapping[str, Any]]] | None = None):
        self._collections: dict[str, list[dict[str, Any]]] = {}
        for name, items in (collections or {}).items():
            self.load(name, items)

    def load(self, resource_name: str, items: Iterable[Mapping[str, Any]]) -> None:
        self._collections[resource_name.strip().lower()] = [dict(item) for item in items]

    def fetch_all(self, config: ResourceConfig) -> list[Item]:
        items = self._collections.get(config.name.strip().lower(), [])
        # callers get copies of the stored rows
        snapshot = [dict(item) for item in items]
        return sort_items(snapshot, config.id_field, "asc", config.id_field)

    def fetch_one(self, config: ResourceConfig, item_id: str) -> Item | None:
        wanted = str(item_id).strip()
        for item in self._collections.get(config.name.strip().lower(), []):
            value = item.get(config.id_field)
            if value is not None and scalar_token(value) == wanted:
                return dict(item)
        return None
