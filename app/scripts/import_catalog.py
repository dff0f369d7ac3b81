from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from sqlalchemy.inspection import inspect as sa_inspect
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.session import SessionLocal
from app.models.catalog import CATALOG_MODELS
from app.schemas.catalog import ResourceConfig
from app.services.catalog_registry import load_registry


def _attribute_names(model: type) -> dict[str, str]:
    """Raw column label -> ORM attribute name."""
    return {attr.columns[0].name: attr.key for attr in sa_inspect(model).column_attrs}


def upsert_catalog_items(db: Session, config: ResourceConfig, items: list[dict[str, Any]]) -> tuple[int, int]:
    model = CATALOG_MODELS[config.table]
    attributes = _attribute_names(model)
    id_attr = attributes[config.id_field]
    created = 0
    updated = 0

    for item in items:
        values = {attributes[label]: value for label, value in item.items() if label in attributes}
        item_id = values.get(id_attr)
        row = db.get(model, item_id) if item_id is not None else None
        if row is None:
            db.add(model(**values))
            created += 1
            continue

        changed = False
        for key, value in values.items():
            if getattr(row, key) != value:
                setattr(row, key, value)
                changed = True
        if changed:
            db.add(row)
            updated += 1

    db.commit()
    return created, updated


def main() -> None:
    parser = argparse.ArgumentParser(description="Upsert catalog items from a JSON array")
    parser.add_argument("resource")
    parser.add_argument("path")
    args = parser.parse_args()

    config = load_registry(settings.CATALOG_RESOURCES_PATH or None).get(args.resource)
    items = json.loads(Path(args.path).read_text(encoding="utf-8"))
    db = SessionLocal()
    try:
        created, updated = upsert_catalog_items(db, config, items)
        total = db.query(CATALOG_MODELS[config.table]).count()
    finally:
        db.close()
    print(f"{config.name} import done: created={created}, updated={updated}, total={total}")


if __name__ == "__main__":
    main()
