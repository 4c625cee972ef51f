from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .models import CatalogProduct

logger = logging.getLogger(__name__)


def load_catalog(path: str | Path = "products.json") -> dict[str, list[dict[str, Any]]]:
    """Read a products.json catalog: {"products": {"<category>": [ {...}, ... ]}}."""
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise RuntimeError(f"Failed to read product catalog {p}: {e}")

    products = data.get("products") if isinstance(data, dict) else None
    if not isinstance(products, dict):
        raise RuntimeError(f"Product catalog {p} has no 'products' mapping")
    return {str(cat): [row for row in rows if isinstance(row, dict)] for cat, rows in products.items() if isinstance(rows, list)}


def _str(row: dict[str, Any], key: str) -> str:
    val = row.get(key)
    return str(val) if val is not None else ""


def product_from_row(category: str, row: dict[str, Any]) -> CatalogProduct:
    qty = row.get("quantity")
    ingredients = _str(row, "ingredients").replace(";", ", ")
    return CatalogProduct(
        link=_str(row, "link"),
        price=f"{_str(row, 'price')} {_str(row, 'currency')}".strip() or "N/A",
        category=category,
        image_url=_str(row, "imageUrl"),
        description=_str(row, "description"),
        flavor=_str(row, "flavor"),
        ingredients=ingredients,
        weight=_str(row, "weight"),
        quantity=int(qty) if isinstance(qty, (int, float)) and not isinstance(qty, bool) else 0,
        brand=_str(row, "brand"),
        type=_str(row, "type"),
    )


def _category_matches(category: str, term: str) -> bool:
    name = category.lower()
    if term in name:
        return True
    # "cookies" should still find a "Cookie" category.
    return term.endswith("s") and len(term) > 1 and term[:-1] in name


def _row_matches(row: dict[str, Any], term: str) -> bool:
    return any(term in _str(row, key).lower() for key in ("description", "flavor", "type"))


def search_catalog(catalog: dict[str, list[dict[str, Any]]], term: str) -> list[CatalogProduct]:
    """Products whose category, description, flavor or type mentions *term*.

    Category hits come first, then field hits; each product appears once.
    """
    needle = term.strip().lower()
    if not needle:
        return []

    seen: set[int] = set()
    out: list[CatalogProduct] = []

    def _add(category: str, row: dict[str, Any]) -> None:
        if id(row) in seen:
            return
        seen.add(id(row))
        out.append(product_from_row(category, row))

    for category, rows in catalog.items():
        if _category_matches(category, needle):
            for row in rows:
                _add(category, row)

    for category, rows in catalog.items():
        for row in rows:
            if _row_matches(row, needle):
                _add(category, row)

    logger.debug("Catalog search %r matched %d products", term, len(out))
    return out
