"""
Field alias table.

Catalog files spell the same attribute in different ways (`desc` vs
`description`, `img` vs `image_url`, `code` vs `sku`).  Each canonical
`ProductRow` field is listed here once with the input keys accepted
for it, in priority order, and the kind of coercion applied to the
first value found.  Keeping the policy in one table means it can be
read and tested without going through the normalizer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

TEXT = "text"
LIST_TEXT = "list_text"
PRICE = "price"
FLAG = "flag"
TIMESTAMP = "timestamp"

UNNAMED_SENTINEL = "Unnamed Product"


@dataclass(frozen=True)
class FieldAlias:
    """Accepted input keys for one canonical field."""

    field: str
    keys: Tuple[str, ...]
    kind: str = TEXT


NAME_ALIAS = FieldAlias("name", ("name", "product_name", "title"))
CATEGORY_ALIAS = FieldAlias("category", ("category",))
SUBCATEGORY_ALIAS = FieldAlias("subcategory", ("subcategory", "sub_category"))

# Order follows PRODUCT_HEADERS; id, name, category and subcategory are
# resolved separately because they depend on the inherited context.
ALIAS_TABLE: Tuple[FieldAlias, ...] = (
    FieldAlias("description", ("description", "desc")),
    FieldAlias("price", ("price",), PRICE),
    FieldAlias("image_url", ("image_url", "image", "img")),
    FieldAlias("in_stock", ("in_stock",), FLAG),
    FieldAlias("created_at", ("created_at",), TIMESTAMP),
    FieldAlias("updated_at", ("updated_at",), TIMESTAMP),
    FieldAlias("brand", ("brand",)),
    FieldAlias("series", ("series",)),
    FieldAlias("material", ("material",)),
    FieldAlias("features", ("features",), LIST_TEXT),
    FieldAlias("specifications", ("specifications",)),
    FieldAlias("dimensions", ("dimensions",)),
    FieldAlias("weight", ("weight",)),
    FieldAlias("color", ("color",)),
    FieldAlias("model", ("model",)),
    FieldAlias("sku", ("sku", "code")),
)

ALIASES_BY_FIELD: Dict[str, FieldAlias] = {
    alias.field: alias for alias in (NAME_ALIAS, CATEGORY_ALIAS, SUBCATEGORY_ALIAS) + ALIAS_TABLE
}


def is_present(value: Any) -> bool:
    """Return True unless `value` is None or a blank string."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def first_present(raw: Mapping[str, Any], keys: Tuple[str, ...]) -> Optional[Any]:
    """Return the value of the first key in `keys` that is present in `raw`."""
    for key in keys:
        value = raw.get(key)
        if is_present(value):
            return value
    return None


def lookup(raw: Mapping[str, Any], field: str) -> Optional[Any]:
    """Resolve a canonical field name against `raw` via the alias table."""
    return first_present(raw, ALIASES_BY_FIELD[field].keys)
