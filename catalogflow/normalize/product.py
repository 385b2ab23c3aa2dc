"""
Product normalizer.

Turns one raw, product-like JSON object into a `ProductRow`.  Field
names are resolved through the alias table in `aliases.py`; each
resolved value is then coerced according to its kind (text, price,
flag, timestamp or list-joined text).  A product with no usable name
is skipped by returning `None` rather than raising: skipping is a
normal outcome for catalog files that mix header rows, notes or empty
placeholders in with real products.
"""

from __future__ import annotations

import json
import math
import re
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from . import aliases
from .aliases import ALIAS_TABLE, FieldAlias, UNNAMED_SENTINEL
from .schema import ProductRow, UNCATEGORIZED

# A dot right after a letter ends an abbreviation ("Rs.120"), not a decimal.
_NUMBER_RE = re.compile(r"-?(?:\d+(?:\.\d*)?|(?<![A-Za-z])\.\d+)(?:[eE][-+]?\d+)?")
_FALSE_WORDS = {"false", "no", "n", "0", "off", "out of stock"}


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def to_text(value: Any) -> str:
    """Render a JSON value as a single CSV-safe string."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return str(value)


def join_list(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(to_text(v) for v in value if v is not None)
    return to_text(value)


def parse_price(value: Any) -> Optional[float]:
    """Parse a price into a float, or None when it cannot be read.

    Strings may carry a currency symbol, a unit suffix or thousands
    separators (``"Rs. 1,299.00"``); the first number found is used.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        price = float(value)
    elif isinstance(value, str):
        match = _NUMBER_RE.search(value.replace(",", ""))
        if not match:
            return None
        price = float(match.group(0))
    else:
        return None
    if math.isnan(price) or math.isinf(price):
        return None
    return price


def parse_flag(value: Any, default: bool = True) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_WORDS
    return bool(value)


def resolve_name(raw: Mapping[str, Any]) -> Optional[str]:
    """Return the first usable product name in `raw`, if any.

    Keys are tried in the order of `aliases.NAME_ALIAS`.  Non-scalar
    values and the "Unnamed Product" placeholder do not count as names.
    """
    for key in aliases.NAME_ALIAS.keys:
        value = raw.get(key)
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            continue
        name = to_text(value)
        if name and name != UNNAMED_SENTINEL:
            return name
    return None


def _coerce(alias: FieldAlias, raw: Mapping[str, Any], now: str) -> Any:
    value = aliases.first_present(raw, alias.keys)
    if alias.kind == aliases.PRICE:
        return parse_price(value)
    if alias.kind == aliases.FLAG:
        return parse_flag(value)
    if alias.kind == aliases.TIMESTAMP:
        return to_text(value) if value is not None else now
    if alias.kind == aliases.LIST_TEXT:
        return join_list(value)
    return to_text(value)


def normalize_product(
    raw: Any,
    category_override: str = "",
    *,
    now: Optional[str] = None,
) -> Optional[ProductRow]:
    """Normalize a raw product object into a `ProductRow`.

    Args:
        raw: A parsed JSON value expected to be an object.
        category_override: Category inherited from the enclosing
            container.  Takes precedence over the product's own
            `category` field when non-empty.
        now: Timestamp used for missing `created_at`/`updated_at`.
            Defaults to the current UTC time.

    Returns:
        A `ProductRow` with `id` set to 0, or None when `raw` is not an
        object or has no usable name.
    """
    if not isinstance(raw, dict):
        return None
    name = resolve_name(raw)
    if name is None:
        return None

    stamp = now or utc_now()
    override = (category_override or "").strip()
    category = override or to_text(aliases.lookup(raw, "category")) or UNCATEGORIZED

    fields: Dict[str, Any] = {
        "id": 0,
        "name": name,
        "category": category,
        "subcategory": to_text(aliases.lookup(raw, "subcategory")),
    }
    for alias in ALIAS_TABLE:
        fields[alias.field] = _coerce(alias, raw, stamp)
    return ProductRow(**fields)
