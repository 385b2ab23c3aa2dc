"""
Catalog shape classification.

Catalog files arrive in a handful of layouts.  This module names them
with explicit enums and decides which one applies, without walking
into the products themselves:

* `DocumentShape` – the layout of the parsed document as a whole.
* `ElementShape` – the layout of one entry of a top-level array.  An
  array may mix categorised and bare entries, so each element is
  classified on its own.
* `BucketKind` – what a property value of a category-keyed object
  holds.

The walker in `walker.py` dispatches on these values.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from ..normalize.aliases import NAME_ALIAS, first_present

PRODUCTS_KEY = "products"
SUBCATEGORIES_KEY = "subcategories"


class DocumentShape(Enum):
    ARRAY = "array"                          # classified per element
    OBJECT_WITH_PRODUCTS = "object_with_products"
    SINGLE_PRODUCT = "single_product"
    CATEGORY_KEYS = "category_keys"
    MALFORMED = "malformed"                  # `products` is not a list
    EMPTY = "empty"                          # scalar or null document


class ElementShape(Enum):
    WITH_PRODUCTS = "with_products"
    WITH_SUBCATEGORIES = "with_subcategories"
    BARE_PRODUCT = "bare_product"
    MALFORMED = "malformed"
    NOT_AN_OBJECT = "not_an_object"


class BucketKind(Enum):
    PRODUCT_LIST = "product_list"
    PRODUCT_OBJECT = "product_object"
    NEITHER = "neither"


def _claims_container(obj: dict, key: str) -> bool:
    """True when `key` is set on `obj` but does not hold a list."""
    value = obj.get(key)
    return value is not None and not isinstance(value, list)


def classify_element(element: Any) -> ElementShape:
    """Classify one entry of a top-level catalog array."""
    if not isinstance(element, dict):
        return ElementShape.NOT_AN_OBJECT
    if isinstance(element.get(PRODUCTS_KEY), list):
        return ElementShape.WITH_PRODUCTS
    if isinstance(element.get(SUBCATEGORIES_KEY), list):
        return ElementShape.WITH_SUBCATEGORIES
    if _claims_container(element, PRODUCTS_KEY) or _claims_container(element, SUBCATEGORIES_KEY):
        return ElementShape.MALFORMED
    return ElementShape.BARE_PRODUCT


def classify_bucket(value: Any) -> BucketKind:
    """Classify the value stored under one key of a category-keyed object."""
    if isinstance(value, list):
        return BucketKind.PRODUCT_LIST
    if isinstance(value, dict):
        return BucketKind.PRODUCT_OBJECT
    return BucketKind.NEITHER


def looks_like_product(obj: dict) -> bool:
    """True when `obj` carries any of the accepted name fields."""
    return first_present(obj, NAME_ALIAS.keys) is not None


def classify_document(document: Any) -> DocumentShape:
    """Decide the top-level layout of a parsed catalog document.

    Checks run in priority order: arrays first, then objects holding
    a `products` list, objects that are themselves a product, and
    finally objects whose keys are category names.
    """
    if isinstance(document, list):
        return DocumentShape.ARRAY
    if not isinstance(document, dict):
        return DocumentShape.EMPTY
    if isinstance(document.get(PRODUCTS_KEY), list):
        return DocumentShape.OBJECT_WITH_PRODUCTS
    if _claims_container(document, PRODUCTS_KEY):
        return DocumentShape.MALFORMED
    if looks_like_product(document):
        return DocumentShape.SINGLE_PRODUCT
    return DocumentShape.CATEGORY_KEYS
