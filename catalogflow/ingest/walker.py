"""
Recursive catalog walker.

Given a parsed catalog document, yield one `ProductRow` for every
usable product it contains.  The walk follows the layout reported by
`shapes.py`: category → subcategory → product.  Categories and
subcategories are inherited from the enclosing container; a product's
own `category` field is only used when no container supplies one.

Structural oddities never abort the walk.  A container whose
`products` or `subcategories` value is not a list contributes nothing,
and products without a usable name are skipped.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterator, List, Optional

from ..errors import MalformedContainer
from ..normalize.aliases import first_present
from ..normalize.product import normalize_product, to_text, utc_now
from ..normalize.schema import ProductRow, UNCATEGORIZED
from .shapes import (
    PRODUCTS_KEY,
    SUBCATEGORIES_KEY,
    BucketKind,
    DocumentShape,
    ElementShape,
    classify_bucket,
    classify_document,
    classify_element,
)

logger = logging.getLogger(__name__)

CATEGORY_LABEL_KEYS = ("category", "name")
SUBCATEGORY_LABEL_KEYS = ("name", "subcategory")


def category_label(container: dict) -> str:
    """Category inherited by products inside `container`."""
    return to_text(first_present(container, CATEGORY_LABEL_KEYS)) or UNCATEGORIZED


def subcategory_label(container: dict) -> str:
    return to_text(first_present(container, SUBCATEGORY_LABEL_KEYS))


def _container(obj: Any, key: str) -> List[Any]:
    if not isinstance(obj, dict):
        raise MalformedContainer(key, obj)
    value = obj.get(key)
    if not isinstance(value, list):
        raise MalformedContainer(key, value)
    return value


def _normalize_all(items: List[Any], category: str, source: str, now: str) -> Iterator[ProductRow]:
    for item in items:
        row = normalize_product(item, category, now=now)
        if row is None:
            logger.debug("Skipping unnamed product in %s (category %r)", source, category)
            continue
        yield row


def _walk_subcategories(element: dict, source: str, now: str) -> Iterator[ProductRow]:
    category = category_label(element)
    for entry in _container(element, SUBCATEGORIES_KEY):
        try:
            products = _container(entry, PRODUCTS_KEY)
        except MalformedContainer as exc:
            logger.debug("Empty subcategory in %s/%s: %s", source, category, exc)
            continue
        label = subcategory_label(entry)
        for row in _normalize_all(products, category, source, now):
            # The container's label supersedes any product-level subcategory.
            yield replace(row, subcategory=label)


def _walk_element(element: Any, source: str, now: str) -> Iterator[ProductRow]:
    shape = classify_element(element)
    if shape is ElementShape.WITH_PRODUCTS:
        yield from _normalize_all(element[PRODUCTS_KEY], category_label(element), source, now)
    elif shape is ElementShape.WITH_SUBCATEGORIES:
        yield from _walk_subcategories(element, source, now)
    elif shape is ElementShape.BARE_PRODUCT:
        yield from _normalize_all([element], "", source, now)
    elif shape is ElementShape.MALFORMED:
        logger.debug("Malformed container in %s: %r", source, element.get("name") or element.get("category"))
    else:
        logger.debug("Ignoring non-object entry in %s: %r", source, element)


def _walk_category_keys(document: dict, source: str, now: str) -> Iterator[ProductRow]:
    for key, value in document.items():
        kind = classify_bucket(value)
        if kind is BucketKind.PRODUCT_LIST:
            yield from _normalize_all(value, key, source, now)
        elif kind is BucketKind.PRODUCT_OBJECT:
            yield from _normalize_all([value], key, source, now)
        else:
            logger.debug("Ignoring scalar key %r in %s", key, source)


def iter_products(document: Any, source: str = "", *, now: Optional[str] = None) -> Iterator[ProductRow]:
    """Yield normalized products from `document` in discovery order.

    Args:
        document: Parsed JSON value of one catalog file.
        source: Label used in log messages (usually the file name).
        now: Timestamp shared by all products missing their own
            `created_at`/`updated_at`.
    """
    stamp = now or utc_now()
    shape = classify_document(document)
    logger.debug("Document %s classified as %s", source, shape.value)

    if shape is DocumentShape.ARRAY:
        for element in document:
            yield from _walk_element(element, source, stamp)
    elif shape is DocumentShape.OBJECT_WITH_PRODUCTS:
        yield from _normalize_all(document[PRODUCTS_KEY], category_label(document), source, stamp)
    elif shape is DocumentShape.SINGLE_PRODUCT:
        yield from _normalize_all([document], "", source, stamp)
    elif shape is DocumentShape.CATEGORY_KEYS:
        yield from _walk_category_keys(document, source, stamp)
    elif shape is DocumentShape.MALFORMED:
        logger.debug("Document %s has a non-list %r field", source, PRODUCTS_KEY)


def walk_document(document: Any, source: str = "", *, now: Optional[str] = None) -> List[ProductRow]:
    """Return all normalized products of `document` as a list."""
    return list(iter_products(document, source, now=now))
