"""
Ingest subsystem for catalogflow.

This package reads catalog JSON files and walks their contents.  The
catalogs are hand-maintained and come in several layouts (arrays of
categories with products, categories with subcategories, bare product
arrays, objects keyed by category name).  `shapes` names those
layouts, `walker` descends through them, and `loader` finds and parses
the files on disk.
"""

from .loader import discover_documents, read_document  # noqa: F401
from .shapes import BucketKind, DocumentShape, ElementShape, classify_document, classify_element  # noqa: F401
from .walker import iter_products, walk_document  # noqa: F401
