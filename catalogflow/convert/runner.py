"""
Catalog conversion runner.

This module exposes the functions that turn a set of catalog JSON
documents into one ordered list of `ProductRow` records:

1. each document is walked independently (`extract`);
2. a failure in one document is logged and counted, and the run moves
   on to the next document;
3. once every document has been walked, the combined list is sorted by
   category and renumbered from 1 (`finalize`).

Finalization runs exactly once per conversion, after all documents,
so ids are contiguous across the whole output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Sequence, Tuple

from tqdm import tqdm

from ..errors import CatalogError
from ..ingest.loader import read_document
from ..ingest.walker import walk_document
from ..normalize.schema import ProductRow

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Outcome of converting a batch of catalog documents."""

    records: List[ProductRow] = field(default_factory=list)
    sources: List[str] = field(default_factory=list)      # parallel to records
    counts: Dict[str, int] = field(default_factory=dict)  # products per document
    failed: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.records)

    def rows_for(self, source: str) -> List[ProductRow]:
        """Final rows (with their final ids) that came from `source`."""
        return [row for row, src in zip(self.records, self.sources) if src == source]


def extract(document: Any, source_label: str = "") -> List[ProductRow]:
    """Extract normalized products from one parsed document.

    Rows keep discovery order and carry id 0; see `finalize`.
    """
    rows = walk_document(document, source_label)
    logger.info("Extracted %d products from %s", len(rows), source_label or "document")
    return rows


def sort_order(records: Sequence[ProductRow]) -> List[int]:
    """Indices of `records` sorted by category, ties kept in input order."""
    return sorted(range(len(records)), key=lambda i: records[i].category)


def _finalize(records: Sequence[ProductRow]) -> Tuple[List[int], List[ProductRow]]:
    order = sort_order(records)
    return order, [replace(records[i], id=pos) for pos, i in enumerate(order, start=1)]


def finalize(records: Sequence[ProductRow]) -> List[ProductRow]:
    """Sort records by category and assign ids 1..N in sorted order."""
    return _finalize(records)[1]


def _run(
    items: Iterable[Tuple[str, Any]],
    load: Callable[[Any], Any],
    *,
    progress: bool = False,
) -> ConversionResult:
    result = ConversionResult()
    rows: List[ProductRow] = []
    labels: List[str] = []
    for label, payload in tqdm(list(items), desc="Converting catalogs", unit="file", disable=not progress):
        try:
            document = load(payload)
            extracted = extract(document, label)
        except CatalogError as exc:
            logger.warning("Skipping %s: %s", label, exc)
            result.failed.append(label)
            result.counts[label] = 0
            continue
        except Exception as exc:  # noqa: BLE001
            logger.exception("Error converting %s: %s", label, exc)
            result.failed.append(label)
            result.counts[label] = 0
            continue
        rows.extend(extracted)
        labels.extend([label] * len(extracted))
        result.counts[label] = len(extracted)

    order, result.records = _finalize(rows)
    result.sources = [labels[i] for i in order]
    logger.info(
        "Converted %d documents into %d products (%d failed)",
        len(result.counts), result.total, len(result.failed),
    )
    return result


def extract_documents(documents: Iterable[Tuple[str, Any]], *, progress: bool = False) -> ConversionResult:
    """Convert already-parsed documents given as `(label, document)` pairs."""
    return _run(documents, lambda document: document, progress=progress)


def convert_files(paths: Iterable[Path], *, progress: bool = False) -> ConversionResult:
    """Read and convert catalog files; unreadable files are skipped."""
    return _run(((str(p), p) for p in paths), read_document, progress=progress)
