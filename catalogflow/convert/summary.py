"""
Category breakdown for a finished conversion.

Counts products per category and per category/subcategory pair so a
run can be sanity-checked at a glance.  Counts are sorted by
descending count; equal counts are ordered by label.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Optional, Tuple

from ..normalize.schema import ProductRow


def _ranked(counter: Counter, limit: Optional[int] = None) -> List[Tuple[str, int]]:
    ranked = sorted(counter.items(), key=lambda kv: (-kv[1], kv[0]))
    return ranked[:limit] if limit is not None else ranked


def category_breakdown(records: Iterable[ProductRow]) -> List[Tuple[str, int]]:
    return _ranked(Counter(r.category for r in records))


def subcategory_breakdown(records: Iterable[ProductRow], limit: Optional[int] = 20) -> List[Tuple[str, int]]:
    """Counts keyed by ``"category > subcategory"``."""
    return _ranked(Counter(f"{r.category} > {r.subcategory}" for r in records), limit)


def format_summary(records: List[ProductRow], limit: int = 20) -> str:
    lines = [f"Total products: {len(records)}", "", "Products by category:"]
    for label, count in category_breakdown(records):
        lines.append(f"  {label}: {count}")
    lines.extend(["", "Top subcategories:"])
    for label, count in subcategory_breakdown(records, limit):
        lines.append(f"  {label}: {count}")
    return "\n".join(lines)
