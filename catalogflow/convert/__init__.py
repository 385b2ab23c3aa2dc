"""
Conversion subsystem for catalogflow.

The `convert` package ties ingest and normalize together.  It walks
each catalog document, collects the products in document order,
and finalizes the combined list by sorting on category and assigning
sequential ids.  `summary` reports per-category counts for a run.
"""

from .runner import ConversionResult, convert_files, extract, extract_documents, finalize  # noqa: F401
from .summary import category_breakdown, format_summary, subcategory_breakdown  # noqa: F401
