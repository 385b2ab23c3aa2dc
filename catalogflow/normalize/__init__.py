"""
Normalization subsystem for catalogflow.

This package converts raw product objects found in catalog JSON files
into uniform `ProductRow` instances and writes them to CSV files.  The
accepted spellings of each field live in a single alias table
(`aliases.py`) so the mapping policy can be audited in one place.

The normalized CSV format is defined by the `ProductRow` dataclass in
`schema.py`.
"""

from .schema import PRODUCT_HEADERS, ProductRow  # noqa: F401
from .product import normalize_product  # noqa: F401
from .write_csv import write_products_csv  # noqa: F401
