"""
CSV writer for normalized products.

Writes `ProductRow` instances using the column order of
`PRODUCT_HEADERS`.  Every field is wrapped in double quotes and
embedded quotes are doubled, with `\\n` line endings, which is the
dialect the storefront import expects.  Existing files are
overwritten.  Unicode is written in UTF‑8 encoding.
"""

from __future__ import annotations

import csv
import os
from typing import Iterable

from .schema import PRODUCT_HEADERS, ProductRow


class CatalogDialect(csv.Dialect):
    delimiter = ","
    quotechar = '"'
    doublequote = True
    quoting = csv.QUOTE_ALL
    lineterminator = "\n"
    skipinitialspace = False


def write_products_csv(products: Iterable[ProductRow], path: str) -> int:
    """Write normalized products to a CSV file.

    Args:
        products: Iterable of `ProductRow` objects.
        path: Destination path for the CSV.  Parent directories are
            created when missing.

    Returns:
        The number of product rows written (header excluded).
    """
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    count = 0
    with open(path, "w", newline="", encoding="utf-8") as csvfile:
        writer = csv.writer(csvfile, dialect=CatalogDialect)
        writer.writerow(PRODUCT_HEADERS)
        for product in products:
            writer.writerow(product.to_csv_row())
            count += 1
    return count
