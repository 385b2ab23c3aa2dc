"""
Catalogflow: product catalog JSON to CSV conversion.

Product catalogs are maintained by hand as JSON files and no two of
them share a layout: some group products by category, some by
category and subcategory, some are flat arrays, and some are objects
keyed by category name.  Field names drift too (`title` vs `name`,
`img` vs `image_url`).  This package turns any mix of those files
into one uniform product table.

The flow is:

1. **ingest** – Find catalog files, parse them, detect each file's
   layout and walk it, carrying the enclosing category and
   subcategory down to every product.
2. **normalize** – Map each raw product onto the `ProductRow` schema
   through a single alias table, skipping products with no usable
   name, and write rows to CSV.
3. **convert** – Run ingest and normalize over a batch of files,
   isolate per-file failures, sort the combined rows by category and
   number them from 1.
4. **cli** – Command line entry point wiring the above together.
"""

from importlib import metadata  # noqa: F401 (expose package version)
