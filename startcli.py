"""Run catalogflow from a checkout: `python startcli.py convert --dir src/product-catalog`.

Catalog folders usually sit next to the storefront sources, so the
converter is often run from the repository root before the package is
installed.  Arguments are handed to `catalogflow.cli.main` unchanged.
"""
from __future__ import annotations

import sys

from catalogflow.cli import main


if __name__ == "__main__":
    main(sys.argv[1:])
