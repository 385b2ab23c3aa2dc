"""
Command line interface for catalogflow.

Two subcommands are provided:

* ``convert`` – find catalog JSON files, normalize every product into a
  single CSV (optionally one CSV per source file as well) and print a
  per-category summary.
* ``inspect`` – report which layout a single catalog file is detected
  as, element by element.  Useful when a file yields fewer products
  than expected.

The CLI is intentionally thin and delegates the work to the `ingest`,
`normalize` and `convert` packages.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Set

from dotenv import load_dotenv

from .config import ConfigLoader
from .convert.runner import convert_files
from .convert.summary import format_summary
from .errors import ConfigError, UnreadableDocument
from .ingest.loader import discover_documents, read_document
from .ingest.shapes import (
    DocumentShape,
    classify_bucket,
    classify_document,
    classify_element,
)
from .ingest.walker import category_label
from .normalize.write_csv import write_products_csv

logger = logging.getLogger("catalogflow.cli")


def _per_document_name(source: Path, taken: Set[str]) -> str:
    """Pick a CSV file name for `source` that no other output uses.

    Tries `<stem>.csv`, then `<parent>-<stem>.csv`, then a numeric suffix.
    """
    candidates = [f"{source.stem}.csv"]
    if source.parent.name:
        candidates.append(f"{source.parent.name}-{source.stem}.csv")
    n = 2
    while True:
        for name in candidates:
            if name not in taken:
                taken.add(name)
                return name
        candidates = [f"{source.stem}-{n}.csv"]
        n += 1


def cmd_convert(args: argparse.Namespace) -> None:
    """Convert all discovered catalogs into CSV."""
    cfg: ConfigLoader = args.config_obj
    dirs = args.dirs or cfg.catalog_dirs
    out_dir = Path(args.out_dir or cfg.get("output", "dir"))
    combined = out_dir / (args.out or cfg.get("output", "combined_file"))
    per_document = args.per_document or bool(cfg.get("output", "per_document", False))

    files = discover_documents(dirs, cfg.get("catalog", "pattern", "*.json"))
    if not files:
        logger.warning("No JSON files found in %s", ", ".join(str(d) for d in dirs))
    progress = not args.quiet and sys.stderr.isatty()
    result = convert_files(files, progress=progress)

    written = write_products_csv(result.records, str(combined))
    logger.info("Wrote %d products to %s", written, combined)
    if per_document:
        taken = {combined.name}
        for source, count in result.counts.items():
            if not count:
                continue
            path = out_dir / _per_document_name(Path(source), taken)
            write_products_csv(result.rows_for(source), str(path))
            logger.info("Saved individual CSV %s (%d products)", path.name, count)
    if result.failed:
        logger.warning("Failed to convert %d files: %s", len(result.failed), ", ".join(result.failed))
    if not args.quiet:
        print(format_summary(result.records))


def cmd_inspect(args: argparse.Namespace) -> None:
    """Print the detected layout of one catalog file."""
    try:
        document = read_document(args.file)
    except UnreadableDocument as exc:
        logger.error("%s", exc)
        sys.exit(1)
    shape = classify_document(document)
    print(f"{args.file}: {shape.value}")
    if shape is DocumentShape.ARRAY:
        for i, element in enumerate(document):
            element_shape = classify_element(element)
            label = category_label(element) if isinstance(element, dict) else ""
            print(f"  [{i}] {element_shape.value} {label}".rstrip())
    elif shape is DocumentShape.CATEGORY_KEYS:
        for key, value in document.items():
            print(f"  {key!r}: {classify_bucket(value).value}")


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="catalogflow", description="Catalog JSON to CSV converter")
    parser.add_argument("--config", default=None, help="YAML config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Convert
    convert_cmd = subparsers.add_parser("convert", help="Convert catalog JSON files to CSV")
    convert_cmd.add_argument(
        "--dir",
        dest="dirs",
        action="append",
        help="Catalog directory (repeatable; overrides config)",
    )
    convert_cmd.add_argument("--out-dir", dest="out_dir", help="Output directory for CSV files")
    convert_cmd.add_argument("--out", help="File name of the combined CSV")
    convert_cmd.add_argument(
        "--per-document",
        dest="per_document",
        action="store_true",
        help="Also write one CSV per source file",
    )
    convert_cmd.add_argument("-q", "--quiet", action="store_true", help="No progress bar or summary")
    convert_cmd.set_defaults(func=cmd_convert)

    # Inspect
    inspect_cmd = subparsers.add_parser("inspect", help="Show the detected layout of a catalog file")
    inspect_cmd.add_argument("file", help="Path to catalog JSON file")
    inspect_cmd.set_defaults(func=cmd_inspect)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    load_dotenv()
    try:
        args.config_obj = ConfigLoader(args.config)
    except ConfigError as exc:
        parser.error(str(exc))
    args.func(args)


if __name__ == "__main__":
    main(sys.argv[1:])
