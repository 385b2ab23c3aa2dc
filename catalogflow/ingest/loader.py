"""
Catalog file discovery and reading.

Catalog JSON files may be spread over several directories, and the
same file is often copied into more than one of them.  `discover_documents`
lists them once each, and `read_document` parses a single file,
turning every read or decode failure into `UnreadableDocument`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Set, Tuple, Union

from ..errors import UnreadableDocument

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_document(path: PathLike) -> Any:
    """Read and parse one catalog JSON file.

    Raises:
        UnreadableDocument: if the file cannot be opened, is not UTF‑8
            or does not contain valid JSON.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as exc:
        raise UnreadableDocument(str(path), f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    except UnicodeDecodeError as exc:
        raise UnreadableDocument(str(path), "file is not valid UTF-8") from exc
    except OSError as exc:
        raise UnreadableDocument(str(path), exc.strerror or str(exc)) from exc


def discover_documents(dirs: Iterable[PathLike], pattern: str = "*.json") -> List[Path]:
    """List catalog files under `dirs`, skipping duplicates.

    A file counts as a duplicate when a file with the same name and
    byte size was already found in an earlier directory.  Directories
    that do not exist are logged and skipped.  Files are returned in
    directory order, then sorted by name within each directory.
    """
    seen: Set[Tuple[str, int]] = set()
    found: List[Path] = []
    for directory in dirs:
        root = Path(directory)
        if not root.is_dir():
            logger.warning("Catalog directory not found: %s", root)
            continue
        added = 0
        for path in sorted(root.glob(pattern)):
            if not path.is_file():
                continue
            key = (path.name, path.stat().st_size)
            if key in seen:
                logger.debug("Skipping duplicate catalog %s", path)
                continue
            seen.add(key)
            found.append(path)
            added += 1
        logger.info("Found %d unique files in %s", added, root)
    return found
