"""Tests for catalog file discovery and reading."""

from __future__ import annotations

from pathlib import Path

import pytest  # type: ignore

from catalogflow.errors import UnreadableDocument
from catalogflow.ingest.loader import discover_documents, read_document


def test_read_document(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text('{"Toys": [{"title": "Café Car"}]}', encoding="utf-8")
    assert read_document(path) == {"Toys": [{"title": "Café Car"}]}


@pytest.mark.parametrize("content", [b"{oops", b"\xff\xfe\x00garbage"])
def test_read_document_rejects_bad_files(tmp_path: Path, content: bytes) -> None:
    path = tmp_path / "bad.json"
    path.write_bytes(content)
    with pytest.raises(UnreadableDocument) as excinfo:
        read_document(path)
    assert excinfo.value.path == str(path)


def test_read_document_missing_file(tmp_path: Path) -> None:
    with pytest.raises(UnreadableDocument):
        read_document(tmp_path / "missing.json")


def test_discover_skips_duplicates_and_missing_dirs(tmp_path: Path) -> None:
    first = tmp_path / "src"
    second = tmp_path / "public"
    first.mkdir()
    second.mkdir()
    (first / "b.json").write_text("[]", encoding="utf-8")
    (first / "a.json").write_text("[]", encoding="utf-8")
    (first / "notes.txt").write_text("x", encoding="utf-8")
    (second / "a.json").write_text("[]", encoding="utf-8")          # same name and size
    (second / "b.json").write_text("[{}]", encoding="utf-8")        # same name, different size

    found = discover_documents([first, tmp_path / "absent", second])
    assert found == [first / "a.json", first / "b.json", second / "b.json"]
