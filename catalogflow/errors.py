"""
Exception types for catalogflow.

Every error raised by the conversion core derives from `CatalogError`
so callers can draw a single boundary around one catalog document.
None of these are fatal to a whole run: the runner records the failed
document and moves on.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog conversion errors."""


class UnreadableDocument(CatalogError):
    """A catalog file could not be read or parsed as JSON."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class MalformedContainer(CatalogError):
    """A `products` or `subcategories` field that is not a list."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"expected a list under {field!r}, got {type(value).__name__}")
        self.field = field
        self.value = value


class ConfigError(CatalogError):
    """The YAML configuration file exists but cannot be used."""
