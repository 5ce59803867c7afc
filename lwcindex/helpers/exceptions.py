"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class TagIndexError(Exception):
    """Base class for tag index errors."""


class StructuralMismatchError(TagIndexError):
    """Raised when a path does not follow the component directory convention."""


class NamespaceResolutionError(StructuralMismatchError):
    """Raised when a component path is too shallow to contain a namespace directory."""


class CatalogLoadError(TagIndexError):
    """Raised when the standard component catalog cannot be loaded."""


class CatalogReadError(CatalogLoadError):
    """Raised when the catalog document cannot be read."""


class CatalogParseError(CatalogLoadError):
    """Raised when the catalog document is not valid JSON or fails schema validation."""
