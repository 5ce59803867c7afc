"""Helpers for file URIs delivered by change notifications."""

from __future__ import annotations

from pathlib import PurePath
from urllib.parse import urlparse
from urllib.request import url2pathname

COMPONENTS_DIR = "lightningcomponents"
COMPONENT_SOURCE_SUFFIX = ".js"


def uri_to_path(uri: str) -> str:
    """
    Convert a ``file://`` URI to a local path. Anything else is returned unchanged.

    Example:
        >>> uri_to_path("file:///ws/lightningcomponents/c/foo/foo.js")
        '/ws/lightningcomponents/c/foo/foo.js'
    """
    parsed = urlparse(uri)
    if parsed.scheme != "file":
        return uri
    path = url2pathname(parsed.path)
    if parsed.netloc and parsed.netloc != "localhost":
        path = f"//{parsed.netloc}{path}"
    return path


def is_component_source(path: str | PurePath) -> bool:
    """True for ``.js`` files somewhere below a ``lightningcomponents`` directory."""
    p = PurePath(path)
    return p.suffix == COMPONENT_SOURCE_SUFFIX and COMPONENTS_DIR in p.parts[:-1]
