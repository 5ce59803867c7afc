"""
Standard catalog loading component.

Loads the bundled catalog of built-in ``lightning-*`` components into a
TagRegistry. The document maps component name -> entry, where each entry may
carry an ``attributes`` list of ``{"name": "camelCaseName", ...}`` objects:

    {"button": {"attributes": [{"name": "iconName"}]}}

The whole document is validated before any registry write, so a failed load
leaves the registry untouched.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, RootModel, ValidationError

from lwcindex.helpers.attribute_names_helper import to_kebab_case
from lwcindex.helpers.dto.tags_dto import TagInfo
from lwcindex.helpers.exceptions import CatalogParseError, CatalogReadError
from lwcindex.helpers.tag_names_helper import STANDARD_NAMESPACE, full_tag_name

if TYPE_CHECKING:
    from lwcindex.components.tags.tag_registry_comp import TagRegistry

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent.parent.parent / "data" / "lwc-standard.json"


# ──────────────────────────────────────────────────────────────────────
# Catalog schema
# ──────────────────────────────────────────────────────────────────────


class CatalogAttribute(BaseModel):
    """One attribute of a built-in component (name in camelCase)."""

    model_config = ConfigDict(extra="allow")

    name: str


class CatalogEntry(BaseModel):
    """One built-in component. Missing or null ``attributes`` means no attributes."""

    model_config = ConfigDict(extra="allow")

    attributes: list[CatalogAttribute] | None = None


class StandardCatalog(RootModel[dict[str, CatalogEntry]]):
    """Top-level catalog document: component name -> entry."""


# ──────────────────────────────────────────────────────────────────────
# Loading
# ──────────────────────────────────────────────────────────────────────


def parse_standard_catalog(text: str) -> dict[str, TagInfo]:
    """
    Parse and validate a catalog document.

    Args:
        text: Raw JSON document

    Returns:
        Mapping of qualified tag name ("lightning-<name>") -> TagInfo

    Raises:
        CatalogParseError: If the document is not JSON or does not match the schema
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogParseError(f"Standard catalog is not valid JSON: {e}") from e

    try:
        catalog = StandardCatalog.model_validate(raw)
    except ValidationError as e:
        raise CatalogParseError(f"Standard catalog does not match schema: {e}") from e

    tags: dict[str, TagInfo] = {}
    for name, entry in catalog.root.items():
        attributes = tuple(to_kebab_case(a.name) for a in entry.attributes or [])
        tags[full_tag_name(STANDARD_NAMESPACE, name)] = TagInfo(attributes=attributes)
    return tags


def load_standard_catalog(registry: TagRegistry, source: str | Path | None = None) -> int:
    """
    Load built-in component tags into the registry.

    Args:
        registry: Registry to populate
        source: Catalog document path (defaults to the bundled catalog)

    Returns:
        Number of tags loaded

    Raises:
        CatalogReadError: If the document cannot be read
        CatalogParseError: If the document is malformed
    """
    path = Path(source) if source is not None else DEFAULT_CATALOG_PATH
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogReadError(f"Cannot read standard catalog {path}: {e}") from e

    tags = parse_standard_catalog(text)
    for name, info in tags.items():
        registry.set(name, info)

    logger.info(f"Loaded {len(tags)} standard tags from {path}")
    return len(tags)
