"""
Tag name resolution from component file paths.

A component is defined by ``<namespace>/<tag>/<tag>.js``: the file stem must
equal its parent directory name. Everything here works on path segments only
and never touches the file system.
"""

from __future__ import annotations

from pathlib import PurePath

from lwcindex.helpers.dto.tags_dto import ResolvedTagName, WorkspaceType
from lwcindex.helpers.exceptions import NamespaceResolutionError

SFDX_NAMESPACE = "c"
STANDARD_NAMESPACE = "lightning"


def full_tag_name(namespace: str, tag: str) -> str:
    """Build the qualified registry key, e.g. ``c-myButton``."""
    return f"{namespace}-{tag}"


def qualified_name(resolved: ResolvedTagName) -> str:
    """Registry key for a resolved tag."""
    return full_tag_name(resolved.namespace, resolved.tag_name)


def is_canonical_component_file(path: str | PurePath) -> bool:
    """True when the file stem equals its parent directory name."""
    p = PurePath(path)
    return bool(p.stem) and p.stem == p.parent.name


def resolve_tag_name(path: str | PurePath, workspace_type: WorkspaceType) -> ResolvedTagName | None:
    """
    Derive (namespace, tag name) from a component file path.

    Args:
        path: Path to a component source file
        workspace_type: Project layout; SFDX puts every component in the "c" namespace

    Returns:
        ResolvedTagName, or None when the file is not the canonical component file

    Raises:
        NamespaceResolutionError: If the layout derives the namespace from the
            directory tree and the path has no grandparent directory
    """
    p = PurePath(path)
    if not is_canonical_component_file(p):
        return None

    tag_name = p.parent.name
    if workspace_type.single_namespace:
        return ResolvedTagName(namespace=SFDX_NAMESPACE, tag_name=tag_name)

    namespace = p.parent.parent.name
    if not namespace:
        raise NamespaceResolutionError(f"No namespace directory above component '{tag_name}': {p}")
    return ResolvedTagName(namespace=namespace, tag_name=tag_name)
