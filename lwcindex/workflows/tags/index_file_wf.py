"""
Workflow for indexing or unindexing a single component file.

This workflow handles one file at a time:
- Resolves the qualified tag name from the file path
- Compiles the file through the injected ComponentCompiler
- Writes (or removes) the registry entry

A file that fails to compile still gets an entry with no attributes, so
tooling does not report its tag as unknown. Compiler diagnostics go to the
``on_diagnostics`` side channel and never fail the indexing call.

ARCHITECTURE:
- This is a PURE WORKFLOW that takes all dependencies as parameters
- Callers (TagIndexService, bulk/batch workflows) provide the registry and compiler

USAGE:
    from lwcindex.workflows.tags.index_file_wf import index_file_workflow

    name = await index_file_workflow(
        registry=registry,
        compiler=compiler,
        path="/ws/lightningcomponents/c/hello/hello.js",
        workspace_type=WorkspaceType.STANDARD_LWC,
    )
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from lwcindex.helpers.attribute_names_helper import to_kebab_case
from lwcindex.helpers.dto.tags_dto import (
    DOC_PLACEHOLDER,
    ComponentMetadata,
    Diagnostic,
    ResolvedTagName,
    TagInfo,
    WorkspaceType,
)
from lwcindex.helpers.exceptions import StructuralMismatchError
from lwcindex.helpers.logging_helper import format_diagnostics
from lwcindex.helpers.tag_names_helper import qualified_name, resolve_tag_name

if TYPE_CHECKING:
    from lwcindex.components.tags.tag_registry_comp import TagRegistry
    from lwcindex.helpers.dto.tags_dto import ComponentCompiler

logger = logging.getLogger(__name__)

DiagnosticsSink = Callable[[str, Sequence[Diagnostic]], None]


def log_diagnostics(path: str, diagnostics: Sequence[Diagnostic]) -> None:
    """Default diagnostics sink: log them as a warning."""
    logger.warning(f"Error compiling {path}:\n{format_diagnostics(diagnostics)}")


def extract_attributes(metadata: ComponentMetadata) -> tuple[str, ...]:
    """Kebab-case attribute names for a component's declared properties."""
    return tuple(to_kebab_case(prop) for prop in metadata.properties)


def _resolve(path: str, workspace_type: WorkspaceType) -> ResolvedTagName | None:
    """Resolve a tag name; structural mismatches are skips, not errors."""
    try:
        resolved = resolve_tag_name(path, workspace_type)
    except StructuralMismatchError as e:
        logger.debug(f"Skipping {path}: {e}")
        return None
    if resolved is None:
        logger.debug(f"Skipping non-component file {path}")
    return resolved


def _report_diagnostics(sink: DiagnosticsSink, path: str, diagnostics: Sequence[Diagnostic]) -> None:
    try:
        sink(path, diagnostics)
    except Exception as e:
        logger.error(f"Diagnostics handler failed for {path}: {e}", exc_info=True)


async def index_file_workflow(
    registry: TagRegistry,
    compiler: ComponentCompiler,
    path: str,
    workspace_type: WorkspaceType,
    on_diagnostics: DiagnosticsSink | None = None,
) -> str | None:
    """
    Compile one component file and write its tag into the registry.

    Steps:
    1. Resolve the tag name (non-canonical or too-shallow paths are skipped)
    2. Compile the file (a raising compiler counts as a compile failure)
    3. Extract kebab-case attributes from metadata, or use none if absent
    4. Overwrite the registry entry
    5. Report diagnostics through ``on_diagnostics`` (default: log)

    Args:
        registry: TagRegistry to update
        compiler: ComponentCompiler collaborator
        path: Component source file path
        workspace_type: Project layout (selects namespace resolution)
        on_diagnostics: Callback receiving (path, diagnostics)

    Returns:
        Qualified tag name written, or None if the file was skipped
    """
    resolved = _resolve(path, workspace_type)
    if resolved is None:
        return None

    sink = on_diagnostics or log_diagnostics
    try:
        compiled = await compiler.compile(path)
    except Exception as e:
        logger.error(f"Compiler failed on {path}: {e}", exc_info=True)
        compiled = None

    info = TagInfo()
    if compiled is not None and compiled.result is not None:
        metadata = compiled.result.metadata
        info = TagInfo(
            attributes=extract_attributes(metadata),
            documentation=metadata.doc or DOC_PLACEHOLDER,
        )

    name = qualified_name(resolved)
    registry.set(name, info)
    logger.debug(f"Indexed {name} from {path} ({len(info.attributes)} attributes)")

    if compiled is not None and compiled.diagnostics:
        _report_diagnostics(sink, path, compiled.diagnostics)

    return name


def unindex_file_workflow(
    registry: TagRegistry,
    path: str,
    workspace_type: WorkspaceType,
) -> str | None:
    """
    Remove the tag defined by a component file from the registry.

    Removing a tag that was never indexed is a no-op.

    Args:
        registry: TagRegistry to update
        path: Component source file path
        workspace_type: Project layout (selects namespace resolution)

    Returns:
        Qualified tag name targeted, or None if the file was skipped
    """
    resolved = _resolve(path, workspace_type)
    if resolved is None:
        return None

    name = qualified_name(resolved)
    if registry.remove(name):
        logger.debug(f"Removed {name} ({path})")
    return name
