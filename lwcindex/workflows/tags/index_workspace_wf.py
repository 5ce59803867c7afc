"""
Workflow for bulk-indexing every component file in a workspace.

Files are compiled strictly one at a time (sequential await). This bounds the
load on the compiler collaborator to a single in-flight compile.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lwcindex.helpers.dto.tags_dto import IndexWorkspaceResult
from lwcindex.helpers.time_helper import elapsed_ms, monotonic_ms
from lwcindex.workflows.tags.index_file_wf import DiagnosticsSink, index_file_workflow

if TYPE_CHECKING:
    from lwcindex.components.tags.tag_registry_comp import TagRegistry
    from lwcindex.helpers.dto.tags_dto import ComponentCompiler, WorkspaceContext

logger = logging.getLogger(__name__)


async def index_workspace_workflow(
    registry: TagRegistry,
    compiler: ComponentCompiler,
    workspace: WorkspaceContext,
    on_diagnostics: DiagnosticsSink | None = None,
) -> IndexWorkspaceResult:
    """
    Index every component file the workspace reports.

    Args:
        registry: TagRegistry to populate
        compiler: ComponentCompiler collaborator
        workspace: WorkspaceContext supplying the files and the layout type
        on_diagnostics: Callback receiving (path, diagnostics)

    Returns:
        IndexWorkspaceResult with discovered/indexed/skipped counts and elapsed time
    """
    start = monotonic_ms()
    files = workspace.find_all_modules()
    workspace_type = workspace.type

    indexed = 0
    for file in files:
        name = await index_file_workflow(
            registry=registry,
            compiler=compiler,
            path=file,
            workspace_type=workspace_type,
            on_diagnostics=on_diagnostics,
        )
        if name is not None:
            indexed += 1

    result = IndexWorkspaceResult(
        files_discovered=len(files),
        files_indexed=indexed,
        files_skipped=len(files) - indexed,
        elapsed_ms=elapsed_ms(start),
    )
    logger.info(
        f"Indexed workspace: processed {result.files_discovered} files in {result.elapsed_ms} ms "
        f"({result.files_indexed} tags, {result.files_skipped} skipped)"
    )
    return result
