"""
Tag index service.

Owns the TagRegistry for one workspace and wires it to the compiler and
workspace collaborators. This is the query surface used by editor tooling
(get/list/override) and the entry point for startup indexing and change
batches.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from lwcindex.components.tags.standard_catalog_comp import load_standard_catalog
from lwcindex.components.tags.tag_registry_comp import TagRegistry
from lwcindex.components.workspace.compiler_comp import NullCompiler
from lwcindex.helpers.dto.tags_dto import (
    ComponentCompiler,
    FileEvent,
    IndexWorkspaceResult,
    TagInfo,
    WorkspaceContext,
)
from lwcindex.workflows.tags.index_file_wf import DiagnosticsSink
from lwcindex.workflows.tags.index_workspace_wf import index_workspace_workflow
from lwcindex.workflows.tags.process_file_events_wf import process_file_events_workflow

logger = logging.getLogger(__name__)


class TagIndexService:
    """
    Per-workspace tag index.

    Lifecycle:
    1. start(): load the standard catalog, then bulk-index the workspace
    2. process_file_events(): apply change batches incrementally

    The registry lives as long as the service; restarting means constructing a
    new service and calling start() again.
    """

    def __init__(
        self,
        workspace: WorkspaceContext,
        compiler: ComponentCompiler | None = None,
        catalog_path: str | Path | None = None,
        reindex_on_change: bool = True,
        on_diagnostics: DiagnosticsSink | None = None,
        registry: TagRegistry | None = None,
    ) -> None:
        """
        Args:
            workspace: Workspace collaborator (layout type + file discovery)
            compiler: Compiler collaborator (defaults to NullCompiler)
            catalog_path: Standard catalog override (None = bundled catalog)
            reindex_on_change: Re-index files on CHANGED events
            on_diagnostics: Callback receiving (path, diagnostics); default logs them
            registry: Registry to populate (a fresh one by default)
        """
        self.workspace = workspace
        self.compiler = compiler or NullCompiler()
        self.catalog_path = catalog_path
        self.reindex_on_change = reindex_on_change
        self.on_diagnostics = on_diagnostics
        self.registry = registry if registry is not None else TagRegistry()

    async def start(self) -> IndexWorkspaceResult:
        """
        Load built-in tags, then index every component in the workspace.

        Raises:
            CatalogLoadError: If the standard catalog cannot be loaded
        """
        self.load_standard_tags()
        return await self.index_workspace()

    def load_standard_tags(self) -> int:
        """Load the standard catalog; CatalogLoadError propagates to the caller."""
        return load_standard_catalog(self.registry, self.catalog_path)

    async def index_workspace(self) -> IndexWorkspaceResult:
        return await index_workspace_workflow(
            registry=self.registry,
            compiler=self.compiler,
            workspace=self.workspace,
            on_diagnostics=self.on_diagnostics,
        )

    async def process_file_events(self, events: Iterable[FileEvent]) -> int:
        """Apply a batch of file events; returns the number dispatched."""
        return await process_file_events_workflow(
            registry=self.registry,
            compiler=self.compiler,
            events=events,
            workspace_type=self.workspace.type,
            reindex_on_change=self.reindex_on_change,
            on_diagnostics=self.on_diagnostics,
        )

    # ----------------------------------------------------------------------
    # Query surface
    # ----------------------------------------------------------------------

    def get_tag(self, name: str) -> TagInfo | None:
        return self.registry.get(name)

    def list_tags(self) -> list[tuple[str, TagInfo]]:
        return self.registry.list()

    def set_custom_attributes(self, namespace: str, tag: str, attributes: Iterable[str]) -> str:
        """Register or replace a tag without going through file indexing."""
        return self.registry.set_custom_tag(namespace, tag, attributes)
