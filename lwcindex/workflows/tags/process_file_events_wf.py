"""
Workflow for applying a batch of file-change notifications to the registry.

Only ``.js`` files below a ``lightningcomponents`` directory are considered.
Dispatch per event kind:
- CREATED -> index the file
- DELETED -> unindex the file
- CHANGED -> re-index the file when ``reindex_on_change`` is set, else ignore

Events are dispatched in the order received, without deduplication.
Operations on different files run concurrently; operations on the same file
are chained so they complete in event order.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from functools import partial
from typing import TYPE_CHECKING

from lwcindex.helpers.dto.tags_dto import FileChangeType, FileEvent, WorkspaceType
from lwcindex.helpers.uri_helper import is_component_source, uri_to_path
from lwcindex.workflows.tags.index_file_wf import DiagnosticsSink, index_file_workflow, unindex_file_workflow

if TYPE_CHECKING:
    from lwcindex.components.tags.tag_registry_comp import TagRegistry
    from lwcindex.helpers.dto.tags_dto import ComponentCompiler

logger = logging.getLogger(__name__)


def select_component_events(events: Iterable[FileEvent]) -> list[tuple[str, FileEvent]]:
    """
    Filter events to component source files.

    Returns:
        (local path, event) pairs in the original order
    """
    selected = []
    for event in events:
        path = uri_to_path(event.uri)
        if is_component_source(path):
            selected.append((path, event))
        else:
            logger.debug(f"Ignoring event for non-component file: {event.uri}")
    return selected


async def _unindex(registry: TagRegistry, path: str, workspace_type: WorkspaceType) -> str | None:
    return unindex_file_workflow(registry, path, workspace_type)


async def _chained(
    previous: asyncio.Task[None] | None,
    operation: Callable[[], Awaitable[object]],
    event: FileEvent,
) -> None:
    if previous is not None:
        await previous
    try:
        await operation()
    except Exception as e:
        logger.error(f"Failed to apply {event.type.name} event for {event.uri}: {e}", exc_info=True)


async def process_file_events_workflow(
    registry: TagRegistry,
    compiler: ComponentCompiler,
    events: Iterable[FileEvent],
    workspace_type: WorkspaceType,
    reindex_on_change: bool = True,
    on_diagnostics: DiagnosticsSink | None = None,
) -> int:
    """
    Apply a batch of file events to the registry.

    Args:
        registry: TagRegistry to update
        compiler: ComponentCompiler collaborator (for CREATED/CHANGED)
        events: File events in delivery order
        workspace_type: Project layout (selects namespace resolution)
        reindex_on_change: Re-index files on CHANGED events
        on_diagnostics: Callback receiving (path, diagnostics)

    Returns:
        Number of events dispatched to an index or unindex operation
    """
    last_for_path: dict[str, asyncio.Task[None]] = {}
    tasks: list[asyncio.Task[None]] = []

    for path, event in select_component_events(events):
        operation: Callable[[], Awaitable[object]]
        if event.type == FileChangeType.DELETED:
            operation = partial(_unindex, registry, path, workspace_type)
        elif event.type == FileChangeType.CREATED or (event.type == FileChangeType.CHANGED and reindex_on_change):
            operation = partial(index_file_workflow, registry, compiler, path, workspace_type, on_diagnostics)
        else:
            logger.debug(f"Ignoring {event.type.name} event for {path}")
            continue

        task = asyncio.create_task(_chained(last_for_path.get(path), operation, event))
        last_for_path[path] = task
        tasks.append(task)

    if tasks:
        await asyncio.gather(*tasks)
        logger.info(f"Applied {len(tasks)} file event(s) to tag registry")
    return len(tasks)
