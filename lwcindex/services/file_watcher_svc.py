"""File system watcher service for incremental tag indexing.

Monitors a workspace for component source changes and feeds debounced
batches of FileEvents to the TagIndexService.

Architecture:
- One watchdog Observer per workspace root
- Only component sources (``lightningcomponents/**/*.js``) are forwarded
- Moves are reported as DELETED (old path) followed by CREATED (new path)
- Events are batched after a quiet period, order preserved, no dedup
- Calls TagIndexService.process_file_events() - NO direct registry access

CRITICAL: Watchdog callbacks run on background threads, NOT the asyncio event loop.
Must use thread-safe handoff via loop.call_soon_threadsafe().
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any, Protocol

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

from lwcindex.helpers.dto.tags_dto import FileChangeType, FileEvent
from lwcindex.helpers.uri_helper import is_component_source

logger = logging.getLogger(__name__)


class FileEventConsumer(Protocol):
    async def process_file_events(self, events: Iterable[FileEvent]) -> int: ...


class ComponentEventHandler(FileSystemEventHandler):
    """Translates watchdog events for one workspace into FileEvents."""

    EVENT_TYPES: dict[str, FileChangeType] = {
        EVENT_TYPE_CREATED: FileChangeType.CREATED,
        EVENT_TYPE_MODIFIED: FileChangeType.CHANGED,
        EVENT_TYPE_DELETED: FileChangeType.DELETED,
    }

    def __init__(self, callback: Callable[[FileEvent], None]):
        super().__init__()
        self.callback = callback

    def on_any_event(self, event: FileSystemEvent) -> None:
        """Filter and forward relevant events."""
        if event.is_directory:
            return

        if event.event_type == EVENT_TYPE_MOVED:
            self._forward(str(event.src_path), FileChangeType.DELETED)
            self._forward(str(event.dest_path), FileChangeType.CREATED)
            return

        change_type = self.EVENT_TYPES.get(event.event_type)
        if change_type is None:
            return
        self._forward(str(event.src_path), change_type)

    def _forward(self, path_str: str, change_type: FileChangeType) -> None:
        path = Path(path_str)
        if not is_component_source(path):
            logger.debug(f"Ignoring non-component file: {path}")
            return
        if self._is_ignored_file(path):
            logger.debug(f"Ignoring temp/hidden file: {path}")
            return

        logger.debug(f"File event: {change_type.name} - {path}")
        self.callback(FileEvent(uri=str(path), type=change_type))

    def _is_ignored_file(self, path: Path) -> bool:
        name = path.name
        return name.startswith(".") or name.endswith("~") or name.endswith(".tmp")


class FileWatcherService:
    """Watches one workspace root and forwards debounced event batches.

    Thread Safety:
    - Watchdog callbacks execute on background threads
    - Uses lock for pending_events access
    - Uses loop.call_soon_threadsafe() to schedule async work
    """

    def __init__(
        self,
        consumer: FileEventConsumer,
        debounce_seconds: float = 0.5,
        event_loop: asyncio.AbstractEventLoop | None = None,
    ):
        self.consumer = consumer
        self.debounce_seconds = debounce_seconds
        try:
            self.event_loop = event_loop or asyncio.get_running_loop()
        except RuntimeError:
            # No running loop - create new one (for non-async context)
            self.event_loop = asyncio.new_event_loop()

        self.observer: Any = None  # Observer
        self.root: Path | None = None

        self._lock = threading.Lock()
        self.pending_events: list[FileEvent] = []
        self.debounce_task: asyncio.Task | None = None
        self.batch_task: asyncio.Task | None = None

        logger.info(f"FileWatcherService initialized (debounce={debounce_seconds}s)")

    @property
    def is_watching(self) -> bool:
        return self.observer is not None

    def start(self, root: str | Path) -> None:
        """
        Start watching a workspace root. Restarts the watcher if already running.

        Raises:
            ValueError: If the root does not exist
        """
        root_path = Path(root)
        if not root_path.is_dir():
            raise ValueError(f"Workspace path does not exist: {root_path}")

        if self.observer is not None:
            logger.info(f"Stopping existing watcher for {self.root}")
            self.stop()

        handler = ComponentEventHandler(callback=self._on_file_event)
        observer = Observer()
        observer.schedule(handler, str(root_path), recursive=True)
        observer.start()

        self.observer = observer
        self.root = root_path
        logger.info(f"Started watching {root_path}")

    def stop(self) -> None:
        """Stop the watcher and drop pending events."""
        if self.observer is None:
            logger.warning("No watcher running")
            return

        self.observer.stop()
        self.observer.join(timeout=5.0)
        self.observer = None
        with self._lock:
            self.pending_events.clear()
        if self.debounce_task and not self.debounce_task.done():
            self.debounce_task.cancel()
        logger.info(f"Stopped watching {self.root}")

    def _on_file_event(self, event: FileEvent) -> None:
        """
        Handle a file event from the watchdog thread.

        CRITICAL: This runs on a watchdog background thread, NOT the event loop.
        """
        with self._lock:
            self.pending_events.append(event)

        self.event_loop.call_soon_threadsafe(self._schedule_debounce)

    def _schedule_debounce(self) -> None:
        """Restart the debounce timer (runs on the event loop)."""
        if self.debounce_task and not self.debounce_task.done():
            self.debounce_task.cancel()
        self.debounce_task = self.event_loop.create_task(self._flush_after_debounce())

    async def _flush_after_debounce(self) -> None:
        """Wait for quiet period, then hand the batch to the consumer."""
        await asyncio.sleep(self.debounce_seconds)

        with self._lock:
            batch = list(self.pending_events)
            self.pending_events.clear()

        if not batch:
            return

        logger.info(f"Debounce fired: {len(batch)} file event(s)")
        # Separate task: restarting the debounce timer never cancels it
        self.batch_task = self.event_loop.create_task(self._process_batch(self.batch_task, batch))

    async def _process_batch(self, previous: asyncio.Task | None, batch: list[FileEvent]) -> None:
        """Apply one batch after the previous batch has finished."""
        if previous is not None:
            await previous
        try:
            await self.consumer.process_file_events(batch)
        except Exception as e:
            logger.error(f"Failed to process file events: {e}", exc_info=True)
