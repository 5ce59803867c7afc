"""
Watch command: index the workspace, then keep the registry in sync with file changes.

The watcher starts before the bulk index so that files created while the
workspace is being walked are not missed. Batches it delivers in the meantime
are held until the bulk index has finished, then applied in order.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Iterable

from lwcindex.helpers.dto.tags_dto import FileEvent
from lwcindex.helpers.exceptions import CatalogLoadError
from lwcindex.interfaces.cli.ui import print_error, print_info, print_success
from lwcindex.interfaces.cli.utils import build_tag_index, load_config
from lwcindex.services.config_svc import ConfigService
from lwcindex.services.file_watcher_svc import FileEventConsumer, FileWatcherService
from lwcindex.services.tag_index_svc import TagIndexService

logger = logging.getLogger(__name__)


class DeferredConsumer:
    """Holds file event batches until ``ready`` is set, then forwards them."""

    def __init__(self, consumer: FileEventConsumer) -> None:
        self.consumer = consumer
        self.ready = asyncio.Event()

    async def process_file_events(self, events: Iterable[FileEvent]) -> int:
        batch = list(events)
        if not self.ready.is_set():
            logger.debug(f"Holding {len(batch)} file event(s) until initial indexing completes")
            await self.ready.wait()
        return await self.consumer.process_file_events(batch)


async def _watch(service: TagIndexService, config: ConfigService) -> None:
    consumer = DeferredConsumer(service)
    watcher = FileWatcherService(
        consumer=consumer,
        debounce_seconds=float(config.get("debounce_seconds", 0.5)),
        event_loop=asyncio.get_running_loop(),
    )
    watcher.start(config.get("workspace_root", "."))
    try:
        result = await service.start()
        consumer.ready.set()
        print_success(f"Indexed {result.files_indexed} component(s), {len(service.registry)} tags known")
        print_info(f"Watching {watcher.root} (Ctrl+C to stop)")
        await asyncio.Event().wait()
    finally:
        watcher.stop()


def cmd_watch(args: argparse.Namespace) -> int:
    """Run until interrupted."""
    config = load_config(args)
    service = build_tag_index(config)
    try:
        asyncio.run(_watch(service, config))
    except CatalogLoadError as e:
        print_error(f"Cannot load standard components: {e}")
        return 2
    except ValueError as e:
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted, stopping watcher")
    return 0
