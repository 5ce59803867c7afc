"""
Tag registry component.

Authoritative mapping from qualified tag name (``c-myButton``,
``lightning-button``) to TagInfo. One registry is created per workspace
context; there is no module-level instance.

Thread Safety:
- Every operation holds a lock, so writes are atomic per key
- list()/names() return snapshot copies, never live views
- Watchdog callbacks and asyncio tasks may call in concurrently
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from lwcindex.helpers.dto.tags_dto import TagInfo
from lwcindex.helpers.tag_names_helper import full_tag_name

logger = logging.getLogger(__name__)


class TagRegistry:
    """Guarded mapping of qualified tag name -> TagInfo (last write wins)."""

    def __init__(self) -> None:
        self._tags: dict[str, TagInfo] = {}
        self._lock = threading.Lock()

    def set(self, name: str, info: TagInfo) -> None:
        """Insert or overwrite the entry for ``name``."""
        with self._lock:
            self._tags[name] = info

    def remove(self, name: str) -> bool:
        """
        Delete the entry for ``name``.

        Returns:
            True if an entry was removed, False if the key was absent
        """
        with self._lock:
            return self._tags.pop(name, None) is not None

    def get(self, name: str) -> TagInfo | None:
        with self._lock:
            return self._tags.get(name)

    def list(self) -> list[tuple[str, TagInfo]]:
        """Snapshot of all entries, in insertion order."""
        with self._lock:
            return list(self._tags.items())

    def names(self) -> list[str]:
        with self._lock:
            return list(self._tags)

    def set_custom_tag(self, namespace: str, tag: str, attributes: Iterable[str]) -> str:
        """
        Register a tag programmatically, bypassing file-based indexing.

        Args:
            namespace: Component namespace (e.g. "c")
            tag: Component name
            attributes: Kebab-case attribute names

        Returns:
            The qualified name that was written
        """
        name = full_tag_name(namespace, tag)
        self.set(name, TagInfo(attributes=tuple(attributes)))
        logger.debug(f"Registered custom tag {name}")
        return name

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._tags

    def __len__(self) -> int:
        with self._lock:
            return len(self._tags)
