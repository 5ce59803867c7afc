"""
Services package.
"""

from .config_svc import ConfigService
from .file_watcher_svc import ComponentEventHandler, FileWatcherService
from .tag_index_svc import TagIndexService

__all__ = [
    "ComponentEventHandler",
    "ConfigService",
    "FileWatcherService",
    "TagIndexService",
]
