"""Version information for lwcindex."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to the registry or query API
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.1.0 - Initial release
#         - Tag registry with standard catalog bootstrap
#         - Sequential workspace indexing, concurrent change-batch processing
#         - Watchdog-based workspace watcher and CLI
