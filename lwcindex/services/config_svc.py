#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from defaults, YAML files, overrides, env vars
#  - Caches composed config
#  - Provides reload() for runtime changes
# ======================================================================

from __future__ import annotations

import contextlib
import logging
import os
from typing import Any

import yaml

ENV_PREFIX = "LWCINDEX_"
CONFIG_PATH_ENV = "LWCINDEX_CONFIG_PATH"

# Keys that may be overridden from the environment
ALLOWED_ENV_KEYS = {
    "workspace_root",
    "catalog_path",
    "reindex_on_change",
    "debounce_seconds",
    "log_level",
}


def _parse_env_value(value: str) -> Any:
    """Parse typed values: booleans, ints, floats, else the raw string."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.isdigit():
        return int(value)
    if value.replace(".", "", 1).replace("-", "", 1).isdigit():
        try:
            return float(value)
        except ValueError:
            return value
    return value


class ConfigService:
    """
    Service for loading and caching application configuration.

    Loads config from multiple sources (defaults → YAML → overrides → env),
    caches the result, and provides reload capability.
    """

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
        """
        Initialize ConfigService with empty cache.

        Args:
            overrides: Values applied after YAML files and before environment variables
        """
        self._config: dict[str, Any] | None = None
        self._overrides = overrides or {}
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose()
        return self._config

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> service.get("debounce_seconds")
            0.5
        """
        node: Any = self.get_config()
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> dict[str, Any]:
        """Force reload configuration from all sources."""
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) ./config/lwcindex.yaml
          3) $LWCINDEX_CONFIG_PATH (if set)
          4) overrides passed to the constructor
          5) Environment variables (LWCINDEX_*)
        """
        cfg = self._default_config()

        self._deep_merge(cfg, self._load_yaml(os.path.join(os.getcwd(), "config", "lwcindex.yaml")))

        env_path = os.getenv(CONFIG_PATH_ENV)
        if env_path:
            self._deep_merge(cfg, self._load_yaml(env_path))

        if self._overrides:
            self._deep_merge(cfg, self._overrides)

        self._apply_env_overrides(cfg)

        with contextlib.suppress(Exception):
            self._logger.debug("compose() loaded config; keys: %s", list(cfg.keys()))

        return cfg

    def _default_config(self) -> dict[str, Any]:
        return {
            "workspace_root": ".",
            "catalog_path": None,  # None = bundled lwc-standard.json
            "reindex_on_change": True,  # Re-index files on CHANGED events
            "debounce_seconds": 0.5,  # File watcher quiet period
            "log_level": "INFO",
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """Recursively merge dict b into dict a (mutates a, returns it)."""
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """Load a YAML file; returns {} if not found or invalid."""
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"Ignoring invalid config file {path}: {e}")
            return {}
        if not isinstance(data, dict):
            self._logger.warning(f"Ignoring config file {path}: top level is not a mapping")
            return {}
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Apply LWCINDEX_* environment overrides for whitelisted keys.

        Supported formats:
          LWCINDEX_WORKSPACE_ROOT=/path/to/project
          LWCINDEX_CATALOG_PATH=/path/to/lwc-standard.json
          LWCINDEX_REINDEX_ON_CHANGE=false
          LWCINDEX_DEBOUNCE_SECONDS=1.5
          LWCINDEX_LOG_LEVEL=DEBUG
        """
        for k, v in os.environ.items():
            if not k.startswith(ENV_PREFIX) or k == CONFIG_PATH_ENV:
                continue

            key = k[len(ENV_PREFIX) :].lower()
            if key not in ALLOWED_ENV_KEYS:
                self._logger.debug(f"Ignoring unknown environment override: {k}")
                continue

            cfg[key] = _parse_env_value(v)
