"""
Logging helpers.

Process-wide logging setup for entry points, plus formatting for compiler
diagnostics that are reported through the log rather than raised.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from lwcindex.helpers.dto.tags_dto import Diagnostic

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str | int = "INFO") -> None:
    """
    Configure logging once for the whole process.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            logger.warning(f"Unknown log level {level!r}, using INFO")
            resolved = logging.INFO
        level = resolved
    logging.basicConfig(level=level, format=LOG_FORMAT)


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Render one diagnostic as ``file:line:col: level: message``."""
    location = diagnostic.filename or "<unknown>"
    if diagnostic.line is not None:
        location += f":{diagnostic.line}"
        if diagnostic.column is not None:
            location += f":{diagnostic.column}"
    return f"{location}: {diagnostic.level}: {diagnostic.message}"


def format_diagnostics(diagnostics: Sequence[Diagnostic]) -> str:
    """Render diagnostics one per line."""
    return "\n".join(format_diagnostic(d) for d in diagnostics)
