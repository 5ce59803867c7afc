"""
Domain-specific DTOs (Data Transfer Objects) used across multiple layers.

Rules for DTO modules:
- Import only stdlib and typing (no lwcindex.* imports)
- Contain ONLY dataclass/type definitions and simple type aliases
- No I/O, no business logic
"""

from .tags_dto import (
    DOC_PLACEHOLDER,
    CompileOutput,
    CompileResult,
    ComponentCompiler,
    ComponentMetadata,
    Diagnostic,
    FileChangeType,
    FileEvent,
    IndexWorkspaceResult,
    ResolvedTagName,
    TagInfo,
    WorkspaceContext,
    WorkspaceType,
)

__all__ = [
    "DOC_PLACEHOLDER",
    "CompileOutput",
    "CompileResult",
    "ComponentCompiler",
    "ComponentMetadata",
    "Diagnostic",
    "FileChangeType",
    "FileEvent",
    "IndexWorkspaceResult",
    "ResolvedTagName",
    "TagInfo",
    "WorkspaceContext",
    "WorkspaceType",
]
