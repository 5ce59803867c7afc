"""
DTOs for the tag registry domain.

Cross-layer data contracts shared by the registry component, the indexing
workflows, the tag index service and the CLI.

Rules:
- Import only stdlib and typing (no lwcindex.* imports)
- Pure data structures, no I/O
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Protocol, runtime_checkable

DOC_PLACEHOLDER = "[doc placeholder]"


@dataclass(frozen=True)
class TagInfo:
    """Metadata for one tag: kebab-case attribute names plus documentation.

    Immutable. Updates replace the whole value in the registry.
    """

    attributes: tuple[str, ...] = ()
    documentation: str = DOC_PLACEHOLDER


@dataclass(frozen=True)
class ResolvedTagName:
    """Tag identity derived from a canonical component file path."""

    namespace: str
    tag_name: str


class FileChangeType(IntEnum):
    """Kind of file-system change (numbered like the editor protocol)."""

    CREATED = 1
    CHANGED = 2
    DELETED = 3


@dataclass(frozen=True)
class FileEvent:
    """A single file-change notification. ``uri`` may be a file URI or a plain path."""

    uri: str
    type: FileChangeType


class WorkspaceType(Enum):
    """Project layout of a workspace."""

    SFDX = "sfdx"  # all custom components share the "c" namespace
    STANDARD_LWC = "standard_lwc"
    CORE_ALL = "core_all"
    CORE_SINGLE_PROJECT = "core_single_project"
    UNKNOWN = "unknown"

    @property
    def single_namespace(self) -> bool:
        return self is WorkspaceType.SFDX


@dataclass
class Diagnostic:
    """One compiler diagnostic."""

    message: str
    level: str = "error"
    filename: str | None = None
    line: int | None = None
    column: int | None = None


@dataclass
class ComponentMetadata:
    """Compiler metadata for a component: declared public property names and doc."""

    properties: list[str] = field(default_factory=list)
    doc: str | None = None


@dataclass
class CompileOutput:
    """Successful (possibly partial) compile output."""

    metadata: ComponentMetadata


@dataclass
class CompileResult:
    """Result from ComponentCompiler.compile().

    ``result`` is None when compilation produced no usable output. Diagnostics
    may be present either way.
    """

    result: CompileOutput | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)


@dataclass
class IndexWorkspaceResult:
    """Result from workflows/tags/index_workspace_wf.py::index_workspace_workflow."""

    files_discovered: int
    files_indexed: int
    files_skipped: int
    elapsed_ms: int


@runtime_checkable
class ComponentCompiler(Protocol):
    """Protocol for the external compiler that turns a component file into metadata."""

    async def compile(self, path: str) -> CompileResult:
        """Compile one component source file.

        Args:
            path: Component source file path

        Returns:
            CompileResult with optional output and diagnostics
        """
        ...


@runtime_checkable
class WorkspaceContext(Protocol):
    """Protocol for workspace discovery: the layout type and the component files to index."""

    @property
    def type(self) -> WorkspaceType: ...

    def find_all_modules(self) -> list[str]:
        """Return the paths of all component source files in the workspace."""
        ...
