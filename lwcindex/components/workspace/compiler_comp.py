"""Compiler collaborators."""

from __future__ import annotations

from lwcindex.helpers.dto.tags_dto import CompileResult


class NullCompiler:
    """ComponentCompiler that produces no metadata and no diagnostics.

    Indexing with it reserves a tag slot (empty attribute list) for every
    canonical component file. Used when no real compiler is wired in.
    """

    async def compile(self, path: str) -> CompileResult:
        return CompileResult()
