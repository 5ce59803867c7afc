"""
Unit tests for index_workspace_workflow (bulk indexing).
"""

import asyncio
from pathlib import Path

import pytest

from lwcindex.components.tags.tag_registry_comp import TagRegistry
from lwcindex.components.workspace.workspace_comp import FileSystemWorkspace
from lwcindex.helpers.dto.tags_dto import CompileResult, TagInfo, WorkspaceType
from lwcindex.workflows.tags.index_workspace_wf import index_workspace_workflow


class StaticWorkspace:
    def __init__(self, files: list[str], workspace_type: WorkspaceType = WorkspaceType.STANDARD_LWC) -> None:
        self.files = files
        self.type = workspace_type
        self.find_calls = 0

    def find_all_modules(self) -> list[str]:
        self.find_calls += 1
        return list(self.files)


class ConcurrencyProbeCompiler:
    """Records the maximum number of compiles in flight at once."""

    def __init__(self) -> None:
        self.in_flight = 0
        self.max_in_flight = 0
        self.order: list[str] = []

    async def compile(self, path: str) -> CompileResult:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        await asyncio.sleep(0.01)
        self.order.append(path)
        self.in_flight -= 1
        return CompileResult()


class TestIndexWorkspace:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_indexes_canonical_files_and_counts_skips(self, registry: TagRegistry, fake_compiler) -> None:
        workspace = StaticWorkspace(
            [
                "/ws/lightningcomponents/c/hello/hello.js",
                "/ws/lightningcomponents/c/hello/utils.js",
                "/ws/lightningcomponents/acme/card/card.js",
            ]
        )
        fake_compiler.add("card", ["cardTitle"])

        result = await index_workspace_workflow(registry, fake_compiler, workspace)

        assert result.files_discovered == 3
        assert result.files_indexed == 2
        assert result.files_skipped == 1
        assert result.elapsed_ms >= 0
        assert registry.get("acme-card") == TagInfo(attributes=("card-title",))
        assert registry.get("c-hello") == TagInfo()
        assert workspace.find_calls == 1

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_compiles_one_file_at_a_time_in_order(self, registry: TagRegistry) -> None:
        files = [f"/ws/lightningcomponents/c/t{i}/t{i}.js" for i in range(5)]
        compiler = ConcurrencyProbeCompiler()

        await index_workspace_workflow(registry, compiler, StaticWorkspace(files))

        assert compiler.max_in_flight == 1
        assert compiler.order == files

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_sfdx_layout_from_workspace(self, registry: TagRegistry, fake_compiler) -> None:
        workspace = StaticWorkspace(["/ws/force-app/lightningcomponents/hello/hello.js"], WorkspaceType.SFDX)

        await index_workspace_workflow(registry, fake_compiler, workspace)

        assert registry.names() == ["c-hello"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_empty_workspace(self, registry: TagRegistry, fake_compiler) -> None:
        result = await index_workspace_workflow(registry, fake_compiler, StaticWorkspace([]))

        assert result.files_discovered == 0
        assert len(registry) == 0

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_filesystem_workspace(self, registry: TagRegistry, fake_compiler, workspace_root: Path) -> None:
        fake_compiler.add("fancyButton", ["iconName"])

        result = await index_workspace_workflow(registry, fake_compiler, FileSystemWorkspace(workspace_root))

        assert result.files_indexed == 2
        assert sorted(registry.names()) == ["acme-fancyButton", "c-hello"]
        assert registry.get("acme-fancyButton").attributes == ("icon-name",)
