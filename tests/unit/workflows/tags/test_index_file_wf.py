"""
Unit tests for index_file_workflow / unindex_file_workflow.

Tests verify:
1. Canonical files are compiled and registered with kebab-case attributes
2. Non-canonical and too-shallow paths are skipped without compiling
3. Compile failures still reserve the tag slot; diagnostics go to the side channel
4. index followed by unindex removes the key; unindexing an unknown file is a no-op
"""

import logging

import pytest

from lwcindex.components.tags.tag_registry_comp import TagRegistry
from lwcindex.helpers.dto.tags_dto import DOC_PLACEHOLDER, ComponentMetadata, Diagnostic, TagInfo, WorkspaceType
from lwcindex.workflows.tags.index_file_wf import (
    extract_attributes,
    index_file_workflow,
    unindex_file_workflow,
)

STANDARD = WorkspaceType.STANDARD_LWC
HELLO = "/ws/lightningcomponents/acme/hello/hello.js"


class TestExtractAttributes:
    @pytest.mark.unit
    def test_kebab_cases_properties(self) -> None:
        metadata = ComponentMetadata(properties=["greeting", "iconName", "maxRowSelection"])
        assert extract_attributes(metadata) == ("greeting", "icon-name", "max-row-selection")


class TestIndexFile:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_registers_attributes_and_doc(self, registry: TagRegistry, fake_compiler) -> None:
        fake_compiler.add("hello", ["greeting", "iconName"], doc="Says hello.")

        name = await index_file_workflow(registry, fake_compiler, HELLO, STANDARD)

        assert name == "acme-hello"
        assert registry.get("acme-hello") == TagInfo(attributes=("greeting", "icon-name"), documentation="Says hello.")
        assert fake_compiler.calls == [HELLO]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_placeholder_doc_when_metadata_has_none(self, registry: TagRegistry, fake_compiler) -> None:
        fake_compiler.add("hello", ["greeting"])

        await index_file_workflow(registry, fake_compiler, HELLO, STANDARD)

        assert registry.get("acme-hello").documentation == DOC_PLACEHOLDER

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_sfdx_namespace(self, registry: TagRegistry, fake_compiler) -> None:
        name = await index_file_workflow(registry, fake_compiler, HELLO, WorkspaceType.SFDX)

        assert name == "c-hello"
        assert "c-hello" in registry

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_non_canonical_file_skipped(self, registry: TagRegistry, fake_compiler) -> None:
        name = await index_file_workflow(registry, fake_compiler, "/ws/lightningcomponents/ns/foo/bar.js", STANDARD)

        assert name is None
        assert len(registry) == 0
        assert fake_compiler.calls == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_shallow_path_skipped(self, registry: TagRegistry, fake_compiler) -> None:
        name = await index_file_workflow(registry, fake_compiler, "foo/foo.js", STANDARD)

        assert name is None
        assert len(registry) == 0
        assert fake_compiler.calls == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_idempotent(self, registry: TagRegistry, fake_compiler) -> None:
        fake_compiler.add("hello", ["greeting"])

        await index_file_workflow(registry, fake_compiler, HELLO, STANDARD)
        first = registry.get("acme-hello")
        await index_file_workflow(registry, fake_compiler, HELLO, STANDARD)

        assert registry.list() == [("acme-hello", first)]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_reindex_replaces_attributes(self, registry: TagRegistry, fake_compiler) -> None:
        fake_compiler.add("hello", ["greeting", "name"])
        await index_file_workflow(registry, fake_compiler, HELLO, STANDARD)
        fake_compiler.add("hello", ["salutation"])
        await index_file_workflow(registry, fake_compiler, HELLO, STANDARD)

        assert registry.get("acme-hello").attributes == ("salutation",)


class TestCompileFailures:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_failed_compile_reserves_slot(self, registry: TagRegistry, fake_compiler) -> None:
        fake_compiler.fail("hello")
        reported = []

        name = await index_file_workflow(
            registry, fake_compiler, HELLO, STANDARD, on_diagnostics=lambda p, d: reported.append((p, list(d)))
        )

        assert name == "acme-hello"
        assert registry.get("acme-hello") == TagInfo()
        assert len(reported) == 1
        assert reported[0][0] == HELLO
        assert reported[0][1][0].message == "Unexpected token"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_partial_result_with_diagnostics(self, registry: TagRegistry, fake_compiler) -> None:
        fake_compiler.add("hello", ["greeting"], diagnostics=[Diagnostic(message="unused", level="warning")])
        reported = []

        await index_file_workflow(registry, fake_compiler, HELLO, STANDARD, on_diagnostics=lambda p, d: reported.append(p))

        assert registry.get("acme-hello").attributes == ("greeting",)
        assert reported == [HELLO]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_no_diagnostics_no_callback(self, registry: TagRegistry, fake_compiler) -> None:
        fake_compiler.add("hello", ["greeting"])
        reported = []

        await index_file_workflow(registry, fake_compiler, HELLO, STANDARD, on_diagnostics=lambda p, d: reported.append(p))

        assert reported == []

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_default_sink_logs_warning(self, registry: TagRegistry, fake_compiler, caplog) -> None:
        fake_compiler.fail("hello", message="Missing semicolon")

        with caplog.at_level(logging.WARNING, logger="lwcindex.workflows.tags.index_file_wf"):
            await index_file_workflow(registry, fake_compiler, HELLO, STANDARD)

        assert "Missing semicolon" in caplog.text
        assert HELLO in caplog.text

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_failing_sink_does_not_fail_indexing(self, registry: TagRegistry, fake_compiler) -> None:
        fake_compiler.fail("hello")

        def broken_sink(path, diagnostics):
            raise RuntimeError("telemetry down")

        name = await index_file_workflow(registry, fake_compiler, HELLO, STANDARD, on_diagnostics=broken_sink)

        assert name == "acme-hello"
        assert "acme-hello" in registry

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_raising_compiler_treated_as_failure(self, registry: TagRegistry, fake_compiler) -> None:
        fake_compiler.errors["hello"] = OSError("compiler crashed")

        name = await index_file_workflow(registry, fake_compiler, HELLO, STANDARD)

        assert name == "acme-hello"
        assert registry.get("acme-hello") == TagInfo()


class TestUnindexFile:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_round_trip(self, registry: TagRegistry, fake_compiler) -> None:
        await index_file_workflow(registry, fake_compiler, HELLO, STANDARD)

        assert unindex_file_workflow(registry, HELLO, STANDARD) == "acme-hello"
        assert "acme-hello" not in registry

    @pytest.mark.unit
    def test_never_indexed_is_noop(self, registry: TagRegistry) -> None:
        registry.set("lightning-button", TagInfo())

        assert unindex_file_workflow(registry, HELLO, STANDARD) == "acme-hello"
        assert registry.names() == ["lightning-button"]

    @pytest.mark.unit
    def test_non_canonical_skipped(self, registry: TagRegistry) -> None:
        registry.set("ns-foo", TagInfo())

        assert unindex_file_workflow(registry, "/ws/lightningcomponents/ns/foo/bar.js", STANDARD) is None
        assert "ns-foo" in registry

    @pytest.mark.unit
    def test_shallow_path_skipped(self, registry: TagRegistry) -> None:
        assert unindex_file_workflow(registry, "foo/foo.js", STANDARD) is None
