"""
Pytest fixtures and configuration for the test suite.

Fixtures:
- registry: fresh TagRegistry per test
- fake_compiler: scripted ComponentCompiler recording every compile call
- workspace_root: on-disk workspace with a lightningcomponents tree
"""

import asyncio
from collections.abc import Callable
from pathlib import Path

import pytest

from lwcindex.components.tags.tag_registry_comp import TagRegistry
from lwcindex.helpers.dto.tags_dto import CompileOutput, CompileResult, ComponentMetadata, Diagnostic


class FakeCompiler:
    """ComponentCompiler returning scripted results keyed by file stem."""

    def __init__(self) -> None:
        self.results: dict[str, CompileResult] = {}
        self.delays: dict[str, float] = {}
        self.errors: dict[str, Exception] = {}
        self.calls: list[str] = []

    def add(self, stem: str, properties: list[str], doc: str | None = None, diagnostics=None) -> None:
        self.results[stem] = CompileResult(
            result=CompileOutput(metadata=ComponentMetadata(properties=properties, doc=doc)),
            diagnostics=list(diagnostics or []),
        )

    def fail(self, stem: str, message: str = "Unexpected token") -> None:
        self.results[stem] = CompileResult(result=None, diagnostics=[Diagnostic(message=message, filename=stem)])

    async def compile(self, path: str) -> CompileResult:
        self.calls.append(path)
        stem = Path(path).stem
        if stem in self.delays:
            await asyncio.sleep(self.delays[stem])
        if stem in self.errors:
            raise self.errors[stem]
        return self.results.get(stem, CompileResult())


@pytest.fixture
def registry() -> TagRegistry:
    return TagRegistry()


@pytest.fixture
def fake_compiler() -> FakeCompiler:
    return FakeCompiler()


@pytest.fixture
def make_component(tmp_path: Path) -> Callable[..., Path]:
    """Create ``<root>/lightningcomponents/<namespace>/<tag>/<file>.js`` and return its path."""

    def _make(namespace: str, tag: str, filename: str | None = None, root: Path | None = None) -> Path:
        base = (root or tmp_path) / "lightningcomponents" / namespace / tag
        base.mkdir(parents=True, exist_ok=True)
        path = base / f"{filename or tag}.js"
        path.write_text("export default class {}\n", encoding="utf-8")
        return path

    return _make


@pytest.fixture
def workspace_root(tmp_path: Path, make_component) -> Path:
    """Workspace with two canonical components, one helper module and a node_modules copy."""
    make_component("c", "hello")
    make_component("c", "hello", filename="utils")
    make_component("acme", "fancyButton")
    nm = tmp_path / "node_modules" / "pkg"
    make_component("c", "ignored", root=nm)
    return tmp_path


# === PYTEST MARKERS ===


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: fast isolated unit test")
    config.addinivalue_line("markers", "integration: test exercising several layers together")
