"""Shared pytest fixtures for the entity scaffolder test suite.

Provides reusable fixtures for:
- Temporary source directories
- Configuration pointing at those directories
- Factory, renderer and generator instances
- Pre-built descriptor sets and rendered files
"""

from __future__ import annotations

from pathlib import Path

import pytest

from entity_scaffold.config import ScaffoldConfig
from entity_scaffold.scaffolder import (
    DescriptorFactory,
    RenderedFile,
    Renderer,
    ScaffoldGenerator,
    TypeDescriptor,
)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_source_dir(tmp_path: Path) -> Path:
    """Temporary ``src/`` directory for generated files (auto-cleanup)."""
    source_dir = tmp_path / "src"
    source_dir.mkdir()
    yield source_dir


@pytest.fixture(autouse=True)
def _clean_scaffold_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer ``SCAFFOLD_*`` variables out of the tests."""
    for name in (
        "SCAFFOLD_ROOT_NAMESPACE",
        "SCAFFOLD_SOURCE_DIR",
        "SCAFFOLD_FILE_EXTENSION",
        "SCAFFOLD_BASE_CONTROLLER",
        "SCAFFOLD_STRICT_TYPES",
    ):
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Core objects
# ---------------------------------------------------------------------------

@pytest.fixture
def config(tmp_source_dir: Path) -> ScaffoldConfig:
    """Default configuration writing into the temporary source directory."""
    return ScaffoldConfig(source_dir=tmp_source_dir)


@pytest.fixture
def factory(config: ScaffoldConfig) -> DescriptorFactory:
    return DescriptorFactory(config)


@pytest.fixture
def renderer(config: ScaffoldConfig) -> Renderer:
    return Renderer(config)


@pytest.fixture
def generator(config: ScaffoldConfig) -> ScaffoldGenerator:
    return ScaffoldGenerator(config)


# ---------------------------------------------------------------------------
# Pre-built scaffolds
# ---------------------------------------------------------------------------

@pytest.fixture
def product_descriptors(factory: DescriptorFactory) -> tuple[TypeDescriptor, ...]:
    """The 13 descriptors of the ``Product`` scaffold."""
    return factory.build("Product")


@pytest.fixture
def product_files(
    renderer: Renderer, product_descriptors: tuple[TypeDescriptor, ...]
) -> dict[str, RenderedFile]:
    """Rendered ``Product`` files keyed by descriptor fqn."""
    return {d.fqn: renderer.render(d) for d in product_descriptors}
