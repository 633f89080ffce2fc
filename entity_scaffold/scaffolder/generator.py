"""Main scaffolding orchestrator.

Takes an entity name and produces the complete scaffold: descriptors are
built by ``DescriptorFactory``, rendered by ``Renderer`` and, unless this is
a dry run, written by ``ScaffoldWriter``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..config import ScaffoldConfig
from .factory import DescriptorFactory
from .models import RenderedFile
from .renderer import Renderer
from .writer import ScaffoldWriter


@dataclass
class ScaffoldResult:
    """Outcome of one scaffolding run."""

    entity_name: str
    source_dir: Path
    files: list[RenderedFile] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)
    dry_run: bool = False

    @property
    def success(self) -> bool:
        return self.dry_run or len(self.written) == len(self.files)


class ScaffoldGenerator:
    """Build, render and write the scaffold for one entity."""

    def __init__(self, config: ScaffoldConfig | None = None) -> None:
        self.config = config or ScaffoldConfig()
        self.factory = DescriptorFactory(self.config)
        self.renderer = Renderer(self.config)
        self.writer = ScaffoldWriter(self.config.source_dir)

    # -- Public API --------------------------------------------------------

    def plan(self, entity_name: str) -> list[RenderedFile]:
        """Render every file of the scaffold without touching the disk.

        Raises:
            InvalidEntityNameError: Before anything is built.
            MalformedNameError: If a descriptor cannot be rendered; no
                partial result is returned.
        """
        descriptors = self.factory.build(entity_name)
        return self.renderer.render_all(descriptors)

    async def generate(
        self,
        entity_name: str,
        *,
        force: bool = False,
        dry_run: bool = False,
    ) -> ScaffoldResult:
        """Generate the scaffold for *entity_name*.

        Args:
            entity_name: Entity to scaffold, e.g. ``"Product"``.
            force: Overwrite files left by a previous run.
            dry_run: Render only; nothing is written.

        Returns:
            A ``ScaffoldResult`` listing the rendered and written files.
        """
        files = self.plan(entity_name)
        result = ScaffoldResult(
            entity_name=entity_name,
            source_dir=self.config.source_dir,
            files=files,
            dry_run=dry_run,
        )
        if not dry_run:
            result.written = await self.writer.write_all(files, force=force)
        return result
