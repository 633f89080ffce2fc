"""Writes rendered files below the configured source directory.

The writer is all-or-nothing with respect to conflicts: every target path is
checked before the first file is written, so a refused run leaves the tree
untouched.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Sequence

from ..errors import ScaffoldConflictError
from .models import RenderedFile


class ScaffoldWriter:
    """Persists ``RenderedFile`` objects under *source_dir*."""

    def __init__(self, source_dir: str | Path) -> None:
        self.source_dir = Path(source_dir)

    def target_path(self, rendered: RenderedFile) -> Path:
        """Absolute-or-relative filesystem path for *rendered*."""
        return self.source_dir.joinpath(*rendered.path.parts)

    def conflicts(self, files: Sequence[RenderedFile]) -> list[Path]:
        """Return the target paths that already exist, in input order."""
        return [p for p in (self.target_path(f) for f in files) if p.exists()]

    async def write_all(
        self,
        files: Sequence[RenderedFile],
        *,
        force: bool = False,
    ) -> list[Path]:
        """Write every file and return the written paths in input order.

        Args:
            files: Rendered files to persist.
            force: Overwrite files that already exist.

        Raises:
            ScaffoldConflictError: If any target exists and *force* is false.
                Nothing is written in that case.
        """
        if not force:
            existing = await asyncio.to_thread(self.conflicts, files)
            if existing:
                raise ScaffoldConflictError(existing)

        targets = [self.target_path(f) for f in files]
        await asyncio.gather(
            *(
                asyncio.to_thread(_write_file, target, f.source)
                for target, f in zip(targets, files)
            )
        )
        return targets


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
