"""Exception hierarchy for the entity scaffolder.

Every error raised deliberately by the package derives from
``ScaffoldError`` so the CLI can report it in one place.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class InvalidEntityNameError(ScaffoldError, ValueError):
    """Raised when the entity name cannot be turned into a scaffold."""

    def __init__(self, entity_name: str, reason: str) -> None:
        self.entity_name = entity_name
        self.reason = reason
        super().__init__(f"Invalid entity name {entity_name!r}: {reason}")


class MalformedNameError(ScaffoldError, ValueError):
    """Raised when a fully-qualified name has no namespace separator."""

    def __init__(self, fqn: str, message: str | None = None) -> None:
        self.fqn = fqn
        super().__init__(message or f"Name {fqn!r} has no namespace separator")


class DuplicateDescriptorError(MalformedNameError):
    """Raised when a descriptor set addresses the same type twice."""

    def __init__(self, fqn: str) -> None:
        super().__init__(fqn, f"Type {fqn!r} is scaffolded more than once")


class ScaffoldConflictError(ScaffoldError, FileExistsError):
    """Raised when target files already exist and overwriting was not requested."""

    def __init__(self, paths: list[Path]) -> None:
        self.paths = list(paths)
        listed = ", ".join(str(p) for p in self.paths[:5])
        more = f" (+{len(self.paths) - 5} more)" if len(self.paths) > 5 else ""
        super().__init__(
            f"{len(self.paths)} file(s) already exist: {listed}{more}. "
            "Use --force to overwrite."
        )
