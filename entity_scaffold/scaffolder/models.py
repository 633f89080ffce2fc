"""Pydantic v2 models describing the source units of a scaffold.

A ``TypeDescriptor`` is the in-memory description of one generated PHP
file.  Descriptors are immutable and compared structurally; the renderer
turns each one into a ``RenderedFile``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from ..config import DEFAULT_MODIFIER
from ..errors import MalformedNameError
from .names import SEPARATOR, normalize_fqn, relative, split_fqn


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class TypeKind(str, Enum):
    """Declaration keyword of a generated type."""
    CLASS = "class"
    INTERFACE = "interface"


# ---------------------------------------------------------------------------
# Descriptor models
# ---------------------------------------------------------------------------

class ConstructorParam(BaseModel):
    """A constructor-injected dependency (promoted property)."""

    model_config = ConfigDict(frozen=True)

    type_fqn: str = Field(..., description="Fully-qualified dependency type")
    modifier: str = Field(default=DEFAULT_MODIFIER, description="e.g. 'private readonly'")

    @field_validator("type_fqn")
    @classmethod
    def _normalize_type(cls, value: str) -> str:
        return normalize_fqn(value)


class TypeDescriptor(BaseModel):
    """One scaffolded source unit, prior to rendering."""

    model_config = ConfigDict(frozen=True)

    fqn: str = Field(..., description="Name relative to the application root namespace")
    kind: TypeKind = Field(default=TypeKind.CLASS)
    implements: tuple[str, ...] = Field(default=())
    extends: tuple[str, ...] = Field(default=())
    constructor_params: tuple[ConstructorParam, ...] = Field(default=())

    def __init__(self, **data: Any) -> None:
        """Build a descriptor.

        Raises:
            MalformedNameError: If ``fqn`` has no namespace or an empty
                segment.  Other invalid input raises ``ValidationError``.
        """
        try:
            super().__init__(**data)
        except ValidationError as exc:
            for error in exc.errors():
                cause = error.get("ctx", {}).get("error")
                if isinstance(cause, MalformedNameError):
                    raise cause from exc
            raise

    @field_validator("fqn")
    @classmethod
    def _validate_fqn(cls, value: str) -> str:
        fqn = relative(value)
        namespace, name = split_fqn(fqn)
        if not name or "" in namespace.split(SEPARATOR):
            raise MalformedNameError(value, f"Name {value!r} has an empty segment")
        return fqn

    @field_validator("implements", "extends")
    @classmethod
    def _normalize_refs(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(normalize_fqn(ref) for ref in value)

    @model_validator(mode="after")
    def _check_kind_rules(self) -> "TypeDescriptor":
        if self.kind is TypeKind.INTERFACE and self.implements:
            raise ValueError(f"interface {self.fqn} cannot implement other types")
        if self.kind is TypeKind.CLASS and len(self.extends) > 1:
            raise ValueError(f"class {self.fqn} can extend at most one type")
        return self

    # -- Derived names -----------------------------------------------------

    @property
    def namespace(self) -> str:
        return split_fqn(self.fqn)[0]

    @property
    def name(self) -> str:
        return split_fqn(self.fqn)[1]

    def __str__(self) -> str:
        from .renderer import Renderer

        return Renderer().render(self).source


@dataclass(frozen=True)
class RenderedFile:
    """A descriptor paired with its file path and source text.

    ``path`` is relative to the configured source directory.
    """

    path: PurePosixPath
    source: str
    descriptor: TypeDescriptor
