"""Turns a ``TypeDescriptor`` into a file path and PHP source text.

Each declaration clause has its own small function so it can be tested on
its own; :class:`Renderer` composes them into the file frame provided by
the ``php/type.php.j2`` template.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Iterable

from ..config import ScaffoldConfig
from .models import ConstructorParam, RenderedFile, TypeDescriptor, TypeKind
from .names import absolute, fqn_to_path, join, lower_camel, simple_name, split_fqn
from .templates import TemplateRenderer

TYPE_TEMPLATE = "php/type.php.j2"


# ---------------------------------------------------------------------------
# Clause builders
# ---------------------------------------------------------------------------

def namespace_line(root_namespace: str, namespace: str) -> str:
    """``namespace App\\Domain\\Product;``"""
    return f"namespace {join(root_namespace, namespace)};"


def _reference_list(keyword: str, refs: Iterable[str]) -> str:
    refs = [absolute(ref) for ref in refs]
    if not refs:
        return ""
    return f" {keyword} " + ", ".join(refs)


def extends_clause(refs: Iterable[str]) -> str:
    """`` extends \\A, \\B`` or an empty string."""
    return _reference_list("extends", refs)


def implements_clause(refs: Iterable[str]) -> str:
    """`` implements \\A`` or an empty string."""
    return _reference_list("implements", refs)


def declaration(descriptor: TypeDescriptor) -> str:
    """The type header, e.g. ``class DbalProductRepository implements \\...``."""
    _, name = split_fqn(descriptor.fqn)
    return (
        f"{descriptor.kind.value} {name}"
        f"{extends_clause(descriptor.extends)}"
        f"{implements_clause(descriptor.implements)}"
    )


def constructor_parameter(param: ConstructorParam) -> str:
    """``private readonly \\App\\Domain\\X\\XRepositoryInterface $xRepositoryInterface``"""
    name = lower_camel(simple_name(param.type_fqn))
    return f"{param.modifier} {absolute(param.type_fqn)} ${name}".lstrip()


def constructor_block(params: Iterable[ConstructorParam], indent: str = "    ") -> str:
    """An empty-bodied ``__construct`` with one promoted parameter per line."""
    params = list(params)
    if not params:
        return (
            f"{indent}public function __construct()\n"
            f"{indent}{{\n"
            f"{indent}}}"
        )
    lines = ",\n".join(f"{indent * 2}{constructor_parameter(p)}" for p in params)
    return (
        f"{indent}public function __construct(\n"
        f"{lines}\n"
        f"{indent}) {{\n"
        f"{indent}}}"
    )


def body(descriptor: TypeDescriptor, indent: str = "    ") -> str:
    """Everything between the braces of the type declaration."""
    if descriptor.kind is TypeKind.CLASS:
        return constructor_block(descriptor.constructor_params, indent)
    if descriptor.kind is TypeKind.INTERFACE:
        return ""
    raise AssertionError(f"unhandled type kind: {descriptor.kind!r}")


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------


class Renderer:
    """Renders descriptors to ``RenderedFile`` objects.

    Rendering never touches the file system; a descriptor whose name has no
    namespace separator propagates ``MalformedNameError``.
    """

    def __init__(
        self,
        config: ScaffoldConfig | None = None,
        templates: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or ScaffoldConfig()
        self.templates = templates or TemplateRenderer()

    def render(self, descriptor: TypeDescriptor) -> RenderedFile:
        return RenderedFile(
            path=self.path_for(descriptor),
            source=self.render_source(descriptor),
            descriptor=descriptor,
        )

    def render_all(self, descriptors: Iterable[TypeDescriptor]) -> list[RenderedFile]:
        """Render every descriptor, keeping the input order.

        The whole batch fails on the first malformed descriptor.
        """
        return [self.render(d) for d in descriptors]

    def path_for(self, descriptor: TypeDescriptor) -> PurePosixPath:
        return fqn_to_path(descriptor.fqn, self.config.file_extension)

    def render_source(self, descriptor: TypeDescriptor) -> str:
        namespace, _ = split_fqn(descriptor.fqn)
        context = {
            "strict_types": self.config.strict_types,
            "namespace_line": namespace_line(self.config.root_namespace, namespace),
            "declaration": declaration(descriptor),
            "body": body(descriptor, self.config.indent),
        }
        return self.templates.render(TYPE_TEMPLATE, context)
