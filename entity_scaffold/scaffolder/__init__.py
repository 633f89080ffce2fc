"""Entity scaffolder -- derives and renders the PHP files of one entity.

Quick usage::

    from entity_scaffold.scaffolder import ScaffoldGenerator

    generator = ScaffoldGenerator()
    result = await generator.generate("Product")
"""

from entity_scaffold.scaffolder.factory import DescriptorFactory, build_descriptors
from entity_scaffold.scaffolder.generator import ScaffoldGenerator, ScaffoldResult
from entity_scaffold.scaffolder.models import (
    ConstructorParam,
    RenderedFile,
    TypeDescriptor,
    TypeKind,
)
from entity_scaffold.scaffolder.names import split_fqn
from entity_scaffold.scaffolder.renderer import Renderer
from entity_scaffold.scaffolder.templates import TemplateRenderer
from entity_scaffold.scaffolder.writer import ScaffoldWriter

__all__ = [
    "ConstructorParam",
    "DescriptorFactory",
    "RenderedFile",
    "Renderer",
    "ScaffoldGenerator",
    "ScaffoldResult",
    "ScaffoldWriter",
    "TemplateRenderer",
    "TypeDescriptor",
    "TypeKind",
    "build_descriptors",
    "split_fqn",
]
