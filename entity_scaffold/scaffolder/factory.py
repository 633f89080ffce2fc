"""Derives the descriptor set of a scaffold from an entity name.

One entity produces 13 PHP types spread over four layers::

    Domain          entity, repository interface
    Application     model, finder interface, create/update commands and handlers
    Infrastructure  DBAL finder and repository
    Framework       controller, create/update forms

Descriptor names are relative to the application root namespace.  Types
referenced from another descriptor (implemented interfaces, injected
dependencies) are addressed from the global root, so they carry the root
namespace as a prefix.
"""

from __future__ import annotations

import re

from ..config import ScaffoldConfig
from ..errors import DuplicateDescriptorError, InvalidEntityNameError
from .models import ConstructorParam, TypeDescriptor, TypeKind
from .names import join

# Whitespace and anything that would introduce an extra namespace or path segment.
_FORBIDDEN = re.compile(r"[\s\\./]")


def validate_entity_name(entity_name: str) -> str:
    """Return *entity_name* unchanged if it can be scaffolded.

    Raises:
        InvalidEntityNameError: For empty, whitespace-only or segmented names.
    """
    if not entity_name or not entity_name.strip():
        raise InvalidEntityNameError(entity_name, "name is empty")
    if _FORBIDDEN.search(entity_name):
        raise InvalidEntityNameError(
            entity_name, "name may not contain whitespace or namespace separators"
        )
    return entity_name


class DescriptorFactory:
    """Builds the ordered descriptor set for one entity."""

    def __init__(self, config: ScaffoldConfig | None = None) -> None:
        self.config = config or ScaffoldConfig()

    def build(self, entity_name: str) -> tuple[TypeDescriptor, ...]:
        """Return the 13 descriptors of the scaffold for *entity_name*.

        The name is validated before anything is built, so the result is
        either the complete set or an ``InvalidEntityNameError``.
        """
        e = validate_entity_name(entity_name)

        entity = f"Domain\\{e}\\{e}Entity"
        repository_interface = f"Domain\\{e}\\{e}RepositoryInterface"
        model = f"Application\\{e}\\{e}Model"
        finder_interface = f"Application\\{e}\\{e}FinderInterface"
        create_command = f"Application\\{e}\\Command\\Create{e}Command"
        update_command = f"Application\\{e}\\Command\\Update{e}Command"
        create_handler = f"Application\\{e}\\CommandHandler\\Create{e}CommandHandler"
        update_handler = f"Application\\{e}\\CommandHandler\\Update{e}CommandHandler"
        dbal_finder = f"Infrastructure\\{e}\\Dbal{e}Finder"
        dbal_repository = f"Infrastructure\\{e}\\Dbal{e}Repository"
        controller = f"Framework\\{e}\\Controller\\{e}Controller"
        create_form = f"Framework\\{e}\\Form\\Create{e}Form"
        update_form = f"Framework\\{e}\\Form\\Update{e}Form"

        repository_dependency = (self._dependency(repository_interface),)

        descriptors = (
            TypeDescriptor(fqn=entity),
            TypeDescriptor(fqn=repository_interface, kind=TypeKind.INTERFACE),
            TypeDescriptor(fqn=model),
            TypeDescriptor(fqn=finder_interface, kind=TypeKind.INTERFACE),
            TypeDescriptor(fqn=create_command),
            TypeDescriptor(fqn=update_command),
            TypeDescriptor(fqn=create_handler, constructor_params=repository_dependency),
            TypeDescriptor(fqn=update_handler, constructor_params=repository_dependency),
            TypeDescriptor(fqn=dbal_finder, implements=(self._ref(finder_interface),)),
            TypeDescriptor(fqn=dbal_repository, implements=(self._ref(repository_interface),)),
            TypeDescriptor(fqn=controller, extends=(self.config.base_controller,)),
            TypeDescriptor(fqn=create_form),
            TypeDescriptor(fqn=update_form),
        )
        _check_unique(descriptors)
        return descriptors

    # -- Helpers -----------------------------------------------------------

    def _ref(self, fqn: str) -> str:
        """Address a scaffolded type from the global root."""
        return join(self.config.root_namespace, fqn)

    def _dependency(self, fqn: str) -> ConstructorParam:
        return ConstructorParam(
            type_fqn=self._ref(fqn), modifier=self.config.dependency_modifier
        )


def build_descriptors(
    entity_name: str, config: ScaffoldConfig | None = None
) -> tuple[TypeDescriptor, ...]:
    """Shortcut for ``DescriptorFactory(config).build(entity_name)``."""
    return DescriptorFactory(config).build(entity_name)


def _check_unique(descriptors: tuple[TypeDescriptor, ...]) -> None:
    seen: set[str] = set()
    for descriptor in descriptors:
        key = descriptor.fqn.lower()
        if key in seen:
            raise DuplicateDescriptorError(descriptor.fqn)
        seen.add(key)
