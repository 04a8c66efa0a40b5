"""Extension factory registries.

A registry answers one question: which extension factories are currently
registered, and at which priority. It returns *references* only; turning a
reference into a callable is the resolver's job, so discovery never imports
plugin code.

Registries provided here:

* :class:`InMemoryFactoryRegistry` for programmatic registration and for
  factories listed in settings.
* :class:`EntryPointFactoryRegistry` for plugin packages that declare their
  factories in the ``text_editor_kit.extension_factories`` entry-point group.
  The entry point name is ``<label>.<priority>`` and its value the factory,
  e.g. ``mention.150 = my_plugin.editor:create_mention``.
* :class:`ChainedFactoryRegistry` to concatenate several registries.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import metadata
from typing import Any, Iterable, List, Optional, Protocol, Sequence, runtime_checkable

from ..core.config import Settings
from .base import Priority
from .errors import EditorKitError, FactoryRegistryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtensionFactoryDescriptor:
    """A registered extension factory: priority plus an unresolved reference."""

    priority: Priority
    reference: Any
    name: Optional[str] = None


@runtime_checkable
class FactoryRegistry(Protocol):
    """Protocol for sources of extension factory registrations."""

    async def find_extension_factories(self) -> Sequence[ExtensionFactoryDescriptor]:
        """Return every registered factory, in registration order."""
        ...


class InMemoryFactoryRegistry:
    """
    In-memory list of extension factory registrations.

    Notes:
        - Registration order is preserved and is the tie-break between
          factories with the same priority.
        - Registering the same reference twice registers it twice.
    """

    def __init__(self, descriptors: Iterable[ExtensionFactoryDescriptor] = ()) -> None:
        self._descriptors: List[ExtensionFactoryDescriptor] = list(descriptors)

    @classmethod
    def from_settings(cls, settings: Settings) -> InMemoryFactoryRegistry:
        return cls(
            ExtensionFactoryDescriptor(priority=item.priority, reference=item.create, name=item.name or item.create)
            for item in settings.extension_factories
        )

    def register(self, priority: Priority, reference: Any, name: Optional[str] = None) -> None:
        """
        Register an extension factory reference.

        Args:
            priority: Ordering key of the extension the factory produces.
            reference: ``"module:attribute"`` string, object with ``load()``
                or the factory callable itself.
            name: Optional label used in logs and error messages.
        """
        self._descriptors.append(ExtensionFactoryDescriptor(priority=priority, reference=reference, name=name))

    async def find_extension_factories(self) -> Sequence[ExtensionFactoryDescriptor]:
        return list(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)


def _iter_entry_points(group: str) -> Iterable[metadata.EntryPoint]:
    """Return entry points for ``group``.

    The function is also used as an indirection point in tests so that
    behavior can be controlled without relying on the real environment.
    """

    return metadata.entry_points().select(group=group)


def parse_entry_point_name(name: str) -> tuple[str, int]:
    """Split an entry point name ``<label>.<priority>`` into its parts.

    Raises:
        FactoryRegistryError: If the name has no integer priority suffix.
    """
    label, sep, raw_priority = name.rpartition(".")
    if not sep or not label:
        raise FactoryRegistryError(f"Entry point '{name}' must be named '<label>.<priority>'")
    try:
        return label, int(raw_priority)
    except ValueError:
        raise FactoryRegistryError(f"Entry point '{name}' has a non-integer priority '{raw_priority}'") from None


class EntryPointFactoryRegistry:
    """Registry backed by Python entry points declared by plugin packages."""

    def __init__(self, group: str = "text_editor_kit.extension_factories") -> None:
        self._group = group

    @property
    def group(self) -> str:
        return self._group

    async def find_extension_factories(self) -> Sequence[ExtensionFactoryDescriptor]:
        try:
            entry_points = list(_iter_entry_points(self._group))
        except Exception as exc:
            raise FactoryRegistryError(f"Cannot list entry points of group '{self._group}': {exc}") from exc

        descriptors: List[ExtensionFactoryDescriptor] = []
        for ep in entry_points:
            label, priority = parse_entry_point_name(ep.name)
            descriptors.append(ExtensionFactoryDescriptor(priority=priority, reference=ep, name=label))
        logger.debug("EntryPointFactoryRegistry: group=%s factories=%d", self._group, len(descriptors))
        return descriptors


class ChainedFactoryRegistry:
    """Concatenates the registrations of several registries, in the given order."""

    def __init__(self, *registries: FactoryRegistry) -> None:
        self._registries = registries

    async def find_extension_factories(self) -> Sequence[ExtensionFactoryDescriptor]:
        descriptors: List[ExtensionFactoryDescriptor] = []
        for registry in self._registries:
            try:
                descriptors.extend(await registry.find_extension_factories())
            except EditorKitError:
                raise
            except Exception as exc:
                raise FactoryRegistryError(f"{type(registry).__name__} failed: {exc}") from exc
        return descriptors


def default_factory_registry(settings: Settings) -> FactoryRegistry:
    """Entry-point registrations first, then factories listed in settings."""
    return ChainedFactoryRegistry(
        EntryPointFactoryRegistry(settings.entry_point_group),
        InMemoryFactoryRegistry.from_settings(settings),
    )
