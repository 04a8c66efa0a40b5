"""Resolution of extension factory references.

The resolver is the second phase of dynamic extension loading: the registry
hands out references, the resolver loads each of them into an invocable
:class:`~text_editor_kit.kit.base.ExtensionCreator`.

All references are resolved concurrently and joined. The priority of each
creator is taken from its descriptor when the resolution is issued, so the
order in which resolutions complete never affects the final ordering.

Resolution is fail-fast: a single reference that cannot be loaded fails the
whole resolution.
"""

from __future__ import annotations

import asyncio
import importlib
import inspect
import logging
from typing import Any, Callable, List

from .base import ExtensionCreator, KitExtensionCreator
from .errors import EditorKitError, FactoryRegistryError, FactoryResolutionError
from .registry import ExtensionFactoryDescriptor, FactoryRegistry

logger = logging.getLogger(__name__)


def _import_from_string(reference: str) -> Any:
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise FactoryResolutionError(reference, "expected 'package.module:attribute'")
    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise FactoryResolutionError(reference, f"cannot import module '{module_name}'") from exc
    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError:
            raise FactoryResolutionError(reference, f"'{attr}' not found") from None
    return target


def load_reference(reference: Any) -> Any:
    """Load a factory reference.

    Supported forms, checked in order:

    1. ``"package.module:attribute"`` strings (the attribute may be dotted).
    2. Objects with a ``load()`` method, such as ``importlib.metadata.EntryPoint``.
    3. Callables, returned unchanged.

    The returned value may be awaitable; :class:`ExtensionFactoryResolver`
    awaits it.

    Raises:
        FactoryResolutionError: If the reference cannot be loaded.
    """
    if isinstance(reference, str):
        return _import_from_string(reference)
    load = getattr(reference, "load", None)
    if callable(load):
        try:
            return load()
        except Exception as exc:
            raise FactoryResolutionError(reference, f"{type(exc).__name__}: {exc}") from exc
    if callable(reference):
        return reference
    raise FactoryResolutionError(reference, f"unsupported reference type {type(reference).__name__}")


class ExtensionFactoryResolver:
    """Turns registry descriptors into invocable, priority-tagged creators."""

    def __init__(self, registry: FactoryRegistry, loader: Callable[[Any], Any] = load_reference) -> None:
        self._registry = registry
        self._loader = loader

    async def resolve(self) -> List[KitExtensionCreator]:
        """
        Query the registry once and resolve every reference.

        Returns:
            Creators in registry order, each carrying its descriptor's priority.

        Raises:
            FactoryRegistryError: If the registry query fails.
            FactoryResolutionError: If any reference cannot be resolved.
        """
        try:
            descriptors = list(await self._registry.find_extension_factories())
        except EditorKitError:
            raise
        except Exception as exc:
            raise FactoryRegistryError(f"Extension factory registry query failed: {exc}") from exc

        logger.info("ExtensionFactoryResolver: resolving %d extension factories", len(descriptors))
        return list(await asyncio.gather(*(self._resolve_one(d) for d in descriptors)))

    async def _resolve_one(self, descriptor: ExtensionFactoryDescriptor) -> KitExtensionCreator:
        try:
            loaded = self._loader(descriptor.reference)
            if inspect.isawaitable(loaded):
                loaded = await loaded
        except EditorKitError:
            raise
        except Exception as exc:
            raise FactoryResolutionError(descriptor.reference, f"{type(exc).__name__}: {exc}") from exc

        if not callable(loaded):
            raise FactoryResolutionError(descriptor.reference, f"resolved to non-callable {type(loaded).__name__}")

        create: ExtensionCreator = loaded
        logger.debug(
            "ExtensionFactoryResolver: resolved name=%s priority=%s", descriptor.name, descriptor.priority
        )
        return KitExtensionCreator(priority=descriptor.priority, create=create, name=descriptor.name)
