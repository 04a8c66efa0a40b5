"""Single-build cache for the composed editor kit.

The editor kit is composed once and then reused for the lifetime of the
cache. The first ``get()`` installs a task that resolves the dynamic
extension factories and builds the kit; every caller, concurrent or later,
awaits that same task. There is no invalidation.

A failed build is cached like a successful one: every caller observes the
same exception and no rebuild is attempted.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from ..core.config import Settings
from .base import ComposedKit, TextEditorMode
from .blob import UrlBlobResolver
from .builder import EditorKitBuilder
from .options import EditorKitOptions
from .registry import FactoryRegistry, default_factory_registry
from .resolver import ExtensionFactoryResolver

logger = logging.getLogger(__name__)


class EditorKitCache:
    """Lazily builds the ``ComposedKit`` exactly once and shares the result.

    Options are captured here, at construction. ``get()`` takes none, so no
    caller can change the mode or build context of a kit that is already
    being built.
    """

    def __init__(
        self,
        registry: FactoryRegistry,
        options: Optional[EditorKitOptions] = None,
        builder: Optional[EditorKitBuilder] = None,
        resolver: Optional[ExtensionFactoryResolver] = None,
    ) -> None:
        self._options = options or EditorKitOptions()
        self._builder = builder or EditorKitBuilder()
        self._resolver = resolver or ExtensionFactoryResolver(registry)
        self._task: Optional[asyncio.Task[ComposedKit]] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> EditorKitCache:
        """Create a cache wired from configuration.

        Uses the entry-point and settings registries, the configured default
        mode and failure policy, and a URL blob resolver.
        """
        mode = TextEditorMode(settings.default_mode) if settings.default_mode else None
        return cls(
            registry=default_factory_registry(settings),
            options=EditorKitOptions(mode=mode),
            builder=EditorKitBuilder(
                blob_resolver=UrlBlobResolver(settings.blob_base_url),
                failure_policy=settings.factory_failure_policy,
            ),
        )

    @property
    def options(self) -> EditorKitOptions:
        return self._options

    @property
    def is_built(self) -> bool:
        """True once the build finished successfully."""
        task = self._task
        return task is not None and task.done() and not task.cancelled() and task.exception() is None

    async def get(self) -> ComposedKit:
        """Return the composed kit, starting the build on first call.

        Raises:
            EditorKitError: If the (single) build failed.
        """
        # No await between the check and the install: one writer per event loop.
        if self._task is None:
            logger.debug("EditorKitCache: starting kit build")
            self._task = asyncio.ensure_future(self._build())
        # A cancelled caller must not cancel the shared build.
        return await asyncio.shield(self._task)

    async def _build(self) -> ComposedKit:
        try:
            creators = await self._resolver.resolve()
            return await self._builder.build(creators, self._options)
        except Exception:
            logger.exception("EditorKitCache: editor kit build failed")
            raise


_default_cache: Optional[EditorKitCache] = None


def get_default_kit_cache() -> EditorKitCache:
    """Return the process-wide cache, creating it from settings on first use."""
    global _default_cache
    if _default_cache is None:
        from ..core.config import settings

        _default_cache = EditorKitCache.from_settings(settings)
    return _default_cache


async def get_editor_kit() -> ComposedKit:
    """Return the process-wide composed editor kit."""
    return await get_default_kit_cache().get()
