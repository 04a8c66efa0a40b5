"""text-editor-kit.

This package composes the capability set ("editor kit") a rich-text editing
surface is mounted with.

High-level architecture
-----------------------

The kit merges two sources of capabilities:

- **Static capabilities**: tables, base formatting and headings, code blocks,
  hard breaks, submit, list keymaps, node ids, file and image embeds. They
  occupy reserved priority bands between 10 and 800.
- **Dynamic capabilities**: produced by extension factories that plugin
  packages register (entry points or settings). Each factory is invoked with
  the editor mode and the build context and may opt out by returning
  ``None``.

Core subpackages
----------------

- ``text_editor_kit.kit``: registries, resolver, builder and the single-build
  cache.
- ``text_editor_kit.core``: settings (pydantic-settings) and logging setup.

Typical workflow
----------------

Most integrations only need::

    from text_editor_kit import get_editor_kit

    kit = await get_editor_kit()

The first call discovers and resolves the registered factories, builds the
kit and caches it; every later call returns the same kit.
"""

from .kit import ComposedKit, EditorKitCache, EditorKitOptions, get_editor_kit

__all__ = [
    "ComposedKit",
    "EditorKitCache",
    "EditorKitOptions",
    "get_editor_kit",
]
