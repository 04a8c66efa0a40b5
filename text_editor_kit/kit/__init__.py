"""Editor kit composition.

This subpackage composes the single ``ComposedKit`` capability the editing
surface is mounted with. It re-exports the types callers are expected to use:

- ``get_editor_kit`` – process-wide, parameterless accessor for the kit.
- ``EditorKitCache`` – single-build cache; create one to capture custom
  options, registries or builders.
- ``EditorKitOptions`` – mode, build context and per-capability overrides.
- ``Capability`` / ``ComposedKit`` – the opaque capability unit and the kit.
- ``FactoryRegistry`` and its implementations – discovery of plugin
  extension factories.
- ``ExtensionFactoryResolver`` – loads registered references.
- ``EditorKitBuilder`` – merges table, dynamic and static capabilities.

Higher layers should import from this module rather than individual
implementation files to keep the integration surface stable.
"""

from .base import BuildContext, Capability, ComposedKit, ExtensionCreator, KitExtensionCreator, TextEditorMode
from .blob import BlobRef, BlobResolver, UrlBlobResolver
from .builder import EditorKitBuilder, sort_kit_entries
from .cache import EditorKitCache, get_default_kit_cache, get_editor_kit
from .errors import (
    EditorKitError,
    ExtensionFactoryError,
    FactoryRegistryError,
    FactoryResolutionError,
    InvalidExtensionError,
)
from .options import EditorKitOptions, FileOptions, ImageOptions, SubmitOptions
from .registry import (
    ChainedFactoryRegistry,
    EntryPointFactoryRegistry,
    ExtensionFactoryDescriptor,
    FactoryRegistry,
    InMemoryFactoryRegistry,
)
from .resolver import ExtensionFactoryResolver, load_reference

__all__ = [
    "BlobRef",
    "BlobResolver",
    "BuildContext",
    "Capability",
    "ChainedFactoryRegistry",
    "ComposedKit",
    "EditorKitBuilder",
    "EditorKitCache",
    "EditorKitError",
    "EditorKitOptions",
    "EntryPointFactoryRegistry",
    "ExtensionCreator",
    "ExtensionFactoryDescriptor",
    "ExtensionFactoryError",
    "ExtensionFactoryResolver",
    "FactoryRegistry",
    "FactoryRegistryError",
    "FactoryResolutionError",
    "FileOptions",
    "ImageOptions",
    "InMemoryFactoryRegistry",
    "InvalidExtensionError",
    "KitExtensionCreator",
    "SubmitOptions",
    "TextEditorMode",
    "UrlBlobResolver",
    "get_default_kit_cache",
    "get_editor_kit",
    "load_reference",
    "sort_kit_entries",
]
