"""Error types for editor kit composition.

Defines a small hierarchy of exceptions raised while discovering, resolving
and invoking extension factories. Every one of them ends up as the failure of
the shared kit build, so callers mounting an editor can catch
``EditorKitError`` to handle them all.
"""

from __future__ import annotations

from typing import Any, Optional, Union


class EditorKitError(Exception):
    """Base error for all editor kit exceptions."""


class FactoryRegistryError(EditorKitError):
    """Raised when the extension factory registry cannot be queried."""


class FactoryResolutionError(EditorKitError):
    """Raised when a factory reference cannot be loaded into a callable."""

    def __init__(self, reference: Any, reason: str) -> None:
        self.reference = reference
        super().__init__(f"Cannot resolve extension factory {reference!r}: {reason}")


class ExtensionFactoryError(EditorKitError):
    """Raised when a dynamic extension factory fails during invocation."""

    def __init__(self, name: Optional[str], priority: Union[int, float], reason: str) -> None:
        self.name = name
        self.priority = priority
        super().__init__(f"Extension factory '{name or '<anonymous>'}' (priority {priority}) failed: {reason}")


class InvalidExtensionError(ExtensionFactoryError):
    """Raised when a factory returns something that is neither a capability nor ``None``."""

    def __init__(self, name: Optional[str], priority: Union[int, float], value: Any) -> None:
        self.value = value
        super().__init__(name, priority, f"expected a Capability or None, got {type(value).__name__}")
