"""Capability types and composition data models.

A *capability* is a self-contained unit of editing behavior (a formatting
rule, an embed type, a keyboard shortcut set) that can be attached to the
editing surface. The kit never looks inside a capability; it only orders
capabilities by priority and hands them over as one ``ComposedKit``.

Dynamic capabilities are produced by *extension creators*: callables that
receive the editor mode and a ``BuildContext`` and return a capability, or
``None`` when they do not apply to that mode/context.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import (
    Any,
    Awaitable,
    Dict,
    Mapping,
    Optional,
    Protocol,
    Tuple,
    Union,
    runtime_checkable,
)

from pydantic import BaseModel, ConfigDict, Field

Priority = Union[int, float]


class TextEditorMode(str, Enum):
    """Editing surface flavor the kit is built for."""

    full = "full"
    compact = "compact"


class BuildContext(BaseModel):
    """Identity of the entity the editing surface is attached to.

    Passed unchanged to every dynamic extension creator.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    object_id: Optional[str] = Field(default=None, description="Id of the edited document")
    object_class: Optional[str] = Field(default=None, description="Class of the edited document")
    object_space: Optional[str] = Field(default=None, description="Space the edited document lives in")


@dataclass(frozen=True)
class Capability:
    """An opaque, self-configuring editor capability.

    ``configure`` never mutates the capability; it returns a copy whose
    options are the current options updated with the given ones.
    """

    name: str
    options: Mapping[str, Any] = field(default_factory=dict)

    def configure(self, options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> Capability:
        merged: Dict[str, Any] = {**self.options, **(options or {}), **overrides}
        return replace(self, options=merged)


@dataclass(frozen=True)
class ComposedKit(Capability):
    """The single capability wrapping every active capability, in order."""

    name: str = "defaultKit"
    extensions: Tuple[Capability, ...] = ()

    @property
    def extension_names(self) -> Tuple[str, ...]:
        return tuple(ext.name for ext in self.extensions)

    def __iter__(self):
        return iter(self.extensions)

    def __len__(self) -> int:
        return len(self.extensions)


KitEntry = Tuple[Priority, Optional[Capability]]
"""A capability (or an opt-out ``None``) tagged with its ordering priority."""


@runtime_checkable
class ExtensionCreator(Protocol):
    """Callable producing a capability for a mode and build context.

    Creators may be plain functions or coroutine functions; returning ``None``
    means the creator opts out for this mode/context.
    """

    def __call__(
        self, mode: TextEditorMode, context: BuildContext
    ) -> Union[Optional[Capability], Awaitable[Optional[Capability]]]: ...


@dataclass(frozen=True)
class KitExtensionCreator:
    """A resolved, invocable extension creator tagged with its priority."""

    priority: Priority
    create: ExtensionCreator
    name: Optional[str] = None
