"""Caller options for building the editor kit.

``EditorKitOptions`` is captured once, when a kit cache is created, and
drives the mode, the build context handed to dynamic extension creators, and
the per-capability overrides for the static capabilities.

Each per-capability field accepts ``False`` to drop the capability entirely,
or a partial options model whose explicitly set values override the kit's
defaults. The partial models allow extra keys so capability-specific
settings the kit knows nothing about still reach the capability.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .base import BuildContext, TextEditorMode


class _PartialCapabilityOptions(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    def overrides(self) -> Dict[str, Any]:
        """Return only the values the caller actually provided."""
        return self.model_dump(exclude_none=True)


class SubmitOptions(_PartialCapabilityOptions):
    """Overrides for the submit capability."""

    use_mod_key: Optional[bool] = Field(default=None, description="Require a modifier key to submit")


class FileOptions(_PartialCapabilityOptions):
    """Overrides for the file embed capability."""

    inline: Optional[bool] = Field(default=None, description="Render file embeds inline")


class ImageOptions(_PartialCapabilityOptions):
    """Overrides for the image embed capability."""

    inline: Optional[bool] = Field(default=None, description="Render images inline")
    loading_img_src: Optional[str] = Field(default=None, description="Placeholder shown while an image loads")
    get_blob_ref: Optional[Callable[..., Awaitable[Any]]] = Field(
        default=None, description="Coroutine function (file, name, size) -> blob reference"
    )


class EditorKitOptions(BaseModel):
    """Options captured by the kit at first build.

    Attributes:
        mode: Editor mode; ``None`` means ``full``.
        history: ``False`` disables undo/redo history in the base kit.
        submit: ``False`` drops the submit capability, otherwise overrides.
        file: ``False`` drops file embeds, otherwise overrides.
        image: ``False`` drops image embeds, otherwise overrides.
        object_id: Id of the edited document.
        object_class: Class of the edited document.
        object_space: Space of the edited document.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    mode: Optional[TextEditorMode] = None
    history: Optional[Literal[False]] = None
    submit: Union[Literal[False], SubmitOptions, None] = None
    file: Union[Literal[False], FileOptions, None] = None
    image: Union[Literal[False], ImageOptions, None] = None
    object_id: Optional[str] = None
    object_class: Optional[str] = None
    object_space: Optional[str] = None

    @property
    def effective_mode(self) -> TextEditorMode:
        return self.mode or TextEditorMode.full

    def build_context(self) -> BuildContext:
        return BuildContext(
            object_id=self.object_id,
            object_class=self.object_class,
            object_space=self.object_space,
        )
