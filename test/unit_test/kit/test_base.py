from __future__ import annotations

import pytest
from pydantic import ValidationError

from text_editor_kit.kit import base as base_mod
from text_editor_kit.kit.base import BuildContext, Capability, ComposedKit, ExtensionCreator, TextEditorMode


def test_configure_returns_new_capability_with_merged_options() -> None:
    cap = Capability("table", {"resizable": True, "html_attributes": {"class": "a"}})

    configured = cap.configure({"resizable": False}, extra=1)

    assert configured is not cap
    assert configured.name == "table"
    assert dict(configured.options) == {"resizable": False, "html_attributes": {"class": "a"}, "extra": 1}
    assert dict(cap.options) == {"resizable": True, "html_attributes": {"class": "a"}}


def test_configure_without_arguments_keeps_options() -> None:
    cap = Capability("nodeUuid")
    assert cap.configure() == cap


def test_keyword_overrides_win_over_mapping() -> None:
    cap = Capability("submit").configure({"use_mod_key": True}, use_mod_key=False)
    assert cap.options["use_mod_key"] is False


def test_composed_kit_is_a_named_capability() -> None:
    exts = (Capability("a"), Capability("b"))
    kit = ComposedKit(extensions=exts)

    assert isinstance(kit, Capability)
    assert kit.name == "defaultKit"
    assert kit.extension_names == ("a", "b")
    assert list(kit) == list(exts)
    assert len(kit) == 2


def test_build_context_is_frozen_and_strict() -> None:
    ctx = BuildContext(object_id="doc-1")
    assert ctx.object_class is None

    with pytest.raises(ValidationError):
        ctx.object_id = "doc-2"  # type: ignore[misc]
    with pytest.raises(ValidationError):
        BuildContext(unknown="x")  # type: ignore[call-arg]


def test_text_editor_mode_values() -> None:
    assert TextEditorMode("full") is TextEditorMode.full
    assert TextEditorMode("compact") is TextEditorMode.compact


def test_plain_functions_satisfy_extension_creator_protocol() -> None:
    def create(mode, context):
        return None

    assert isinstance(create, ExtensionCreator)


def test_module_docstring_is_kept() -> None:
    assert base_mod.__doc__ is not None
    assert base_mod.__doc__.startswith("Capability types and composition data models.")
