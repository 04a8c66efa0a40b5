"""Unit tests for the settings model."""

import pytest
from pydantic import ValidationError

from text_editor_kit.core.config import ExtensionFactorySetting, FactoryFailurePolicy, Settings


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    for name in (
        "TEXT_EDITOR_KIT_LOG_LEVEL",
        "TEXT_EDITOR_KIT_DEFAULT_MODE",
        "TEXT_EDITOR_KIT_ENTRY_POINT_GROUP",
        "TEXT_EDITOR_KIT_EXTENSION_FACTORIES",
        "TEXT_EDITOR_KIT_FACTORY_FAILURE_POLICY",
        "TEXT_EDITOR_KIT_BLOB_BASE_URL",
    ):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)


def test_defaults(clean_env) -> None:
    settings = Settings()

    assert settings.log_level == "INFO"
    assert settings.log_format == "detailed"
    assert settings.enable_file_logging is False
    assert settings.default_mode is None
    assert settings.entry_point_group == "text_editor_kit.extension_factories"
    assert settings.extension_factories == []
    assert settings.factory_failure_policy is FactoryFailurePolicy.fail_fast
    assert settings.blob_base_url == "/files"


def test_values_from_environment(clean_env, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEXT_EDITOR_KIT_DEFAULT_MODE", "compact")
    monkeypatch.setenv("TEXT_EDITOR_KIT_FACTORY_FAILURE_POLICY", "isolate")
    monkeypatch.setenv("TEXT_EDITOR_KIT_ENTRY_POINT_GROUP", "acme.editor")
    monkeypatch.setenv(
        "TEXT_EDITOR_KIT_EXTENSION_FACTORIES",
        '[{"priority": 150, "create": "plugins.mention:create"}, '
        '{"priority": 950.5, "create": "plugins.emoji:create", "name": "emoji"}]',
    )

    settings = Settings()

    assert settings.default_mode == "compact"
    assert settings.factory_failure_policy is FactoryFailurePolicy.isolate
    assert settings.entry_point_group == "acme.editor"
    assert settings.extension_factories == [
        ExtensionFactorySetting(priority=150, create="plugins.mention:create"),
        ExtensionFactorySetting(priority=950.5, create="plugins.emoji:create", name="emoji"),
    ]


def test_values_from_dotenv_file(clean_env, tmp_path) -> None:
    (tmp_path / ".env").write_text("TEXT_EDITOR_KIT_BLOB_BASE_URL=https://cdn.example.com/files\n", encoding="utf-8")
    assert Settings().blob_base_url == "https://cdn.example.com/files"


def test_invalid_failure_policy(clean_env, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEXT_EDITOR_KIT_FACTORY_FAILURE_POLICY", "ignore")
    with pytest.raises(ValidationError):
        Settings()


def test_factory_setting_requires_reference() -> None:
    with pytest.raises(ValidationError):
        ExtensionFactorySetting(priority=1)


def test_invalid_default_mode_rejected_at_load(clean_env, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEXT_EDITOR_KIT_DEFAULT_MODE", "wide")
    with pytest.raises(ValidationError):
        Settings()


def test_factory_setting_fields_by_name() -> None:
    setting = ExtensionFactorySetting(priority=150, create="plugins.mention:create")
    assert (setting.priority, setting.create, setting.name) == (150, "plugins.mention:create", None)
