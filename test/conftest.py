from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import pytest

# Load dotenv files early so settings-based tests see test/.env overrides
try:  # pragma: no cover
    from dotenv import load_dotenv

    TEST_ROOT = Path(__file__).resolve().parent
    load_dotenv(TEST_ROOT / ".env", override=False)
except Exception:
    pass

from text_editor_kit.kit import cache as cache_mod
from text_editor_kit.kit.base import BuildContext, Capability, TextEditorMode
from text_editor_kit.kit.registry import ExtensionFactoryDescriptor


class CountingRegistry:
    """Registry double that records how often it is queried."""

    def __init__(self, descriptors: Sequence[ExtensionFactoryDescriptor] = ()) -> None:
        self.descriptors = list(descriptors)
        self.calls = 0

    async def find_extension_factories(self) -> Sequence[ExtensionFactoryDescriptor]:
        self.calls += 1
        return list(self.descriptors)


class RecordingCreator:
    """Extension creator double returning a fixed capability per mode."""

    def __init__(self, name: str, modes: Optional[Sequence[TextEditorMode]] = None) -> None:
        self.name = name
        self.modes = set(modes) if modes is not None else set(TextEditorMode)
        self.calls: List[Dict[str, Any]] = []

    def __call__(self, mode: TextEditorMode, context: BuildContext) -> Optional[Capability]:
        self.calls.append({"mode": mode, "context": context})
        if mode not in self.modes:
            return None
        return Capability(self.name, {"mode": mode.value})


@pytest.fixture
def counting_registry_cls():
    return CountingRegistry


@pytest.fixture
def recording_creator_cls():
    return RecordingCreator


@pytest.fixture(autouse=True)
def _reset_default_kit_cache(monkeypatch: pytest.MonkeyPatch):
    """Every test starts without a process-wide kit (each test has its own event loop)."""
    monkeypatch.setattr(cache_mod, "_default_cache", None, raising=True)
    yield
