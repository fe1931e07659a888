"""
Advice message templates.

Templates are loaded once from messages.yaml and rendered per evaluation.
"""

from __future__ import annotations

from pathlib import Path

import yaml

MESSAGES_PATH = Path(__file__).parent / "messages.yaml"

REQUIRED_KINDS = (
    "congratulate",
    "suggest_gain",
    "suggest_lose",
    "suggest_lose_urgent",
)

REQUIRED_KEYS = ("suggestion", "message")


class AdviceTemplates:
    """Loads and provides access to advice message templates."""

    _instance = None
    _data = None

    @classmethod
    def get(cls) -> "AdviceTemplates":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reload(cls):
        """Force reload of template data."""
        cls._data = None
        cls._instance = None

    def __init__(self, path: Path | None = None):
        if path is not None:
            self._data = self._load(path)
        elif AdviceTemplates._data is None:
            AdviceTemplates._data = self._load(MESSAGES_PATH)

    @staticmethod
    def _load(path: Path) -> dict[str, dict[str, str]]:
        """Load templates from YAML, checking every message kind has both texts."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        missing = [kind for kind in REQUIRED_KINDS if kind not in data]
        if missing:
            raise ValueError(f"Advice templates missing for: {', '.join(missing)}")

        for kind in REQUIRED_KINDS:
            entry = data[kind]
            if not isinstance(entry, dict):
                raise ValueError(f"Advice template '{kind}' must be a mapping")
            absent = [key for key in REQUIRED_KEYS if not isinstance(entry.get(key), str)]
            if absent:
                raise ValueError(f"Advice template '{kind}' missing text for: {', '.join(absent)}")
        return data

    @property
    def kinds(self) -> list[str]:
        return list(self._data.keys())

    def suggestion(self, kind: str, delta_kg: float) -> str:
        """Short suggestion line, e.g. "Gain 8.5 kg"."""
        return self._data[kind]["suggestion"].format(delta=f"{delta_kg:.1f}")

    def message(self, kind: str, delta_kg: float) -> str:
        """Full advice sentence for a message kind."""
        return self._data[kind]["message"].format(delta=f"{delta_kg:.1f}")
