"""Interface strings used for option group and placeholder labels."""

from __future__ import annotations

from collections.abc import Mapping

DEFAULT_TEXTS: dict[str, str] = {
    "label-optgroup-global": "Custom global classes:",
    "label-optgroup-module": "Custom {name} classes:",  # {name} = context name
    "label-option-column": "Column",
    "label-option-empty": "- Choose a class -",
    "label-option-row": "Row",
}


class TextProvider:
    """Look up interface strings by key, with per-key overrides.

    Unknown keys resolve to an empty string.
    """

    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        self._texts = {**DEFAULT_TEXTS, **(overrides or {})}

    def __call__(self, key: str) -> str:
        return self._texts.get(key, "")
