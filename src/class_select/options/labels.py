"""Human-readable names for requesting contexts."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from class_select.options.texts import TextProvider

# Built-in layout contexts and the text key naming each.
_LAYOUT_CONTEXT_TEXTS = {
    "row": "label-option-row",
    "col": "label-option-column",
    "column": "label-option-column",
}


class ContextLabels:
    """Resolve a context id to a display name.

    Registered names take precedence, then the layout contexts (``row``,
    ``col``/``column``); anything else is shown as its id.
    """

    def __init__(
        self,
        names: Mapping[str, str] | None = None,
        texts: Callable[[str], str] | None = None,
    ) -> None:
        self._names = dict(names or {})
        self._texts = texts or TextProvider()

    def register(self, context_id: str, name: str) -> None:
        self._names[context_id] = name

    def __call__(self, context_id: str) -> str:
        if context_id in self._names:
            return self._names[context_id]
        text_key = _LAYOUT_CONTEXT_TEXTS.get(context_id)
        if text_key is not None:
            return self._texts(text_key)
        return context_id
