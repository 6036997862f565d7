"""Merge an option set into a host form field configuration."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from class_select.model.options import OptionSet

__all__ = ["CLASS_FIELD_KEY", "merge_field_options"]

logger = logging.getLogger(__name__)

CLASS_FIELD_KEY = "class"


def merge_field_options(field: Mapping[str, object], option_set: OptionSet) -> dict[str, object]:
    """Return a copy of *field* with *option_set* added to its ``options``.

    Options the field already defines win over computed ones with the same
    key. The empty-value placeholder leads the list unless the field already
    has an empty-value option. A field whose ``options`` is set but is not a
    mapping is returned unchanged.
    """
    merged = dict(field)
    if option_set.is_empty:
        return merged

    existing = field.get("options")
    if existing is not None and not isinstance(existing, Mapping):
        logger.warning(
            "Field options is a %s, not a mapping; leaving it unchanged",
            type(existing).__name__,
        )
        return merged

    computed = option_set.to_options()
    placeholder = computed.pop("", None)

    options: dict[str, object] = dict(existing or {})
    for key, value in computed.items():
        options.setdefault(key, value)

    if placeholder is not None and "" not in options:
        options = {"": placeholder, **options}

    merged["options"] = options
    return merged
