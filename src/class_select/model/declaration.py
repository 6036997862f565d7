"""Declaration model: the attributes of one declared CSS class."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ShortcodeAtts:
    """Tokenised shortcode attributes.

    ``named`` holds ``key=value`` pairs (keys lowercased, last one wins);
    ``positional`` holds bare values in source order.
    """

    named: dict[str, str] = field(default_factory=dict)
    positional: tuple[str, ...] = ()


@dataclass(frozen=True)
class ClassAttributes:
    """A single validated class declaration.

    ``bare_tokens`` keeps values written without a key; they carry no
    meaning and are only reported.
    """

    class_name: str
    label: str
    scopes: tuple[str, ...] = ("global",)
    group: str | None = None
    bare_tokens: tuple[str, ...] = ()
