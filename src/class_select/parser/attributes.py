"""Parser for the attribute list of a single class declaration.

Syntax example:
    class=".my-class" label="My class" scope="global, !rich-text" group='Effects'
"""

from __future__ import annotations

import logging
import re

from class_select.model.declaration import ClassAttributes, ShortcodeAtts
from class_select.parser.sanitize import esc_attr, esc_html, sanitize_html_class

__all__ = ["parse_declaration", "parse_shortcode_atts"]

logger = logging.getLogger(__name__)

# One attribute per match; exactly one alternative's groups are populated.
_ATTR_RE = re.compile(
    r"""
      (?P<dq_key>[\w-]+)\s*=\s*"(?P<dq_value>[^"]*)"(?:\s|$)     # key="value"
    | (?P<sq_key>[\w-]+)\s*=\s*'(?P<sq_value>[^']*)'(?:\s|$)     # key='value'
    | (?P<bare_key>[\w-]+)\s*=\s*(?P<bare_value>[^\s'"]+)(?:\s|$) # key=value
    | "(?P<dq_positional>[^"]*)"(?:\s|$)                         # "value"
    | '(?P<sq_positional>[^']*)'(?:\s|$)                         # 'value'
    | (?P<positional>\S+)(?:\s|$)                                # value
    """,
    re.VERBOSE,
)

_ODD_SPACES_RE = re.compile(r"[\u00a0\u200b]+")
_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

# Characters left over from the surrounding CSS comment.
_COMMENT_RESIDUE = str.maketrans("", "", "/*;")

# Applied after lowercasing, so scope ids are case-insensitive.
_INVALID_SCOPE_CHARS_RE = re.compile(r"[^a-z,\-!]")

# Attribute values treated as unset.
_FALSY_VALUES = frozenset({"", "0"})


def _unescape(value: str) -> str:
    return _ESCAPE_RE.sub(r"\1", value)


def parse_shortcode_atts(text: str) -> ShortcodeAtts:
    """Tokenise a shortcode attribute string.

    Quoted values may contain whitespace; unquoted values run to the next
    whitespace. Keys are case-insensitive.
    """
    text = _ODD_SPACES_RE.sub(" ", text)
    named: dict[str, str] = {}
    positional: list[str] = []
    for match in _ATTR_RE.finditer(text):
        for kind in ("dq", "sq", "bare"):
            key = match.group(f"{kind}_key")
            if key:
                named[key.lower()] = _unescape(match.group(f"{kind}_value"))
                break
        else:
            for name in ("dq_positional", "sq_positional", "positional"):
                value = match.group(name)
                if value is not None:
                    positional.append(_unescape(value))
                    break
    return ShortcodeAtts(named=named, positional=tuple(positional))


def _parse_scopes(raw: str) -> tuple[str, ...]:
    cleaned = _INVALID_SCOPE_CHARS_RE.sub("", raw.lower())
    return tuple(esc_attr(token) for token in cleaned.split(",") if token)


def parse_declaration(body: str) -> ClassAttributes | None:
    """Parse a raw declaration body into validated class attributes.

    Returns None when the body declares no usable class name.
    """
    atts = parse_shortcode_atts(body.translate(_COMMENT_RESIDUE))
    named = {k: v for k, v in atts.named.items() if v not in _FALSY_VALUES}

    if "class" not in named:
        logger.debug("Skipping declaration without a class: %r", body)
        return None

    raw_class = named["class"].strip(". \t\r\n\f\v")
    if not raw_class:
        logger.debug("Skipping declaration with an empty class: %r", body)
        return None

    label = named.get("label", "").strip() or raw_class
    group = named.get("group", "").strip() or None
    scopes = _parse_scopes(named.get("scope", "global"))

    class_name = sanitize_html_class(raw_class)
    if not class_name:
        logger.debug("Skipping declaration, class %r sanitizes to nothing", raw_class)
        return None

    return ClassAttributes(
        class_name=class_name,
        label=esc_html(label),
        scopes=scopes,
        group=group,
        bare_tokens=atts.positional,
    )
