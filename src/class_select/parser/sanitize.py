"""Text sanitizers for class names, slugs, labels and attribute values.

These mirror the escaping rules applied by the host page builder, so that
option keys and labels produced here can be dropped straight into its
field configuration.
"""

from __future__ import annotations

import re
import unicodedata

__all__ = ["esc_attr", "esc_html", "sanitize_html_class", "sanitize_title"]

_PERCENT_OCTET_RE = re.compile(r"%[a-fA-F0-9]{2}")
_INVALID_CLASS_CHARS_RE = re.compile(r"[^A-Za-z0-9_-]")

_TAG_RE = re.compile(r"<[^>]*>")
_ENTITY_RE = re.compile(r"&.+?;")
_INVALID_SLUG_CHARS_RE = re.compile(r"[^a-z0-9 _-]")
_WHITESPACE_RE = re.compile(r"\s+")
_DASHES_RE = re.compile(r"-+")

# An ampersand that does not already start a character reference.
_BARE_AMP_RE = re.compile(r"&(?!(?:[a-zA-Z][a-zA-Z0-9]*|#[0-9]+|#[xX][0-9a-fA-F]+);)")

_SPECIAL_CHARS = {
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}


def sanitize_html_class(value: str) -> str:
    """Reduce *value* to a lowercase token usable as an HTML class name.

    Percent-encoded octets are dropped first, then every character outside
    ``A-Z a-z 0-9 _ -``. The result may be empty.
    """
    sanitized = _PERCENT_OCTET_RE.sub("", value.lower())
    return _INVALID_CLASS_CHARS_RE.sub("", sanitized)


def sanitize_title(value: str) -> str:
    """Slugify *value*: lowercase ASCII words joined by dashes.

    Underscores survive, so ``custom_class`` stays ``custom_class``.
    """
    slug = _TAG_RE.sub("", value)
    slug = unicodedata.normalize("NFKD", slug)
    slug = "".join(ch for ch in slug if not unicodedata.combining(ch))
    slug = slug.lower()
    slug = _ENTITY_RE.sub("", slug)
    slug = slug.replace(".", "-")
    slug = _INVALID_SLUG_CHARS_RE.sub("", slug)
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _DASHES_RE.sub("-", slug)
    return slug.strip("-")


def _specialchars(value: str) -> str:
    escaped = _BARE_AMP_RE.sub("&amp;", value)
    for char, entity in _SPECIAL_CHARS.items():
        escaped = escaped.replace(char, entity)
    return escaped


def esc_html(value: str) -> str:
    """Escape *value* for HTML text content without double-encoding entities."""
    return _specialchars(value)


def esc_attr(value: str) -> str:
    """Escape *value* for use inside an HTML attribute."""
    return _specialchars(value)
