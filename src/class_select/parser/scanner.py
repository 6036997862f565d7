"""Locate bracketed class declarations inside a CSS text blob.

Declaration example (usually inside a CSS comment):
    /* [custom_class class="my-class" label="My class" scope="global, !row" /] */
"""

from __future__ import annotations

import re
from functools import lru_cache

__all__ = ["declaration_pattern", "scan_declarations"]


@lru_cache(maxsize=32)
def declaration_pattern(marker_name: str) -> re.Pattern[str]:
    """Return the compiled pattern matching ``[<marker_name> ... ]`` units."""
    return re.compile(
        r"""
        \[                  # opening bracket
        {marker}            # declaration marker, matched literally
        (?P<body>.*?)       # attributes, possibly spanning lines
        \]                  # first closing bracket ends the unit
        """.format(marker=re.escape(marker_name)),
        re.VERBOSE | re.DOTALL,
    )


def scan_declarations(text: str, marker_name: str) -> list[str]:
    """Return the raw body of every declaration found in *text*, in order.

    Adjacent declarations (``[m a][m b]``) each produce their own body.
    Text without declarations, or an empty marker, yields an empty list.
    """
    if not text or not marker_name:
        return []
    return [m.group("body") for m in declaration_pattern(marker_name).finditer(text)]
