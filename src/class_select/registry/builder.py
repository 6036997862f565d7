"""Build the scope-keyed class registry from a CSS text blob."""

from __future__ import annotations

import logging

from class_select.model.registry import ClassRegistry
from class_select.parser.attributes import parse_declaration
from class_select.parser.scanner import scan_declarations
from class_select.registry.scope import resolve_scopes

__all__ = ["build_registry", "lookup"]

logger = logging.getLogger(__name__)


def build_registry(text: str | None, marker_name: str) -> ClassRegistry:
    """Scan *text* for ``[<marker_name> ...]`` declarations and index them.

    Each parsed class is added to the bucket of every scope it resolves to,
    and to its option group when one is declared. Later declarations of the
    same class in the same bucket replace the earlier label.
    """
    scopes: dict[str, dict[str, str]] = {}
    optgroup: dict[str, dict[str, str]] = {}

    declarations = scan_declarations(text or "", marker_name)
    for body in declarations:
        atts = parse_declaration(body)
        if atts is None:
            continue
        for scope_key in resolve_scopes(atts.scopes):
            scopes.setdefault(scope_key, {})[atts.class_name] = atts.label
        if atts.group is not None:
            optgroup.setdefault(atts.group, {})[atts.class_name] = atts.label

    registry = ClassRegistry(scopes=scopes, optgroup=optgroup)
    logger.debug(
        "Built class registry: %d declaration(s), %d scope(s), %d group(s)",
        len(declarations),
        len(registry.scopes),
        len(registry.optgroup),
    )
    return registry


def lookup(registry: ClassRegistry, scope_key: str) -> dict[str, str]:
    """Return the classes registered under exactly *scope_key*."""
    return registry.lookup(scope_key)
