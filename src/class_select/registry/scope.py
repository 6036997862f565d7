"""Scope keys: where a declared class is offered, or explicitly withheld."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

__all__ = [
    "GLOBAL_SCOPE",
    "ScopeKind",
    "context_key",
    "context_not_key",
    "resolve_scope",
    "resolve_scopes",
]


class ScopeKind(StrEnum):
    GLOBAL = "global"
    CONTEXT = "context"
    CONTEXT_NOT = "context_not"


GLOBAL_SCOPE = str(ScopeKind.GLOBAL)


def context_key(context_id: str) -> str:
    return f"{ScopeKind.CONTEXT}:{context_id}"


def context_not_key(context_id: str) -> str:
    return f"{ScopeKind.CONTEXT_NOT}:{context_id}"


def resolve_scope(token: str) -> str:
    """Map one raw scope token to its registry key.

    ``global`` stays ``global``, ``!row`` becomes ``context_not:row`` and any
    other token is taken as an opaque context id.
    """
    if token == GLOBAL_SCOPE:
        return GLOBAL_SCOPE
    if token.startswith("!"):
        return context_not_key(token[1:])
    return context_key(token)


def resolve_scopes(tokens: Iterable[str]) -> list[str]:
    """Resolve *tokens* in order. Duplicates are kept."""
    return [resolve_scope(token) for token in tokens]
