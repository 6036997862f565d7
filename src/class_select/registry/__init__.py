from class_select.registry.builder import build_registry, lookup
from class_select.registry.scope import (
    GLOBAL_SCOPE,
    ScopeKind,
    context_key,
    context_not_key,
    resolve_scope,
    resolve_scopes,
)

__all__ = [
    "GLOBAL_SCOPE",
    "ScopeKind",
    "build_registry",
    "context_key",
    "context_not_key",
    "lookup",
    "resolve_scope",
    "resolve_scopes",
]
