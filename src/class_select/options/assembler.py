"""Assemble the grouped class options offered to one requesting context."""

from __future__ import annotations

from collections.abc import Callable

from class_select.model.options import OptionGroup, OptionSet
from class_select.model.registry import ClassRegistry
from class_select.parser.sanitize import esc_html, sanitize_title
from class_select.registry.scope import GLOBAL_SCOPE, context_key, context_not_key

__all__ = ["assemble_options", "optgroup_key"]


def optgroup_key(variable_prefix: str, suffix: str) -> str:
    return f"optgroup-{variable_prefix}-{suffix}"


def _context_group_label(template: str, name: str) -> str:
    """Fill the context group template; ``{name}`` and ``%s`` both take the name."""
    template = esc_html(template)
    name = esc_html(name)
    if "{name}" in template:
        return template.replace("{name}", name)
    return template.replace("%s", name, 1)


def assemble_options(
    registry: ClassRegistry,
    context_id: str,
    context_label: Callable[[str], str],
    variable_prefix: str,
    texts: Callable[[str], str],
) -> OptionSet:
    """Build the option set for *context_id*.

    Display order is: classes scoped to the context, then global classes,
    then custom option groups. Classes excluded from the context
    (``!<context_id>``) are removed from the global and custom groups, and
    classes listed in a custom group are not repeated under global. Custom
    groups are never filtered by positive context scopes.
    """
    # Scope ids are stored lowercase; the group key keeps the id as given.
    scope_id = context_id.lower()
    global_classes = registry.lookup(GLOBAL_SCOPE)
    contextual = registry.lookup(context_key(scope_id))
    excluded = list(registry.lookup(context_not_key(scope_id)))

    if not global_classes and not contextual and not excluded:
        return OptionSet()

    groups: dict[str, dict[str, str]] = {
        name: dict(bucket) for name, bucket in registry.optgroup.items()
    }
    for class_name in excluded:
        global_classes.pop(class_name, None)
        for bucket in groups.values():
            bucket.pop(class_name, None)
    groups = {name: bucket for name, bucket in groups.items() if bucket}

    # Accumulated in reverse display order; a key, once added, is kept.
    collected: dict[str, OptionGroup] = {}

    def add(group: OptionGroup) -> None:
        collected.setdefault(group.key, group)

    for name, bucket in groups.items():
        add(
            OptionGroup(
                key=optgroup_key(variable_prefix, sanitize_title(name)),
                label=esc_html(name),
                options=bucket,
            )
        )
        # Global only: a class may still show up under several custom groups.
        for class_name in bucket:
            global_classes.pop(class_name, None)

    if global_classes:
        add(
            OptionGroup(
                key=optgroup_key(variable_prefix, "global"),
                label=esc_html(texts("label-optgroup-global")),
                options=global_classes,
            )
        )

    if contextual:
        add(
            OptionGroup(
                key=optgroup_key(variable_prefix, context_id),
                label=_context_group_label(
                    texts("label-optgroup-module"), context_label(context_id)
                ),
                options=contextual,
            )
        )

    ordered = tuple(reversed(collected.values()))
    if not ordered:
        return OptionSet()
    return OptionSet(groups=ordered, placeholder=texts("label-option-empty"))
