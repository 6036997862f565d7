"""Option set model: grouped select options for the class field."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class OptionGroup:
    """One ``<optgroup>``: a keyed, labelled set of ``class -> label`` options."""

    key: str
    label: str
    options: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        return {"label": self.label, "options": dict(self.options)}


@dataclass(frozen=True)
class OptionSet:
    """Ordered option groups, optionally led by an empty-value placeholder."""

    groups: tuple[OptionGroup, ...] = ()
    placeholder: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.groups and self.placeholder is None

    def to_options(self) -> dict[str, object]:
        """Render as a host field ``options`` dict, placeholder first."""
        options: dict[str, object] = {}
        if self.placeholder is not None:
            options[""] = self.placeholder
        for group in self.groups:
            options.setdefault(group.key, group.to_dict())
        return options
