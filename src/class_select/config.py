from __future__ import annotations

from dataclasses import dataclass

from class_select.parser.sanitize import sanitize_title

CACHE_NAME_SUFFIX = "custom_css_class_select"


@dataclass(frozen=True)
class ClassSelectConfig:
    variable_prefix: str = "custom_class"
    declaration_name: str = ""  # defaults to the prefix
    cache_name: str = ""  # defaults to "<prefix>_custom_css_class_select"
    db_path: str = "class_select.db"
    host: str = "127.0.0.1"
    port: int = 5000

    @property
    def prefix(self) -> str:
        """Slugified variable prefix used in option group keys."""
        return sanitize_title(self.variable_prefix)

    @property
    def marker_name(self) -> str:
        """Name that opens a class declaration: ``[<marker_name> ...]``."""
        return self.declaration_name or self.prefix

    @property
    def cache_key(self) -> str:
        return self.cache_name or f"{self.prefix}_{CACHE_NAME_SUFFIX}"
