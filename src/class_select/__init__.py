"""class_select: CSS class options declared inside stylesheet comments."""
from __future__ import annotations

__version__ = "1.0.0"

from class_select.config import ClassSelectConfig
from class_select.model import ClassAttributes, ClassRegistry, OptionGroup, OptionSet
from class_select.options import ContextLabels, TextProvider, assemble_options
from class_select.parser import parse_declaration, scan_declarations
from class_select.registry import build_registry, lookup, resolve_scopes
from class_select.service import ClassSelect

__all__ = [
    "__version__",
    "ClassAttributes",
    "ClassRegistry",
    "ClassSelect",
    "ClassSelectConfig",
    "ContextLabels",
    "OptionGroup",
    "OptionSet",
    "TextProvider",
    "assemble_options",
    "build_registry",
    "lookup",
    "parse_declaration",
    "resolve_scopes",
    "scan_declarations",
]
