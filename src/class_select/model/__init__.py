from class_select.model.declaration import ClassAttributes, ShortcodeAtts
from class_select.model.options import OptionGroup, OptionSet
from class_select.model.registry import ClassRegistry

__all__ = [
    "ClassAttributes",
    "ClassRegistry",
    "OptionGroup",
    "OptionSet",
    "ShortcodeAtts",
]
