from class_select.options.assembler import assemble_options, optgroup_key
from class_select.options.field import CLASS_FIELD_KEY, merge_field_options
from class_select.options.labels import ContextLabels
from class_select.options.texts import DEFAULT_TEXTS, TextProvider

__all__ = [
    "CLASS_FIELD_KEY",
    "ContextLabels",
    "DEFAULT_TEXTS",
    "TextProvider",
    "assemble_options",
    "merge_field_options",
    "optgroup_key",
]
