from class_select.parser.attributes import parse_declaration, parse_shortcode_atts
from class_select.parser.scanner import scan_declarations

__all__ = ["parse_declaration", "parse_shortcode_atts", "scan_declarations"]
