from .freezer import freeze
from .header import ParseNode, parse_header
from .scanner import LineScanner
from .stack import IndentationStack, measure_indentation

__all__ = [
    "IndentationStack",
    "LineScanner",
    "ParseNode",
    "freeze",
    "measure_indentation",
    "parse_header",
]
