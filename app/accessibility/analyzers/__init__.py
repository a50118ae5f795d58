"""
Analyzers - Markup tree access for the rule checks.

- DOMParser: Parse and query HTML structure
- estimate_position: Per-check ordinal position estimate
"""

from .dom_parser import DOMParser, SourceOrderFormatter, parse
from .position import DOCUMENT_START, estimate_position

__all__ = [
    "DOMParser",
    "SourceOrderFormatter",
    "parse",
    "DOCUMENT_START",
    "estimate_position",
]
