"""
Contracts - Data structures for the accessibility checker.

Provides:
- Severity, Position: Issue classification and location
- FixSuggestion, FixOption, FixKind: Suggested replacements
- Issue, AnalysisResult: Analysis output
- AccessibilityError, ParseError: Failure taxonomy
"""

from .errors import AccessibilityError, ParseError
from .issues import (
    AnalysisResult,
    FixKind,
    FixOption,
    FixSuggestion,
    Issue,
    Position,
    Severity,
)

__all__ = [
    "AccessibilityError",
    "ParseError",
    "AnalysisResult",
    "FixKind",
    "FixOption",
    "FixSuggestion",
    "Issue",
    "Position",
    "Severity",
]
