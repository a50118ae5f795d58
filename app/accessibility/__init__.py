"""
Accessibility Checker - WCAG-based analysis and repair of HTML markup.

Analyzes a block of markup against ten accessibility checks and returns
the issues found together with a best-effort fixed copy of the markup.

Usage:
    from app.accessibility import analyze, Severity

    result = analyze(html)
    critical = result.by_severity(Severity.CRITICAL)
    fixed_html = result.fixed_code
"""

from .analyzer import AccessibilityAnalyzer, analyze
from .contracts import (
    AccessibilityError,
    AnalysisResult,
    FixKind,
    FixOption,
    FixSuggestion,
    Issue,
    ParseError,
    Position,
    Severity,
)
from .reporter import AccessibilityReporter, SeveritySummary

__all__ = [
    "AccessibilityAnalyzer",
    "analyze",
    "AccessibilityError",
    "AnalysisResult",
    "FixKind",
    "FixOption",
    "FixSuggestion",
    "Issue",
    "ParseError",
    "Position",
    "Severity",
    "AccessibilityReporter",
    "SeveritySummary",
]
