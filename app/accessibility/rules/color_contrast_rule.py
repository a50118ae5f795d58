"""
ColorContrastRule - Flag inline color declarations for a contrast review.

This is a textual pattern match on the style attribute. It does not resolve
the cascade or compute luminance ratios; any hex or rgb() color or
background on an inline style is reported as a warning.
"""

import re
from typing import List

from ..analyzers.dom_parser import DOMParser
from ..contracts.issues import FixSuggestion, Issue, Severity
from .base_rule import AccessibilityRule


INLINE_COLOR_PATTERNS = (
    re.compile(r"color:\s*#([0-9a-f]{3}){1,2}", re.IGNORECASE),
    re.compile(r"color:\s*rgb\(", re.IGNORECASE),
    re.compile(r"background(-color)?:\s*#([0-9a-f]{3}){1,2}", re.IGNORECASE),
    re.compile(r"background(-color)?:\s*rgb\(", re.IGNORECASE),
)


def has_inline_color(style: str) -> bool:
    """True if an inline style declares a hex or rgb() color/background."""
    return any(pattern.search(style) for pattern in INLINE_COLOR_PATTERNS)


class ColorContrastRule(AccessibilityRule):
    """Check inline styles for hard-coded colors."""

    @property
    def order(self) -> int:
        return 40

    def check(self, dom: DOMParser) -> List[Issue]:
        issues = []
        styled = dom.get_elements_by_selector('[style*="color"], [style*="background"]')

        for index, element in enumerate(styled):
            style = dom.get_attribute(element, "style") or ""
            if not has_inline_color(style):
                continue

            issues.append(self._issue(
                title="Potential color contrast issue",
                severity=Severity.WARNING,
                wcag_reference="1.4.3 Contrast (Minimum) (Level AA)",
                description=(
                    "Inline styles with color values detected. Ensure text has "
                    "sufficient contrast against its background."
                ),
                impact=(
                    "Users with low vision or color blindness may have difficulty "
                    "reading text without adequate contrast."
                ),
                position=self._position(element, index),
                code_snippet=dom.outer_html(element),
                fix=FixSuggestion.advisory(
                    "Ensure a contrast ratio of at least 4.5:1 for normal text and 3:1 for large text",
                    "Consider using a color contrast checker tool",
                ),
                learn_more_url="https://webaim.org/resources/contrastchecker/",
            ))

        return issues
