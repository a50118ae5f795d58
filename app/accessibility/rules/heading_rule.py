"""
HeadingStructureRule - Document outline checks.

Handles:
- No <h1> anywhere in the document (one critical issue)
- A heading more than one level deeper than the heading before it
  (H2 followed by H4). Going back up, or staying level, is fine.
"""

import re
from typing import List

from bs4 import Tag

from ..analyzers.dom_parser import DOMParser
from ..analyzers.position import DOCUMENT_START
from ..contracts.issues import FixSuggestion, Issue, Severity
from .base_rule import AccessibilityRule
from .vocabulary import HEADING_TAGS


WCAG_HEADINGS = (
    "1.3.1 Info and Relationships (Level A), 2.4.6 Headings and Labels (Level AA)"
)

MISSING_H1_SNIPPET = "<body>\n  <!-- No H1 heading found -->\n</body>"
MISSING_H1_FIX = "<body>\n  <h1>Main Page Title</h1>\n  <!-- Rest of the content -->\n</body>"


def heading_level(heading: Tag) -> int:
    """Numeric level of an h1-h6 tag."""
    return int(heading.name[1])


class HeadingStructureRule(AccessibilityRule):
    """Check for a top-level heading and for skipped heading levels."""

    @property
    def order(self) -> int:
        return 20

    def check(self, dom: DOMParser) -> List[Issue]:
        issues = []
        headings = dom.get_elements_by_tag(*HEADING_TAGS)

        if not dom.has_element("h1"):
            issues.append(self._issue(
                title="Missing H1 heading",
                severity=Severity.CRITICAL,
                wcag_reference=WCAG_HEADINGS,
                description=(
                    "Each page should have at least one H1 heading that identifies "
                    "the page content."
                ),
                impact=(
                    "Screen reader users rely on headings to understand page "
                    "structure and navigate content."
                ),
                position=DOCUMENT_START,
                code_snippet=MISSING_H1_SNIPPET,
                fix=FixSuggestion.from_text(MISSING_H1_FIX),
                learn_more_url="https://www.w3.org/WAI/tutorials/page-structure/headings/",
            ))

        for i in range(len(headings) - 1):
            current_level = heading_level(headings[i])
            next_heading = headings[i + 1]
            next_level = heading_level(next_heading)

            if next_level <= current_level + 1:
                continue

            markup = dom.outer_html(next_heading)
            expected_level = current_level + 1
            fixed = re.sub(f"<h{next_level}", f"<h{expected_level}", markup)
            fixed = re.sub(f"</h{next_level}>", f"</h{expected_level}>", fixed)

            issues.append(self._issue(
                title=f"Skipped heading level (H{current_level} to H{next_level})",
                severity=Severity.WARNING,
                wcag_reference=WCAG_HEADINGS,
                description=(
                    "Heading levels should not be skipped. "
                    f"Found H{current_level} followed by H{next_level}."
                ),
                impact=(
                    "Skipped heading levels create confusion in the document "
                    "structure for screen reader users."
                ),
                position=self._position(next_heading, i + 1),
                code_snippet=markup,
                fix=FixSuggestion.single(fixed),
                learn_more_url="https://www.w3.org/WAI/WCAG22/quickref/?versions=2.2#headings-and-labels",
            ))

        return issues
