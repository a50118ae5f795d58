"""
DocumentLanguageRule - The <html> element must declare the page language.

The fix inserts lang="en" right after the source's own <html start tag, so
the rest of the document is left exactly as written. Fragments without an
<html> element have no document element and are not checked.
"""

import re
from typing import List, Optional

from ..analyzers.dom_parser import DOMParser
from ..analyzers.position import DOCUMENT_START
from ..contracts.issues import FixSuggestion, Issue, Severity
from .base_rule import AccessibilityRule
from .vocabulary import DEFAULT_LANGUAGE


HTML_START_TAG = re.compile(r"<html(?=[\s>/])", re.IGNORECASE)

SNIPPET_LENGTH = 50


class DocumentLanguageRule(AccessibilityRule):
    """Check the document element for a lang attribute."""

    @property
    def order(self) -> int:
        return 80

    def check(self, dom: DOMParser) -> List[Issue]:
        root = dom.root_element()
        if root is None or dom.has_attribute(root, "lang"):
            return []

        markup = dom.outer_html(root)
        anchor = self._source_start_tag(dom.html)

        return [self._issue(
            title="Missing language attribute",
            severity=Severity.CRITICAL,
            wcag_reference="3.1.1 Language of Page (Level A)",
            description=(
                "The HTML element should have a lang attribute that identifies "
                "the language of the page."
            ),
            impact=(
                "Screen readers need the language attribute to correctly "
                "pronounce and interpret content."
            ),
            position=DOCUMENT_START,
            code_snippet=markup[:SNIPPET_LENGTH] + "...",
            fix=FixSuggestion.single(
                markup.replace("<html", f'<html lang="{DEFAULT_LANGUAGE}"', 1)
            ),
            learn_more_url="https://www.w3.org/WAI/WCAG21/Techniques/html/H57",
            insert_after=anchor,
            insert_content=f' lang="{DEFAULT_LANGUAGE}"' if anchor is not None else None,
        )]

    @staticmethod
    def _source_start_tag(source: str) -> Optional[str]:
        """The literal '<html' prefix as written in the source, any casing."""
        match = HTML_START_TAG.search(source)
        return match.group(0) if match else None
