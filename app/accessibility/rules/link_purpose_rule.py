"""
LinkPurposeRule - Links must say where they go.

Handles:
- Ambiguous text ("click here", "read more", ...): warning
- Links with no accessible name at all: critical

Both can fire on the same link.
"""

from typing import List

from bs4 import Tag

from ..analyzers.dom_parser import DOMParser
from ..contracts.issues import FixSuggestion, Issue, Severity
from .base_rule import AccessibilityRule
from .vocabulary import (
    AMBIGUOUS_LINK_TEXTS,
    PLACEHOLDER_LINK_LABEL,
    PLACEHOLDER_LINK_TEXT,
)


class LinkPurposeRule(AccessibilityRule):
    """Check <a> elements for ambiguous or missing link text."""

    @property
    def order(self) -> int:
        return 50

    def check(self, dom: DOMParser) -> List[Issue]:
        issues = []

        for index, link in enumerate(dom.get_elements_by_tag("a")):
            position = self._position(link, index)
            link_text = dom.get_text_content(link).strip()
            markup = dom.outer_html(link)

            if link_text.lower() in AMBIGUOUS_LINK_TEXTS:
                issues.append(self._issue(
                    title="Ambiguous link text",
                    severity=Severity.WARNING,
                    wcag_reference=(
                        "2.4.4 Link Purpose (In Context) (Level A), "
                        "2.4.9 Link Purpose (Link Only) (Level AAA)"
                    ),
                    description=(
                        f'Link text "{link_text}" doesn\'t clearly indicate its '
                        "purpose or destination."
                    ),
                    impact=(
                        "Screen reader users often navigate by links, and ambiguous "
                        "link text makes it difficult to understand where links lead."
                    ),
                    position=position,
                    code_snippet=markup,
                    fix=FixSuggestion.single(
                        self._replace_link_text(dom, link, markup, link_text)
                    ),
                    learn_more_url="https://www.w3.org/WAI/WCAG22/quickref/?versions=2.2#link-purpose-in-context",
                ))

            if link_text == "" and not self._has_accessible_name(dom, link):
                issues.append(self._issue(
                    title="Empty link",
                    severity=Severity.CRITICAL,
                    wcag_reference="2.4.4 Link Purpose (In Context) (Level A)",
                    description="This link has no text content or accessible name.",
                    impact="Screen reader users will not know the purpose of this link.",
                    position=position,
                    code_snippet=markup,
                    fix=FixSuggestion.single(
                        markup.replace(
                            "<a ", f'<a aria-label="{PLACEHOLDER_LINK_LABEL}" ', 1
                        )
                    ),
                    learn_more_url="https://www.w3.org/WAI/tutorials/images/decorative/",
                ))

        return issues

    @staticmethod
    def _replace_link_text(dom: DOMParser, link: Tag, markup: str, link_text: str) -> str:
        """Swap the visible text for the placeholder, leaving attributes alone."""
        inner = dom.inner_html(link)
        end_tag = f"</{dom.tag_name(link)}>"
        start_tag = markup[: len(markup) - len(inner) - len(end_tag)]
        return start_tag + inner.replace(link_text, PLACEHOLDER_LINK_TEXT, 1) + end_tag

    @staticmethod
    def _has_accessible_name(dom: DOMParser, link: Tag) -> bool:
        """Name from a descendant image's alt or from ARIA labelling."""
        if link.select_one("img[alt]") is not None:
            return True
        return dom.has_attribute(link, "aria-label") or dom.has_attribute(
            link, "aria-labelledby"
        )
