"""
ImageAltTextRule - Images must carry a text alternative.

Handles:
- <img> without alt: critical, add a placeholder alt
- <img alt="">: warning, the rule cannot tell a decorative image from an
  informative one so both fixes are offered (decorative first)
"""

from typing import List

from ..analyzers.dom_parser import DOMParser
from ..contracts.issues import FixOption, FixSuggestion, Issue, Severity
from .base_rule import AccessibilityRule
from .vocabulary import PLACEHOLDER_ALT


WCAG_NON_TEXT_CONTENT = "1.1.1 Non-text Content (Level A)"


class ImageAltTextRule(AccessibilityRule):
    """Check every <img> for a missing or empty alt attribute."""

    @property
    def order(self) -> int:
        return 10

    def check(self, dom: DOMParser) -> List[Issue]:
        issues = []

        for index, img in enumerate(dom.get_elements_by_tag("img")):
            position = self._position(img, index)
            markup = dom.outer_html(img)

            if not dom.has_attribute(img, "alt"):
                issues.append(self._issue(
                    title="Missing alt text for image",
                    severity=Severity.CRITICAL,
                    wcag_reference=WCAG_NON_TEXT_CONTENT,
                    description=(
                        "Image elements must have an alt attribute that describes "
                        "the image content or its purpose."
                    ),
                    impact="Screen reader users will not know what information the image conveys.",
                    position=position,
                    code_snippet=markup,
                    fix=FixSuggestion.single(
                        markup.replace("<img ", f'<img alt="{PLACEHOLDER_ALT}" ', 1)
                    ),
                    learn_more_url="https://www.w3.org/WAI/WCAG22/quickref/?versions=2.2#non-text-content",
                ))
            elif dom.get_attribute(img, "alt") == "":
                issues.append(self._issue(
                    title="Empty alt text - confirm if image is decorative",
                    severity=Severity.WARNING,
                    wcag_reference=WCAG_NON_TEXT_CONTENT,
                    description=(
                        "This image has empty alt text. This is correct only if the "
                        "image is purely decorative and conveys no information."
                    ),
                    impact=(
                        "If this image conveys information but has empty alt text, "
                        "screen reader users will miss that information."
                    ),
                    position=position,
                    code_snippet=markup,
                    fix=FixSuggestion.alternatives(
                        FixOption(markup, label="If decorative:"),
                        FixOption(
                            markup.replace('alt=""', f'alt="{PLACEHOLDER_ALT}"', 1),
                            label="If informative:",
                        ),
                    ),
                    learn_more_url="https://www.w3.org/WAI/WCAG22/quickref/?versions=2.2#info-and-relationships",
                ))

        return issues
