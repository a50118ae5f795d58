"""
ButtonRoleRule - Styled divs and spans posing as buttons.

A <div> or <span> whose class mentions "button" or "btn" and that has no
role is reported. The preferred fix is a real <button>; the fallback keeps
the element and adds role, tabindex and Enter-key activation.
"""

from typing import List

from ..analyzers.dom_parser import DOMParser
from ..contracts.issues import FixOption, FixSuggestion, Issue, Severity
from .base_rule import AccessibilityRule
from .vocabulary import KEYBOARD_ACTIVATION_ATTRS


FAKE_BUTTON_SELECTOR = (
    'div[class*="button"], span[class*="button"], '
    'div[class*="btn"], span[class*="btn"]'
)


class ButtonRoleRule(AccessibilityRule):
    """Check for div/span elements used as buttons without a role."""

    @property
    def order(self) -> int:
        return 90

    def check(self, dom: DOMParser) -> List[Issue]:
        issues = []

        for index, element in enumerate(dom.get_elements_by_selector(FAKE_BUTTON_SELECTOR)):
            if dom.has_attribute(element, "role"):
                continue

            tag = dom.tag_name(element)
            markup = dom.outer_html(element)
            class_name = dom.get_attribute(element, "class") or ""

            issues.append(self._issue(
                title="Div/span used as button without proper role",
                severity=Severity.CRITICAL,
                wcag_reference="4.1.2 Name, Role, Value (Level A)",
                description=(
                    "This element appears to be used as a button but doesn't have "
                    "the button role."
                ),
                impact="Screen reader users will not know this element is a button.",
                position=self._position(element, index),
                code_snippet=markup,
                fix=FixSuggestion.alternatives(
                    FixOption(
                        f'<button class="{class_name}">{dom.inner_html(element)}</button>',
                        label="Better solution: Use a real button element",
                    ),
                    FixOption(
                        markup.replace(f"<{tag}", f"<{tag} {KEYBOARD_ACTIVATION_ATTRS}", 1),
                        label="Alternative: Add proper ARIA role and keyboard support",
                    ),
                ),
                learn_more_url="https://www.w3.org/WAI/WCAG22/quickref/?versions=2.2#name-role-value",
            ))

        return issues
