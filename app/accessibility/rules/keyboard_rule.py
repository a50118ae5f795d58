"""
KeyboardNavigationRule - Everything clickable must be reachable by keyboard.

Handles:
- tabindex greater than zero: warning (custom tab order)
- <div>/<span> with onclick but neither tabindex nor role: critical
"""

import re
from typing import List, Optional

from ..analyzers.dom_parser import DOMParser
from ..contracts.issues import FixSuggestion, Issue, Severity
from .base_rule import AccessibilityRule
from .vocabulary import KEYBOARD_ACTIVATION_ATTRS


LEADING_INT = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


def leading_int(value: Optional[str]) -> Optional[int]:
    """
    Parse the integer prefix of an attribute value.

    "2" -> 2, " 3px" -> 3, "abc" -> None, "" -> None
    """
    if value is None:
        return None
    match = LEADING_INT.match(value)
    return int(match.group(1)) if match else None


class KeyboardNavigationRule(AccessibilityRule):
    """Check tab order and keyboard reachability of custom controls."""

    @property
    def order(self) -> int:
        return 70

    def check(self, dom: DOMParser) -> List[Issue]:
        return self._check_positive_tabindex(dom) + self._check_custom_controls(dom)

    def _check_positive_tabindex(self, dom: DOMParser) -> List[Issue]:
        issues = []

        for index, element in enumerate(dom.get_elements_by_attribute("tabindex")):
            tabindex = leading_int(dom.get_attribute(element, "tabindex"))
            if tabindex is None or tabindex <= 0:
                continue

            markup = dom.outer_html(element)
            issues.append(self._issue(
                title="Positive tabindex value",
                severity=Severity.WARNING,
                wcag_reference="2.1.1 Keyboard (Level A), 2.4.3 Focus Order (Level A)",
                description=(
                    f'This element has tabindex="{tabindex}". Positive tabindex '
                    "values create a custom tab order that may be confusing."
                ),
                impact=(
                    "Keyboard users may experience an unexpected navigation order, "
                    "making the page difficult to use."
                ),
                position=self._position(element, index),
                code_snippet=markup,
                fix=FixSuggestion.single(
                    markup.replace(f'tabindex="{tabindex}"', 'tabindex="0"', 1)
                ),
                learn_more_url="https://www.w3.org/WAI/WCAG21/Techniques/html/H4",
            ))

        return issues

    def _check_custom_controls(self, dom: DOMParser) -> List[Issue]:
        issues = []

        for index, element in enumerate(dom.get_elements_by_selector("div[onclick], span[onclick]")):
            if dom.has_attribute(element, "tabindex") or dom.has_attribute(element, "role"):
                continue

            tag = dom.tag_name(element)
            markup = dom.outer_html(element)
            issues.append(self._issue(
                title="Inaccessible custom control",
                severity=Severity.CRITICAL,
                wcag_reference="2.1.1 Keyboard (Level A), 4.1.2 Name, Role, Value (Level A)",
                description=(
                    "This element has click handlers but is not keyboard accessible "
                    "and has no ARIA role."
                ),
                impact="Keyboard users and screen reader users cannot access this interactive element.",
                position=self._position(element, index),
                code_snippet=markup,
                fix=FixSuggestion.single(
                    markup.replace(f"<{tag}", f"<{tag} {KEYBOARD_ACTIVATION_ATTRS}", 1)
                ),
                learn_more_url="https://www.w3.org/WAI/WCAG22/quickref/?versions=2.2#name-role-value",
            ))

        return issues
