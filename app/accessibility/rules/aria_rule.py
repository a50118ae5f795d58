"""
AriaRule - Roles must be real ARIA roles and carry their required state.

Handles:
- role values outside the valid role table: critical
- role="checkbox" without aria-checked: critical
- role="slider" / "spinbutton" without aria-valuemin: critical

Only aria-valuemin is verified for range widgets; aria-valuemax and
aria-valuenow are added by the fix but not checked on their own.
"""

from typing import List

from ..analyzers.dom_parser import DOMParser
from ..contracts.issues import FixSuggestion, Issue, Severity
from .base_rule import AccessibilityRule
from .vocabulary import RANGE_ARIA_ROLES, STATEFUL_ARIA_ROLES, VALID_ARIA_ROLES


WCAG_NAME_ROLE_VALUE = "4.1.2 Name, Role, Value (Level A)"


class AriaRule(AccessibilityRule):
    """Check role attributes and role-specific required attributes."""

    @property
    def order(self) -> int:
        return 60

    def check(self, dom: DOMParser) -> List[Issue]:
        return self._check_role_values(dom) + self._check_required_states(dom)

    def _check_role_values(self, dom: DOMParser) -> List[Issue]:
        issues = []

        for index, element in enumerate(dom.get_elements_by_attribute("role")):
            role = dom.get_attribute(element, "role")
            if role in VALID_ARIA_ROLES:
                continue

            markup = dom.outer_html(element)
            issues.append(self._issue(
                title="Invalid ARIA role",
                severity=Severity.CRITICAL,
                wcag_reference=WCAG_NAME_ROLE_VALUE,
                description=f'The role "{role}" is not a valid ARIA role.',
                impact=(
                    "Assistive technologies rely on valid roles to communicate the "
                    "purpose of elements to users."
                ),
                position=self._position(element, index),
                code_snippet=markup,
                fix=FixSuggestion.single(
                    markup.replace(f'role="{role}"', 'role="[appropriate valid role]"', 1)
                ),
                learn_more_url="https://www.w3.org/TR/wai-aria-1.1/#role_definitions",
            ))

        return issues

    def _check_required_states(self, dom: DOMParser) -> List[Issue]:
        issues = []
        selector = ", ".join(f'[role="{role}"]' for role in STATEFUL_ARIA_ROLES)

        for index, element in enumerate(dom.get_elements_by_selector(selector)):
            role = dom.get_attribute(element, "role")
            position = self._position(element, index)
            markup = dom.outer_html(element)

            if role == "checkbox" and not dom.has_attribute(element, "aria-checked"):
                issues.append(self._issue(
                    title="Missing required ARIA attribute",
                    severity=Severity.CRITICAL,
                    wcag_reference=WCAG_NAME_ROLE_VALUE,
                    description='Elements with role="checkbox" must have an aria-checked attribute.',
                    impact="Screen reader users will not know the state of this checkbox.",
                    position=position,
                    code_snippet=markup,
                    fix=FixSuggestion.single(
                        markup.replace('role="checkbox"', 'role="checkbox" aria-checked="false"', 1)
                    ),
                    learn_more_url="https://developer.mozilla.org/en-US/docs/Web/Accessibility/ARIA/Roles/checkbox_role",
                ))

            if role in RANGE_ARIA_ROLES and not dom.has_attribute(element, "aria-valuemin"):
                issues.append(self._issue(
                    title="Missing required ARIA attribute",
                    severity=Severity.CRITICAL,
                    wcag_reference=WCAG_NAME_ROLE_VALUE,
                    description=(
                        f'Elements with role="{role}" must have aria-valuemin, '
                        "aria-valuemax, and aria-valuenow attributes."
                    ),
                    impact=(
                        "Screen reader users will not know the range and current "
                        "value of this control."
                    ),
                    position=position,
                    code_snippet=markup,
                    fix=FixSuggestion.single(
                        markup.replace(
                            f'role="{role}"',
                            f'role="{role}" aria-valuemin="0" aria-valuemax="100" aria-valuenow="50"',
                            1,
                        )
                    ),
                    learn_more_url=f"https://developer.mozilla.org/en-US/docs/Web/Accessibility/ARIA/Roles/{role}_role",
                ))

        return issues
