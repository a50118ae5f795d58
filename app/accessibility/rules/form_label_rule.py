"""
FormLabelRule - Form controls need a programmatically associated label.

A control passes when it has an aria-label/aria-labelledby, or an id that a
<label for="..."> elsewhere in the document points at. Hidden inputs and
submit/button inputs are skipped.
"""

from typing import List

from ..analyzers.dom_parser import DOMParser
from ..contracts.issues import FixSuggestion, Issue, Severity
from .base_rule import AccessibilityRule
from .vocabulary import PLACEHOLDER_CONTROL_ID, UNLABELLED_INPUT_TYPES


class FormLabelRule(AccessibilityRule):
    """Check input, select and textarea elements for labels."""

    @property
    def order(self) -> int:
        return 30

    def check(self, dom: DOMParser) -> List[Issue]:
        issues = []

        for index, control in enumerate(dom.get_elements_by_tag("input", "select", "textarea")):
            control_type = dom.get_attribute(control, "type") or ""
            if (
                control_type in UNLABELLED_INPUT_TYPES
                or dom.has_attribute(control, "aria-label")
                or dom.has_attribute(control, "aria-labelledby")
            ):
                continue

            control_id = dom.get_attribute(control, "id")
            if control_id and dom.find_first("label", for_=control_id) is not None:
                continue

            tag = dom.tag_name(control)
            markup = dom.outer_html(control)
            if control_id:
                fixed = f'<label for="{control_id}">Label text</label>\n{markup}'
            else:
                labelled = markup.replace(
                    f"<{tag}", f'<{tag} id="{PLACEHOLDER_CONTROL_ID}"', 1
                )
                fixed = f'<label for="{PLACEHOLDER_CONTROL_ID}">Label text</label>\n{labelled}'

            issues.append(self._issue(
                title="Form control without label",
                severity=Severity.CRITICAL,
                wcag_reference="1.3.1 Info and Relationships, 3.3.2 Labels or Instructions (Level A)",
                description=f"This {tag} element doesn't have a properly associated label.",
                impact=(
                    "Screen reader users will not know the purpose of this form "
                    "control, making it difficult or impossible to complete the form."
                ),
                position=self._position(control, index),
                code_snippet=markup,
                fix=FixSuggestion.single(fixed),
                learn_more_url="https://www.w3.org/WAI/WCAG22/quickref/?versions=2.2#labels-or-instructions",
            ))

        return issues
