"""
TableStructureRule - Data tables need header cells.

Handles:
- Tables with <td> cells but no <th>: warning
- Tables with no <th>, no role and no nested table: info, probably a
  layout table that should be marked role="presentation"
"""

from typing import List

from ..analyzers.dom_parser import DOMParser
from ..contracts.issues import FixSuggestion, Issue, Severity
from .base_rule import AccessibilityRule


SNIPPET_LENGTH = 150

WCAG_INFO_RELATIONSHIPS = "1.3.1 Info and Relationships (Level A)"

HEADER_TABLE_EXAMPLE = """<table>
  <thead>
    <tr>
      <th scope="col">Header 1</th>
      <th scope="col">Header 2</th>
    </tr>
  </thead>
  <tbody>
    <tr>
      <td>Data 1</td>
      <td>Data 2</td>
    </tr>
  </tbody>
</table>"""

LAYOUT_TABLE_EXAMPLE = """<!-- If this is a layout table: -->
<table role="presentation">
  <!-- table content -->
</table>

<!-- Better modern solution: Use CSS for layout instead of tables -->"""


class TableStructureRule(AccessibilityRule):
    """Check tables for header cells and layout usage."""

    @property
    def order(self) -> int:
        return 100

    def check(self, dom: DOMParser) -> List[Issue]:
        issues = []

        for index, table in enumerate(dom.get_elements_by_tag("table")):
            position = self._position(table, index)
            has_data_cells = bool(dom.get_descendants(table, ["td"]))
            has_header_cells = bool(dom.get_descendants(table, ["th"]))
            snippet = dom.outer_html(table)[:SNIPPET_LENGTH] + "..."

            if has_data_cells and not has_header_cells:
                issues.append(self._issue(
                    title="Table missing headers",
                    severity=Severity.WARNING,
                    wcag_reference=WCAG_INFO_RELATIONSHIPS,
                    description=(
                        "This table appears to be a data table but has no header "
                        "cells (th elements)."
                    ),
                    impact=(
                        "Screen reader users will not know the relationship between "
                        "header and data cells."
                    ),
                    position=position,
                    code_snippet=snippet,
                    fix=FixSuggestion.from_text(HEADER_TABLE_EXAMPLE),
                    learn_more_url="https://www.w3.org/WAI/tutorials/tables/",
                ))

            if (
                not has_header_cells
                and not dom.has_attribute(table, "role")
                and not dom.get_descendants(table, ["table"])
            ):
                issues.append(self._issue(
                    title="Table potentially used for layout",
                    severity=Severity.INFO,
                    wcag_reference=WCAG_INFO_RELATIONSHIPS,
                    description=(
                        "This table might be used for layout purposes. If so, it "
                        'should have role="presentation" or role="none".'
                    ),
                    impact=(
                        "Screen readers announce layout tables as tables, which can "
                        "confuse users when they're used for visual layout only."
                    ),
                    position=position,
                    code_snippet=snippet,
                    fix=FixSuggestion.from_text(LAYOUT_TABLE_EXAMPLE),
                    learn_more_url="https://www.w3.org/WAI/tutorials/tables/",
                ))

        return issues
