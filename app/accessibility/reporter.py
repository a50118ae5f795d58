"""
Accessibility Reporter - Severity summaries and plain-text reports.
"""

from dataclasses import dataclass
from typing import Dict, List

from .contracts.issues import AnalysisResult, Issue, Severity


@dataclass
class SeveritySummary:
    """Issue counts by severity."""

    critical: int = 0
    warning: int = 0
    info: int = 0

    @property
    def total(self) -> int:
        return self.critical + self.warning + self.info

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "SeveritySummary":
        counts = result.counts_by_severity()
        return cls(
            critical=counts[Severity.CRITICAL],
            warning=counts[Severity.WARNING],
            info=counts[Severity.INFO],
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            "critical": self.critical,
            "warning": self.warning,
            "info": self.info,
            "total": self.total,
        }


SECTION_TITLES = {
    Severity.CRITICAL: "CRITICAL",
    Severity.WARNING: "WARNINGS",
    Severity.INFO: "INFO",
}


class AccessibilityReporter:
    """Generate reports from analysis results."""

    @staticmethod
    def generate_text_report(result: AnalysisResult) -> str:
        """Generate a text report grouped by severity, most severe first."""
        if not result.issues:
            return "\nNo accessibility issues found.\n"

        report = [f"\n{'=' * 80}", "Accessibility Report", f"{'=' * 80}\n"]

        for severity in sorted(Severity, key=lambda s: s.rank, reverse=True):
            issues = result.by_severity(severity)
            if not issues:
                continue
            report.append(f"{SECTION_TITLES[severity]} ({len(issues)}):")
            report.append("-" * 80)
            for issue in issues:
                report.extend(AccessibilityReporter._format_issue(issue))

        summary = SeveritySummary.from_result(result)
        report.append(
            f"\nSummary: {summary.critical} critical, "
            f"{summary.warning} warnings, {summary.info} info"
        )
        report.append("=" * 80)
        return "\n".join(report)

    @staticmethod
    def _format_issue(issue: Issue) -> List[str]:
        position = issue.position
        return [
            f"  Line {position.line}, Column {position.column}: {issue.title}",
            f"    WCAG: {issue.wcag_reference}",
            f"    Issue: {issue.description}",
            f"    Why it matters: {issue.impact}",
            f"    Code: {issue.code_snippet}",
            f"    Fix: {issue.fix_example}",
            f"    Learn more: {issue.learn_more_url}\n",
        ]

    @staticmethod
    def generate_summary(result: AnalysisResult) -> Dict[str, int]:
        """Count issues by the rule that produced them."""
        summary: Dict[str, int] = {}
        for issue in result.issues:
            summary[issue.rule] = summary.get(issue.rule, 0) + 1
        return summary
