"""
Tests for AccessibilityReporter and SeveritySummary.
"""

from app.accessibility import AccessibilityReporter, SeveritySummary, analyze
from app.accessibility.contracts import AnalysisResult


def test_summary_counts():
    result = analyze("<table><tr><td>1</td></tr></table>")
    summary = SeveritySummary.from_result(result)

    # Missing H1, table headers, layout hint
    assert (summary.critical, summary.warning, summary.info) == (1, 1, 1)
    assert summary.to_dict() == {"critical": 1, "warning": 1, "info": 1, "total": 3}


def test_text_report_sections():
    report = AccessibilityReporter.generate_text_report(
        analyze("<table><tr><td>1</td></tr></table>")
    )

    assert "CRITICAL (1):" in report
    assert "WARNINGS (1):" in report
    assert "INFO (1):" in report
    assert report.index("CRITICAL") < report.index("WARNINGS") < report.index("INFO (1)")
    assert "Summary: 1 critical, 1 warnings, 1 info" in report
    assert "Line 1, Column 1: Missing H1 heading" in report


def test_text_report_without_issues():
    report = AccessibilityReporter.generate_text_report(
        AnalysisResult(issues=(), fixed_code="")
    )
    assert "No accessibility issues found." in report


def test_summary_by_rule():
    result = analyze('<img src="a.png"><img src="b.png">')
    assert AccessibilityReporter.generate_summary(result) == {
        "ImageAltTextRule": 2,
        "HeadingStructureRule": 1,
    }
