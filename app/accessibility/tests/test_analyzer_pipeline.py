"""
End-to-end tests for the analyze() pipeline.

Parses, runs all ten rules and applies the fixes, then checks the issue
list and the fixed markup together.
"""

import dataclasses
import logging

import pytest

from app.accessibility import AccessibilityAnalyzer, ParseError, Severity, analyze
from app.accessibility.rules import ImageAltTextRule, RuleEngine


def titles(result):
    return [issue.title for issue in result.issues]


# Triggers every one of the ten checks at least once
ALL_CHECKS_HTML = (
    "<html>\n"
    "<body>\n"
    '<img src="a.png">\n'
    '<img src="b.png" alt="">\n'
    "<h2>Section</h2>\n"
    "<h4>Detail</h4>\n"
    '<input type="text" id="q">\n'
    '<p style="color: #333">Grey text</p>\n'
    '<a href="/more">more</a>\n'
    '<a href="/x"></a>\n'
    '<div role="buton">Go</div>\n'
    '<div role="checkbox">Agree</div>\n'
    '<div role="slider"></div>\n'
    '<div tabindex="2">First</div>\n'
    '<span onclick="go()">Go</span>\n'
    '<div class="btn">Save</div>\n'
    "<table><tr><td>1</td></tr></table>\n"
    "</body>\n"
    "</html>"
)


class TestAnalyze:

    def test_image_missing_alt(self):
        result = analyze('<img src="logo.png">')

        alt_issues = [i for i in result.issues if i.title == "Missing alt text for image"]
        assert len(alt_issues) == 1
        assert alt_issues[0].severity == Severity.CRITICAL
        assert alt_issues[0].code_snippet == '<img src="logo.png">'
        assert "Descriptive text about this image" in alt_issues[0].fix_example
        assert result.fixed_code == (
            '<img alt="Descriptive text about this image" src="logo.png">'
        )

    @pytest.mark.parametrize("html,expected", [
        ("<h1>T</h1><h3>T</h3>", ["Skipped heading level (H1 to H3)"]),
        ("<h1>T</h1><h2>T</h2><h3>T</h3>", []),
        ("<h1>T</h1><h3>T</h3><h4>T</h4>", ["Skipped heading level (H1 to H3)"]),
    ])
    def test_heading_sequences(self, html, expected):
        assert titles(analyze(html)) == expected

    def test_h1_present_means_no_missing_h1(self):
        assert "Missing H1 heading" not in titles(analyze("<h1>Title</h1>"))

    def test_ambiguous_link(self):
        result = analyze('<a href="x">click here</a>')

        ambiguous = [i for i in result.issues if i.title == "Ambiguous link text"]
        assert len(ambiguous) == 1
        assert ambiguous[0].severity == Severity.WARNING
        assert ambiguous[0].fix_example == (
            '<a href="x">Specific description of link destination</a>'
        )

    def test_document_without_lang(self):
        html = "<html><body><h1>Title</h1></body></html>"
        result = analyze(html)

        assert titles(result) == ["Missing language attribute"]
        assert result.issues[0].position.line == 1
        assert result.issues[0].position.column == 1
        assert result.fixed_code == '<html lang="en"><body><h1>Title</h1></body></html>'

    def test_accessible_document_is_unchanged(self, accessible_html):
        result = analyze(accessible_html)
        assert result.issues == ()
        assert result.fixed_code == accessible_html

    def test_issues_follow_rule_order(self):
        html = '<table><tr><td>1</td></tr></table><img src="a.png">'
        rules = [issue.rule for issue in analyze(html).issues]
        assert rules == [
            "ImageAltTextRule",
            "HeadingStructureRule",
            "TableStructureRule",
            "TableStructureRule",
        ]

    def test_malformed_markup_still_analyzed(self):
        result = analyze('<div><p>unclosed <img src="x.png"></div>')
        assert "Missing alt text for image" in titles(result)

    def test_non_text_input_raises(self):
        with pytest.raises(ParseError):
            analyze(None)


class TestRepairLoop:
    """Applying the fixes must not leave structural criticals behind."""

    def test_critical_issues_resolved_on_reanalysis(self, repairable_html):
        first = analyze(repairable_html)
        assert {i.title for i in first.by_severity(Severity.CRITICAL)} == {
            "Missing alt text for image",
            "Form control without label",
            "Missing required ARIA attribute",
            "Inaccessible custom control",
            "Missing language attribute",
        }

        second = analyze(first.fixed_code)

        assert second.by_severity(Severity.CRITICAL) == []
        assert not second.has_critical

    def test_fixed_code_contents(self, repairable_html):
        fixed = analyze(repairable_html).fixed_code

        assert fixed.startswith('<html lang="en">\n')
        assert '<label for="q">Label text</label>\n<input type="text" id="q">' in fixed
        assert '<div role="checkbox" aria-checked="false">Agree</div>' in fixed
        assert '<div role="button" tabindex="0"' in fixed

    def test_reanalysis_is_stable(self, repairable_html):
        fixed = analyze(repairable_html).fixed_code
        second = analyze(fixed)
        assert analyze(second.fixed_code).issues == second.issues


class TestAnalyzer:

    def test_custom_engine(self):
        engine = RuleEngine()
        engine.register(ImageAltTextRule())
        analyzer = AccessibilityAnalyzer(engine=engine)

        result = analyzer.analyze('<img src="a.png"><a href="x">click here</a>')

        assert titles(result) == ["Missing alt text for image"]

    def test_default_engine_has_ten_rules(self, analyzer):
        assert len(analyzer.engine) == 10

    def test_logs_summary(self, analyzer, caplog):
        with caplog.at_level(logging.INFO, logger="app.accessibility.analyzer"):
            analyzer.analyze("<h1>Title</h1>")
        assert "0 issues" in caplog.text

    def test_analyzer_is_reusable(self, analyzer):
        first = analyzer.analyze('<img src="a.png">')
        second = analyzer.analyze('<img src="a.png">')
        assert first == second


class TestIssueInvariants:
    """Every issue the pipeline returns is complete and read-only."""

    def test_all_checks_fire(self, analyzer):
        rules = {issue.rule for issue in analyzer.analyze(ALL_CHECKS_HTML).issues}
        assert rules == set(analyzer.engine.rule_names)

    @pytest.mark.parametrize("html", [
        ALL_CHECKS_HTML,
        '<img src="logo.png">',
        "<h1>T</h1><h3>T</h3>",
        "<html><body></body></html>",
        "<HTML><BODY><H2>x</H2></BODY></HTML>",
        '<a href="x">click here</a><a href="/y"></a>',
        "<table><tr><td><table><tr><td>x</td></tr></table></td></tr></table>",
    ])
    def test_issue_fields_populated(self, html):
        result = analyze(html)

        assert result.issues
        for issue in result.issues:
            assert issue.code_snippet or issue.uses_insertion, issue.title
            assert issue.fix_example, issue.title
            assert issue.wcag_reference, issue.title
            assert issue.learn_more_url, issue.title
            assert issue.rule, issue.title

    def test_returned_issues_are_frozen(self):
        result = analyze('<img src="logo.png">')
        issue = result.issues[0]

        with pytest.raises(dataclasses.FrozenInstanceError):
            issue.title = "changed"
        with pytest.raises(dataclasses.FrozenInstanceError):
            issue.code_snippet = ""
        assert issue.code_snippet == '<img src="logo.png">'

    def test_ambiguous_link_fix_keeps_href(self):
        result = analyze('<h1>T</h1>\n<a href="/more">more</a>')
        assert result.fixed_code == (
            '<h1>T</h1>\n<a href="/more">Specific description of link destination</a>'
        )
