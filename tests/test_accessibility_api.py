"""
Tests for the accessibility HTTP API.

Covers:
- POST /accessibility/analyze (success, validation, size limit, parse errors)
- GET /accessibility/rules
- GET /health
"""

from app.accessibility import ParseError
from app.core.config import settings
from app.routers import accessibility as accessibility_router


# ---------------------------------------------------------------------------
# ANALYZE
# ---------------------------------------------------------------------------

class TestAnalyzeEndpoint:
    """POST /accessibility/analyze"""

    def test_returns_issues_and_fixed_code(self, client, broken_page):
        response = client.post("/accessibility/analyze", json={"html": broken_page})

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"issues", "fixedCode", "summary"}

        titles = [issue["title"] for issue in data["issues"]]
        assert titles == [
            "Missing alt text for image",
            "Ambiguous link text",
            "Missing language attribute",
        ]
        assert data["summary"] == {"critical": 2, "warning": 1, "info": 0, "total": 3}
        assert data["fixedCode"].startswith('<html lang="en">')
        assert 'alt="Descriptive text about this image"' in data["fixedCode"]

    def test_issue_fields_are_camel_case(self, client):
        response = client.post(
            "/accessibility/analyze", json={"html": '<h1>T</h1><img src="a.png">'}
        )

        issue = response.json()["issues"][0]
        assert issue["severity"] == "critical"
        assert issue["wcagReference"].startswith("1.1.1")
        assert issue["position"] == {"line": 1, "column": 1}
        assert issue["codeSnippet"] == '<img src="a.png">'
        assert "fixExample" in issue
        assert "learnMoreUrl" in issue
        assert "insertAfter" not in issue

    def test_insertion_fields_present_for_lang_issue(self, client):
        response = client.post(
            "/accessibility/analyze", json={"html": "<html><body><h1>T</h1></body></html>"}
        )

        issue = response.json()["issues"][0]
        assert issue["insertAfter"] == "<html"
        assert issue["insertContent"] == ' lang="en"'

    def test_clean_markup(self, client):
        response = client.post(
            "/accessibility/analyze",
            json={"html": '<html lang="en"><body><h1>Hello</h1></body></html>'},
        )

        assert response.status_code == 200
        assert response.json()["issues"] == []
        assert response.json()["summary"]["total"] == 0

    def test_blank_markup_rejected(self, client):
        response = client.post("/accessibility/analyze", json={"html": "   \n  "})

        assert response.status_code == 422
        assert response.json()["detail"] == "Paste some HTML to analyze"

    def test_empty_markup_rejected(self, client):
        response = client.post("/accessibility/analyze", json={"html": ""})
        assert response.status_code == 422

    def test_missing_field_rejected(self, client):
        response = client.post("/accessibility/analyze", json={})
        assert response.status_code == 422

    def test_oversized_markup_rejected(self, client, monkeypatch):
        monkeypatch.setattr(settings, "ACCESSIBILITY_MAX_INPUT_CHARS", 10)

        response = client.post("/accessibility/analyze", json={"html": "<p>" + "x" * 20 + "</p>"})

        assert response.status_code == 413

    def test_parse_error_is_bad_request(self, client, monkeypatch):
        def fail(source):
            raise ParseError("parser crashed", source_length=len(source))

        monkeypatch.setattr(accessibility_router.analyzer, "analyze", fail)

        response = client.post("/accessibility/analyze", json={"html": "<p>x</p>"})

        assert response.status_code == 400
        assert "check your HTML" in response.json()["detail"]

    def test_text_report_when_enabled(self, client, monkeypatch):
        monkeypatch.setattr(settings, "ACCESSIBILITY_INCLUDE_REPORT", True)

        response = client.post("/accessibility/analyze", json={"html": '<img src="a.png">'})

        report = response.json()["report"]
        assert "Summary: 2 critical, 0 warnings, 0 info" in report


# ---------------------------------------------------------------------------
# RULES AND HEALTH
# ---------------------------------------------------------------------------

class TestRulesEndpoint:
    """GET /accessibility/rules"""

    def test_lists_rules_in_execution_order(self, client):
        response = client.get("/accessibility/rules")

        assert response.status_code == 200
        assert response.json()["rules"] == [
            "ImageAltTextRule",
            "HeadingStructureRule",
            "FormLabelRule",
            "ColorContrastRule",
            "LinkPurposeRule",
            "AriaRule",
            "KeyboardNavigationRule",
            "DocumentLanguageRule",
            "ButtonRoleRule",
            "TableStructureRule",
        ]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
