"""
Accessibility Router - HTTP access to the accessibility checker.

Endpoints:
- POST /accessibility/analyze: Analyze HTML and return issues plus fixed code
- GET /accessibility/rules: List the checks in execution order
"""

import logging

from fastapi import APIRouter, HTTPException

from app.accessibility import (
    AccessibilityAnalyzer,
    AccessibilityReporter,
    ParseError,
    SeveritySummary,
)
from app.core.config import settings
from app.schemas.accessibility import (
    AnalyzeRequest,
    AnalyzeResponse,
    IssueOut,
    RulesResponse,
    SeveritySummaryOut,
)


logger = logging.getLogger("app.routers.accessibility")


# ---------------------------------------------------------------------------
# ROUTER SETUP
# ---------------------------------------------------------------------------
router = APIRouter(prefix="/accessibility", tags=["accessibility"])

# Stateless, safe to share across requests
analyzer = AccessibilityAnalyzer()


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    response_model_exclude_none=True,
    summary="Analyze HTML for accessibility issues",
    description="""
    Runs the ten WCAG-based checks over the submitted markup:
    - Returns every issue with severity, WCAG reference and suggested fix
    - Returns a best-effort copy of the markup with fixes applied
    - Returns issue counts by severity
    """,
)
def analyze_html(request: AnalyzeRequest):
    """Analyze HTML markup. Runs in the threadpool (plain def)."""
    if not request.html.strip():
        raise HTTPException(
            status_code=422,
            detail="Paste some HTML to analyze",
        )

    if len(request.html) > settings.ACCESSIBILITY_MAX_INPUT_CHARS:
        raise HTTPException(
            status_code=413,
            detail=(
                f"Markup is {len(request.html)} characters; "
                f"the limit is {settings.ACCESSIBILITY_MAX_INPUT_CHARS}"
            ),
        )

    try:
        result = analyzer.analyze(request.html)
    except ParseError as e:
        logger.warning(f"Analysis failed: {e}")
        raise HTTPException(
            status_code=400,
            detail="Couldn't analyze the markup - check your HTML and try again",
        ) from e

    summary = SeveritySummary.from_result(result)
    report = (
        AccessibilityReporter.generate_text_report(result)
        if settings.ACCESSIBILITY_INCLUDE_REPORT
        else None
    )

    return AnalyzeResponse(
        issues=[IssueOut.model_validate(issue.to_dict()) for issue in result.issues],
        fixed_code=result.fixed_code,
        summary=SeveritySummaryOut(**summary.to_dict()),
        report=report,
    )


@router.get(
    "/rules",
    response_model=RulesResponse,
    summary="List accessibility checks",
)
def list_rules():
    """Rule names in execution order."""
    return RulesResponse(rules=analyzer.engine.rule_names)
