"""
Pydantic schemas for the accessibility checker API.

These schemas define the REST contract.
Used in app/routers/accessibility.py
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ============== ENUMS ==============

class SeverityEnum(str, Enum):
    """Issue severity."""
    critical = "critical"
    warning = "warning"
    info = "info"


# ============== ANALYZE ==============

class AnalyzeRequest(BaseModel):
    """Request to analyze a block of HTML."""
    html: str = Field(..., min_length=1, description="HTML markup to analyze")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "html": '<html><body><img src="logo.png"><a href="/docs">click here</a></body></html>'
            }
        }
    )


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PositionOut(_CamelModel):
    """Estimated location of the offending element."""
    line: int = Field(..., ge=1)
    column: int = Field(..., ge=1)


class IssueOut(_CamelModel):
    """One detected accessibility issue."""
    title: str
    severity: SeverityEnum
    wcag_reference: str
    description: str
    impact: str
    position: PositionOut
    code_snippet: str
    fix_example: str
    learn_more_url: str
    insert_before: Optional[bool] = None
    insert_after: Optional[str] = None
    insert_content: Optional[str] = None


class SeveritySummaryOut(BaseModel):
    """Issue counts by severity."""
    critical: int = 0
    warning: int = 0
    info: int = 0
    total: int = 0


class AnalyzeResponse(_CamelModel):
    """Issues found plus the best-effort fixed markup."""
    issues: List[IssueOut]
    fixed_code: str
    summary: SeveritySummaryOut
    report: Optional[str] = None


# ============== RULES ==============

class RulesResponse(BaseModel):
    """Rules in the order they run."""
    rules: List[str]
