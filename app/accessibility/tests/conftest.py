"""
Pytest configuration for accessibility checker tests.

Provides fixtures for:
- Parsing markup
- The default rule engine and analyzer
- Sample documents
"""

import logging
from typing import Callable, List

import pytest

from app.accessibility import AccessibilityAnalyzer
from app.accessibility.analyzers import DOMParser
from app.accessibility.contracts import Issue
from app.accessibility.rules import AccessibilityRule, create_default_engine


logging.basicConfig(level=logging.INFO)


# ============================================================================
# ENGINE FIXTURES
# ============================================================================


@pytest.fixture
def engine():
    """Rule engine with all ten rules."""
    return create_default_engine()


@pytest.fixture
def analyzer():
    """Analyzer with default rules and fix applier."""
    return AccessibilityAnalyzer()


@pytest.fixture
def run_rule() -> Callable[[AccessibilityRule, str], List[Issue]]:
    """Run a single rule against a markup string."""
    def _run(rule: AccessibilityRule, html: str) -> List[Issue]:
        return rule.check(DOMParser(html))
    return _run


# ============================================================================
# SAMPLE DOCUMENTS
# ============================================================================


@pytest.fixture
def repairable_html() -> str:
    """Document whose every critical defect has an exactly-anchored fix."""
    return (
        "<html>\n"
        "<body>\n"
        "<h1>Shop</h1>\n"
        '<img src="logo.png">\n'
        '<input type="text" id="q">\n'
        '<div onclick="go()">Go</div>\n'
        '<div role="checkbox">Agree</div>\n'
        "</body>\n"
        "</html>"
    )


@pytest.fixture
def accessible_html() -> str:
    """Document that passes every check."""
    return (
        '<html lang="en">\n'
        "<body>\n"
        "<h1>Welcome</h1>\n"
        "<h2>News</h2>\n"
        '<img src="team.jpg" alt="Our team at the 2024 offsite">\n'
        '<label for="email">Email</label>\n'
        '<input type="email" id="email">\n'
        '<a href="/pricing">Pricing plans</a>\n'
        '<button type="submit">Send</button>\n'
        "<table>\n"
        "<tr><th>Plan</th><th>Price</th></tr>\n"
        "<tr><td>Basic</td><td>$5</td></tr>\n"
        "</table>\n"
        "</body>\n"
        "</html>"
    )
