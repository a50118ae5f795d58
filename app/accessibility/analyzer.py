"""
AccessibilityAnalyzer - Entry point of the accessibility checker.

Parses the markup once, runs every rule in order, then applies the
collected fixes to a copy of the input.

Usage:
    from app.accessibility import analyze

    result = analyze('<img src="logo.png">')
    for issue in result.issues:
        print(issue.describe())
    print(result.fixed_code)
"""

import logging
import time
from typing import Optional

from .analyzers.dom_parser import DOMParser
from .contracts.issues import AnalysisResult
from .patcher.fix_applier import FixApplier
from .rules.rule_engine import RuleEngine, create_default_engine


logger = logging.getLogger(__name__)


class AccessibilityAnalyzer:
    """
    Runs the full analysis pipeline.

    Holds no per-call state, so one instance can serve any number of
    concurrent calls.
    """

    def __init__(
        self,
        engine: Optional[RuleEngine] = None,
        applier: Optional[FixApplier] = None,
    ):
        """
        Args:
            engine: Rule engine to use (default: all ten rules)
            applier: Fix applier to use (default: FixApplier())
        """
        self._engine = engine or create_default_engine()
        self._applier = applier or FixApplier()

    @property
    def engine(self) -> RuleEngine:
        return self._engine

    def analyze(self, source: str) -> AnalysisResult:
        """
        Analyze markup for accessibility issues.

        Args:
            source: HTML markup

        Returns:
            AnalysisResult with issues in rule order and the fixed markup

        Raises:
            ParseError: If the markup cannot be parsed at all
        """
        start_time = time.time()

        dom = DOMParser(source)
        issues = self._engine.run(dom)
        fixed_code = self._applier.apply(source, issues)

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            f"Analyzed {len(source)} chars: {len(issues)} issues "
            f"in {duration_ms:.1f}ms"
        )
        return AnalysisResult(issues=tuple(issues), fixed_code=fixed_code)

    def __repr__(self) -> str:
        return f"AccessibilityAnalyzer({self._engine!r})"


def analyze(source: str) -> AnalysisResult:
    """Analyze markup with the default rule set. Raises ParseError."""
    return AccessibilityAnalyzer().analyze(source)
