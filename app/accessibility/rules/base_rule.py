"""
AccessibilityRule - Abstract base class for accessibility checks.

Each rule inspects the parsed document and returns the Issues it found,
with a ready-to-apply FixSuggestion attached to each one.

Usage:
    class MyRule(AccessibilityRule):
        @property
        def order(self) -> int:
            return 110

        def check(self, dom: DOMParser) -> List[Issue]:
            issues = []
            for index, element in enumerate(dom.get_elements_by_tag("marquee")):
                issues.append(self._issue(...))
            return issues
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from bs4 import Tag

from ..analyzers.dom_parser import DOMParser
from ..analyzers.position import estimate_position
from ..contracts.issues import FixSuggestion, Issue, Position, Severity


class AccessibilityRule(ABC):
    """
    Abstract base class for accessibility rule checks.

    Subclasses must implement:
    - order: Execution order (lower = earlier)
    - check(): Return the issues found in a document

    Rules are stateless. A missing or malformed attribute is either an
    issue or not an issue; check() must never raise because of the markup.

    Order values of the default rules:
    - 10: Image alt text
    - 20: Heading structure
    - 30: Form labels
    - 40: Color contrast
    - 50: Link purpose
    - 60: ARIA validity
    - 70: Keyboard navigation
    - 80: Document language
    - 90: Fake buttons
    - 100: Table structure
    """

    @property
    @abstractmethod
    def order(self) -> int:
        """Execution order. Lower values run first."""
        pass

    @property
    def name(self) -> str:
        """Rule name for logging and debugging."""
        return self.__class__.__name__

    @abstractmethod
    def check(self, dom: DOMParser) -> List[Issue]:
        """
        Inspect the document.

        Args:
            dom: Parsed document

        Returns:
            Issues in document order of the elements they refer to
        """
        pass

    def _issue(
        self,
        *,
        title: str,
        severity: Severity,
        wcag_reference: str,
        description: str,
        impact: str,
        position: Position,
        code_snippet: str,
        fix: FixSuggestion,
        learn_more_url: str,
        insert_before: bool = False,
        insert_after: Optional[str] = None,
        insert_content: Optional[str] = None,
    ) -> Issue:
        """Build an Issue tagged with this rule's name."""
        return Issue(
            title=title,
            severity=severity,
            wcag_reference=wcag_reference,
            description=description,
            impact=impact,
            position=position,
            code_snippet=code_snippet,
            fix=fix,
            learn_more_url=learn_more_url,
            rule=self.name,
            insert_before=insert_before,
            insert_after=insert_after,
            insert_content=insert_content,
        )

    @staticmethod
    def _position(element: Optional[Tag], index: int) -> Position:
        return estimate_position(element, index)

    def __repr__(self) -> str:
        return f"{self.name}(order={self.order})"

    def __eq__(self, other: object) -> bool:
        """Equality check based on class type."""
        if not isinstance(other, AccessibilityRule):
            return False
        return self.__class__ == other.__class__

    def __hash__(self) -> int:
        return hash(self.__class__.__name__)
