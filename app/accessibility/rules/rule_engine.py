"""
RuleEngine - Runs accessibility rules in a fixed order.

Maintains a registry of rules sorted by their order value and concatenates
the issues each rule returns. Rules never share state; the engine only
decides the sequence.

Usage:
    from app.accessibility.rules import RuleEngine, create_default_engine

    # Use default engine with all rules
    engine = create_default_engine()
    issues = engine.run(DOMParser(html))

    # Or build custom engine
    engine = RuleEngine()
    engine.register(ImageAltTextRule())
    engine.register(LinkPurposeRule())
    issues = engine.run(DOMParser(html))
"""

import logging
from typing import List, Type

from ..analyzers.dom_parser import DOMParser
from ..contracts.issues import Issue
from .base_rule import AccessibilityRule


logger = logging.getLogger(__name__)


class RuleEngine:
    """
    Orchestrates accessibility rule execution.

    Features:
    - Order-based rule execution
    - Per-rule issue lists, concatenated in rule order
    - Duplicate registrations ignored
    """

    def __init__(self):
        self._rules: List[AccessibilityRule] = []

    def register(self, rule: AccessibilityRule) -> None:
        """
        Register a rule.

        Args:
            rule: AccessibilityRule instance to register
        """
        if rule in self._rules:
            logger.debug(f"Rule already registered: {rule.name}")
            return
        self._rules.append(rule)
        self._rules.sort(key=lambda r: r.order)
        logger.debug(f"Registered rule: {rule.name}")

    def register_all(self, rules: List[AccessibilityRule]) -> None:
        """Register multiple rules at once."""
        for rule in rules:
            self.register(rule)

    def unregister(self, rule_class: Type[AccessibilityRule]) -> bool:
        """
        Unregister a rule by class.

        Returns:
            True if rule was found and removed
        """
        original_count = len(self._rules)
        self._rules = [r for r in self._rules if not isinstance(r, rule_class)]
        removed = len(self._rules) < original_count
        if removed:
            logger.debug(f"Unregistered rule: {rule_class.__name__}")
        return removed

    def run(self, dom: DOMParser) -> List[Issue]:
        """
        Run every registered rule against a parsed document.

        Args:
            dom: Parsed document

        Returns:
            All issues, grouped by rule in execution order
        """
        issues: List[Issue] = []

        for rule in self._rules:
            found = rule.check(dom)
            if found:
                logger.debug(f"Rule {rule.name} reported {len(found)} issue(s)")
            issues.extend(found)

        logger.debug(f"Ran {len(self._rules)} rules: {len(issues)} issues")
        return issues

    @property
    def rules(self) -> List[AccessibilityRule]:
        """Get all registered rules (sorted by order)."""
        return self._rules.copy()

    @property
    def rule_names(self) -> List[str]:
        return [rule.name for rule in self._rules]

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleEngine({len(self._rules)} rules)"


def create_default_engine() -> RuleEngine:
    """
    Create a RuleEngine with all default rules registered.

    Returns:
        Configured RuleEngine ready to use
    """
    from .image_alt_rule import ImageAltTextRule
    from .heading_rule import HeadingStructureRule
    from .form_label_rule import FormLabelRule
    from .color_contrast_rule import ColorContrastRule
    from .link_purpose_rule import LinkPurposeRule
    from .aria_rule import AriaRule
    from .keyboard_rule import KeyboardNavigationRule
    from .document_lang_rule import DocumentLanguageRule
    from .button_role_rule import ButtonRoleRule
    from .table_rule import TableStructureRule

    engine = RuleEngine()
    engine.register_all([
        ImageAltTextRule(),         # Order 10
        HeadingStructureRule(),     # Order 20
        FormLabelRule(),            # Order 30
        ColorContrastRule(),        # Order 40
        LinkPurposeRule(),          # Order 50
        AriaRule(),                 # Order 60
        KeyboardNavigationRule(),   # Order 70
        DocumentLanguageRule(),     # Order 80
        ButtonRoleRule(),           # Order 90
        TableStructureRule(),       # Order 100
    ])

    logger.debug(f"Created default engine with {len(engine)} rules")
    return engine
