"""
Rules - The ten accessibility checks and the engine that runs them.

Components:
- AccessibilityRule: Abstract base class for all checks
- RuleEngine: Runs checks in a fixed order
- Concrete Rules: ImageAltTextRule, HeadingStructureRule, etc.

Usage:
    from app.accessibility.rules import create_default_engine

    engine = create_default_engine()
    issues = engine.run(dom)
"""

from .base_rule import AccessibilityRule
from .rule_engine import RuleEngine, create_default_engine
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


__all__ = [
    # Base
    "AccessibilityRule",
    "RuleEngine",
    "create_default_engine",
    # Rules
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
