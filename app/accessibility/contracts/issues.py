"""
Issues - Data structures describing detected accessibility defects.

These structures carry information from the rule checks to the fix
applier and out to callers:
1. Severity: Ranked defect classification
2. Position: Estimated line/column of the offending element
3. FixSuggestion: Replacement text, possibly with alternatives
4. Issue: One detected defect
5. AnalysisResult: Everything a single analyze() call produces
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


# Comment markers that delimit alternatives inside a textual fix
FIX_COMMENT_PATTERN = re.compile(r"<!--.*?-->")


class Severity(Enum):
    """Defect severity. critical > warning > info."""

    CRITICAL = "critical"
    """Blocks access for assistive technology users."""

    WARNING = "warning"
    """Likely problem that needs a human decision."""

    INFO = "info"
    """Advisory only."""

    @property
    def rank(self) -> int:
        """Higher rank means more severe."""
        return _SEVERITY_RANK[self]

    @classmethod
    def from_string(cls, value: str) -> "Severity":
        """Convert string to Severity, defaulting to INFO."""
        try:
            return cls(value.lower())
        except ValueError:
            return cls.INFO


_SEVERITY_RANK = {
    Severity.CRITICAL: 3,
    Severity.WARNING: 2,
    Severity.INFO: 1,
}


@dataclass(frozen=True)
class Position:
    """Estimated location of an element. Not a true source map."""

    line: int = 1
    column: int = 1

    @property
    def sort_key(self) -> Tuple[int, int]:
        return (self.line, self.column)

    def to_dict(self) -> Dict[str, int]:
        return {"line": self.line, "column": self.column}


class FixKind(Enum):
    """Shape of a fix suggestion."""

    SINGLE = "single"
    ALTERNATIVES = "alternatives"


@dataclass(frozen=True)
class FixOption:
    """One literal replacement text, optionally labelled (e.g. 'If decorative:')."""

    text: str
    label: Optional[str] = None


@dataclass(frozen=True)
class FixSuggestion:
    """
    Suggested replacement for an issue's code snippet.

    Mutually exclusive alternatives are kept as separate options instead
    of being embedded in one string. The first option is the one the fix
    applier uses; notes are shown to the reader but never applied.

    Example:
        fix = FixSuggestion.alternatives(
            FixOption('<img src="a.png" alt="">', label="If decorative:"),
            FixOption('<img src="a.png" alt="Chart">', label="If informative:"),
        )
        fix.selected()  # '<img src="a.png" alt="">'
    """

    kind: FixKind = FixKind.SINGLE
    options: Tuple[FixOption, ...] = ()
    notes: Tuple[str, ...] = ()
    source: Optional[str] = None
    """Verbatim text this suggestion was parsed from, rendered as-is."""

    @classmethod
    def single(cls, text: str, notes: Tuple[str, ...] = ()) -> "FixSuggestion":
        return cls(kind=FixKind.SINGLE, options=(FixOption(text),), notes=notes)

    @classmethod
    def alternatives(
        cls, *options: FixOption, notes: Tuple[str, ...] = ()
    ) -> "FixSuggestion":
        return cls(kind=FixKind.ALTERNATIVES, options=tuple(options), notes=notes)

    @classmethod
    def advisory(cls, *notes: str) -> "FixSuggestion":
        """A suggestion with guidance only and nothing to apply."""
        return cls(kind=FixKind.SINGLE, options=(), notes=tuple(notes))

    @classmethod
    def from_text(cls, text: str) -> "FixSuggestion":
        """
        Parse a comment-delimited fix string.

        Text without '<!-- ' markers is a single option. Otherwise the text
        is split on comment markers, each segment trimmed and empty segments
        dropped; the remaining segments become alternatives in order.
        """
        if "<!-- " not in text:
            options = (FixOption(text),) if text else ()
            return cls(kind=FixKind.SINGLE, options=options, source=text)

        segments = [part.strip() for part in FIX_COMMENT_PATTERN.split(text)]
        options = tuple(FixOption(part) for part in segments if part)
        return cls(kind=FixKind.ALTERNATIVES, options=options, source=text)

    @property
    def is_advisory(self) -> bool:
        return not self.options

    def selected(self) -> Optional[str]:
        """Text of the first option, or None when there is nothing to apply."""
        if not self.options:
            return None
        return self.options[0].text

    def render(self) -> str:
        """Human-facing fix text with labels and notes as comment markers."""
        if self.source is not None:
            return self.source

        parts: List[str] = []
        for option in self.options:
            if option.label:
                parts.append(f"<!-- {option.label} -->")
            parts.append(option.text)
        for note in self.notes:
            parts.append(f"<!-- {note} -->")
        return "\n".join(parts)


@dataclass(frozen=True)
class Issue:
    """
    One detected accessibility defect. Frozen once built.

    Issues normally fix themselves by replacing code_snippet with the
    selected fix text. Issues that add new text next to an anchor instead
    set insert_content together with insert_before (anchor is the snippet)
    or insert_after (anchor is the given text).
    """

    title: str
    severity: Severity
    wcag_reference: str
    description: str
    impact: str
    position: Position
    code_snippet: str
    fix: FixSuggestion
    learn_more_url: str
    rule: str = ""
    """Name of the rule that produced this issue."""

    insert_before: bool = False
    insert_after: Optional[str] = None
    insert_content: Optional[str] = None

    @property
    def fix_example(self) -> str:
        return self.fix.render()

    @property
    def uses_insertion(self) -> bool:
        return self.insert_content is not None and (
            self.insert_before or self.insert_after is not None
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase wire shape."""
        result: Dict[str, Any] = {
            "title": self.title,
            "severity": self.severity.value,
            "wcagReference": self.wcag_reference,
            "description": self.description,
            "impact": self.impact,
            "position": self.position.to_dict(),
            "codeSnippet": self.code_snippet,
            "fixExample": self.fix_example,
            "learnMoreUrl": self.learn_more_url,
        }
        if self.insert_before:
            result["insertBefore"] = True
        if self.insert_after is not None:
            result["insertAfter"] = self.insert_after
        if self.insert_content is not None:
            result["insertContent"] = self.insert_content
        return result

    def describe(self) -> str:
        """Generate human-readable description."""
        return (
            f"[{self.severity.value}] {self.title} "
            f"(line {self.position.line}, column {self.position.column})"
        )


@dataclass(frozen=True)
class AnalysisResult:
    """
    Result of analyzing one block of markup.

    issues keeps rule-execution order; fixed_code is a best-effort copy of
    the input with fixes applied.
    """

    issues: Tuple[Issue, ...] = field(default_factory=tuple)
    fixed_code: str = ""

    def by_severity(self, severity: Severity) -> List[Issue]:
        return [issue for issue in self.issues if issue.severity == severity]

    def counts_by_severity(self) -> Dict[Severity, int]:
        counts = {severity: 0 for severity in Severity}
        for issue in self.issues:
            counts[issue.severity] += 1
        return counts

    @property
    def has_critical(self) -> bool:
        return any(issue.severity == Severity.CRITICAL for issue in self.issues)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "issues": [issue.to_dict() for issue in self.issues],
            "fixedCode": self.fixed_code,
        }

    def __len__(self) -> int:
        return len(self.issues)
