"""
FixApplier - Applies issue fixes to the original markup as text edits.

Fixes are plain substring substitutions, applied bottom-of-document first
(by estimated position) so earlier edits disturb later anchors as little as
possible. The result is best effort: a fix whose anchor can no longer be
found is skipped and the text is left as it was.

Usage:
    from app.accessibility.patcher import FixApplier

    applier = FixApplier()
    fixed = applier.apply(html, issues)

    report = applier.apply_with_report(html, issues)
    for issue, method in report.applied:
        print(f"{issue.title}: {method.value}")
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from ..contracts.issues import Issue


logger = logging.getLogger(__name__)


# Delimiters used to pull identifying words out of a code snippet
SNIPPET_TOKEN_DELIMITERS = re.compile(r"[<>\s=\"']")

# Words this short are too common to identify a line
MIN_TOKEN_LENGTH = 4


class FixMethod(Enum):
    """How a fix was anchored in the working text."""

    INSERT_BEFORE = "insert_before"
    INSERT_AFTER = "insert_after"
    EXACT = "exact"
    LINE = "line"


@dataclass
class PatchReport:
    """
    Result of applying fixes to markup.

    Attributes:
        fixed_code: The patched text
        applied: (issue, method) for every fix that changed the text
        skipped: (issue, reason) for every fix that could not be anchored
    """

    fixed_code: str
    applied: List[Tuple[Issue, FixMethod]] = field(default_factory=list)
    skipped: List[Tuple[Issue, str]] = field(default_factory=list)

    @property
    def applied_count(self) -> int:
        return len(self.applied)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def describe(self) -> str:
        """Generate human-readable summary."""
        lines = [
            "PatchReport:",
            f"  Applied: {len(self.applied)} fixes",
        ]
        if self.skipped:
            lines.append(f"  Skipped: {len(self.skipped)} fixes")
            for issue, reason in self.skipped[:5]:
                lines.append(f"    - {issue.title}: {reason}")
            if len(self.skipped) > 5:
                lines.append(f"    ... and {len(self.skipped) - 5} more")
        return "\n".join(lines)


def snippet_tokens(snippet: str) -> List[str]:
    """Words of a snippet long enough to identify the line it sits on."""
    return [
        token for token in SNIPPET_TOKEN_DELIMITERS.split(snippet)
        if len(token) >= MIN_TOKEN_LENGTH
    ]


class FixApplier:
    """
    Applies the fixes attached to issues to a copy of the source text.

    Per issue, in descending (line, column) order:
    1. insert_before: put insert_content on its own line before the snippet
    2. insert_after: put insert_content right after the anchor text
    3. otherwise replace the first occurrence of the snippet with the
       selected fix option
    4. if the snippet has drifted, replace the whole line at the issue's
       estimated line when it still contains a word from the snippet
    5. otherwise leave the text alone
    """

    def apply(self, original: str, issues: Sequence[Issue]) -> str:
        """
        Apply all fixes.

        Args:
            original: Source markup
            issues: Issues in any order

        Returns:
            Patched copy of the markup
        """
        return self.apply_with_report(original, issues).fixed_code

    def apply_with_report(self, original: str, issues: Sequence[Issue]) -> PatchReport:
        """Apply all fixes and record which ones landed and how."""
        report = PatchReport(fixed_code=original)
        ordered = sorted(issues, key=lambda i: i.position.sort_key, reverse=True)

        for issue in ordered:
            patched, method = self._apply_one(report.fixed_code, issue)
            if method is None:
                report.skipped.append((issue, "anchor not found"))
                logger.debug(f"Skipped fix for '{issue.title}' at line {issue.position.line}")
                continue
            report.fixed_code = patched
            report.applied.append((issue, method))

        logger.debug(
            f"Applied {report.applied_count}/{len(ordered)} fixes "
            f"({report.skipped_count} skipped)"
        )
        return report

    def _apply_one(self, text: str, issue: Issue) -> Tuple[str, Optional[FixMethod]]:
        content = issue.insert_content

        if (
            issue.insert_before
            and content
            and issue.code_snippet
            and issue.code_snippet in text
        ):
            return (
                text.replace(issue.code_snippet, f"{content}\n{issue.code_snippet}", 1),
                FixMethod.INSERT_BEFORE,
            )

        if issue.insert_after and content and issue.insert_after in text:
            return (
                text.replace(issue.insert_after, f"{issue.insert_after}{content}", 1),
                FixMethod.INSERT_AFTER,
            )

        replacement = issue.fix.selected()
        if not replacement or not issue.code_snippet:
            return text, None

        if issue.code_snippet in text:
            return text.replace(issue.code_snippet, replacement, 1), FixMethod.EXACT

        return self._replace_line(text, issue, replacement)

    @staticmethod
    def _replace_line(
        text: str, issue: Issue, replacement: str
    ) -> Tuple[str, Optional[FixMethod]]:
        lines = text.split("\n")
        target = issue.position.line - 1
        if not 0 <= target < len(lines):
            return text, None

        if not any(token in lines[target] for token in snippet_tokens(issue.code_snippet)):
            return text, None

        lines[target] = replacement
        return "\n".join(lines), FixMethod.LINE


def apply_fixes(original: str, issues: Sequence[Issue]) -> str:
    """Apply issue fixes to markup with a default FixApplier."""
    return FixApplier().apply(original, issues)
