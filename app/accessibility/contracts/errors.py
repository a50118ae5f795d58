"""
Errors - Exception hierarchy for the accessibility checker.

Only ParseError ever escapes analyze(). Rule checks treat malformed
attributes as "issue present" or "issue absent", and the fix applier
skips fixes it cannot anchor, so neither has an exception of its own.
"""

from typing import Optional


class AccessibilityError(Exception):
    """Base class for all accessibility checker errors."""


class ParseError(AccessibilityError):
    """
    The input markup could not be turned into an element tree.

    Fatal to the analysis call: no partial result is produced.
    """

    def __init__(self, message: str, source_length: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.source_length = source_length

    def __str__(self) -> str:
        if self.source_length is None:
            return self.message
        return f"{self.message} (input length: {self.source_length})"
