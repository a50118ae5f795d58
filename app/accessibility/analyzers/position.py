"""
Position Estimator - Approximate location for reported elements.

The line number is the element's ordinal within the rule that matched it,
not its real source line. The fix applier's line fallback indexes lines
with this numbering.
"""

from typing import Optional

from bs4 import Tag

from ..contracts.issues import Position


# Used by document-wide issues (missing H1, missing lang)
DOCUMENT_START = Position(line=1, column=1)


def estimate_position(element: Optional[Tag], index: int) -> Position:
    """
    Estimate the position of an element.

    Args:
        element: The matched element (unused by the current scheme)
        index: Zero-based ordinal of the element within its check

    Returns:
        Position(line=index + 1, column=1)
    """
    return Position(line=index + 1, column=1)
