"""
Patcher - Turns issue fixes into a fixed copy of the markup.
"""

from .fix_applier import FixApplier, FixMethod, PatchReport, apply_fixes, snippet_tokens

__all__ = [
    "FixApplier",
    "FixMethod",
    "PatchReport",
    "apply_fixes",
    "snippet_tokens",
]
