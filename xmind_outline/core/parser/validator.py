from __future__ import annotations

"""Cheap structural pre-check of outline text.

The checks only look at line prefixes; no tree is built.  The verdict is
advisory: a valid result does not promise that every line survives parsing.
"""

from xmind_outline.core.models import ValidationResult
from xmind_outline.core.utils import count_indent

__all__ = ["validate_outline"]

MSG_EMPTY = "Please enter some text to convert"
MSG_NO_ROOT = "Text must have at least one root-level item (no tabs)"
MSG_VALID = "Valid input structure"
WARN_FLAT = "Text should have tab-indented structure for best results"
WARN_MANY_ROOTS = (
    "Text has {count} root-level items; only the last one and its sub-items are kept"
)


def validate_outline(text: str) -> ValidationResult:
    if not text or not text.strip():
        return ValidationResult(False, MSG_EMPTY)

    root_lines = 0
    indented_lines = 0
    for line in text.split("\n"):
        if not line.strip():
            continue
        if count_indent(line) == 0:
            root_lines += 1
        else:
            indented_lines += 1

    if not root_lines:
        return ValidationResult(False, MSG_NO_ROOT)

    warnings = []
    if not indented_lines:
        warnings.append(WARN_FLAT)
    if root_lines > 1:
        warnings.append(WARN_MANY_ROOTS.format(count=root_lines))
    return ValidationResult(True, MSG_VALID, warnings)
