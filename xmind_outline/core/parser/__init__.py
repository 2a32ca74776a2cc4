from __future__ import annotations

"""Outline text helpers.

Provides the tab-indented outline parser and the advisory validator used by
the compilation pipeline.
"""

from .outline_parser import EXAMPLE_OUTLINE, parse_line_content, parse_outline  # noqa: F401
from .validator import validate_outline  # noqa: F401

__all__ = [
    "EXAMPLE_OUTLINE",
    "parse_line_content",
    "parse_outline",
    "validate_outline",
]
