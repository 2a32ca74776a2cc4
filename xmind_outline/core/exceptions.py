from __future__ import annotations

"""Exception classes raised by the outline compiler.

Two families are kept apart so front-ends can tell them apart:

* :class:`OutlineInputError` and subclasses describe problems the user can fix
  by editing the outline text (show a hint).
* :class:`SerializationError` and :class:`PackagingError` describe unexpected
  internal failures; the underlying exception is attached as ``cause`` and
  chained with ``raise ... from``.
"""

from typing import Optional


class OutlineError(Exception):
    """Base exception for all compiler errors."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{super().__str__()} (caused by {type(self.cause).__name__}: {self.cause})"
        return super().__str__()


class OutlineInputError(OutlineError):
    """Raised when the outline text cannot produce a tree.

    These errors are user-correctable and never carry a cause.
    """


class EmptyInputError(OutlineInputError):
    """Raised when the outline text is empty or whitespace only."""

    def __init__(self) -> None:
        super().__init__("Please enter some text to convert")


class NoRootLineError(OutlineInputError):
    """Raised when no line sits at indentation level 0."""

    def __init__(self) -> None:
        super().__init__("Text must have at least one root-level item (no tabs)")


class SerializationError(OutlineError):
    """Raised when the XML documents cannot be generated."""


class PackagingError(OutlineError):
    """Raised when the archive cannot be assembled or written."""
