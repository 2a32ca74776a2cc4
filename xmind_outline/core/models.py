from __future__ import annotations

"""Shared data structures used across the xmind-outline core.

This module is intentionally free of UI / I/O code (apart from the explicit
:meth:`CompiledArtifact.save` helper) so that the contained objects can be
reused in any context (unit-tests, CLI, services, etc.).
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List

__all__ = ["OutlineNode", "ValidationResult", "CompiledArtifact"]

logger = logging.getLogger(__name__)


@dataclass
class OutlineNode:
    """One item of a parsed outline.

    Attributes
    ----------
    title
        Display text of the item.
    labels
        Tags from the trailing ``[a, b]`` annotation, in the order written.
    children
        Nested items, in source order.  Each child belongs to exactly one
        parent.
    """

    title: str
    labels: List[str] = field(default_factory=list)
    children: List["OutlineNode"] = field(default_factory=list)

    def iter_nodes(self) -> Iterator["OutlineNode"]:
        """Yield this node and all descendants, depth-first in document order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def count_nodes(self) -> int:
        return sum(1 for _ in self.iter_nodes())


@dataclass(frozen=True)
class ValidationResult:
    """Advisory verdict of :func:`validate_outline`.

    ``warnings`` never affect ``ok``; they point at input the compiler will
    accept but may not render the way the author expects.
    """

    ok: bool
    message: str
    warnings: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.ok


@dataclass(frozen=True)
class CompiledArtifact:
    """The ``.xmind`` archive bytes together with their suggested filename."""

    data: bytes
    filename: str

    @property
    def size(self) -> int:
        return len(self.data)

    def save(self, directory: str | Path) -> Path:
        """Write the archive into *directory* and return the file path."""
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.filename
        try:
            path.write_bytes(self.data)
        except OSError:
            logger.error("I/O FAIL: write archive path=%s", path, exc_info=True)
            raise
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("I/O: wrote archive path=%s bytes=%d", path, len(self.data))
        return path
