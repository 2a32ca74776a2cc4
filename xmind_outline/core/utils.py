from __future__ import annotations

"""Simple reusable helper functions.

These helpers are side-effect-free and contain no disk I/O; they can be used
across all layers of the compiler.
"""

from datetime import datetime, timezone
from typing import Optional, Set
import logging
import re
import uuid

from xmind_outline.core.exceptions import SerializationError

__all__ = [
    "count_indent",
    "xml_safe_text",
    "sanitize_basename",
    "format_timestamp",
    "generate_topic_id",
    "TopicIdFactory",
]

logger = logging.getLogger(__name__)

_LEADING_TABS = re.compile(r"^\t*")


def count_indent(line: str) -> int:
    """Return the number of leading tab characters of *line*.

    Spaces never count as indentation.
    """
    return len(_LEADING_TABS.match(line).group(0))


# Code points XML 1.0 cannot represent, even as character references.
_XML_INVALID_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def xml_safe_text(text: str) -> str:
    """Remove characters that XML 1.0 cannot carry from *text*."""
    return _XML_INVALID_CHARS.sub("", text)


def sanitize_basename(text: str) -> str:
    """Return *text* usable as a bare file name (no directory parts).

    Path separators and characters rejected by common file systems are
    replaced with dashes; surrounding whitespace and dots are stripped.
    """
    text = re.sub(r'[\\/:*?"<>|\x00-\x1f]+', "-", text or "")
    return text.strip().strip(".")


def format_timestamp(now: Optional[datetime] = None) -> str:
    """Return a sortable, filename-safe UTC timestamp.

    The value is the ISO-8601 instant with millisecond precision where ``:``
    and ``.`` are replaced by ``-``, e.g. ``2026-10-18T09-30-12-345Z``.
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H-%M-%S-") + f"{now.microsecond // 1000:03d}Z"


def generate_topic_id() -> str:
    """Generate a random 128-bit identifier suitable for XMind elements."""
    return uuid.uuid4().hex


class TopicIdFactory:
    """Issues identifiers that are unique within one generated document.

    A fresh factory is created for every compilation and passed explicitly to
    the builders; identifiers are never shared between two documents.
    """

    MAX_ATTEMPTS = 8

    def __init__(self) -> None:
        self._issued: Set[str] = set()

    def __len__(self) -> int:
        return len(self._issued)

    def __contains__(self, value: object) -> bool:
        return value in self._issued

    def new_id(self) -> str:
        """Return an identifier not issued before by this factory.

        Raises
        ------
        SerializationError
            If no fresh identifier could be produced.
        """
        for _ in range(self.MAX_ATTEMPTS):
            try:
                candidate = generate_topic_id()
            except Exception as exc:
                raise SerializationError("Identifier generation failed", cause=exc) from exc
            if candidate not in self._issued:
                self._issued.add(candidate)
                return candidate
            logger.warning("Identifier collision on %s; retrying", candidate)
        raise SerializationError(
            f"Could not generate a unique identifier after {self.MAX_ATTEMPTS} attempts"
        )
