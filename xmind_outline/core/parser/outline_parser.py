from __future__ import annotations

"""Tab-indented outline parser.

Grammar (one item per line)::

    <tabs><title> [label, label, ...]

The number of leading tab characters is the nesting level.  The optional
trailing bracket group holds comma-separated labels; only the last group on
the line is treated as an annotation, earlier brackets stay part of the title.
"""

import logging
import re
from typing import List, Tuple

from xmind_outline.core.exceptions import EmptyInputError, NoRootLineError
from xmind_outline.core.models import OutlineNode
from xmind_outline.core.utils import count_indent

logger = logging.getLogger(__name__)

__all__ = ["parse_outline", "parse_line_content", "EXAMPLE_OUTLINE"]

# Title (lazy) followed by one bracket group closing the line.  The group may
# not contain brackets itself so "a [b] [c]" yields title "a [b]".
_LABELLED_LINE = re.compile(r"^(?P<title>.*?)\s*\[(?P<labels>[^\[\]]*)\]$", re.DOTALL)

EXAMPLE_OUTLINE = (
    "BusinessPropertyInsurance\n"
    "\tCoverage [core]\n"
    "\t\tRule: FireCoverage\n"
    "\t\tRule: FloodCoverage\n"
    "\tExclusions\n"
    "\t\tCondition: WearAndTearExcluded\n"
    "\tLimits\n"
    "\t\tLimit: MaxPayoutPerLocation_50000000 [limit, per-location]\n"
    "\tConditions\n"
    "\t\tCondition: FireSuppressionRequired"
)


def parse_line_content(content: str) -> Tuple[str, List[str]]:
    """Split stripped line *content* into ``(title, labels)``.

    >>> parse_line_content("Child1 [L1, L2]")
    ('Child1', ['L1', 'L2'])
    >>> parse_line_content("Plain title")
    ('Plain title', [])
    """
    match = _LABELLED_LINE.match(content)
    if match is None:
        return content, []
    labels = [item.strip() for item in match.group("labels").split(",")]
    return match.group("title").strip(), [label for label in labels if label]


def parse_outline(text: str) -> OutlineNode:
    """Parse outline *text* into a tree and return its root node.

    A line at level 0 starts a new root and replaces any earlier root together
    with its subtree.  Indented lines that appear before the first root have
    nowhere to attach and are dropped.

    Raises
    ------
    EmptyInputError
        If *text* is empty or whitespace only.
    NoRootLineError
        If no non-blank line has indentation level 0.
    """
    if not text or not text.strip():
        raise EmptyInputError()

    root: OutlineNode | None = None
    stack: List[Tuple[int, OutlineNode]] = []
    dropped = 0

    for lineno, line in enumerate(text.split("\n"), start=1):
        content = line.strip()
        if not content:
            continue

        level = count_indent(line)
        title, labels = parse_line_content(content)
        node = OutlineNode(title=title, labels=labels)

        if level == 0:
            if root is not None:
                logger.debug("Line %d: new root-level item replaces '%s'", lineno, root.title)
            root = node
            stack = [(0, node)]
            continue

        while stack and stack[-1][0] >= level:
            stack.pop()
        if not stack:
            dropped += 1
            logger.debug("Line %d: no parent at level < %d; line dropped", lineno, level)
            continue

        stack[-1][1].children.append(node)
        stack.append((level, node))

    if root is None:
        raise NoRootLineError()

    if dropped:
        logger.info("Parse: %d orphaned line(s) dropped", dropped)
    return root
