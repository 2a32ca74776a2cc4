"""Package utilities for ``.xmind`` archive creation.

These utilities handle the final stages of a compilation:
- Generating the three XML payloads for a parsed outline
- Packing them into an in-memory deflate zip archive
- Computing the timestamped artifact filename

Everything happens in memory; writing the archive to disk is left to the
caller (see :meth:`xmind_outline.core.models.CompiledArtifact.save`).
"""

from __future__ import annotations

import io
import logging
import zipfile
from datetime import datetime
from typing import Dict, Optional

from xmind_outline.config import ConfigManager
from xmind_outline.core.exceptions import PackagingError
from xmind_outline.core.generators.document_builder import (
    CONTENT_PATH,
    MANIFEST_PATH,
    STYLES_PATH,
    build_content_xml,
    build_manifest_xml,
    build_styles_xml,
)
from xmind_outline.core.models import OutlineNode
from xmind_outline.core.utils import TopicIdFactory, format_timestamp, sanitize_basename

logger = logging.getLogger(__name__)

__all__ = [
    "build_archive_entries",
    "pack_archive",
    "assemble_archive",
    "build_artifact_filename",
]


def build_archive_entries(root: OutlineNode, ids: Optional[TopicIdFactory] = None) -> Dict[str, bytes]:
    """Return the archive payloads keyed by their path inside the archive.

    The mapping preserves the archive order: content, styles, manifest.
    """
    ids = ids if ids is not None else TopicIdFactory()
    return {
        CONTENT_PATH: build_content_xml(root, ids),
        STYLES_PATH: build_styles_xml(),
        MANIFEST_PATH: build_manifest_xml(),
    }


def pack_archive(entries: Dict[str, bytes]) -> bytes:
    """Pack *entries* into a deflate-compressed zip and return its bytes.

    Raises
    ------
    PackagingError
        If the archive cannot be written.
    """
    buffer = io.BytesIO()
    try:
        with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zipf:
            for path, payload in entries.items():
                zipf.writestr(path, payload)
    except (OSError, ValueError, RuntimeError, MemoryError, zipfile.LargeZipFile) as exc:
        logger.error("Archive packing failed: %s", exc)
        raise PackagingError("Could not assemble the .xmind archive", cause=exc) from exc

    data = buffer.getvalue()
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Packed %d entries into %d bytes", len(entries), len(data))
    return data


def assemble_archive(root: OutlineNode) -> bytes:
    """Generate every document for *root* and return the archive bytes.

    A fresh :class:`TopicIdFactory` scopes identifiers to this archive.
    """
    return pack_archive(build_archive_entries(root, TopicIdFactory()))


def build_artifact_filename(base: Optional[str] = None, now: Optional[datetime] = None) -> str:
    """Return ``"<base>-<timestamp><extension>"`` for a compiled archive.

    An empty *base* falls back to the configured default basename.
    """
    fmt = ConfigManager().get_xmind_format()
    extension = fmt.get("file_extension", ".xmind")
    if not extension.startswith("."):
        extension = f".{extension}"

    base = sanitize_basename(base or "")
    if base.lower().endswith(extension.lower()):
        base = base[: -len(extension)]
    if not base:
        base = fmt.get("default_basename", "bedrock-output")
    return f"{base}-{format_timestamp(now)}{extension}"
