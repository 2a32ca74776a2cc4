from __future__ import annotations

"""High-level compilation service for outline to ``.xmind`` transformation.

Entry-point for any front-end (CLI, GUI, API) that needs to turn outline text
into an XMind archive.  Provides a small, stable API:

* :meth:`CompilerService.validate` - advisory pre-check, never raises
* :meth:`CompilerService.compile` - text to :class:`CompiledArtifact`
* :meth:`CompilerService.compile_async` - the same as one awaitable unit
* :meth:`CompilerService.write_artifact` - persist an artifact to a folder
"""

import asyncio
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from xmind_outline.core.exceptions import OutlineError, OutlineInputError, PackagingError
from xmind_outline.core.models import CompiledArtifact, OutlineNode, ValidationResult
from xmind_outline.core.package_utils import assemble_archive, build_artifact_filename
from xmind_outline.core.parser import parse_outline, validate_outline

logger = logging.getLogger(__name__)

__all__ = ["CompilerService", "compile_outline"]


class CompilerService:
    """Business-logic façade with no UI or transport dependencies.

    The service holds no per-compilation state; one instance may serve any
    number of concurrent calls.
    """

    def __init__(self) -> None:
        self.logger = logger

    # ---------------------------------------------------------------------
    # PUBLIC API
    # ---------------------------------------------------------------------
    def validate(self, text: str) -> ValidationResult:
        """Return the advisory verdict for *text* without building a tree."""
        result = validate_outline(text)
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug("Validate: ok=%s message=%s warnings=%d",
                              result.ok, result.message, len(result.warnings))
        return result

    def parse(self, text: str) -> OutlineNode:
        """Parse *text* into an outline tree (see :func:`parse_outline`)."""
        return parse_outline(text)

    def compile(self, text: str, base_filename: Optional[str] = None, *,
                now: Optional[datetime] = None) -> CompiledArtifact:
        """Compile outline *text* into an ``.xmind`` archive.

        Args:
            text: Tab-indented outline text
            base_filename: Requested file name without extension; the
                configured default is used when empty
            now: Timestamp for the file name (current UTC time by default)

        Returns:
            CompiledArtifact holding the archive bytes and final file name

        Raises:
            EmptyInputError / NoRootLineError: correctable input problems
            SerializationError / PackagingError: internal failures
        """
        self.logger.info("Compile: parsing outline")
        try:
            root = parse_outline(text)
        except OutlineInputError as exc:
            self.logger.info("Compile rejected: %s", exc)
            raise

        self.logger.debug("Parsed outline root='%s' nodes=%d", root.title, root.count_nodes())
        try:
            data = assemble_archive(root)
        except OutlineError as exc:
            self.logger.error("Compile failed: %s", exc)
            raise

        artifact = CompiledArtifact(data=data, filename=build_artifact_filename(base_filename, now))
        self.logger.info("Compile OK: file=%s size_bytes=%d", artifact.filename, artifact.size)
        return artifact

    async def compile_async(self, text: str, base_filename: Optional[str] = None, *,
                            now: Optional[datetime] = None) -> CompiledArtifact:
        """Run :meth:`compile` on a worker thread as a single awaited unit.

        There is no cancellation: once started the work runs to completion,
        callers that lose interest simply discard the result.
        """
        return await asyncio.to_thread(self.compile, text, base_filename, now=now)

    def write_artifact(self, artifact: CompiledArtifact, directory: str | Path) -> Path:
        """Write *artifact* into *directory* and return the written path."""
        self.logger.info("Export: writing archive")
        try:
            path = artifact.save(directory)
        except OSError as exc:
            raise PackagingError(f"Could not write {artifact.filename}", cause=exc) from exc
        self.logger.info("Export OK: %s", path)
        return path


def compile_outline(text: str, base_filename: Optional[str] = None) -> CompiledArtifact:
    """Convenience one-shot around :meth:`CompilerService.compile`."""
    return CompilerService().compile(text, base_filename)
