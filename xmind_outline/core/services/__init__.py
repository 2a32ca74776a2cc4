from __future__ import annotations

"""High-level orchestration services (compilation, packaging)."""

from .compiler_service import CompilerService, compile_outline  # noqa: F401

__all__: list[str] = [
    "CompilerService",
    "compile_outline",
]
