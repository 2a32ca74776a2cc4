"""Top-level package for xmind-outline.

Turns tab-indented outline text into XMind mind-map archives.  Front-ends
(CLI, services) should only depend on the public API exposed here rather than
importing internal modules directly.
"""

from .core.exceptions import (
    EmptyInputError,
    NoRootLineError,
    OutlineError,
    OutlineInputError,
    PackagingError,
    SerializationError,
)
from .core.models import CompiledArtifact, OutlineNode, ValidationResult
from .core.parser import EXAMPLE_OUTLINE, parse_outline, validate_outline
from .core.services import CompilerService, compile_outline

__all__: list[str] = [
    "CompiledArtifact",
    "CompilerService",
    "EXAMPLE_OUTLINE",
    "EmptyInputError",
    "NoRootLineError",
    "OutlineError",
    "OutlineInputError",
    "OutlineNode",
    "PackagingError",
    "SerializationError",
    "ValidationResult",
    "compile_outline",
    "parse_outline",
    "validate_outline",
]
