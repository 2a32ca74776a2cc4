from __future__ import annotations

"""Modules responsible for generating the XMind XML documents."""

from .topic_builder import build_topic_element, serialize_topic  # noqa: F401
from .document_builder import (  # noqa: F401
    build_content_xml,
    build_manifest_xml,
    build_styles_xml,
)

__all__: list[str] = [
    "build_topic_element",
    "serialize_topic",
    "build_content_xml",
    "build_styles_xml",
    "build_manifest_xml",
]
