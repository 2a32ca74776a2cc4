"""Builders for the three XML documents of an ``.xmind`` archive.

* ``content.xml``   - the sheet holding the topic tree
* ``styles.xml``    - one default topic style so consumers never miss a style
* ``META-INF/manifest.xml`` - index of the payload files

All builders return UTF-8 encoded bytes including the XML declaration.
"""

from typing import Dict, Optional
import logging

from lxml import etree as ET

from xmind_outline.config import ConfigManager
from xmind_outline.core.exceptions import OutlineError, SerializationError
from xmind_outline.core.generators.topic_builder import CONTENT_NS, build_topic_element, content_tag
from xmind_outline.core.models import OutlineNode
from xmind_outline.core.utils import TopicIdFactory

logger = logging.getLogger(__name__)

__all__ = [
    "CONTENT_PATH",
    "STYLES_PATH",
    "MANIFEST_PATH",
    "META_INF_DIR",
    "build_content_xml",
    "build_styles_xml",
    "build_manifest_xml",
]

CONTENT_PATH = "content.xml"
STYLES_PATH = "styles.xml"
META_INF_DIR = "META-INF/"
MANIFEST_PATH = META_INF_DIR + "manifest.xml"

STYLE_NS = "urn:xmind:xmap:xmlns:style:2.0"
MANIFEST_NS = "urn:xmind:xmap:xmlns:manifest:1.0"
FORMAT_VERSION = "2.0"

_CONTENT_NSMAP = {
    None: CONTENT_NS,
    "fo": "http://www.w3.org/1999/XSL/Format",
    "svg": "http://www.w3.org/2000/svg",
    "xhtml": "http://www.w3.org/1999/xhtml",
    "xlink": "http://www.w3.org/1999/xlink",
}

DEFAULT_STYLE_ID = "default"


def _to_bytes(element: ET._Element) -> bytes:
    return ET.tostring(
        element,
        xml_declaration=True,
        encoding="UTF-8",
        standalone=False,
    )


def build_content_xml(root: OutlineNode, ids: Optional[TopicIdFactory] = None) -> bytes:
    """Return ``content.xml`` for the tree rooted at *root*.

    The sheet and every topic get their own identifier from *ids*.
    """
    ids = ids if ids is not None else TopicIdFactory()
    fmt = ConfigManager().get_xmind_format()
    try:
        xmap = ET.Element(content_tag("xmap-content"), nsmap=_CONTENT_NSMAP)
        xmap.set("version", FORMAT_VERSION)

        sheet = ET.SubElement(xmap, content_tag("sheet"))
        sheet.set("id", ids.new_id())
        build_topic_element(root, ids, sheet)
        ET.SubElement(sheet, content_tag("title")).text = fmt.get("sheet_title", "Sheet 1")

        data = _to_bytes(xmap)
    except OutlineError:
        raise
    except (ValueError, TypeError) as exc:
        logger.error("content.xml generation failed: %s", exc)
        raise SerializationError("Could not generate content.xml", cause=exc) from exc

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Generated %s: ids=%d bytes=%d", CONTENT_PATH, len(ids), len(data))
    return data


def build_styles_xml(style: Optional[Dict[str, Dict[str, str]]] = None) -> bytes:
    """Return ``styles.xml`` holding the default topic style.

    *style* maps ``topic`` and ``text`` to attribute dictionaries; the
    configured style is used when omitted.
    """
    style = style if style is not None else ConfigManager().get_style_properties()

    xmap = ET.Element(f"{{{STYLE_NS}}}xmap-styles", nsmap={None: STYLE_NS})
    xmap.set("version", FORMAT_VERSION)
    styles = ET.SubElement(xmap, f"{{{STYLE_NS}}}styles")
    style_el = ET.SubElement(styles, f"{{{STYLE_NS}}}style")
    style_el.set("id", DEFAULT_STYLE_ID)
    style_el.set("type", "topic")

    topic_props = ET.SubElement(style_el, f"{{{STYLE_NS}}}topic-properties")
    for name, value in sorted(style.get("topic", {}).items()):
        topic_props.set(name, str(value))
    text_props = ET.SubElement(style_el, f"{{{STYLE_NS}}}text-properties")
    for name, value in sorted(style.get("text", {}).items()):
        text_props.set(name, str(value))

    return _to_bytes(xmap)


def build_manifest_xml() -> bytes:
    """Return ``META-INF/manifest.xml`` listing the payload documents."""
    manifest = ET.Element(f"{{{MANIFEST_NS}}}manifest", nsmap={None: MANIFEST_NS})
    for full_path, media_type in (
        (CONTENT_PATH, "text/xml"),
        (STYLES_PATH, "text/xml"),
        (META_INF_DIR, ""),
    ):
        entry = ET.SubElement(manifest, f"{{{MANIFEST_NS}}}file-entry")
        entry.set("full-path", full_path)
        entry.set("media-type", media_type)
    return _to_bytes(manifest)
