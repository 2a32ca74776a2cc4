from typing import Optional
import logging

from lxml import etree as ET

from xmind_outline.config import ConfigManager
from xmind_outline.core.exceptions import OutlineError, SerializationError
from xmind_outline.core.models import OutlineNode
from xmind_outline.core.utils import TopicIdFactory, xml_safe_text

logger = logging.getLogger(__name__)

__all__ = [
    "CONTENT_NS",
    "content_tag",
    "build_topic_element",
    "serialize_topic",
]

CONTENT_NS = "urn:xmind:xmap:xmlns:content:2.0"


def content_tag(local: str) -> str:
    """Return the Clark-notation tag of *local* in the content namespace."""
    return f"{{{CONTENT_NS}}}{local}"


def _display_title(node: OutlineNode) -> str:
    title = xml_safe_text(node.title)
    if title:
        return title
    return ConfigManager().get_xmind_format().get("untitled_title", "Untitled")


def build_topic_element(node: OutlineNode, ids: TopicIdFactory,
                        parent: Optional[ET._Element] = None) -> ET._Element:
    """Create the ``<topic>`` element for *node* and its whole subtree.

    When *parent* is given the topic is appended to it.  Text is assigned
    through lxml, which escapes XML metacharacters on serialisation.
    """
    if parent is None:
        topic = ET.Element(content_tag("topic"), nsmap={None: CONTENT_NS})
    else:
        topic = ET.SubElement(parent, content_tag("topic"))
    topic.set("id", ids.new_id())

    ET.SubElement(topic, content_tag("title")).text = _display_title(node)

    if node.labels:
        labels_el = ET.SubElement(topic, content_tag("labels"))
        for label in node.labels:
            ET.SubElement(labels_el, content_tag("label")).text = xml_safe_text(label)

    if node.children:
        children_el = ET.SubElement(topic, content_tag("children"))
        topics_el = ET.SubElement(children_el, content_tag("topics"))
        topics_el.set("type", "attached")
        for child in node.children:
            build_topic_element(child, ids, topics_el)

    return topic


def serialize_topic(node: OutlineNode, ids: Optional[TopicIdFactory] = None) -> str:
    """Return the topic XML fragment of *node* as a string.

    A new :class:`TopicIdFactory` is used when *ids* is not supplied.
    """
    ids = ids if ids is not None else TopicIdFactory()
    try:
        element = build_topic_element(node, ids)
        return ET.tostring(element, encoding="unicode")
    except OutlineError:
        raise
    except (ValueError, TypeError) as exc:
        # lxml rejects text with control characters or invalid code points
        logger.error("Topic serialisation failed for '%s': %s", node.title, exc)
        raise SerializationError(f"Could not serialise topic '{node.title}'", cause=exc) from exc
