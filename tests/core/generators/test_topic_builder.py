import pytest

pytest.importorskip("lxml")
from lxml import etree as ET

from xmind_outline.core import utils
from xmind_outline.core.exceptions import SerializationError
from xmind_outline.core.generators import build_topic_element, serialize_topic
from xmind_outline.core.models import OutlineNode
from xmind_outline.core.parser import parse_outline
from xmind_outline.core.utils import TopicIdFactory

NS = {"c": "urn:xmind:xmap:xmlns:content:2.0"}


def _tree():
    return parse_outline("Root\n\tChild1 [L1, L2]\n\t\tGrand\n\tChild2")


def test_fragment_structure():
    topic = ET.fromstring(serialize_topic(_tree()))
    assert topic.tag == "{urn:xmind:xmap:xmlns:content:2.0}topic"
    assert topic.findtext("c:title", namespaces=NS) == "Root"

    attached = topic.find("c:children/c:topics", namespaces=NS)
    assert attached.get("type") == "attached"
    children = attached.findall("c:topic", namespaces=NS)
    assert [c.findtext("c:title", namespaces=NS) for c in children] == ["Child1", "Child2"]

    labels = children[0].findall("c:labels/c:label", namespaces=NS)
    assert [lbl.text for lbl in labels] == ["L1", "L2"]
    assert children[1].find("c:labels", namespaces=NS) is None
    assert children[1].find("c:children", namespaces=NS) is None

    grand = children[0].find("c:children/c:topics/c:topic", namespaces=NS)
    assert grand.findtext("c:title", namespaces=NS) == "Grand"


def test_every_topic_gets_a_distinct_id():
    ids = TopicIdFactory()
    element = build_topic_element(_tree(), ids)
    topic_ids = [t.get("id") for t in element.iter("{urn:xmind:xmap:xmlns:content:2.0}topic")]
    assert len(topic_ids) == 4
    assert len(set(topic_ids)) == 4
    assert len(ids) == 4
    assert all(i in ids for i in topic_ids)


def test_two_serialisations_share_no_ids():
    tree = _tree()
    first = ET.fromstring(serialize_topic(tree))
    second = ET.fromstring(serialize_topic(tree))
    all_ids = [t.get("id") for doc in (first, second) for t in doc.iter("{*}topic")]
    assert len(all_ids) == 8
    assert len(set(all_ids)) == 8


def test_depth_is_not_serialised():
    xml = serialize_topic(_tree())
    assert "level" not in xml
    assert "depth" not in xml


@pytest.mark.parametrize(
    "title",
    [
        "<script>alert('x')</script>",
        'Fish & "Chips"',
        "a < b > c & d ' e \" f",
        "&amp; already escaped",
    ],
)
def test_escaping_round_trips(title):
    node = OutlineNode(title=title, labels=[title])
    xml = serialize_topic(node)
    assert "<script>" not in xml
    topic = ET.fromstring(xml)
    assert topic.findtext("c:title", namespaces=NS) == title
    assert topic.findtext("c:labels/c:label", namespaces=NS) == title


def test_empty_title_falls_back_to_untitled():
    topic = ET.fromstring(serialize_topic(OutlineNode(title="", labels=["only"])))
    assert topic.findtext("c:title", namespaces=NS) == "Untitled"


def test_xml_incompatible_characters_are_removed():
    topic = ET.fromstring(serialize_topic(OutlineNode(title="bell\x07 and\x00 nul")))
    assert topic.findtext("c:title", namespaces=NS) == "bell and nul"


def test_id_generation_failure_raises_serialization_error(monkeypatch):
    monkeypatch.setattr(utils, "generate_topic_id", lambda: "same-id")
    with pytest.raises(SerializationError):
        serialize_topic(_tree())


def test_id_generator_exception_is_wrapped(monkeypatch):
    def _boom():
        raise OSError("entropy pool unavailable")

    monkeypatch.setattr(utils, "generate_topic_id", _boom)
    with pytest.raises(SerializationError) as excinfo:
        serialize_topic(OutlineNode(title="x"))
    assert isinstance(excinfo.value.cause, OSError)
    assert excinfo.value.__cause__ is excinfo.value.cause
