import pytest

from xmind_outline.core.models import CompiledArtifact, OutlineNode, ValidationResult


def test_iter_nodes_is_depth_first_in_document_order():
    tree = OutlineNode("R", children=[
        OutlineNode("A", children=[OutlineNode("A1"), OutlineNode("A2")]),
        OutlineNode("B"),
    ])
    assert [n.title for n in tree.iter_nodes()] == ["R", "A", "A1", "A2", "B"]
    assert tree.count_nodes() == 5


def test_nodes_do_not_share_children_lists():
    a, b = OutlineNode("a"), OutlineNode("b")
    a.children.append(OutlineNode("c"))
    assert b.children == []
    assert a.labels is not b.labels


def test_validation_result_truthiness():
    assert ValidationResult(True, "ok")
    assert not ValidationResult(False, "nope")


def test_artifact_save(tmp_path):
    artifact = CompiledArtifact(data=b"PK\x05\x06" + b"\x00" * 18, filename="x.xmind")
    path = artifact.save(tmp_path / "nested" / "out")
    assert path == tmp_path / "nested" / "out" / "x.xmind"
    assert path.read_bytes() == artifact.data
    assert artifact.size == 22


def test_artifact_save_to_file_path_fails(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    with pytest.raises(OSError):
        CompiledArtifact(data=b"", filename="x.xmind").save(blocker)
