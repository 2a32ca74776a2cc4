import pytest

from xmind_outline.core.parser import validate_outline
from xmind_outline.core.parser.validator import WARN_FLAT


@pytest.mark.parametrize("text", ["", "   ", "\n\n", "\t\t"])
def test_blank_text_is_invalid(text):
    result = validate_outline(text)
    assert not result.ok
    assert "enter some text" in result.message


def test_missing_root_level_item():
    result = validate_outline("\tA\n\t\tB")
    assert not result.ok
    assert "root-level item" in result.message


def test_simple_tree_is_valid():
    result = validate_outline("a\n\tb")
    assert result.ok
    assert bool(result) is True
    assert result.message == "Valid input structure"
    assert result.warnings == []


def test_flat_text_is_valid_with_warning():
    result = validate_outline("just one line")
    assert result.ok
    assert result.warnings == [WARN_FLAT]


def test_several_roots_are_valid_with_warning():
    result = validate_outline("Root1\n\tA\nRoot2\n\tB")
    assert result.ok
    assert len(result.warnings) == 1
    assert "2 root-level items" in result.warnings[0]


def test_orphaned_first_line_is_not_rejected():
    # Advisory only: the parser drops "\tOrphan", the validator accepts it.
    result = validate_outline("\tOrphan\nRoot\n\tA")
    assert result.ok


def test_space_indented_lines_count_as_root_level():
    result = validate_outline("    indented with spaces")
    assert result.ok
