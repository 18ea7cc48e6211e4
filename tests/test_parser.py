"""Tests for the block parser (raw graph, before normalization)."""

import pytest

from yamljson_core.errors import StructuralError, UnterminatedScalarError
from yamljson_core.options import ConverterOptions
from yamljson_core.parser import parse_lines
from yamljson_core.reader import split_documents


def _parse(text, **options):
    (doc,) = split_documents(text)
    return parse_lines(doc.lines, ConverterOptions(**options))


# ---------------------------------------------------------------------------
# Mappings and sequences
# ---------------------------------------------------------------------------

def test_flat_mapping():
    assert _parse("a: 1\nb: true\nc: \"001\"") == {"a": 1, "b": True, "c": "001"}

def test_nested_mapping():
    assert _parse("name: sample\nnested:\n  value: 42") == {"name": "sample", "nested": {"value": 42}}

def test_sequence_of_scalars():
    assert _parse("- a\n- 2\n- ~") == ["a", 2, None]

def test_sequence_under_key_same_indent():
    text = "items:\n- one\n- two\nafter: x"
    assert _parse(text) == {"items": ["one", "two"], "after": "x"}

def test_sequence_under_key_indented():
    text = "items:\n  - one\n  - two\nafter: x"
    assert _parse(text) == {"items": ["one", "two"], "after": "x"}

def test_compact_mapping_in_sequence():
    text = "- name: a\n  port: 80\n- name: b\n  port: 81"
    assert _parse(text) == [{"name": "a", "port": 80}, {"name": "b", "port": 81}]

def test_compact_nested_sequence():
    assert _parse("- - 1\n  - 2\n- - 3") == [[1, 2], [3]]

def test_dash_with_nested_block():
    assert _parse("-\n  a: 1\n-\n- x") == [{"a": 1}, None, "x"]

def test_deep_nesting_shape():
    text = "a:\n  b:\n    c:\n      - 1\n      - d: e\n"
    assert _parse(text) == {"a": {"b": {"c": [1, {"d": "e"}]}}}

def test_empty_value_is_null():
    assert _parse("a:\nb: # comment only\nc: ''") == {"a": None, "b": None, "c": ""}

def test_duplicate_key_overwrites():
    assert _parse("a: 1\nb: 2\na: 3") == {"a": 3, "b": 2}

def test_keys_stay_strings():
    assert _parse("1: one\ntrue: yes\n'3': x") == {"1": "one", "true": True, "3": "x"}

def test_comments_and_blank_lines_ignored():
    text = "# top\n\na: 1  # trailing\n   # indented comment\n\nb: 'x # y'\n"
    assert _parse(text) == {"a": 1, "b": "x # y"}

def test_flow_values_in_block():
    assert _parse("ports: [80, 443]\nlabels: {app: web}") == {
        "ports": [80, 443],
        "labels": {"app": "web"},
    }

def test_top_level_scalar():
    assert _parse("hello world") == "hello world"
    assert _parse("42") == 42

def test_comment_only_document_is_none():
    assert _parse("# nothing here\n") is None


# ---------------------------------------------------------------------------
# Multi-line scalars
# ---------------------------------------------------------------------------

def test_plain_continuation():
    assert _parse("msg: first\n  second\n  third\nnext: 1") == {"msg": "first second third", "next": 1}

def test_literal_block():
    text = "script: |\n  line one\n    indented\n\n  line three\nafter: 1"
    assert _parse(text) == {"script": "line one\n  indented\n\nline three\n", "after": 1}

def test_literal_block_keeps_comment_lines():
    assert _parse("s: |\n  # not a comment\n  x\n") == {"s": "# not a comment\nx\n"}

def test_folded_block():
    text = "desc: >\n  a\n  b\n\n  c\n"
    assert _parse(text) == {"desc": "a b\nc\n"}

def test_block_chomping():
    assert _parse("s: |-\n  x\n\n") == {"s": "x"}
    assert _parse("s: |+\n  x\n\n") == {"s": "x\n\n"}

def test_block_in_sequence_item():
    assert _parse("- |\n  a\n  b\n- c") == ["a\nb\n", "c"]

def test_empty_block():
    assert _parse("s: |\nt: 1") == {"s": "", "t": 1}

def test_top_level_block_indent_indicator():
    assert _parse("|2\n   x\n  y\n") == " x\ny\n"

def test_nested_block_indent_indicator():
    assert _parse("s: |1\n   x\n  y\n") == {"s": "  x\n y\n"}


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

def test_sequence_then_key_same_indent():
    with pytest.raises(StructuralError) as exc:
        _parse("- a\nkey: b")
    assert exc.value.line == 2

def test_key_then_sequence_same_indent():
    with pytest.raises(StructuralError) as exc:
        _parse("key: 1\n- a")
    assert exc.value.line == 2

def test_mixed_markers_inside_nested_block():
    with pytest.raises(StructuralError) as exc:
        _parse("items:\n  - a\n  b: c")
    assert exc.value.line == 3

def test_unexpected_indent():
    with pytest.raises(StructuralError) as exc:
        _parse("a: 1\n    b: 2")
    assert exc.value.line == 2

def test_dedent_below_document_start():
    with pytest.raises(StructuralError) as exc:
        _parse("  a: 1\nb: 2")
    assert exc.value.line == 2

def test_tab_indentation():
    with pytest.raises(StructuralError):
        _parse("a:\n\tb: 1")

def test_unterminated_quote():
    with pytest.raises(UnterminatedScalarError) as exc:
        _parse("a: 1\nb: \"open")
    assert exc.value.line == 2

def test_max_depth():
    text = "a:\n b:\n  c:\n   d: 1"
    assert _parse(text, max_depth=4) == {"a": {"b": {"c": {"d": 1}}}}
    with pytest.raises(StructuralError):
        _parse(text, max_depth=3)
