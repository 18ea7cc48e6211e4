"""Tests for flow collections."""

import pytest

from yamljson_core.errors import StructuralError, UnterminatedScalarError
from yamljson_core.flow import parse_flow
from yamljson_core.options import ConverterOptions

OPTIONS = ConverterOptions()


def test_flow_sequence_with_inference():
    assert parse_flow('[1, two, "3", 4.5, true, ~]', 1, OPTIONS) == [1, "two", "3", 4.5, True, None]

def test_flow_mapping():
    assert parse_flow("{a: 1, 'b c': x, d: }", 1, OPTIONS) == {"a": 1, "b c": "x", "d": None}

def test_nested_flow():
    assert parse_flow("{ports: [80, 443], tls: {on: yes}}", 1, OPTIONS) == {
        "ports": [80, 443],
        "tls": {"on": True},
    }

def test_empty_collections():
    assert parse_flow("[]", 1, OPTIONS) == []
    assert parse_flow("{ }", 1, OPTIONS) == {}

def test_trailing_comma_and_comment():
    assert parse_flow("[a, b, ]  # list", 1, OPTIONS) == ["a", "b"]

def test_url_in_flow_sequence():
    assert parse_flow("[http://a.example, b]", 1, OPTIONS) == ["http://a.example", "b"]

def test_unterminated_flow_sequence():
    with pytest.raises(StructuralError) as exc:
        parse_flow("[a, b", 7, OPTIONS)
    assert exc.value.line == 7

def test_unterminated_quote_in_flow():
    with pytest.raises(UnterminatedScalarError):
        parse_flow('["a, b]', 1, OPTIONS)

def test_text_after_flow_collection():
    with pytest.raises(StructuralError):
        parse_flow("[a] b", 1, OPTIONS)

def test_flow_depth_limit():
    with pytest.raises(StructuralError):
        parse_flow("[[[1]]]", 1, ConverterOptions(max_depth=2))
