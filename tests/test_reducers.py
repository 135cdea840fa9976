"""Tests for the ReduceToTextBuffer reducer."""

from io import StringIO

import pytest

from do_collections import Do, ReduceToTextBuffer


@pytest.mark.parametrize("separator,expected", [
    (", ", "a, b, c, d, e"),
    ("", "abcde"),
    (None, "abcde"),
])
def test_joins_with_separator(letters, separator, expected):
    buffer = Do.with_collection(letters).with_initial_value(StringIO()).reduce(
        ReduceToTextBuffer(separator))
    assert buffer.getvalue() == expected


def test_returns_same_buffer():
    buffer = StringIO()
    reducer = ReduceToTextBuffer("-")
    assert reducer(buffer, "x") is buffer
    assert reducer(buffer, "y") is buffer
    assert buffer.getvalue() == "x-y"


def test_no_leading_separator_on_empty_buffer():
    assert ReduceToTextBuffer("; ")(StringIO(), "only").getvalue() == "only"


def test_appends_to_existing_content():
    buffer = StringIO()
    buffer.write("head")
    ReduceToTextBuffer(" | ")(buffer, "tail")
    assert buffer.getvalue() == "head | tail"


def test_empty_collection_leaves_buffer_untouched():
    buffer = Do.with_array().with_initial_value(StringIO()).reduce(ReduceToTextBuffer(", "))
    assert buffer.getvalue() == ""


def test_non_text_elements_raise():
    with pytest.raises(TypeError):
        Do.with_array(1, 2).with_initial_value(StringIO()).reduce(ReduceToTextBuffer(","))


def test_repr():
    assert repr(ReduceToTextBuffer(", ")) == "ReduceToTextBuffer(', ')"
