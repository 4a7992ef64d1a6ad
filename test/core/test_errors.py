import pytest

from schemanorm.core.errors import (
    ConversionError,
    DecodingError,
    IllegalRequiredFlag,
    PathSegment,
    RecursionLimitExceeded,
    SchemanormError,
    to_pointer,
)


@pytest.mark.parametrize(
    "segment, expected",
    [
        (PathSegment.field("self"), "in field 'self'"),
        (PathSegment.pattern_property("^x-"), "in pattern property '^x-'"),
        (PathSegment.subschemas(), "in subschemas"),
        (PathSegment.keyword("allOf"), "in 'allOf'"),
        (PathSegment.index(1), "at index 1"),
        (PathSegment.definition("Customer"), "in definition 'Customer'"),
    ],
)
def test_segment_rendering(segment, expected):
    assert str(segment) == expected


def test_path_is_built_innermost_first():
    error = ConversionError("boom")
    error.within(PathSegment.index(1)).within(PathSegment.keyword("allOf")).within(PathSegment.subschemas())
    error.within(PathSegment.field("a/b"))
    assert str(error) == "in field 'a/b': in subschemas: in 'allOf': at index 1: boom"
    assert error.pointer == "/properties/a~1b/allOf/1"


def test_error_without_path():
    error = IllegalRequiredFlag()
    assert str(error) == 'found illegal "required" annotation'
    assert error.pointer == ""
    assert isinstance(error, SchemanormError)


def test_root_flag_error():
    error = IllegalRequiredFlag(at_root=True)
    assert error.at_root
    assert str(error) == 'found illegal "required" annotation at the document root'


def test_recursion_limit_message():
    error = RecursionLimitExceeded(3, [PathSegment.definition("Node")])
    assert str(error) == "in definition 'Node': schema nesting exceeds the maximum depth of 3"
    assert error.pointer == "/definitions/Node"


@pytest.mark.parametrize(
    "path, expected",
    [
        ([], ""),
        (["properties", "a"], "/properties/a"),
        (["items", 0], "/items/0"),
        (["properties", "a~b/c"], "/properties/a~0b~1c"),
    ],
)
def test_to_pointer(path, expected):
    assert to_pointer(path) == expected


def test_decoding_error_rendering():
    assert str(DecodingError("Unknown type: `str`", ["properties", "a", "type"])) == (
        "Unknown type: `str` (at `/properties/a/type`)"
    )
    assert str(DecodingError("Invalid JSON")) == "Invalid JSON"
