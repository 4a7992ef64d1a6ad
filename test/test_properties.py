"""Property-based checks of the conversion on generated documents."""

import jsonschema
from hypothesis import given, settings
from hypothesis import strategies as st

from schemanorm import normalize

NAMES = st.text(alphabet="abcxyz", min_size=1, max_size=4)
LEAVES = st.fixed_dictionaries(
    {},
    optional={
        "type": st.sampled_from(["string", "integer", "boolean", "null"]),
        "minLength": st.integers(min_value=0, max_value=5),
        "title": st.text(alphabet="abc ", max_size=5),
    },
)


def _with_flag(pair):
    schema, flag = pair
    if flag is None:
        return schema
    return {**schema, "required": flag}


def _canonical(children):
    return st.fixed_dictionaries(
        {"type": st.just("object")},
        optional={
            "properties": st.dictionaries(NAMES, children | st.booleans(), min_size=1, max_size=4),
            "required": st.lists(NAMES, unique=True, min_size=1, max_size=3),
            "items": children,
            "allOf": st.lists(children, min_size=1, max_size=2),
        },
    )


def _legacy(children):
    members = st.tuples(children, st.none() | st.booleans()).map(_with_flag)
    return st.fixed_dictionaries(
        {"type": st.just("object")},
        optional={
            "properties": st.dictionaries(NAMES, members | st.booleans(), min_size=1, max_size=4),
            "required": st.lists(NAMES, unique=True, min_size=1, max_size=3),
            "items": children,
        },
    )


CANONICAL_SCHEMAS = st.recursive(LEAVES, _canonical, max_leaves=10)
LEGACY_SCHEMAS = st.recursive(LEAVES, _legacy, max_leaves=10)


def expected_required(schema):
    explicit = schema.get("required")
    required = list(explicit) if isinstance(explicit, list) else []
    for name, member in schema.get("properties", {}).items():
        if isinstance(member, dict) and member.get("required") is True and name not in required:
            required.append(name)
    return required


def assert_hoisted(source, converted):
    if isinstance(source, bool):
        assert converted is source
        return
    assert converted.get("required", []) == expected_required(source)
    for name, member in source.get("properties", {}).items():
        assert_hoisted(member, converted["properties"][name])
    if "items" in source:
        assert_hoisted(source["items"], converted["items"])


@given(CANONICAL_SCHEMAS)
@settings(max_examples=50, deadline=None)
def test_canonical_schemas_are_fixed_points(schema):
    assert normalize(schema) == schema


@given(LEGACY_SCHEMAS)
@settings(max_examples=50, deadline=None)
def test_annotations_are_hoisted(schema):
    converted = normalize(schema)
    assert_hoisted(schema, converted)
    jsonschema.Draft7Validator.check_schema(converted)
    assert normalize(converted) == converted
