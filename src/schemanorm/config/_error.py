from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from schemanorm.core.errors import SchemanormError

if TYPE_CHECKING:
    from jsonschema import ValidationError


class ConfigError(SchemanormError):
    """Invalid configuration."""

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> ConfigError:
        message = error.message
        if error.validator == "minimum":
            message = _format_minimum_error(error)
        elif error.validator == "type":
            message = _format_type_error(error)
        elif error.validator == "additionalProperties":
            message = _format_additional_properties_error(error)
        return cls(message)


def _format_minimum_error(error: ValidationError) -> str:
    assert isinstance(error.validator_value, (int, float))
    section = path_to_section_name(list(error.path)[:-1] if error.path else [])
    assert error.path

    prop_name = error.path[-1]
    min_value = error.validator_value
    actual_value = error.instance

    return (
        f"Error in {section} section:\n  Value too low:\n\n"
        f"  - '{prop_name}' -> Must be at least {min_value}, but got {actual_value}."
    )


def _format_type_error(error: ValidationError) -> str:
    expected = error.validator_value
    assert isinstance(expected, (str, list))
    section = path_to_section_name(list(error.path)[:-1] if error.path else [])
    assert error.path

    type_phrases = {
        "object": "an object",
        "array": "an array",
        "number": "a number",
        "boolean": "a boolean",
        "string": "a string",
        "integer": "an integer",
        "null": "null",
    }
    message = f"Error in {section} section:\n  Type error:\n\n  - '{error.path[-1]}' -> Must be "

    if isinstance(expected, list):
        message += f"one of: {' or '.join(expected)}"
    else:
        message += type_phrases[expected]
    actual = type(error.instance).__name__
    message += f", but got {actual}: {error.instance}"
    return message


def _format_additional_properties_error(error: ValidationError) -> str:
    valid = list(error.schema.get("properties", {}))
    unknown = sorted(set(error.instance) - set(valid))
    valid_list = ", ".join(f"'{prop}'" for prop in valid)
    section = path_to_section_name(list(error.path))

    details = []
    for prop in unknown:
        match = _find_closest_match(prop, valid)
        if match:
            details.append(f"- '{prop}' -> Did you mean '{match}'?")
        else:
            details.append(f"- '{prop}'")

    return (
        f"Error in {section} section:\n  Unknown properties:\n\n"
        + "\n".join(f"  {detail}" for detail in details)
        + f"\n\nValid properties for {section} are: {valid_list}."
    )


def path_to_section_name(path: list[int | str]) -> str:
    """Convert a JSON path to a TOML-like section name."""
    if not path:
        return "root"

    return f"[{'.'.join(str(p) for p in path)}]"


def _find_closest_match(value: str, variants: list[str]) -> str | None:
    matches = difflib.get_close_matches(value, variants, n=1, cutoff=0.6)
    return matches[0] if matches else None
