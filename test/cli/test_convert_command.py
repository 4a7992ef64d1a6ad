import json

import pytest

from schemanorm.core.version import SCHEMANORM_VERSION

LEGACY = {"type": "object", "properties": {"self": {"type": "string", "required": True}, "name": {}}}
CANONICAL = {"type": "object", "required": ["self"], "properties": {"self": {"type": "string"}, "name": {}}}


@pytest.fixture
def legacy_file(tmp_path):
    path = tmp_path / "legacy.json"
    path.write_text(json.dumps(LEGACY))
    return path


def test_convert_file(cli, legacy_file):
    result = cli("convert", str(legacy_file))
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == CANONICAL
    # Pretty-printed by default
    assert result.stdout.count("\n") > 1


def test_convert_stdin(cli):
    result = cli("convert", input=json.dumps(LEGACY))
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == CANONICAL


def test_convert_explicit_stdin(cli):
    result = cli("convert", "-", input=json.dumps(LEGACY))
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == CANONICAL


def test_compact_and_sorted(cli, legacy_file):
    result = cli("convert", str(legacy_file), "--compact", "--sort-keys")
    assert result.exit_code == 0, result.output
    assert result.stdout.count("\n") == 1
    assert list(json.loads(result.stdout)) == ["properties", "required", "type"]


def test_keeps_document_order(cli, legacy_file):
    result = cli("convert", str(legacy_file))
    assert list(json.loads(result.stdout)["properties"]) == ["self", "name"]


def test_output_file(cli, legacy_file, tmp_path):
    target = tmp_path / "canonical.json"
    result = cli("convert", str(legacy_file), "--output", str(target))
    assert result.exit_code == 0, result.output
    assert result.stdout == ""
    assert json.loads(target.read_text()) == CANONICAL


def test_conversion_failure(cli):
    result = cli("convert", input=json.dumps({"allOf": [{"required": True}]}))
    assert result.exit_code == 1
    assert "Failed to convert <stdin>" in result.output
    assert "in subschemas: in 'allOf': at index 0: found illegal \"required\" annotation" in result.output
    assert "Location: /allOf/0" in result.output


def test_root_annotation(cli):
    result = cli("convert", input=json.dumps({"required": True}))
    assert result.exit_code == 1
    assert 'found illegal "required" annotation at the document root' in result.output
    assert "Location: /" in result.output


def test_invalid_json(cli):
    result = cli("convert", input="{")
    assert result.exit_code == 1
    assert "Failed to decode <stdin>" in result.output
    assert "Invalid JSON" in result.output


def test_invalid_schema(cli):
    result = cli("convert", input=json.dumps({"type": "str"}))
    assert result.exit_code == 1
    assert "Unknown type: `str` (at `/type`)" in result.output


def test_missing_file(cli, tmp_path):
    result = cli("convert", str(tmp_path / "missing.json"))
    assert result.exit_code == 2


def test_max_depth(cli):
    document = {"properties": {"a": {"properties": {"b": {}}}}}
    result = cli("convert", "--max-depth", "1", input=json.dumps(document))
    assert result.exit_code == 1
    assert "schema nesting exceeds the maximum depth of 1" in result.output
    assert cli("convert", "--max-depth", "2", input=json.dumps(document)).exit_code == 0


def test_max_depth_must_be_positive(cli):
    assert cli("convert", "--max-depth", "0", input="{}").exit_code == 2


def test_discovered_config(cli, tmp_path, legacy_file):
    # `cli` runs from `tmp_path`
    (tmp_path / "schemanorm.toml").write_text("[output]\ncompact = true\n")
    result = cli("convert", str(legacy_file))
    assert result.exit_code == 0, result.output
    assert result.stdout.count("\n") == 1
    # Command-line options take precedence
    result = cli("convert", str(legacy_file), "--pretty")
    assert result.stdout.count("\n") > 1


def test_config_max_depth(cli, tmp_path):
    config = tmp_path / "custom.toml"
    config.write_text("max-depth = 1\n")
    document = json.dumps({"properties": {"a": {"properties": {"b": {}}}}})
    result = cli("--config-file", str(config), "convert", input=document)
    assert result.exit_code == 1
    assert "maximum depth of 1" in result.output


def test_missing_config_file(cli, tmp_path):
    result = cli("--config-file", str(tmp_path / "missing.toml"), "convert", input="{}")
    assert result.exit_code == 1
    assert "Failed to load configuration file" in result.output
    assert "The configuration file does not exist" in result.output


@pytest.mark.parametrize(
    "content, detail",
    [
        ("max-depth = ", "The configuration file content is not valid TOML"),
        ("max-depth = 0", "Must be at least 1, but got 0."),
    ],
)
def test_invalid_config_file(cli, tmp_path, content, detail):
    config = tmp_path / "custom.toml"
    config.write_text(content)
    result = cli("--config-file", str(config), "convert", input="{}")
    assert result.exit_code == 1
    assert "Failed to load configuration file" in result.output
    assert detail in result.output


def test_version(cli):
    result = cli("--version")
    assert result.exit_code == 0
    assert SCHEMANORM_VERSION in result.output


def _deep(depth):
    schema = {}
    for _ in range(depth):
        schema = {"properties": {"a": schema}}
    return schema


@pytest.mark.parametrize(
    "args, message",
    [
        (("--max-depth", "10"), "schema nesting exceeds the maximum depth of 10"),
        ((), "Schema is nested too deeply to be decoded"),
    ],
)
def test_deeply_nested_input(cli, args, message):
    result = cli("convert", *args, input=json.dumps(_deep(400)))
    assert result.exit_code == 1
    assert "Failed to decode <stdin>" in result.output
    assert message in result.output
