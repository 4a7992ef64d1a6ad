import pytest

from schemanorm.config import ConfigError, OutputConfig, SchemanormConfig

TOML_CONTENT = """
max-depth = 32

[output]
compact = true
sort-keys = true
"""


def test_discover_in_current_directory(tmp_path, monkeypatch):
    config_file = tmp_path / "schemanorm.toml"
    config_file.write_text(TOML_CONTENT)

    monkeypatch.chdir(tmp_path)

    config = SchemanormConfig.discover()
    assert config.max_depth == 32
    assert config.output == OutputConfig(compact=True, sort_keys=True)
    assert config.config_path == str(config_file.resolve())


def test_discover_in_parent_directory(tmp_path, monkeypatch):
    (tmp_path / "schemanorm.toml").write_text(TOML_CONTENT)
    child_dir = tmp_path / "child"
    child_dir.mkdir()

    monkeypatch.chdir(child_dir)

    assert SchemanormConfig.discover().max_depth == 32


def test_discover_not_found(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    config = SchemanormConfig.discover()
    assert config.max_depth is None
    assert config.output == OutputConfig()
    assert config.config_path is None


def test_discover_stops_at_git_root(tmp_path, monkeypatch):
    (tmp_path / "schemanorm.toml").write_text(TOML_CONTENT)
    repository = tmp_path / "repository"
    repository.mkdir()
    (repository / ".git").mkdir()
    child = repository / "child"
    child.mkdir()

    monkeypatch.chdir(child)

    # The file above the repository root is not picked up
    assert SchemanormConfig.discover().max_depth is None


def test_from_str_defaults():
    config = SchemanormConfig.from_str("")
    assert config.max_depth is None
    assert not config.output.compact
    assert not config.output.sort_keys


def test_update():
    config = SchemanormConfig.from_str(TOML_CONTENT)
    config.update(max_depth=None)
    assert config.max_depth == 32
    config.update(max_depth=4)
    assert config.max_depth == 4
    config.output.update(compact=False, sort_keys=None)
    assert config.output == OutputConfig(compact=False, sort_keys=True)


@pytest.mark.parametrize(
    "content, expected",
    [
        (
            "max-depth = 0",
            "Error in root section:\n  Value too low:\n\n  - 'max-depth' -> Must be at least 1, but got 0.",
        ),
        (
            'max-depth = "3"',
            "Error in root section:\n  Type error:\n\n  - 'max-depth' -> Must be an integer, but got str: 3",
        ),
        (
            '[output]\ncompact = "yes"',
            "Error in [output] section:\n  Type error:\n\n  - 'compact' -> Must be a boolean, but got str: yes",
        ),
        (
            "max-dpth = 3",
            "Error in root section:\n  Unknown properties:\n\n  - 'max-dpth' -> Did you mean 'max-depth'?\n\n"
            "Valid properties for root are: 'max-depth', 'output'.",
        ),
        (
            "[output]\nindent = 4",
            "Error in [output] section:\n  Unknown properties:\n\n  - 'indent'\n\n"
            "Valid properties for [output] are: 'compact', 'sort-keys'.",
        ),
    ],
)
def test_invalid_config(content, expected):
    with pytest.raises(ConfigError) as exc:
        SchemanormConfig.from_str(content)
    assert str(exc.value) == expected
