from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from schemanorm.cli import schemanorm

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def load_json():
    def inner(name: str) -> dict[str, Any]:
        with (DATA_DIR / name).open(encoding="utf-8") as fd:
            return json.load(fd)

    return inner


@pytest.fixture
def data_path():
    def inner(name: str) -> Path:
        return DATA_DIR / name

    return inner


@pytest.fixture
def cli(tmp_path, monkeypatch):
    """Run the CLI from an empty directory so no `schemanorm.toml` is discovered."""
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()

    def invoke(*args: str, input: str | None = None):
        return runner.invoke(schemanorm, list(args), input=input, catch_exceptions=False)

    return invoke
