"""Tests for generator configuration."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from localenames.config import ExclusionRule, GeneratorConfig, load_config
from localenames.models import Locale


def test_defaults() -> None:
    config = load_config(None)
    assert config == GeneratorConfig()
    assert config.output_subdir == "resources"
    assert config.extension == "properties"
    assert config.always_write(Locale.parse("nn-NO"))


def test_load_from_json(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "extension": "txt",
                "copyright_holder": "Example Corp",
                "always_write": {"languages": ["sr"]},
            }
        ),
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.extension == "txt"
    assert config.copyright_holder == "Example Corp"
    assert config.always_write == ExclusionRule(languages=frozenset({"sr"}))
    assert not config.always_write(Locale.parse("nb"))


def test_invalid_config(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"always_write": {"languages": 3}}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)
