"""Tests for JSON config loading."""

import json

import pytest

from critters.core.config_loader import load_config


def test_loads_object(tmp_path):
    (tmp_path / "a.json").write_text(json.dumps({"snake": {"step": 4}}))
    assert load_config("a.json", tmp_path) == {"snake": {"step": 4}}


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config("nope.json", tmp_path)


def test_rejects_non_object(tmp_path):
    (tmp_path / "list.json").write_text("[1, 2]")
    with pytest.raises(ValueError, match="JSON object"):
        load_config("list.json", tmp_path)


def test_malformed_json_is_value_error(tmp_path):
    (tmp_path / "bad.json").write_text("{not json")
    with pytest.raises(ValueError):
        load_config("bad.json", tmp_path)
