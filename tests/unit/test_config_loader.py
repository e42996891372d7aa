"""Unit tests for configuration loading.

These tests verify:
- Defaults when sections are omitted
- Relative store paths resolved against the config file
- File, JSON syntax and validation errors reported as ConfigError
"""

import json
from pathlib import Path

import pytest

from sheetstock.application.config import (
    ConfigError,
    SheetstockConfiguration,
    load_config,
    load_config_from_dict,
)
from sheetstock.domain import RemnantPolicy


class TestLoadConfigFromDict:
    def test_defaults(self) -> None:
        config = load_config_from_dict({})
        assert config.schema_version == "1.0"
        assert config.store.path == Path("inventory.json")
        assert config.cutting.default_policy is RemnantPolicy.FULL_FOOTPRINT

    def test_policy(self) -> None:
        config = load_config_from_dict(
            {"cutting": {"default_policy": "proportional_shrink"}}
        )
        assert config.cutting.default_policy is RemnantPolicy.PROPORTIONAL_SHRINK

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"store": {"path": "x.json", "backup": True}})
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "store.backup"

    def test_unsupported_version(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"schema_version": "2.0"})
        assert "Unsupported schema version" in exc_info.value.message

    def test_bad_policy(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"cutting": {"default_policy": "round"}})
        assert exc_info.value.details[0]["path"] == "cutting.default_policy"


class TestLoadConfig:
    def test_relative_store_path(self, tmp_path: Path) -> None:
        config_path = tmp_path / "sheetstock.json"
        config_path.write_text(json.dumps({"store": {"path": "stock.json"}}))

        config = load_config(config_path)

        assert config.store.path == tmp_path / "stock.json"

    def test_absolute_store_path_kept(self, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere" / "stock.json"
        config_path = tmp_path / "sheetstock.json"
        config_path.write_text(json.dumps({"store": {"path": str(target)}}))

        assert load_config(config_path).store.path == target

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_json_parse_error(self, tmp_path: Path) -> None:
        config_path = tmp_path / "bad.json"
        config_path.write_text('{"store": ')
        with pytest.raises(ConfigError) as exc_info:
            load_config(config_path)
        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.path == config_path


def test_model_is_default_constructible() -> None:
    assert SheetstockConfiguration().store.path.name == "inventory.json"
