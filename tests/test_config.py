"""Tests for configuration loading and validation."""

import json

import pytest

from modelgen.codegen.core.config import (
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)


class TestLoadConfig:
    def test_java_defaults(self):
        config = load_config("java")
        assert config.package_name == "com.amplifyframework.datastore.generated.model"
        assert config.loader_class_name == "AmplifyModelProvider"
        assert config.generate == "code"
        assert config.selected_type is None
        assert config.custom == {"scalar_overrides": {}}

    def test_overrides(self):
        config = load_config("java", custom_config={"package_name": "com.example", "add_comments": False})
        assert config.package_name == "com.example"
        assert config.add_comments is False

    def test_unknown_keys_land_in_custom(self):
        config = load_config("java", custom_config={"scalar_overrides": {"AWSJSON": "org.json.JSONObject"}})
        assert config.custom["scalar_overrides"] == {"AWSJSON": "org.json.JSONObject"}

    def test_overrides_do_not_leak_into_defaults(self):
        load_config("java", custom_config={"custom": {"scalar_overrides": {"Int": "Long"}}})
        assert load_config("java").custom == {"scalar_overrides": {}}

    def test_config_file(self, tmp_path):
        path = tmp_path / "modelgen.json"
        path.write_text(json.dumps({"package_name": "com.example.file", "generate": "loader"}))
        config = load_config("java", config_file=path)
        assert config.package_name == "com.example.file"
        assert config.generate == "loader"

    def test_explicit_overrides_win_over_file(self, tmp_path):
        path = tmp_path / "modelgen.json"
        path.write_text(json.dumps({"package_name": "com.example.file"}))
        config = load_config("java", custom_config={"package_name": "com.example.cli"}, config_file=path)
        assert config.package_name == "com.example.cli"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config("java", config_file=tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config("java", config_file=path)

    def test_non_json_suffix(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("package_name: x")
        with pytest.raises(ConfigError):
            load_config("java", config_file=path)


class TestConfigManager:
    def test_save_and_reload(self, tmp_path):
        manager = ConfigManager()
        config = manager.get_config("java", {"package_name": "com.example.saved"})
        path = tmp_path / "saved.json"
        manager.save_config(config, path)

        reloaded = manager.get_config("java", config_file=path)
        assert reloaded.package_name == "com.example.saved"
        assert reloaded.custom == config.custom

    def test_validate_config(self):
        manager = ConfigManager()
        config = GeneratorConfig(package_name="com.1bad", loader_class_name="Bad Name", generate="both")
        warnings = manager.validate_config(config)
        assert len(warnings) == 3

    def test_valid_config_has_no_warnings(self):
        manager = ConfigManager()
        assert manager.validate_config(manager.get_config("java")) == []

    def test_list_languages(self):
        assert ConfigManager().list_languages() == ["java"]
