"""Tests for config.py module."""

from pathlib import Path
from unittest.mock import patch

import pytest

from fieldkit.config import Config, generate_config_template, load_config
from fieldkit.schema.validation import ValidationPolicy
from fieldkit.shared.errors import ConfigError


class TestConfigPathResolution:
    """Test configuration file path resolution priority."""

    def test_config_paths_priority_order(self, tmp_path, monkeypatch):
        env_config = tmp_path / "env_config.ini"
        monkeypatch.setenv("FIELDKIT_CONFIG", str(env_config))

        paths = Config().get_config_paths()

        assert len(paths) == 4
        assert paths[0] == env_config
        assert paths[-1] == Path("./fieldkit.ini")

    def test_find_config_file_env_priority(self, tmp_path, monkeypatch):
        env_config = tmp_path / "env.ini"
        env_config.write_text("[output]\nformat = json\n")
        home_config = tmp_path / ".fieldkit.ini"
        home_config.write_text("[output]\nformat = text\n")
        monkeypatch.setenv("FIELDKIT_CONFIG", str(env_config))

        with patch.object(Path, "home", return_value=tmp_path):
            assert Config().find_config_file() == env_config

    def test_find_config_file_returns_none_when_missing(self):
        config = Config()

        with patch.object(config, "get_config_paths", return_value=[Path("/nonexistent/config.ini")]):
            assert config.find_config_file() is None

    def test_default_config_path(self):
        path = Config().get_default_config_path()

        assert path.name == "fieldkit.ini"
        assert "fieldkit" in str(path.parent).lower()


class TestConfigLoading:
    """Test configuration loading."""

    def test_load_config_success(self, tmp_path):
        config_file = tmp_path / "test.ini"
        config_file.write_text("[output]\nformat = json\n")
        config = Config()

        with patch.object(config, "find_config_file", return_value=config_file):
            assert config.load_config() is True

        assert config.config_path == config_file
        assert config.get_field_value("output", "format") == "json"

    def test_load_config_not_found(self):
        config = Config()

        with patch.object(config, "find_config_file", return_value=None):
            assert config.load_config() is False

        assert config.config_path is None

    def test_load_config_malformed_file(self, tmp_path):
        config_file = tmp_path / "bad.ini"
        config_file.write_text("[output\nthis is not valid ini")
        config = Config()

        with patch.object(config, "find_config_file", return_value=config_file):
            with pytest.raises(ConfigError):
                config.load_config()

    def test_load_config_undecodable_file(self, tmp_path):
        config_file = tmp_path / "latin1.ini"
        config_file.write_bytes(b"[output]\nformat = \xff\xfe\n")
        config = Config()

        with patch.object(config, "find_config_file", return_value=config_file):
            with pytest.raises(ConfigError, match="Error reading configuration file"):
                config.load_config()

    def test_load_config_unreadable_path(self, tmp_path):
        config_dir = tmp_path / "fieldkit.ini"
        config_dir.mkdir()
        config = Config()

        with patch.object(config, "find_config_file", return_value=config_dir):
            with pytest.raises(ConfigError, match="Error reading configuration file"):
                config.load_config()

    def test_load_config_verbose_output(self, tmp_path, capsys):
        config_file = tmp_path / "test.ini"
        config_file.write_text("[output]\nformat = text\n")
        config = Config()

        with patch.object(config, "find_config_file", return_value=config_file):
            config.load_config(verbose=True)

        assert "Loaded configuration from" in capsys.readouterr().err


class TestFieldValueConversion:
    """Test value conversion to setting types."""

    def _load(self, tmp_path, content):
        config_file = tmp_path / "test.ini"
        config_file.write_text(content, encoding="utf-8")
        config = Config()
        with patch.object(config, "find_config_file", return_value=config_file):
            config.load_config()
        return config

    def test_defaults_without_file(self):
        config = Config()

        assert config.get_field_value("validation", "check_label_languages") is True
        assert config.get_field_value("validation", "required_languages") == []
        assert config.get_field_value("output", "format") == "text"
        assert config.get_field_value("output", "language") == ""

    def test_boolean_values(self, tmp_path):
        config = self._load(tmp_path, "[validation]\ncheck_label_languages = no\n[system]\nverbose = yes\n")

        assert config.get_field_value("validation", "check_label_languages") is False
        assert config.get_field_value("system", "verbose") is True

    def test_list_values(self, tmp_path):
        config = self._load(tmp_path, "[validation]\nrequired_languages = en, ru ,uz\n")

        assert config.get_field_value("validation", "required_languages") == ["en", "ru", "uz"]

    def test_unknown_setting(self):
        with pytest.raises(ValueError):
            Config().get_field_value("validation", "nonexistent")

    def test_policy_from_config(self, tmp_path):
        config = self._load(
            tmp_path,
            "[validation]\ncheck_label_languages = false\nrequired_languages = en\ncheck_option_defaults = 0\n",
        )

        assert ValidationPolicy.from_config(config) == ValidationPolicy(
            check_label_languages=False, required_languages=("en",), check_option_defaults=False
        )


class TestConfigValidation:
    """Test configuration validation."""

    def test_template_is_valid(self):
        assert Config().validate_config() == []

    def test_invalid_value(self, tmp_path):
        config_file = tmp_path / "test.ini"
        config_file.write_text("[output]\nformat = xml\n")
        config = Config()

        with patch.object(config, "find_config_file", return_value=config_file):
            config.load_config()

        errors = config.validate_config()
        assert len(errors) == 1
        assert "output.format" in errors[0]


class TestConfigCreation:
    """Test configuration file creation."""

    def test_create_default_config(self, tmp_path):
        config_path = tmp_path / "nested" / "fieldkit.ini"

        created_path = Config().create_default_config(config_path)

        assert created_path == config_path
        content = config_path.read_text()
        for section in ["[validation]", "[output]", "[system]"]:
            assert section in content
        assert "check_label_languages = true" in content

    def test_template_leaves_list_defaults_empty(self):
        assert "required_languages = \n" in generate_config_template()


class TestLoadConfigFunction:
    """Test the load_config convenience function."""

    def test_load_config_function_success(self):
        with patch("fieldkit.config.Config") as MockConfig:
            mock_instance = MockConfig.return_value
            mock_instance.validate_config.return_value = []

            config = load_config(verbose=False)

            assert config is mock_instance
            mock_instance.load_config.assert_called_once_with(verbose=False)

    def test_load_config_function_validation_error(self):
        with patch("fieldkit.config.Config") as MockConfig:
            MockConfig.return_value.validate_config.return_value = ["Error 1", "Error 2"]

            with pytest.raises(ConfigError) as exc_info:
                load_config()

        assert "Configuration validation failed" in str(exc_info.value)
        assert "Error 2" in str(exc_info.value)
        assert exc_info.value.details["errors"] == ["Error 1", "Error 2"]
