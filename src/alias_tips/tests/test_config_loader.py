"""
Test suite for configuration loading.

Covers YAML files, dotenv files, environment overrides and the zsh plugin
variables.
"""

import os
import pytest
from pathlib import Path
from unittest.mock import patch

from alias_tips.config.loader import ConfigLoader, default_config_dir, load_config
from alias_tips.config.models import AliasTipsConfig, LogLevel
from alias_tips.utils.error_handling import ConfigurationError


class TestConfigLoader:
    """Test the ConfigLoader class functionality."""

    @pytest.fixture(autouse=True)
    def setup_loader(self, tmp_path):
        self.config_dir = tmp_path / "alias-tips"
        self.config_dir.mkdir()
        self.loader = ConfigLoader(config_dir=self.config_dir)

    def test_load_default_config(self):
        config = self.loader.load_config()

        assert isinstance(config, AliasTipsConfig)
        assert config.tips.text == "Alias tip: "
        assert config.tips.expand is True
        assert config.git.enabled is True

    def test_user_config_file(self):
        (self.config_dir / "config.yaml").write_text(
            "tips:\n  text: 'Hint: '\n  excludes: gst gco\ngit:\n  enabled: false\n"
        )

        config = self.loader.load_config()

        assert config.tips.text == "Hint: "
        assert config.tips.excludes == ["gst", "gco"]
        assert config.git.enabled is False

    def test_cli_config_overrides_user_config(self, tmp_path):
        (self.config_dir / "config.yaml").write_text("tips:\n  text: 'User: '\n  force: true\n")
        cli_file = tmp_path / "cli.yaml"
        cli_file.write_text("tips:\n  text: 'Cli: '\n")

        config = self.loader.load_config(cli_file)

        assert config.tips.text == "Cli: "
        assert config.tips.force is True

    def test_missing_cli_config(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            self.loader.load_config(tmp_path / "missing.yaml")

        assert "not found" in str(exc_info.value)

    def test_malformed_yaml(self, tmp_path):
        bad_file = tmp_path / "bad.yaml"
        bad_file.write_text("tips:\n  text: 'unterminated\n  force: [\n")

        with pytest.raises(ConfigurationError) as exc_info:
            self.loader.load_config(bad_file)

        assert "Invalid YAML" in str(exc_info.value)

    def test_yaml_must_be_mapping(self, tmp_path):
        list_file = tmp_path / "list.yaml"
        list_file.write_text("- one\n- two\n")

        with pytest.raises(ConfigurationError):
            self.loader.load_config(list_file)

    def test_empty_yaml(self, tmp_path):
        empty_file = tmp_path / "empty.yaml"
        empty_file.write_text("")

        assert self.loader.load_config(empty_file).tips.text == "Alias tip: "

    def test_validation_error_lists_fields(self, tmp_path):
        bad_file = tmp_path / "invalid.yaml"
        bad_file.write_text("git:\n  timeout_seconds: 500\n")

        with pytest.raises(ConfigurationError) as exc_info:
            self.loader.load_config(bad_file)

        assert "git -> timeout_seconds" in str(exc_info.value)
        assert exc_info.value.details["error_type"] == "validation"

    def test_legacy_plugin_variables(self):
        env_vars = {
            "ZSH_PLUGINS_ALIAS_TIPS_TEXT": "💡 ",
            "ZSH_PLUGINS_ALIAS_TIPS_EXPAND": "0",
            "ZSH_PLUGINS_ALIAS_TIPS_EXCLUDES": "gst gco",
            "ZSH_PLUGINS_ALIAS_TIPS_FORCE": "1",
        }

        with patch.dict(os.environ, env_vars):
            config = self.loader.load_config()

        assert config.tips.text == "💡 "
        assert config.tips.expand is False
        assert config.tips.excludes == ["gst", "gco"]
        assert config.tips.force is True

    @pytest.mark.parametrize("value", ["true", "yes", "", "2"])
    def test_legacy_flags_only_accept_one(self, value):
        with patch.dict(os.environ, {"ZSH_PLUGINS_ALIAS_TIPS_FORCE": value}):
            config = self.loader.load_config()

        assert config.tips.force is False

    def test_legacy_text_with_comma_kept_verbatim(self):
        with patch.dict(os.environ, {"ZSH_PLUGINS_ALIAS_TIPS_TEXT": "Hey, use: "}):
            config = self.loader.load_config()

        assert config.tips.text == "Hey, use: "

    def test_environment_overrides(self):
        env_vars = {
            "ALIAS_TIPS_GIT_ENABLED": "false",
            "ALIAS_TIPS_GIT_TIMEOUT_SECONDS": "1.5",
            "ALIAS_TIPS_APP_LOG_LEVEL": "debug",
            "ALIAS_TIPS_TIPS_TEXT": "Tip: ",
        }

        with patch.dict(os.environ, env_vars):
            config = self.loader.load_config()

        assert config.git.enabled is False
        assert config.git.timeout_seconds == 1.5
        assert config.app.log_level == LogLevel.DEBUG
        assert config.tips.text == "Tip: "

    def test_environment_overrides_file(self):
        (self.config_dir / "config.yaml").write_text("git:\n  executable: /opt/git\n")

        with patch.dict(os.environ, {"ALIAS_TIPS_GIT_EXECUTABLE": "/usr/local/bin/git"}):
            config = self.loader.load_config()

        assert config.git.executable == "/usr/local/bin/git"

    def test_legacy_variables_win_over_generic(self):
        env_vars = {
            "ALIAS_TIPS_TIPS_TEXT": "Generic: ",
            "ZSH_PLUGINS_ALIAS_TIPS_TEXT": "Plugin: ",
        }

        with patch.dict(os.environ, env_vars):
            config = self.loader.load_config()

        assert config.tips.text == "Plugin: "

    def test_unknown_env_section_ignored(self):
        with patch.dict(os.environ, {"ALIAS_TIPS_NOPE_VALUE": "1", "ALIAS_TIPS_": "x"}):
            config = self.loader.load_config()

        assert not hasattr(config, "nope")

    def test_dotenv_file(self):
        (self.config_dir / ".env").write_text("ALIAS_TIPS_TIPS_COLOR=false\n")

        # load_dotenv writes into os.environ; patch.dict restores it afterwards
        with patch.dict(os.environ, {}):
            config = self.loader.load_config()

        assert config.tips.color is False

    def test_dotenv_does_not_override_environment(self, monkeypatch):
        monkeypatch.setenv("ALIAS_TIPS_TIPS_COLOR", "true")
        (self.config_dir / ".env").write_text("ALIAS_TIPS_TIPS_COLOR=false\n")

        config = self.loader.load_config()

        assert config.tips.color is True


class TestDefaultConfigDir:
    """Test config directory discovery."""

    def test_uses_xdg_config_home(self, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert default_config_dir() == tmp_path / "alias-tips"

    def test_falls_back_to_dot_config(self, monkeypatch):
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

        assert default_config_dir() == Path("~/.config").expanduser() / "alias-tips"

    def test_module_loader_reads_xdg_config(self, isolated_environment):
        config_dir = isolated_environment / "alias-tips"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("tips:\n  text: 'From XDG: '\n")

        assert load_config().tips.text == "From XDG: "
