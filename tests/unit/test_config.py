"""
Unit Tests for Settings Loading

Tests defaults, overrides and rejection of malformed values.
"""

import pytest

from sqltutor.config import load_settings
from sqltutor.errors import ConfigError
from sqltutor.models import ConsoleSettings, ExplainMode


class TestLoadSettings:
    """Environment -> ConsoleSettings."""

    def test_defaults(self):
        assert load_settings({}) == ConsoleSettings()

    def test_overrides(self):
        settings = load_settings(
            {
                "SQLTUTOR_RECALL_LIMIT": "10",
                "SQLTUTOR_DISPLAY_ROW_LIMIT": "5",
                "SQLTUTOR_MIN_COLUMN_WIDTH": "2",
                "SQLTUTOR_EXPLAIN_MODE": "Technical",
                "SQLTUTOR_AI_ASSIST": "off",
                "SQLTUTOR_TUTOR_MODE": "0",
                "SQLTUTOR_LOG_LEVEL": "debug",
            }
        )
        assert settings.recall_limit == 10
        assert settings.display_row_limit == 5
        assert settings.min_column_width == 2
        assert settings.explain_mode == ExplainMode.TECHNICAL
        assert settings.ai_assist_default is False
        assert settings.tutor_mode_default is False
        assert settings.log_level == "DEBUG"

    def test_blank_values_fall_back(self):
        settings = load_settings({"SQLTUTOR_RECALL_LIMIT": " ", "SQLTUTOR_AI_ASSIST": ""})
        assert settings.recall_limit == 50
        assert settings.ai_assist_default is True

    @pytest.mark.parametrize(
        "env",
        [
            {"SQLTUTOR_RECALL_LIMIT": "many"},
            {"SQLTUTOR_DISPLAY_ROW_LIMIT": "0"},
            {"SQLTUTOR_AI_ASSIST": "sometimes"},
            {"SQLTUTOR_EXPLAIN_MODE": "verbose"},
        ],
    )
    def test_invalid_values(self, env):
        with pytest.raises(ConfigError):
            load_settings(env)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            load_settings({"SQLTUTOR_MIN_COLUMN_WIDTH": "-1"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("SQLTUTOR_RECALL_LIMIT", "7")
        monkeypatch.setattr("sqltutor.config.load_dotenv", lambda: False)
        assert load_settings().recall_limit == 7
