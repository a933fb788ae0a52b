"""
Purpose: Load ConsoleSettings from the environment (and a local .env file).

Variables:
- SQLTUTOR_RECALL_LIMIT       size of the Up/Down recall list (default 50)
- SQLTUTOR_DISPLAY_ROW_LIMIT  rows drawn per result grid (default 25)
- SQLTUTOR_MIN_COLUMN_WIDTH   narrowest grid column (default 4)
- SQLTUTOR_EXPLAIN_MODE       easy | technical
- SQLTUTOR_AI_ASSIST          initial AI assist flag
- SQLTUTOR_TUTOR_MODE         initial learn-mode flag
- SQLTUTOR_LOG_LEVEL          DEBUG / INFO / WARNING ...
"""

from __future__ import annotations
import os
from typing import Mapping, Optional

from dotenv import load_dotenv

from .errors import ConfigError
from .models import ConsoleSettings, ExplainMode

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _int(env: Mapping[str, str], key: str, default: int, minimum: int = 1) -> int:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {raw!r}")
    if value < minimum:
        raise ConfigError(f"{key} must be >= {minimum}, got {value}")
    return value


def _bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = (env.get(key) or "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ConfigError(f"{key} must be a boolean, got {raw!r}")


def _explain_mode(env: Mapping[str, str], key: str) -> ExplainMode:
    raw = (env.get(key) or "").strip().lower()
    if not raw:
        return ExplainMode.EASY
    try:
        return ExplainMode(raw)
    except ValueError:
        raise ConfigError(f"{key} must be 'easy' or 'technical', got {raw!r}")


def load_settings(env: Optional[Mapping[str, str]] = None) -> ConsoleSettings:
    if env is None:
        load_dotenv()
        env = os.environ
    return ConsoleSettings(
        recall_limit=_int(env, "SQLTUTOR_RECALL_LIMIT", 50),
        display_row_limit=_int(env, "SQLTUTOR_DISPLAY_ROW_LIMIT", 25),
        min_column_width=_int(env, "SQLTUTOR_MIN_COLUMN_WIDTH", 4),
        explain_mode=_explain_mode(env, "SQLTUTOR_EXPLAIN_MODE"),
        ai_assist_default=_bool(env, "SQLTUTOR_AI_ASSIST", True),
        tutor_mode_default=_bool(env, "SQLTUTOR_TUTOR_MODE", True),
        log_level=(env.get("SQLTUTOR_LOG_LEVEL") or "INFO").strip().upper(),
    )
