"""
Purpose: Static rule tables for the console pipeline.
Content: destructive-command patterns, Vietnamese request -> SQL templates,
and known keyword misspellings.

Tables are plain ordered tuples scanned linearly. Order matters: the first
matching danger/translation rule wins, while every matching correction applies.
"""

import re

from .models import CorrectionRule, DangerRule, Severity, TranslationRule

_FLAGS = re.IGNORECASE | re.DOTALL

IDENT = r"([A-Za-z_][A-Za-z0-9_]*)"


def _rx(pattern: str) -> re.Pattern:
    return re.compile(pattern, _FLAGS)


DANGER_RULES: tuple[DangerRule, ...] = (
    DangerRule(
        _rx(r"^DROP\s+TABLE\s+"),
        "DANGER: this permanently deletes the table and all of its data!",
        Severity.HIGH,
    ),
    DangerRule(
        _rx(r"^DROP\s+DATABASE\s+"),
        "EXTREME DANGER: this deletes the ENTIRE database!",
        Severity.HIGH,
    ),
    DangerRule(
        _rx(r"^DELETE\s+FROM\s+\w+\s*;?\s*$"),
        "WARNING: DELETE without WHERE removes ALL rows from the table!",
        Severity.HIGH,
    ),
    DangerRule(
        _rx(r"^TRUNCATE\s+"),
        "WARNING: TRUNCATE removes every row in the table!",
        Severity.HIGH,
    ),
    DangerRule(
        _rx(r"^UPDATE\s+\w+\s+SET\s+(?:(?!\bWHERE\b).)*$"),
        "WARNING: UPDATE without WHERE changes ALL rows!",
        Severity.MEDIUM,
    ),
)


TRANSLATION_RULES: tuple[TranslationRule, ...] = (
    TranslationRule(
        _rx(rf"^\s*lấy\s+tất\s+cả\s+(?:từ\s+)?(?:bảng\s+)?{IDENT}"),
        "SELECT * FROM $1",
    ),
    TranslationRule(
        _rx(rf"^\s*đếm\s+(?:số\s+)?(?:lượng\s+)?(?:trong\s+)?(?:bảng\s+)?{IDENT}"),
        "SELECT COUNT(*) FROM $1",
    ),
    TranslationRule(
        _rx(rf"^\s*xem\s+(?:bảng\s+)?{IDENT}"),
        "SELECT * FROM $1",
    ),
    TranslationRule(
        _rx(rf"^\s*hiển\s+thị\s+(?:tất\s+cả\s+)?(?:bảng\s+)?{IDENT}"),
        "SELECT * FROM $1",
    ),
    TranslationRule(
        _rx(rf"^\s*tìm\s+(.+)\s+trong\s+{IDENT}\s+(?:với|có|where)\s+(.+)"),
        "SELECT $1 FROM $2 WHERE $3",
    ),
    TranslationRule(
        _rx(rf"^\s*sắp\s+xếp\s+{IDENT}\s+theo\s+{IDENT}\s+tăng(?:\s+dần)?"),
        "SELECT * FROM $1 ORDER BY $2 ASC",
    ),
    TranslationRule(
        _rx(rf"^\s*sắp\s+xếp\s+{IDENT}\s+theo\s+{IDENT}\s+giảm(?:\s+dần)?"),
        "SELECT * FROM $1 ORDER BY $2 DESC",
    ),
    TranslationRule(
        _rx(rf"^\s*thêm\s+(.+)\s+vào\s+{IDENT}"),
        "INSERT INTO $2 VALUES ($1)",
    ),
    TranslationRule(
        _rx(rf"^\s*xóa\s+(?:từ\s+)?{IDENT}\s+(?:với|có|where)\s+(.+)"),
        "DELETE FROM $1 WHERE $2",
    ),
)


def _fix(typo: str, keyword: str) -> CorrectionRule:
    pattern = r"\b" + r"\s+".join(typo.split()) + r"\b"
    return CorrectionRule(_rx(pattern), keyword, f"Fixed typo: {typo} -> {keyword}")


CORRECTION_RULES: tuple[CorrectionRule, ...] = (
    _fix("SLECT", "SELECT"),
    _fix("FORM", "FROM"),
    _fix("WHER", "WHERE"),
    _fix("ODER BY", "ORDER BY"),
    _fix("GRUOP BY", "GROUP BY"),
    _fix("DELTE", "DELETE"),
    _fix("UDPATE", "UPDATE"),
    _fix("INSET", "INSERT"),
    _fix("VALEUS", "VALUES"),
    _fix("JION", "JOIN"),
)


BARE_COMMANDS = frozenset(
    {
        "help",
        "clear",
        "reset",
        "tables",
        "yes",
        "no",
        "y",
        "n",
        "ai on",
        "ai off",
        "learn on",
        "learn off",
    }
)

DESCRIBE_PREFIXES = ("desc ", "describe ")

YES_ANSWERS = frozenset({"yes", "y"})
NO_ANSWERS = frozenset({"no", "n"})
