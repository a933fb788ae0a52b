"""
Purpose: Keyword typo repair.
Every CorrectionRule that matches is applied (cumulative, not first-wins),
each replacing all of its occurrences. Running it twice changes nothing.
"""

from __future__ import annotations
from typing import Sequence

from ..models import CorrectionRule
from ..rules import CORRECTION_RULES


def fix_typos(
    sql: str, rules: Sequence[CorrectionRule] = CORRECTION_RULES
) -> tuple[str, list[str]]:
    fixed = sql
    corrections: list[str] = []
    for rule in rules:
        fixed, n = rule.pattern.subn(rule.replacement, fixed)
        if n:
            corrections.append(rule.message)
    return fixed, corrections
