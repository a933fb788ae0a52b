"""
Purpose: Guardrail for destructive statements.
Content: early, predictable classification; the first DangerRule in declared
order decides the severity, so table order is significant.
"""

from __future__ import annotations
from typing import Optional, Sequence

from ..models import DangerRule, Severity
from ..rules import DANGER_RULES


def classify(
    sql: str, rules: Sequence[DangerRule] = DANGER_RULES
) -> Optional[DangerRule]:
    text = (sql or "").strip()
    for rule in rules:
        if rule.pattern.search(text):
            return rule
    return None


def requires_confirmation(rule: Optional[DangerRule]) -> bool:
    return rule is not None and rule.severity == Severity.HIGH
