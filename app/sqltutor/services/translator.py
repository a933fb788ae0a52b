"""
Purpose: Vietnamese request -> SQL rewrite.
Deterministic: the first TranslationRule that matches wins, captured groups
fill the $1..$n placeholders of its template, and a terminator is appended.
"""

from __future__ import annotations
import re
from typing import Optional, Sequence

from ..models import TranslationRule
from ..rules import TRANSLATION_RULES

_PLACEHOLDER = re.compile(r"\$(\d+)")


def fill_template(template: str, groups: Sequence[str]) -> str:
    def _sub(m: re.Match) -> str:
        idx = int(m.group(1)) - 1
        if idx >= len(groups):
            return m.group(0)
        return (groups[idx] or "").strip()

    return _PLACEHOLDER.sub(_sub, template)


def translate(
    text: str, rules: Sequence[TranslationRule] = TRANSLATION_RULES
) -> Optional[str]:
    """Return the SQL for a recognized request, or None to pass through."""
    for rule in rules:
        m = rule.pattern.search(text.strip())
        if m:
            return fill_template(rule.template, m.groups()) + ";"
    return None
