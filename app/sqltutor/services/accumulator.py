"""
Purpose: Multi-line statement accumulation, the way a database CLI does it.
A line is buffered until the whole statement is complete; bare console
commands and recognized Vietnamese requests complete without a terminator.
"""

from __future__ import annotations
from typing import Sequence

from ..models import SubmitOutcome, TranslationRule
from ..rules import BARE_COMMANDS, DESCRIBE_PREFIXES, TRANSLATION_RULES
from ..state import SessionState

TERMINATOR = ";"


def is_bare_command(text: str) -> bool:
    return text.strip().lower() in BARE_COMMANDS


def is_describe(text: str) -> bool:
    return text.strip().lower().startswith(DESCRIBE_PREFIXES)


def matches_translation(
    text: str, rules: Sequence[TranslationRule] = TRANSLATION_RULES
) -> bool:
    return any(rule.pattern.search(text) for rule in rules)


def is_complete(
    text: str, rules: Sequence[TranslationRule] = TRANSLATION_RULES
) -> bool:
    trimmed = text.strip()
    if is_bare_command(trimmed) or is_describe(trimmed):
        return True
    if matches_translation(trimmed, rules):
        return True
    return trimmed.endswith(TERMINATOR)


def pending_lines(state: SessionState) -> list[str]:
    return [*state.line_buffer, state.current_line]


def submit_line(state: SessionState, text: str) -> SubmitOutcome:
    """
    Enter key. Either buffers the line (incomplete) or returns the full
    statement; the caller echoes the lines and clears the input afterwards.
    """
    state.current_line = text
    if not state.line_buffer and not text.strip():
        state.current_line = ""
        return SubmitOutcome(complete=False)

    full = "\n".join(pending_lines(state))
    if is_complete(full):
        return SubmitOutcome(complete=True, statement=full.strip())

    state.line_buffer.append(text)
    state.current_line = ""
    return SubmitOutcome(complete=False)


def force_submit(state: SessionState) -> SubmitOutcome:
    """Ctrl+Enter: submit whatever is buffered, terminator or not."""
    full = "\n".join(pending_lines(state)).strip()
    if not full:
        return SubmitOutcome(complete=False)
    return SubmitOutcome(complete=True, statement=full)
