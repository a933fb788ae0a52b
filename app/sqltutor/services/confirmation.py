"""
Purpose: Guard for high-severity statements.
States: Idle (pending_statement is None) and AwaitingConfirmation(statement).
While awaiting, a submitted line is only ever an answer; anything that is not
yes/y or no/n re-prompts and never runs the held statement.
"""

from __future__ import annotations
from enum import Enum
from typing import Optional

from ..errors import ConsoleError
from ..rules import NO_ANSWERS, YES_ANSWERS
from ..state import SessionState


class Answer(str, Enum):
    CONFIRMED = "confirmed"
    DECLINED = "declined"
    UNCLEAR = "unclear"


def interpret(reply: str) -> Answer:
    text = (reply or "").strip().lower().rstrip(";").strip()
    if text in YES_ANSWERS:
        return Answer.CONFIRMED
    if text in NO_ANSWERS:
        return Answer.DECLINED
    return Answer.UNCLEAR


def hold(state: SessionState, statement: str) -> None:
    if state.pending_statement is not None:
        raise ConsoleError("A statement is already awaiting confirmation.")
    state.pending_statement = statement


def resolve(state: SessionState, reply: str) -> tuple[Answer, Optional[str]]:
    """
    Apply an answer. Returns (answer, statement_to_run). The statement is
    only returned for CONFIRMED; UNCLEAR keeps it pending.
    """
    answer = interpret(reply)
    if answer == Answer.UNCLEAR:
        return answer, None
    held = state.pending_statement
    state.pending_statement = None
    return answer, held if answer == Answer.CONFIRMED else None


def release(state: SessionState) -> Optional[str]:
    held = state.pending_statement
    state.pending_statement = None
    return held
