"""
SessionState: the single mutable record of one console session.

Owned by ConsoleController; every mutation goes through a controller
operation. The UI only reads it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .models import ExplainMode
from .persistence.recall_store import RecallHistory
from .persistence.transcript import Transcript


@dataclass
class SessionState:
    line_buffer: list[str] = field(default_factory=list)
    current_line: str = ""

    transcript: Transcript = field(default_factory=Transcript)
    recall: RecallHistory = field(default_factory=RecallHistory)

    ai_assist_enabled: bool = True
    tutor_mode: bool = True
    explain_mode: ExplainMode = ExplainMode.EASY

    # single slot; a second destructive statement cannot be queued
    pending_statement: Optional[str] = None
    session_started_at: datetime = field(default_factory=datetime.now)

    @property
    def awaiting_confirmation(self) -> bool:
        return self.pending_statement is not None

    @property
    def is_multiline(self) -> bool:
        return bool(self.line_buffer)

    def clear_input(self) -> None:
        self.line_buffer = []
        self.current_line = ""
