"""
Canonical data shapes, shared truth for typing between layers.

Typical contents:
- Rule variants (DangerRule, TranslationRule, CorrectionRule).
- Transcript entries (TranscriptEntry, ResultEntry carrying a TableData).
- ExecutionResult as returned by the query engine.
- ConsoleSettings, the tunables loaded by config.py.

SessionState lives in state.py because it holds the persistence containers,
which themselves build entries from the types below.

Testing: Trivial; mostly types.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import re
from typing import Optional, Union
from enum import Enum
from datetime import datetime


Cell = Union[str, int, float, None]


class EntryKind(str, Enum):
    INPUT = "input"
    CONTINUATION = "continuation"
    RESULT = "result"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    AI = "ai"


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"


class ExplainMode(str, Enum):
    EASY = "easy"
    TECHNICAL = "technical"


@dataclass(frozen=True)
class DangerRule:
    pattern: re.Pattern[str]
    warning: str
    severity: Severity


@dataclass(frozen=True)
class TranslationRule:
    pattern: re.Pattern[str]
    template: str


@dataclass(frozen=True)
class CorrectionRule:
    pattern: re.Pattern[str]
    replacement: str
    message: str


@dataclass(frozen=True)
class TableData:
    columns: tuple[str, ...]
    rows: tuple[tuple[Cell, ...], ...]

    @classmethod
    def of(cls, columns, rows) -> "TableData":
        return cls(tuple(columns), tuple(tuple(r) for r in rows))


@dataclass(frozen=True)
class TranscriptEntry:
    id: int
    kind: EntryKind
    text: str
    created_at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class ResultEntry(TranscriptEntry):
    """The only transcript entry that carries a table payload (kind RESULT)."""

    table: TableData = field(default_factory=lambda: TableData((), ()))


@dataclass
class ExecutionResult:
    columns: list[str] = field(default_factory=list)
    rows: list[list[Cell]] = field(default_factory=list)
    error: Optional[str] = None
    affected_rows: Optional[int] = None
    elapsed_ms: float = 0.0

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def has_rows(self) -> bool:
        return bool(self.columns) and bool(self.rows)

    def as_table(self) -> TableData:
        return TableData.of(self.columns, self.rows)


@dataclass(frozen=True)
class SubmitOutcome:
    complete: bool
    statement: Optional[str] = None


@dataclass
class PipelineOutcome:
    statement: str
    must_confirm: bool = False
    warning_shown: bool = False
    translated: bool = False
    corrections: list[str] = field(default_factory=list)
    danger: Optional[DangerRule] = None


@dataclass(frozen=True)
class ConsoleSettings:
    recall_limit: int = 50
    display_row_limit: int = 25
    min_column_width: int = 4
    explain_mode: ExplainMode = ExplainMode.EASY
    ai_assist_default: bool = True
    tutor_mode_default: bool = True
    log_level: str = "INFO"

