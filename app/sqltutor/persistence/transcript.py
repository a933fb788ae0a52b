"""
Purpose: Session transcript storage (in-memory, append-only).
Why: Everything shown in the console is replayable from this log.

What is inside:
Transcript with append/append_result/entries/clear. Entry ids come from a
counter that survives clear(), so ids stay unique for the whole session.

Testing:
In-memory: simple state tests.
"""

from __future__ import annotations
from itertools import count
from typing import Iterator

from ..models import EntryKind, ResultEntry, TableData, TranscriptEntry


class Transcript:
    def __init__(self) -> None:
        self._entries: list[TranscriptEntry] = []
        self._ids = count()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TranscriptEntry]:
        return iter(self._entries)

    def append(self, kind: EntryKind, text: str) -> TranscriptEntry:
        if kind == EntryKind.RESULT:
            raise ValueError("Result entries need a table; use append_result().")
        entry = TranscriptEntry(id=next(self._ids), kind=kind, text=text)
        self._entries.append(entry)
        return entry

    def append_result(self, text: str, table: TableData) -> ResultEntry:
        entry = ResultEntry(
            id=next(self._ids), kind=EntryKind.RESULT, text=text, table=table
        )
        self._entries.append(entry)
        return entry

    def entries(self) -> list[TranscriptEntry]:
        return self._entries[:]

    def last(self) -> TranscriptEntry | None:
        return self._entries[-1] if self._entries else None

    def of_kind(self, kind: EntryKind) -> list[TranscriptEntry]:
        return [e for e in self._entries if e.kind == kind]

    def clear(self) -> None:
        self._entries = []
