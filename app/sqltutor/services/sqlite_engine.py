"""
Purpose: The query engine collaborator: an in-memory SQLite database loaded
with the sample dataset. Parses and executes SQL text and reports rows,
columns, errors, affected row counts and timing.

A small compatibility shim accepts MySQL-only statements learners type from
lessons (TRUNCATE) by rewriting them to SQLite equivalents.

Testing: Real in-memory database; no fixtures on disk.
"""

from __future__ import annotations
import logging
import re
import sqlite3
import time
from typing import Optional

from ..errors import EngineNotReadyError
from ..models import ExecutionResult
from .seed_data import SCHEMAS, SEED_ROWS

logger = logging.getLogger(__name__)

_TRUNCATE = re.compile(r"^\s*TRUNCATE\s+(?:TABLE\s+)?(\w+)\s*;?\s*$", re.IGNORECASE)


def _create_table_sql(name: str, columns: list[tuple[str, str]]) -> str:
    defs = ", ".join(f'"{col}" {sql_type}' for col, sql_type in columns)
    return f'CREATE TABLE "{name}" ({defs})'


def _normalize_cell(value):
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    return value


def to_sqlite(sql: str) -> str:
    m = _TRUNCATE.match(sql)
    if m:
        return f"DELETE FROM {m.group(1)};"
    return sql


class SQLiteQueryEngine:
    def __init__(self, *, autoload: bool = True) -> None:
        self._conn: Optional[sqlite3.Connection] = None
        if autoload:
            self.reset()

    @property
    def ready(self) -> bool:
        return self._conn is not None

    def reset(self) -> None:
        """Replace the whole store with a fresh copy of the seed data."""
        if self._conn is not None:
            self._conn.close()
        conn = sqlite3.connect(":memory:", check_same_thread=False)
        with conn:
            for name, columns in SCHEMAS.items():
                conn.execute(_create_table_sql(name, columns))
                placeholders = ", ".join("?" for _ in columns)
                conn.executemany(
                    f'INSERT INTO "{name}" VALUES ({placeholders})', SEED_ROWS[name]
                )
        self._conn = conn
        logger.info("sample database loaded (%d tables)", len(SCHEMAS))

    def execute(self, sql: str) -> ExecutionResult:
        if self._conn is None:
            raise EngineNotReadyError("Query engine is not loaded yet.")

        started = time.perf_counter()
        try:
            cursor = self._conn.execute(to_sqlite(sql))
            columns = [d[0] for d in cursor.description or []]
            rows = [[_normalize_cell(v) for v in row] for row in cursor.fetchall()]
            self._conn.commit()
        except (sqlite3.Error, sqlite3.Warning) as e:
            self._conn.rollback()
            return ExecutionResult(
                error=str(e), elapsed_ms=(time.perf_counter() - started) * 1000
            )

        affected = cursor.rowcount if cursor.rowcount >= 0 else None
        return ExecutionResult(
            columns=columns,
            rows=rows,
            affected_rows=affected,
            elapsed_ms=(time.perf_counter() - started) * 1000,
        )

    def row_count(self, table: str) -> int:
        if self._conn is None:
            raise EngineNotReadyError("Query engine is not loaded yet.")
        return self._conn.execute(f'SELECT COUNT(*) FROM "{table}"').fetchone()[0]

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
