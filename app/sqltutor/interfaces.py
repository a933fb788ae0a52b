"""
Abstractions for pluggable collaborators. Inversion of control: the console
depends on the QueryEngine protocol, not on sqlite3. Enables fakes in tests
and future swaps (another embedded engine, a remote sandbox).

Common protocols:
- QueryEngine.execute(sql) -> ExecutionResult
- QueryEngine.reset() restores the documented seed data
- QueryEngine.ready gates the first use

Testing: Use a simple fake engine to test the controller without a database.
"""

from __future__ import annotations
from typing import Protocol

from .models import ExecutionResult


class QueryEngine(Protocol):
    @property
    def ready(self) -> bool: ...

    def execute(self, sql: str) -> ExecutionResult: ...

    def reset(self) -> None: ...
