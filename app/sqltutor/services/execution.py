"""
Purpose: Thin adapter between the console and the QueryEngine collaborator.
Checks the ready gate, normalizes the result shape, and never raises: every
failure comes back as an ExecutionResult with `error` set.
"""

from __future__ import annotations
import logging

from ..errors import EngineNotReadyError
from ..interfaces import QueryEngine
from ..models import ExecutionResult
from ..texts import console

logger = logging.getLogger(__name__)


class ExecutionAdapter:
    def __init__(self, engine: QueryEngine):
        self.engine: QueryEngine = engine

    @property
    def ready(self) -> bool:
        return bool(getattr(self.engine, "ready", False))

    def execute(self, sql: str) -> ExecutionResult:
        if not self.ready:
            return ExecutionResult(error=console.engine_not_ready())
        try:
            result = self.engine.execute(sql)
        except EngineNotReadyError:
            return ExecutionResult(error=console.engine_not_ready())

        if result.error is not None:
            result.error = result.error or console.engine_failed()
            logger.warning("execution failed: %s | sql=%r", result.error, sql)
            return result

        result.columns = [str(c) for c in result.columns]
        result.rows = [list(r) for r in result.rows]
        if result.affected_rows is not None and result.affected_rows < 0:
            result.affected_rows = None
        return result

    def reset(self) -> None:
        self.engine.reset()
