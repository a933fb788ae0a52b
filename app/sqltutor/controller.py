"""
Purpose: The single orchestration point for a console session. Owns the
SessionState and is the only thing that mutates it.
It centralizes the per-keystroke logic (submit, force-submit, cancel, recall)
and the statement lifecycle (dispatch -> pipeline -> confirm -> execute), so
the UI never needs to know how statements are completed or classified.

Key responsibilities:
- Accumulate multi-line input and decide when a statement is complete.
- Route complete statements to a built-in command or to the AI pipeline.
- Hold high-severity statements until the learner answers yes/no.
- Execute through the ExecutionAdapter and record everything in the transcript.
- Keep the Up/Down recall list.

Testing: Unit tests with the in-memory SQLite engine, plus a fake engine to
assert exactly when execute() is called.
"""

from __future__ import annotations
import logging
from typing import Optional

from .interfaces import QueryEngine
from .models import (
    ConsoleSettings,
    EntryKind,
    ExecutionResult,
    ExplainMode,
    SubmitOutcome,
    TranscriptEntry,
)
from .persistence.recall_store import RecallHistory
from .rules import NO_ANSWERS, YES_ANSWERS
from .services import accumulator, advisor, confirmation, pipeline, renderer
from .services.confirmation import Answer
from .services.execution import ExecutionAdapter
from .state import SessionState
from .texts import console, notes

logger = logging.getLogger(__name__)


class ConsoleController:
    def __init__(
        self,
        engine: QueryEngine,
        settings: Optional[ConsoleSettings] = None,
    ):
        self.settings: ConsoleSettings = settings or ConsoleSettings()
        self.executor = ExecutionAdapter(engine)
        self.state = self._new_state()

    def _new_state(self) -> SessionState:
        return SessionState(
            recall=RecallHistory(limit=self.settings.recall_limit),
            ai_assist_enabled=self.settings.ai_assist_default,
            tutor_mode=self.settings.tutor_mode_default,
            explain_mode=self.settings.explain_mode,
        )

    def is_ready(self) -> bool:
        """True if the query engine has loaded its data."""
        return self.executor.ready

    def start(self) -> None:
        """Show the welcome banner once the engine is ready."""
        if len(self.state.transcript):
            return
        if self.is_ready():
            self._add(EntryKind.INFO, console.welcome_banner())
        else:
            self._add(EntryKind.ERROR, console.engine_not_ready())

    def reset_session(self) -> None:
        """Fresh SessionState (transcript, recall, flags); the database is kept."""
        self.state = self._new_state()

    # ------------------------------------------------------------------ #
    # Input surface: key bindings
    # ------------------------------------------------------------------ #

    def set_current_line(self, text: str) -> None:
        self.state.current_line = text

    def submit_line(self, text: str) -> SubmitOutcome:
        """Enter: buffer the line, or complete and dispatch the statement."""
        self.state.recall.reset_cursor()
        if self.state.awaiting_confirmation:
            return self._answer_confirmation(text)

        outcome = accumulator.submit_line(self.state, text)
        if outcome.complete:
            self._complete(outcome.statement)
        return outcome

    def force_submit(self) -> SubmitOutcome:
        """Ctrl+Enter: submit the buffered statement without a terminator."""
        self.state.recall.reset_cursor()
        if self.state.awaiting_confirmation:
            return self._answer_confirmation(self.state.current_line)

        outcome = accumulator.force_submit(self.state)
        if outcome.complete:
            self._complete(outcome.statement)
        return outcome

    def cancel(self) -> None:
        """Ctrl+C: drop the statement being typed and any pending confirmation."""
        lines = [line for line in accumulator.pending_lines(self.state) if line]
        if lines:
            for kind, line in renderer.echo_lines(lines):
                self._add(kind, line)
            self._add(EntryKind.INFO, notes.interrupted())
        self.state.clear_input()
        self.state.recall.reset_cursor()

        if confirmation.release(self.state) is not None:
            self._add(EntryKind.INFO, notes.cancelled())

    def clear_screen(self) -> None:
        """Ctrl+L."""
        self.state.transcript.clear()

    def recall_previous(self) -> Optional[str]:
        """Up arrow. Only while no multi-line statement is being typed."""
        st = self.state
        if st.line_buffer:
            return None
        if st.current_line and st.recall.cursor < 0:
            return None
        item = st.recall.previous()
        if item is not None:
            st.current_line = item
        return item

    def recall_next(self) -> Optional[str]:
        """Down arrow. Returns "" when stepping past the newest statement."""
        st = self.state
        if st.line_buffer:
            return None
        item = st.recall.next()
        if item is not None:
            st.current_line = item
        return item

    # ------------------------------------------------------------------ #
    # Statement lifecycle
    # ------------------------------------------------------------------ #

    def _complete(self, statement: str) -> None:
        for kind, line in renderer.echo_lines(accumulator.pending_lines(self.state)):
            self._add(kind, line)
        self.state.clear_input()
        self.dispatch(statement)

    def _answer_confirmation(self, text: str) -> SubmitOutcome:
        reply = (text or "").strip()
        self._add(EntryKind.INPUT, reply)
        self.state.clear_input()

        answer, held = confirmation.resolve(self.state, reply)
        if answer == Answer.CONFIRMED:
            logger.info("destructive statement confirmed: %r", held)
            self._guarded(self.run_sql, held)
        elif answer == Answer.DECLINED:
            logger.info("destructive statement declined")
            self._add(EntryKind.INFO, notes.cancelled())
        else:
            self._add(EntryKind.WARNING, notes.confirm_reprompt(reply))
        return SubmitOutcome(complete=True, statement=reply)

    def dispatch(self, statement: str) -> None:
        """Route a complete statement to a built-in command or to execution."""
        statement = (statement or "").strip()
        if not statement:
            return
        self.state.recall.push(statement)
        logger.info("dispatch: %r", statement)
        self._guarded(self._route, statement)

    def _guarded(self, fn, *args) -> None:
        # nothing below the dispatcher may end the session
        try:
            fn(*args)
        except Exception as e:
            logger.exception("console statement failed")
            self._add(EntryKind.ERROR, notes.error_line(str(e)))

    def _route(self, statement: str) -> None:
        if self._run_builtin(statement):
            return

        sql = statement
        if self.state.ai_assist_enabled:
            outcome = pipeline.run(statement, self.state.transcript)
            sql = outcome.statement
            if outcome.must_confirm:
                confirmation.hold(self.state, sql)
                return
        self.run_sql(sql)

    def _run_builtin(self, statement: str) -> bool:
        lower = statement.lower()

        if lower == "help":
            self._add(EntryKind.INFO, console.help_text())
        elif lower == "clear":
            self.clear_screen()
        elif lower == "reset":
            self.reset_database()
        elif lower == "tables":
            self._add(EntryKind.INFO, console.tables_listing())
        elif accumulator.is_describe(lower):
            parts = statement.split()
            name = parts[1].rstrip(";") if len(parts) > 1 else ""
            schema = console.describe_table(name)
            if schema is None:
                self._add(EntryKind.ERROR, console.unknown_table(name))
            else:
                self._add(EntryKind.INFO, schema)
        elif lower in ("ai on", "ai off"):
            self.set_ai_assist(lower == "ai on")
        elif lower in ("learn on", "learn off"):
            self.set_tutor_mode(lower == "learn on")
        elif lower in YES_ANSWERS or lower in NO_ANSWERS:
            self._add(EntryKind.INFO, console.nothing_to_confirm())
        else:
            return False
        return True

    def run_sql(self, sql: str) -> ExecutionResult:
        """Execute SQL and record the result, hints, explanation and tips."""
        st = self.state
        result = self.executor.execute(sql)

        if not result.succeeded:
            self._add(EntryKind.ERROR, notes.error_line(result.error))
            if st.ai_assist_enabled:
                hint = advisor.error_hint(result.error)
                if hint:
                    self._add(EntryKind.AI, hint)
            return result

        if st.ai_assist_enabled:
            explanation = advisor.explain_sql(sql, st.explain_mode)
            if explanation:
                self._add(EntryKind.AI, notes.explanation(explanation))

        if result.has_rows:
            st.transcript.append_result(
                notes.rows_in_set(len(result.rows), result.elapsed_ms),
                result.as_table(),
            )
        else:
            self._add(
                EntryKind.INFO,
                notes.rows_affected(result.affected_rows or 0, result.elapsed_ms),
            )

        if st.tutor_mode and st.ai_assist_enabled:
            tips = advisor.optimization_tips(sql)
            if tips:
                self._add(EntryKind.AI, notes.optimization_tips(tips))
        return result

    # ------------------------------------------------------------------ #
    # Toggles and maintenance
    # ------------------------------------------------------------------ #

    def set_ai_assist(self, enabled: bool, *, announce: bool = True) -> None:
        self.state.ai_assist_enabled = enabled
        if announce:
            self._add(EntryKind.INFO, console.ai_toggled(enabled))

    def set_tutor_mode(self, enabled: bool, *, announce: bool = True) -> None:
        self.state.tutor_mode = enabled
        if announce:
            self._add(EntryKind.INFO, console.learn_toggled(enabled))

    def set_explain_mode(self, mode: ExplainMode) -> None:
        self.state.explain_mode = ExplainMode(mode)

    def reset_database(self) -> None:
        self.executor.reset()
        logger.info("database reset to seed data")
        self._add(EntryKind.INFO, console.reset_done())

    # ------------------------------------------------------------------ #
    # Read side for the UI
    # ------------------------------------------------------------------ #

    def entries(self) -> list[TranscriptEntry]:
        return self.state.transcript.entries()

    def prompt(self) -> str:
        return renderer.prompt_for(self.state)

    def render(self) -> str:
        return renderer.render_transcript(
            self.state.transcript,
            max_rows=self.settings.display_row_limit,
            min_width=self.settings.min_column_width,
        )

    def _add(self, kind: EntryKind, text: str) -> TranscriptEntry:
        return self.state.transcript.append(kind, text)
