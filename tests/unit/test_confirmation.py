"""
Unit Tests for the Destructive-Statement Guard

Tests that high-severity statements wait for an explicit yes/no and that
nothing else can slip through while they wait.
"""

import pytest

from console_helpers import kinds, texts_of
from sqltutor.errors import ConsoleError
from sqltutor.models import EntryKind
from sqltutor.services import confirmation
from sqltutor.services.confirmation import Answer
from sqltutor.state import SessionState


class TestInterpret:
    """Reply parsing."""

    @pytest.mark.parametrize("reply", ["yes", "Y", " YES ", "yes;"])
    def test_yes(self, reply):
        assert confirmation.interpret(reply) == Answer.CONFIRMED

    @pytest.mark.parametrize("reply", ["no", "N", "no;"])
    def test_no(self, reply):
        assert confirmation.interpret(reply) == Answer.DECLINED

    @pytest.mark.parametrize("reply", ["", "maybe", "yess", "SELECT 1;"])
    def test_unclear(self, reply):
        assert confirmation.interpret(reply) == Answer.UNCLEAR


class TestHoldResolve:
    """Single pending slot."""

    def test_hold_then_confirm(self):
        state = SessionState()
        confirmation.hold(state, "DROP TABLE t;")
        assert state.awaiting_confirmation

        answer, stmt = confirmation.resolve(state, "y")
        assert answer == Answer.CONFIRMED
        assert stmt == "DROP TABLE t;"
        assert not state.awaiting_confirmation

    def test_decline_discards(self):
        state = SessionState()
        confirmation.hold(state, "DROP TABLE t;")
        assert confirmation.resolve(state, "no") == (Answer.DECLINED, None)
        assert state.pending_statement is None

    def test_unclear_keeps_pending(self):
        state = SessionState()
        confirmation.hold(state, "DROP TABLE t;")
        assert confirmation.resolve(state, "hmm") == (Answer.UNCLEAR, None)
        assert state.pending_statement == "DROP TABLE t;"

    def test_second_hold_rejected(self):
        state = SessionState()
        confirmation.hold(state, "DROP TABLE a;")
        with pytest.raises(ConsoleError):
            confirmation.hold(state, "DROP TABLE b;")
        assert state.pending_statement == "DROP TABLE a;"

    def test_release(self):
        state = SessionState()
        assert confirmation.release(state) is None
        confirmation.hold(state, "TRUNCATE t;")
        assert confirmation.release(state) == "TRUNCATE t;"
        assert not state.awaiting_confirmation


class TestControllerConfirmation:
    """The guard as seen through the console."""

    def test_nothing_runs_before_yes(self, fake_controller, fake_engine):
        fake_controller.submit_line("DROP TABLE students;")

        assert fake_engine.calls == []
        assert fake_controller.state.awaiting_confirmation
        warnings = texts_of(fake_controller, EntryKind.WARNING)
        assert len(warnings) == 2
        assert "DANGER" in warnings[0]

        fake_controller.submit_line("yes")
        assert fake_engine.calls == ["DROP TABLE students;"]
        assert not fake_controller.state.awaiting_confirmation

    def test_short_yes(self, fake_controller, fake_engine):
        fake_controller.submit_line("TRUNCATE TABLE orders;")
        fake_controller.submit_line("y")
        assert fake_engine.calls == ["TRUNCATE TABLE orders;"]

    def test_unclear_answer_reprompts(self, fake_controller, fake_engine):
        fake_controller.submit_line("DELETE FROM students;")
        fake_controller.submit_line("SELECT * FROM students;")

        assert fake_engine.calls == []
        assert fake_controller.state.pending_statement == "DELETE FROM students;"
        assert "is not an answer" in texts_of(fake_controller, EntryKind.WARNING)[-1]

        fake_controller.submit_line("no")
        assert fake_engine.calls == []
        assert texts_of(fake_controller, EntryKind.INFO)[-1] == "Statement cancelled."

    def test_answer_is_echoed(self, fake_controller):
        fake_controller.submit_line("DROP TABLE students;")
        fake_controller.submit_line("no")
        assert texts_of(fake_controller, EntryKind.INPUT) == ["DROP TABLE students;", "no"]

    def test_answers_are_not_recalled(self, fake_controller):
        fake_controller.submit_line("DROP TABLE students;")
        fake_controller.submit_line("no")
        assert fake_controller.state.recall.get() == ["DROP TABLE students;"]

    def test_decline_keeps_data(self, controller, engine):
        controller.submit_line("DELETE FROM students;")
        controller.submit_line("no")
        assert engine.row_count("students") == 5

        controller.submit_line("SELECT COUNT(*) FROM students;")
        assert controller.entries()[-1].kind in (EntryKind.RESULT, EntryKind.AI)
        assert engine.row_count("students") == 5

    def test_confirm_runs_against_engine(self, controller, engine):
        controller.submit_line("DELETE FROM students;")
        controller.submit_line("yes")
        assert engine.row_count("students") == 0
        assert "Query OK, 5 row(s) affected" in "\n".join(
            texts_of(controller, EntryKind.INFO)
        )

    def test_cancel_releases_pending(self, fake_controller, fake_engine):
        fake_controller.submit_line("DROP TABLE students;")
        fake_controller.cancel()

        assert not fake_controller.state.awaiting_confirmation
        assert texts_of(fake_controller, EntryKind.INFO)[-1] == "Statement cancelled."

        fake_controller.submit_line("yes")
        assert fake_engine.calls == []
        assert texts_of(fake_controller, EntryKind.INFO)[-1] == (
            "Nothing is waiting for confirmation."
        )

    def test_medium_severity_warns_and_runs(self, controller, engine):
        controller.submit_line("UPDATE students SET age = 30;")

        assert not controller.state.awaiting_confirmation
        warnings = texts_of(controller, EntryKind.WARNING)
        assert warnings == ["WARNING: UPDATE without WHERE changes ALL rows!"]
        assert "Query OK, 5 row(s) affected" in "\n".join(
            texts_of(controller, EntryKind.INFO)
        )

    def test_ai_off_skips_guard(self, fake_controller, fake_engine):
        fake_controller.set_ai_assist(False, announce=False)
        fake_controller.submit_line("DROP TABLE students;")

        assert fake_engine.calls == ["DROP TABLE students;"]
        assert EntryKind.WARNING not in kinds(fake_controller)

    def test_corrected_statement_is_what_gets_held(self, fake_controller, fake_engine):
        fake_controller.submit_line("DELTE FORM students;")
        assert fake_controller.state.pending_statement == "DELETE FROM students;"
        fake_controller.submit_line("yes")
        assert fake_engine.calls == ["DELETE FROM students;"]

    def test_declined_drop_keeps_table(self, controller):
        controller.submit_line("DROP TABLE students;")
        controller.submit_line("n")
        controller.submit_line("SELECT name FROM students WHERE id = 1;")

        assert not texts_of(controller, EntryKind.ERROR)
        rows = [e for e in controller.entries() if e.kind == EntryKind.RESULT][-1].table.rows
        assert rows == (("Nguyễn Văn An",),)
