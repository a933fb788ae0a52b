"""
Unit Tests for the Streamlit Console Page

Drives app/app.py through Streamlit's AppTest harness to check that the
input form submits what is in the box, including recalled statements.
"""

import os

import pytest
from streamlit.testing.v1 import AppTest

from sqltutor.models import EntryKind

APP_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "../../app/app.py"))


@pytest.fixture
def app():
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def _inputs(at):
    controller = at.session_state["controller"]
    return [e.text for e in controller.entries() if e.kind == EntryKind.INPUT]


def _enter(at, text=None):
    if text is not None:
        at.text_input(key="console_line").input(text)
    at.button(key="submit_line").click().run()
    assert not at.exception


class TestConsoleForm:
    """Enter and the console buttons."""

    def test_enter_runs_statement(self, app):
        _enter(app, "SELECT 1;")

        assert _inputs(app) == ["SELECT 1;"]
        assert app.text_input(key="console_line").value == ""
        assert "mysql> SELECT 1;" in app.code[0].value

    def test_recalled_statement_runs_again_on_enter(self, app):
        _enter(app, "SELECT 1;")

        app.button(key="recall_previous").click().run()
        assert app.text_input(key="console_line").value == "SELECT 1;"

        _enter(app)
        assert _inputs(app) == ["SELECT 1;", "SELECT 1;"]
        assert app.text_input(key="console_line").value == ""

    def test_multiline_prompt_and_execute(self, app):
        _enter(app, "SELECT name FROM students")
        assert app.text_input(key="console_line").label == "->"
        assert app.button(key="recall_previous").disabled

        app.button(key="force_submit").click().run()
        controller = app.session_state["controller"]
        assert controller.state.line_buffer == []
        assert EntryKind.RESULT in [e.kind for e in controller.entries()]

    def test_cancel_discards_typed_line(self, app):
        app.text_input(key="console_line").input("SELECT *")
        app.button(key="cancel").click().run()

        assert app.text_input(key="console_line").value == ""
        controller = app.session_state["controller"]
        assert controller.entries()[-1].text == "^C"

    def test_button_help_names_no_shortcuts(self, app):
        for key in ("submit_line", "force_submit", "cancel", "clear_screen"):
            assert "Ctrl" not in (app.button(key=key).help or "")
