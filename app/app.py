"""
UI layer
Purpose: Streamlit-only glue. Renders the console transcript and the input
line, maps buttons to the console key bindings, and delegates all work to the
controller. The UI never mutates SessionState directly, so the console logic
can be unit tested without Streamlit.
"""

import logging
from datetime import datetime

import streamlit as st

from sqltutor.config import load_settings
from sqltutor.controller import ConsoleController
from sqltutor.errors import ConfigError
from sqltutor.models import EntryKind, ExplainMode
from sqltutor.services import renderer
from sqltutor.services.sqlite_engine import SQLiteQueryEngine
from sqltutor.utils.log import setup_logging

logger = logging.getLogger(__name__)

# ---------------------------
# Page config
# ---------------------------
st.set_page_config(
    page_title="SQL Tutor Console",
    page_icon="🐬",
    layout="wide",
    initial_sidebar_state="expanded",
)
# ---------------------------
# UI constants
# ---------------------------
EXPLAIN_MODES = [ExplainMode.EASY.value, ExplainMode.TECHNICAL.value]
EXPLAIN_LABELS = {
    ExplainMode.EASY.value: "Easy (plain language)",
    ExplainMode.TECHNICAL.value: "Technical (clause names)",
}

# ---------------------------
# Session state init
# ---------------------------
st_session = st.session_state
st_session.setdefault("controller", None)
st_session.setdefault("console_line", "")

if st_session.controller is None:
    try:
        settings = load_settings()
    except ConfigError as e:
        st.error(f"Invalid configuration: {e}")
        st.stop()
    setup_logging(settings.log_level)
    try:
        st_session.controller = ConsoleController(SQLiteQueryEngine(), settings)
    except Exception as e:
        logger.exception("console init failed")
        st.error(f"Could not start the SQL engine: {e}")
        st.stop()
    st_session.controller.start()


# ---------------------------
# Helpers
# ---------------------------
def get_controller() -> ConsoleController:
    """Return the controller object."""
    return st_session.controller


def sync_line_from_widget():
    """Push whatever is in the input box into the controller's current line."""
    get_controller().set_current_line(st_session.get("console_line", ""))


def sync_widget_from_line():
    """Mirror the controller's current line back into the input box."""
    st_session.console_line = get_controller().state.current_line


def on_enter():
    """Enter: submit-or-continue."""
    controller = get_controller()
    try:
        controller.submit_line(st_session.console_line)
    except Exception as e:
        logger.exception("submit failed")
        st.toast(f"Submit failed: {e}", icon="⚠️")
    sync_widget_from_line()


def on_force_submit():
    """Execute: run now, no terminator needed."""
    sync_line_from_widget()
    get_controller().force_submit()
    sync_widget_from_line()


def on_cancel():
    """Cancel: discard the buffered statement."""
    sync_line_from_widget()
    get_controller().cancel()
    sync_widget_from_line()


def on_clear_screen():
    """Clear screen."""
    get_controller().clear_screen()


def on_recall_previous():
    sync_line_from_widget()
    get_controller().recall_previous()
    sync_widget_from_line()


def on_recall_next():
    sync_line_from_widget()
    get_controller().recall_next()
    sync_widget_from_line()


def on_ai_toggle():
    get_controller().set_ai_assist(st_session.ai_toggle)


def on_learn_toggle():
    get_controller().set_tutor_mode(st_session.learn_toggle)


def on_explain_mode():
    get_controller().set_explain_mode(ExplainMode(st_session.explain_mode_choice))


def on_reset_database():
    get_controller().reset_database()


def reset_session():
    """Wipe transcript, recall and flags; keep the database."""
    get_controller().reset_session()
    st_session.console_line = ""
    get_controller().start()


def format_duration(seconds: float) -> str:
    """Format seconds as Hh Mm Ss, skipping hours if zero."""
    seconds = int(max(0, seconds))
    h = seconds // 3600
    m = (seconds % 3600) // 60
    s = seconds % 60
    if h:
        return f"{h}h {m:02d}m {s:02d}s"
    return f"{m}m {s:02d}s"


controller = get_controller()
state = controller.state

# typed "ai off" / "learn on" must show up in the widgets too
st_session.ai_toggle = state.ai_assist_enabled
st_session.learn_toggle = state.tutor_mode
st_session.explain_mode_choice = state.explain_mode.value

# ---------------------------
# SIDEBAR: assistant settings & database
# ---------------------------
with st.sidebar:
    st.markdown("# Settings")

    st.markdown("## Assistant")
    st.toggle(
        "🤖 AI assist",
        key="ai_toggle",
        on_change=on_ai_toggle,
        help="Translate Vietnamese requests, fix typos, warn about destructive SQL.",
    )
    st.toggle(
        "📚 Learn mode",
        key="learn_toggle",
        on_change=on_learn_toggle,
        help="Show optimization tips after each statement.",
    )
    st.radio(
        "Explanations",
        EXPLAIN_MODES,
        format_func=EXPLAIN_LABELS.get,
        key="explain_mode_choice",
        on_change=on_explain_mode,
    )
    st.divider()

    st.markdown("## Database")
    st.write("Restore the sample tables to their initial data.")
    st.button("Reset database", on_click=on_reset_database)
    st.divider()

    st.markdown("## Session Controls")
    st.write("Clear the transcript and command history.")
    st.button("Reset session", type="primary", on_click=reset_session)

# ---------------------------
# Header
# ---------------------------
st.title("SQL Tutor Console")
st.caption(
    f" · AI assist: **{'ON' if state.ai_assist_enabled else 'OFF'}**"
    f" · Learn mode: **{'ON' if state.tutor_mode else 'OFF'}**"
)

console_tab, session_tab = st.tabs(["Console", "Session"])

with console_tab:
    transcript = st.container(height=520, border=True)
    with transcript:
        text = controller.render()
        pending = renderer.render_pending(state)
        if pending:
            text = f"{text}\n{pending}" if text else pending
        st.code(text or " ", language=None)

    if state.awaiting_confirmation:
        st.warning("A destructive statement is waiting: answer **yes** or **no**.")

    # A form commits the box on Enter even when its text was set by recall,
    # and Enter presses the first submit button.
    with st.form("console", clear_on_submit=False, border=False):
        st.text_input(
            controller.prompt().strip(),
            key="console_line",
            placeholder="Type SQL and press Enter; end with ; to run",
        )

        b0, b1, b2, b3, b4, b5 = st.columns(6)
        b0.form_submit_button("⏎ Enter", key="submit_line", on_click=on_enter,
                              help="Submit the line; runs once the statement is complete.")
        b1.form_submit_button("▶ Execute", key="force_submit", type="primary",
                              on_click=on_force_submit,
                              help="Run the buffered statement now, no ; needed.")
        b2.form_submit_button("✖ Cancel", key="cancel", on_click=on_cancel,
                              help="Discard the current statement.")
        b3.form_submit_button("🧹 Clear screen", key="clear_screen",
                              on_click=on_clear_screen, help="Clear the transcript.")
        b4.form_submit_button("↑ Previous", key="recall_previous",
                              on_click=on_recall_previous, disabled=state.is_multiline)
        b5.form_submit_button("↓ Next", key="recall_next",
                              on_click=on_recall_next, disabled=state.is_multiline)

with session_tab:
    st.subheader("Session")
    st.caption("What has happened in this console so far.")

    entries = controller.entries()
    session_secs = (datetime.now() - state.session_started_at).total_seconds()

    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("Statements in history", f"{len(state.recall):,}")
    with c2:
        st.metric("Errors shown", f"{sum(1 for e in entries if e.kind == EntryKind.ERROR):,}")
    with c3:
        st.metric("Session time", format_duration(session_secs))

    if state.recall.get():
        st.markdown("#### Recent statements")
        st.code("\n".join(state.recall.get()[:10]), language="sql")

st.divider()
st.caption("Sample data only. Nothing you run here leaves this browser session.")
