"""
Unit Tests for the Console Renderer

Tests grid layout, NULL cells, display truncation and prompts.
"""

from sqltutor.models import EntryKind, TableData
from sqltutor.persistence.transcript import Transcript
from sqltutor.services import renderer
from sqltutor.state import SessionState


def _table(rows, columns=("id", "name")):
    return TableData.of(columns, rows)


class TestRenderTable:
    """Fixed-width grid drawing."""

    def test_layout(self):
        out = renderer.render_table(_table([[1, "Ann"], [2, "Bartholomew"]]))
        assert out.splitlines() == [
            "+------+-------------+",
            "| id   | name        |",
            "+------+-------------+",
            "| 1    | Ann         |",
            "| 2    | Bartholomew |",
            "+------+-------------+",
        ]

    def test_null_cell(self):
        lines = renderer.render_table(_table([[1, "Ann"], [2, None]])).splitlines()
        assert lines[4] == "| 2    | NULL |"

    def test_widths_respect_floor(self):
        table = _table([[1, "x"]], columns=("a", "bb"))
        assert renderer.column_widths(table) == [4, 4]
        assert renderer.column_widths(table, min_width=1) == [1, 2]

    def test_truncated_display(self):
        table = _table([[i, f"row{i}"] for i in range(30)])
        lines = renderer.render_table(table).splitlines()

        body = [line for line in lines if line.startswith("| ") and "row" in line]
        assert len(body) == 25
        assert lines[-1] == "... and 5 more rows"
        assert len(table.rows) == 30

    def test_exactly_at_limit_not_truncated(self):
        table = _table([[i, "x"] for i in range(25)])
        assert "more rows" not in renderer.render_table(table)

    def test_custom_limit(self):
        table = _table([[i, "x"] for i in range(5)])
        out = renderer.render_table(table, max_rows=2)
        assert out.endswith("... and 3 more rows")

    def test_empty_rows(self):
        out = renderer.render_table(_table([]))
        assert out.splitlines() == [
            "+------+------+",
            "| id   | name |",
            "+------+------+",
            "+------+------+",
        ]


class TestEntries:
    """Transcript entry rendering."""

    def test_prompts_on_echo(self):
        t = Transcript()
        t.append(EntryKind.INPUT, "SELECT *")
        t.append(EntryKind.CONTINUATION, "FROM students;")
        t.append(EntryKind.INFO, "done")
        assert renderer.render_transcript(t) == (
            "mysql> SELECT *\n    -> FROM students;\ndone"
        )

    def test_result_entry_draws_grid_then_summary(self):
        t = Transcript()
        entry = t.append_result("1 row(s) in set (0ms)", _table([[1, "Ann"]]))
        out = renderer.render_entry(entry)
        assert out.startswith("+------+------+")
        assert out.endswith("1 row(s) in set (0ms)")

    def test_row_limit_passed_through(self):
        t = Transcript()
        t.append_result("3 row(s)", _table([[1, "a"], [2, "b"], [3, "c"]]))
        assert "... and 2 more rows" in renderer.render_transcript(t, max_rows=1)


class TestPrompts:
    """Prompt selection and echo of pending lines."""

    def test_prompt_switches_when_buffering(self):
        state = SessionState()
        assert renderer.prompt_for(state) == "mysql> "
        state.line_buffer.append("SELECT *")
        assert renderer.prompt_for(state) == "    -> "

    def test_echo_lines_skips_empty_continuations(self):
        assert renderer.echo_lines(["SELECT *", "", "FROM t;"]) == [
            (EntryKind.INPUT, "SELECT *"),
            (EntryKind.CONTINUATION, "FROM t;"),
        ]

    def test_render_pending(self):
        state = SessionState(line_buffer=["CREATE TABLE t (", "  id INT"])
        assert renderer.render_pending(state) == "mysql> CREATE TABLE t (\n    ->   id INT"
