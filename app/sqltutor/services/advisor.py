"""
Purpose: Pedagogical notes around an executed statement.
- explain_sql: clause-by-clause explanation (plain language or clause names).
- optimization_tips: anti-pattern heuristics shown in learn mode; advisory only.
- error_hint: best-effort nudge for common engine errors.

All heuristics are regex scans over the statement text; none of them block
execution.
"""

from __future__ import annotations
import re
from typing import Optional

from ..models import ExplainMode

_I = re.IGNORECASE | re.DOTALL

SELECT_COLS = re.compile(r"\bSELECT\s+(.+?)\s+FROM\b", _I)
FROM_TABLE = re.compile(r"\bFROM\s+(\w+)", _I)
WHERE_COND = re.compile(r"\bWHERE\s+(.+?)(?:\s+ORDER\b|\s+GROUP\b|\s+LIMIT\b|;|$)", _I)
ORDER_BY = re.compile(r"\bORDER\s+BY\s+(\w+)(?:\s+(ASC|DESC))?", _I)
GROUP_BY = re.compile(r"\bGROUP\s+BY\s+(\w+)", _I)
JOIN = re.compile(r"\bJOIN\b", _I)
INSERT_INTO = re.compile(r"\bINSERT\s+INTO\s+(\w+)", _I)
UPDATE_TABLE = re.compile(r"\bUPDATE\s+(\w+)", _I)
DELETE_FROM = re.compile(r"\bDELETE\s+FROM\s+(\w+)", _I)
CREATE_TABLE = re.compile(r"\bCREATE\s+TABLE\s+(\w+)", _I)
ALTER_TABLE = re.compile(r"\bALTER\s+TABLE\s+(\w+)", _I)

SELECT_STAR = re.compile(r"\bSELECT\s+\*", _I)
SELECT_KW = re.compile(r"\bSELECT\b", _I)
LIMIT_KW = re.compile(r"\bLIMIT\b", _I)
COUNT_CALL = re.compile(r"\bCOUNT\s*\(", _I)
LEADING_WILDCARD = re.compile(r"\bLIKE\s+'%", _I)
OR_KW = re.compile(r"\bOR\b", _I)
WHERE_KW = re.compile(r"\bWHERE\b", _I)

MISSING_OBJECT_CUES = ("no such table", "no such column", "not found", "does not exist")
SYNTAX_CUES = ("syntax", "incomplete input", "unrecognized token")


def explain_sql(sql: str, mode: ExplainMode = ExplainMode.EASY) -> str:
    easy = mode == ExplainMode.EASY
    parts: list[str] = []

    if m := SELECT_COLS.search(sql):
        cols = m.group(1).strip()
        if easy:
            parts.append(f"Fetch {'every column' if cols == '*' else f'columns: {cols}'}")
        else:
            parts.append(
                f"SELECT: Retrieves {'all columns' if cols == '*' else f'columns: {cols}'}"
            )

    if m := FROM_TABLE.search(sql):
        parts.append(
            f"From table: {m.group(1)}" if easy else f'FROM: Source table "{m.group(1)}"'
        )

    if m := WHERE_COND.search(sql):
        cond = m.group(1).strip()
        parts.append(f"Only rows where: {cond}" if easy else f'WHERE: Filter condition "{cond}"')

    if m := ORDER_BY.search(sql):
        direction = (m.group(2) or "ASC").upper()
        if easy:
            word = "descending" if direction == "DESC" else "ascending"
            parts.append(f"Sorted by {m.group(1)} ({word})")
        else:
            parts.append(f'ORDER BY: Sort by "{m.group(1)}" {direction}')

    if m := GROUP_BY.search(sql):
        parts.append(
            f"Grouped by: {m.group(1)}" if easy else f'GROUP BY: Group rows by "{m.group(1)}"'
        )

    if JOIN.search(sql):
        parts.append(
            "Links tables together" if easy else "JOIN: Combines rows from multiple tables"
        )

    for rx, easy_fmt, tech_fmt in (
        (INSERT_INTO, "Adds data to table: {}", 'INSERT: Add new row(s) to "{}"'),
        (UPDATE_TABLE, "Changes data in table: {}", 'UPDATE: Modify rows in "{}"'),
        (DELETE_FROM, "Removes rows from table: {}", 'DELETE: Remove rows from "{}"'),
        (CREATE_TABLE, "Creates a new table: {}", 'CREATE TABLE: Creates new table "{}"'),
        (ALTER_TABLE, "Changes the structure of table: {}", 'ALTER TABLE: Modifies table structure "{}"'),
    ):
        if m := rx.search(sql):
            parts.append((easy_fmt if easy else tech_fmt).format(m.group(1)))

    return "\n".join(parts)


def optimization_tips(sql: str) -> list[str]:
    tips: list[str] = []
    if SELECT_STAR.search(sql):
        tips.append("Name the columns you need instead of SELECT * to read less data")
    if SELECT_KW.search(sql) and not LIMIT_KW.search(sql) and not COUNT_CALL.search(sql):
        tips.append("Add LIMIT to cap the result while you are experimenting")
    if LEADING_WILDCARD.search(sql):
        tips.append("LIKE with a leading % cannot use an index")
    if OR_KW.search(sql) and WHERE_KW.search(sql):
        tips.append("OR in a filter can be slow; consider IN or UNION instead")
    return tips


def error_hint(message: str) -> Optional[str]:
    text = (message or "").lower()
    if any(cue in text for cue in MISSING_OBJECT_CUES):
        return 'Hint: check the table/column name. Type "tables" to list the tables.'
    if any(cue in text for cue in SYNTAX_CUES):
        return "Hint: check the SQL syntax. Example: SELECT column FROM table WHERE condition;"
    return None
