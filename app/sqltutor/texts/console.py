"""Static console screens: welcome banner, help, table listing, desc output."""

from __future__ import annotations
from textwrap import dedent
from typing import Optional

from ..services.seed_data import SCHEMAS


def welcome_banner() -> str:
    return dedent(
        """
        +------------------------------------------------------------+
        |   MySQL-style Command Line Client - SQL Tutor              |
        +------------------------------------------------------------+
        |  Type SQL the way you would in a real CLI:                 |
        |    * Enter         = new line (keep typing)                |
        |    * end with ;    = run the statement                     |
        |    * Execute       = run now, no ; needed                  |
        |                                                            |
        |  Type "help" for the full guide.                           |
        +------------------------------------------------------------+
        """
    ).strip("\n")


def help_text() -> str:
    return dedent(
        """
        HOW TO USE (LIKE THE MYSQL CLI)
        ============================================================

        Typing statements:
        ------------------------------------------------------------
          Enter          = new line (continue the statement)
          end with ;     = run the statement
          Execute        = run now (no ; needed)
          Up / Down      = browse previous statements
          Clear screen   = wipe the transcript
          Cancel         = discard the statement being typed

        Console commands:
        ------------------------------------------------------------
          help           - show this guide
          clear          - clear the screen
          reset          - restore the sample database
          tables         - list the sample tables
          desc <table>   - show a table's columns
          ai on/off      - turn AI assistance on or off
          learn on/off   - turn optimization tips on or off

        Vietnamese requests (converted to SQL by the assistant):
        ------------------------------------------------------------
          "lấy tất cả từ students"
          "đếm số lượng trong products"
          "sắp xếp employees theo salary giảm dần"

        Multi-line SQL:
        ------------------------------------------------------------
          mysql> CREATE TABLE users (
              ->   id INT PRIMARY KEY,
              ->   name VARCHAR(100)
              -> );
        """
    ).strip("\n")


def tables_listing() -> str:
    width = max(len(name) for name in SCHEMAS)
    lines = ["SAMPLE TABLES:", "-" * 40]
    for name, cols in SCHEMAS.items():
        columns = ", ".join(col for col, _ in cols)
        lines.append(f"  * {name.ljust(width)}  ({columns})")
    return "\n".join(lines)


def describe_table(name: str) -> Optional[str]:
    cols = SCHEMAS.get((name or "").lower())
    if cols is None:
        return None
    lines = [f"Table structure: {name}", "-" * 40]
    lines += [f"  {col} {sql_type}" for col, sql_type in cols]
    return "\n".join(lines)


def unknown_table(name: str) -> str:
    return f'Table "{name}" does not exist!'


def reset_done() -> str:
    return "Database restored to its initial state!"


def ai_toggled(enabled: bool) -> str:
    return f"AI assistance turned {'ON' if enabled else 'OFF'}"


def learn_toggled(enabled: bool) -> str:
    if enabled:
        return "Learning mode turned ON - optimization tips will be shown"
    return "Learning mode turned OFF"


def nothing_to_confirm() -> str:
    return "Nothing is waiting for confirmation."


def engine_not_ready() -> str:
    return "The database is still loading. Try again in a moment."


def engine_failed() -> str:
    return "The statement failed without an error message."
