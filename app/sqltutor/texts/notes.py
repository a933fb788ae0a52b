"""Assistant notes, warnings and result summaries emitted by the pipeline."""

from __future__ import annotations


def translated(sql: str) -> str:
    return f"Vietnamese -> SQL:\n   {sql}"


def corrected(fixes: list[str], fixed_sql: str) -> str:
    body = "\n".join(f"   * {f}" for f in fixes)
    return f"Corrections:\n{body}\n   -> {fixed_sql}"


def confirm_prompt() -> str:
    return 'Type "yes" to run it anyway or "no" to cancel.'


def confirm_reprompt(answer: str) -> str:
    return f'"{answer}" is not an answer. Type "yes" to run the statement or "no" to cancel.'


def cancelled() -> str:
    return "Statement cancelled."


def interrupted() -> str:
    return "^C"


def error_line(message: str) -> str:
    return f"ERROR: {message}"


def rows_in_set(count: int, elapsed_ms: float) -> str:
    return f"{count} row(s) in set ({elapsed_ms:.0f}ms)"


def rows_affected(count: int, elapsed_ms: float) -> str:
    return f"Query OK, {count} row(s) affected ({elapsed_ms:.0f}ms)"


def explanation(body: str) -> str:
    return f"Explanation:\n{body}"


def optimization_tips(tips: list[str]) -> str:
    return "Optimization tips:\n" + "\n".join(f"  * {t}" for t in tips)
