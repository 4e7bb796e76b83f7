"""Parenthesis balance checking for passage content."""

from __future__ import annotations

from harlowelint.models.errors import Diagnostic, DiagnosticKind
from harlowelint.parser.position import LineIndex


def check_balance(
    content: str,
    passage: str,
    start_line: int = 1,
    start_column: int = 1,
) -> list[Diagnostic]:
    """Report unmatched ``)`` and unclosed ``(`` in one passage.

    Works on raw characters: parens inside string literals count too.
    A stray ``)`` is reported where it occurs and the depth is reset to
    zero, so it does not cancel a later ``(``. Every opener still on the
    stack at the end is reported, in the order the openers appeared.
    """
    index = LineIndex(content, start_line, start_column)
    errors: list[Diagnostic] = []
    depth = 0
    open_positions: list[int] = []

    for i, char in enumerate(content):
        if char == "(":
            depth += 1
            open_positions.append(i)
        elif char == ")":
            depth -= 1
            if open_positions:
                open_positions.pop()
            if depth < 0:
                line, column = index.position(i)
                errors.append(
                    Diagnostic(
                        kind=DiagnosticKind.UNMATCHED_CLOSE,
                        passage=passage,
                        line=line,
                        column=column,
                        message="Unexpected closing parenthesis",
                    )
                )
                depth = 0

    for i in open_positions:
        line, column = index.position(i)
        errors.append(
            Diagnostic(
                kind=DiagnosticKind.UNCLOSED_MACRO,
                passage=passage,
                line=line,
                column=column,
                message="Unclosed macro or parenthesis",
            )
        )
    return errors
