"""Macro name validation against the vocabulary."""

from __future__ import annotations

from collections.abc import Iterable

from harlowelint.linter.suggest import suggest_macro
from harlowelint.models.errors import Diagnostic, DiagnosticKind
from harlowelint.models.passage import MacroToken
from harlowelint.models.vocabulary import Vocabulary


def validate_macro(token: MacroToken, passage: str, vocabulary: Vocabulary) -> Diagnostic | None:
    """Return an ``invalid-macro`` diagnostic if *token* is not a known name.

    Matching is exact and case-sensitive; case only matters for the
    suggestion.
    """
    if token.name in vocabulary:
        return None
    return Diagnostic(
        kind=DiagnosticKind.INVALID_MACRO,
        passage=passage,
        line=token.line,
        column=token.column,
        message=f"Unknown macro name: '{token.name}'",
        suggestion=suggest_macro(token.name, vocabulary),
    )


def validate_macros(
    tokens: Iterable[MacroToken], passage: str, vocabulary: Vocabulary
) -> list[Diagnostic]:
    errors: list[Diagnostic] = []
    for token in tokens:
        error = validate_macro(token, passage, vocabulary)
        if error is not None:
            errors.append(error)
    return errors
