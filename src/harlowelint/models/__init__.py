"""Pydantic domain models for the Harlowe linter."""

from harlowelint.models.errors import Diagnostic, DiagnosticKind, LintReport
from harlowelint.models.passage import MacroToken, Passage
from harlowelint.models.vocabulary import Vocabulary

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "LintReport",
    "MacroToken",
    "Passage",
    "Vocabulary",
]
