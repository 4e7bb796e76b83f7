"""Lint engine for Harlowe macros in Twee documents."""

from harlowelint.linter.balance import check_balance
from harlowelint.linter.format import format_report
from harlowelint.linter.pipeline import LintPipeline, lint_file, lint_string
from harlowelint.linter.report import aggregate
from harlowelint.linter.suggest import levenshtein, suggest_macro
from harlowelint.linter.validator import validate_macro, validate_macros

__all__ = [
    "LintPipeline",
    "aggregate",
    "check_balance",
    "format_report",
    "levenshtein",
    "lint_file",
    "lint_string",
    "suggest_macro",
    "validate_macro",
    "validate_macros",
]
