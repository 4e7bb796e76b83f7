"""Orchestrates the lint pipeline: Split → Extract → Validate + Balance → Report."""

from __future__ import annotations

from pathlib import Path

from harlowelint.linter.balance import check_balance
from harlowelint.linter.report import aggregate
from harlowelint.linter.validator import validate_macros
from harlowelint.models.errors import Diagnostic, LintReport
from harlowelint.models.passage import Passage
from harlowelint.models.vocabulary import Vocabulary
from harlowelint.parser.extractor import extract_macros
from harlowelint.parser.loader import DocumentLoader
from harlowelint.parser.splitter import split_passages

DEFAULT_SOURCE = "<string>"


class LintPipeline:
    """Lints Twee documents against one vocabulary.

    Holds no per-document state, so one instance can lint any number of
    documents, from any number of threads.
    """

    def __init__(self, vocabulary: Vocabulary) -> None:
        self._vocabulary = vocabulary

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    def lint_passage(self, passage: Passage) -> list[Diagnostic]:
        """Name diagnostics for the passage, followed by its balance diagnostics."""
        tokens = extract_macros(passage.content, passage.content_line, passage.content_column)
        errors = validate_macros(tokens, passage.name, self._vocabulary)
        errors.extend(
            check_balance(
                passage.content, passage.name, passage.content_line, passage.content_column
            )
        )
        return errors

    def lint(self, text: str, source: str = DEFAULT_SOURCE) -> LintReport:
        passages = split_passages(text)
        return aggregate(source, passages, [self.lint_passage(p) for p in passages])


def lint_string(text: str, vocabulary: Vocabulary, source: str = DEFAULT_SOURCE) -> LintReport:
    """Lint Twee source held in memory; *source* only labels the report."""
    return LintPipeline(vocabulary).lint(text, source)


def lint_file(
    path: Path, vocabulary: Vocabulary, loader: DocumentLoader | None = None
) -> LintReport:
    """Read and lint one Twee file. Read failures raise ``DocumentError``."""
    loader = loader or DocumentLoader()
    return LintPipeline(vocabulary).lint(loader.load(path), str(path))
