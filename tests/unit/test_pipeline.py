"""Tests for report aggregation and the end-to-end lint pipeline."""

from __future__ import annotations

import pytest

from harlowelint.linter.pipeline import LintPipeline, lint_file, lint_string
from harlowelint.linter.report import aggregate
from harlowelint.models.errors import Diagnostic, DiagnosticKind
from harlowelint.models.vocabulary import Vocabulary
from harlowelint.parser.loader import DocumentNotFoundError
from harlowelint.parser.splitter import split_passages
from tests.conftest import (
    EXAMPLE_STORY,
    EXAMPLE_WITH_ERRORS,
    FIXTURES_DIR,
    INVALID_STORY,
    VALID_STORY,
)


def _diag(passage: str, line: int) -> Diagnostic:
    return Diagnostic(
        kind=DiagnosticKind.UNCLOSED_MACRO,
        passage=passage,
        line=line,
        column=1,
        message="Unclosed macro or parenthesis",
    )


class TestAggregate:
    def test_keeps_passage_then_scan_order(self) -> None:
        passages = split_passages(":: A\nx\n:: B\ny\n")
        report = aggregate("doc", passages, [[_diag("A", 2), _diag("A", 1)], [_diag("B", 4)]])
        assert [(d.passage, d.line) for d in report.diagnostics] == [("A", 2), ("A", 1), ("B", 4)]
        assert report.passage_count == 2
        assert report.is_valid is False

    def test_no_diagnostics_is_valid(self) -> None:
        passages = split_passages(":: A\nx\n")
        report = aggregate("doc", passages, [[]])
        assert report.is_valid is True
        assert report.source == "doc"

    def test_mismatched_lengths_rejected(self) -> None:
        with pytest.raises(ValueError, match="expected 1"):
            aggregate("doc", split_passages(":: A\n"), [])


class TestLintString:
    def test_valid_story(self, vocabulary: Vocabulary) -> None:
        report = lint_string(VALID_STORY, vocabulary, "test-string.twee")
        assert report.source == "test-string.twee"
        assert report.passage_count == 2
        assert report.is_valid
        assert report.diagnostics == ()

    def test_invalid_story(self, vocabulary: Vocabulary) -> None:
        report = lint_string(INVALID_STORY, vocabulary)
        assert report.source == "<string>"
        assert not report.is_valid
        invalid = report.by_kind(DiagnosticKind.INVALID_MACRO)
        assert len(invalid) >= 2
        first = report.diagnostics[0]
        assert first.kind == DiagnosticKind.INVALID_MACRO
        assert first.suggestion == "set"
        assert (first.line, first.column) == (2, 1)
        assert invalid[1].message == "Unknown macro name: 'invalidmacro'"
        assert invalid[1].suggestion is None

    def test_no_headers(self, vocabulary: Vocabulary) -> None:
        report = lint_string("(sett: $x to 1", vocabulary)
        assert report.passage_count == 0
        assert report.is_valid

    def test_name_diagnostics_precede_balance_diagnostics(self, vocabulary: Vocabulary) -> None:
        report = lint_string(":: A\n(set: (prnt: 1)\n", vocabulary)
        assert [d.kind for d in report.diagnostics] == [
            DiagnosticKind.INVALID_MACRO,
            DiagnosticKind.UNCLOSED_MACRO,
        ]

    def test_diagnostics_are_document_positioned(self, vocabulary: Vocabulary) -> None:
        text = ":: Intro\nHello\n\n:: Next [t]\n\n   (sett: $x)\n  (if: $x\n"
        report = lint_string(text, vocabulary)
        assert [(d.passage, d.line, d.column) for d in report.diagnostics] == [
            ("Next", 6, 4),
            ("Next", 7, 3),
        ]
        lines = text.split("\n")
        for d in report.diagnostics:
            assert lines[d.line - 1][d.column - 1] == "("

    def test_idempotent(self, vocabulary: Vocabulary) -> None:
        first = lint_string(INVALID_STORY, vocabulary, "story")
        second = lint_string(INVALID_STORY, vocabulary, "story")
        assert first.model_dump_json() == second.model_dump_json()

    def test_pipeline_is_reusable(self, pipeline: LintPipeline) -> None:
        assert pipeline.lint(INVALID_STORY) == pipeline.lint(INVALID_STORY)
        assert pipeline.lint(VALID_STORY).is_valid


class TestLintFile:
    def test_example_story_is_valid(self, harlowe_vocabulary: Vocabulary) -> None:
        report = lint_file(EXAMPLE_STORY, harlowe_vocabulary)
        assert report.is_valid, report.diagnostics
        assert report.passage_count == 6
        assert report.source == str(EXAMPLE_STORY)

    def test_example_with_errors(self, harlowe_vocabulary: Vocabulary) -> None:
        report = lint_file(EXAMPLE_WITH_ERRORS, harlowe_vocabulary)
        assert not report.is_valid
        assert [
            (d.kind, d.passage, d.line, d.column, d.suggestion) for d in report.diagnostics
        ] == [
            (DiagnosticKind.INVALID_MACRO, "Start", 2, 1, "set"),
            (DiagnosticKind.UNCLOSED_MACRO, "Start", 3, 1, None),
            (DiagnosticKind.INVALID_MACRO, "Chapter1", 7, 1, "if"),
            (DiagnosticKind.UNCLOSED_MACRO, "Chapter1", 8, 20, None),
            (DiagnosticKind.INVALID_MACRO, "End", 12, 1, "print"),
            (DiagnosticKind.UNCLOSED_MACRO, "End", 11, 1, None),
        ]

    def test_missing_file_raises(self, vocabulary: Vocabulary) -> None:
        with pytest.raises(DocumentNotFoundError):
            lint_file(FIXTURES_DIR / "missing.twee", vocabulary)
