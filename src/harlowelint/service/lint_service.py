"""Lint service — core service layer reused by the CLI and REST API."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from harlowelint.linter.pipeline import DEFAULT_SOURCE, LintPipeline
from harlowelint.linter.suggest import suggest_macro
from harlowelint.models.errors import LintReport
from harlowelint.models.vocabulary import Vocabulary
from harlowelint.parser.loader import DocumentError, DocumentLoader

logger = logging.getLogger("harlowelint.service")

# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass
class DocumentFailure:
    """A document that could not be read."""

    path: Path
    message: str


@dataclass
class BatchResult:
    """Outcome of linting several documents.

    ``reports`` and ``failures`` each keep the order the paths were given.
    """

    reports: list[LintReport] = field(default_factory=list)
    failures: list[DocumentFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures and all(r.is_valid for r in self.reports)


@dataclass
class Suggestion:
    """Lookup result for a single macro name."""

    name: str
    valid: bool
    suggestion: str | None


# ---------------------------------------------------------------------------
# LintService
# ---------------------------------------------------------------------------


class LintService:
    """Lints strings and files against one read-only vocabulary.

    Documents share nothing but the vocabulary, so batches are linted in
    parallel, one task per document.
    """

    def __init__(
        self,
        vocabulary: Vocabulary,
        *,
        loader: DocumentLoader | None = None,
        workers: int = 4,
    ) -> None:
        self._pipeline = LintPipeline(vocabulary)
        self._loader = loader or DocumentLoader()
        self._workers = max(1, workers)

    @property
    def vocabulary(self) -> Vocabulary:
        return self._pipeline.vocabulary

    def lint_string(self, content: str, source: str = DEFAULT_SOURCE) -> LintReport:
        return self._pipeline.lint(content, source)

    def lint_file(self, path: Path) -> LintReport:
        """Lint one file. Read failures propagate as ``DocumentError``."""
        report = self._pipeline.lint(self._loader.load(path), str(path))
        logger.debug(
            "Linted %s: %d passages, %d diagnostics",
            path, report.passage_count, len(report.diagnostics),
        )
        return report

    def lint_paths(self, paths: Sequence[Path]) -> BatchResult:
        """Lint every path; a failure on one document does not stop the rest."""
        result = BatchResult()
        if not paths:
            return result
        with ThreadPoolExecutor(max_workers=min(self._workers, len(paths))) as pool:
            outcomes = list(pool.map(self._lint_or_fail, paths))
        for outcome in outcomes:
            if isinstance(outcome, DocumentFailure):
                result.failures.append(outcome)
            else:
                result.reports.append(outcome)
        return result

    def suggest(self, name: str) -> Suggestion:
        valid = name in self.vocabulary
        return Suggestion(
            name=name,
            valid=valid,
            suggestion=None if valid else suggest_macro(name, self.vocabulary),
        )

    # -- internal ------------------------------------------------------------

    def _lint_or_fail(self, path: Path) -> LintReport | DocumentFailure:
        try:
            return self.lint_file(path)
        except DocumentError as exc:
            logger.warning("Skipping %s: %s", path, exc)
            return DocumentFailure(path=path, message=str(exc))
