"""Structured lint diagnostics and the per-document report."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, computed_field


class DiagnosticKind(StrEnum):
    INVALID_MACRO = "invalid-macro"
    UNCLOSED_MACRO = "unclosed-macro"
    UNMATCHED_CLOSE = "unmatched-parenthesis"


class Diagnostic(BaseModel):
    """A single problem found in a passage, with an optional correction."""

    model_config = ConfigDict(frozen=True)

    kind: DiagnosticKind
    passage: str
    line: int = Field(ge=1)
    column: int = Field(ge=1)
    message: str
    suggestion: str | None = None


class LintReport(BaseModel):
    """Result of linting one document."""

    model_config = ConfigDict(frozen=True)

    source: str
    passage_count: int = Field(ge=0)
    diagnostics: tuple[Diagnostic, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return not self.diagnostics

    def by_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        """Return the diagnostics of one kind, in report order."""
        return [d for d in self.diagnostics if d.kind == kind]
