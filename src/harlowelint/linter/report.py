"""Combine per-passage diagnostics into a document report."""

from __future__ import annotations

from collections.abc import Sequence

from harlowelint.models.errors import Diagnostic, LintReport
from harlowelint.models.passage import Passage


def aggregate(
    source: str,
    passages: Sequence[Passage],
    diagnostics_per_passage: Sequence[Sequence[Diagnostic]],
) -> LintReport:
    """Build a report, keeping passage order and then scan order."""
    if len(passages) != len(diagnostics_per_passage):
        raise ValueError(
            f"Got diagnostics for {len(diagnostics_per_passage)} passages, "
            f"expected {len(passages)}"
        )
    diagnostics = tuple(d for group in diagnostics_per_passage for d in group)
    return LintReport(source=source, passage_count=len(passages), diagnostics=diagnostics)
