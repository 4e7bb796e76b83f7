"""Human-readable rendering of lint reports."""

from __future__ import annotations

from harlowelint.models.errors import LintReport


def format_report(report: LintReport) -> str:
    lines = [
        "",
        f"Linting: {report.source}",
        f"Passages checked: {report.passage_count}",
        "",
    ]
    if report.is_valid:
        lines.append("✓ No errors found!")
        return "\n".join(lines) + "\n"

    lines.append(f"Errors ({len(report.diagnostics)}):")
    for error in report.diagnostics:
        lines.append(
            f"  {error.passage} (line {error.line}, col {error.column}): {error.message}"
        )
        if error.suggestion:
            lines.append(f"    Did you mean: {error.suggestion}?")
    return "\n".join(lines) + "\n"
