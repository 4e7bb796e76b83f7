"""Service layer shared by the CLI and REST API."""

from harlowelint.service.lint_service import BatchResult, DocumentFailure, LintService

__all__ = [
    "BatchResult",
    "DocumentFailure",
    "LintService",
]
