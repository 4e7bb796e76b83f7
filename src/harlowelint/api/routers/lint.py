"""Lint endpoint: POST /lint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from harlowelint.api.deps import get_lint_service
from harlowelint.api.schemas import LintRequest
from harlowelint.models.errors import LintReport
from harlowelint.service.lint_service import LintService

router = APIRouter()


@router.post("", response_model=LintReport)
def lint_document(
    body: LintRequest, service: LintService = Depends(get_lint_service)
) -> LintReport:
    """Lint a Twee document and return its report."""
    return service.lint_string(body.content, body.source)
