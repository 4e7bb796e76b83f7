"""Vocabulary endpoints: GET /vocabulary, GET /vocabulary/suggest."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, Query

from harlowelint.api.deps import get_lint_service
from harlowelint.api.schemas import SuggestionResponse, VocabularyResponse
from harlowelint.service.lint_service import LintService

router = APIRouter()


@router.get("", response_model=VocabularyResponse)
async def list_macros(service: LintService = Depends(get_lint_service)) -> VocabularyResponse:
    """List every recognized macro name, sorted."""
    vocabulary = service.vocabulary
    return VocabularyResponse(count=len(vocabulary), macros=list(vocabulary))


@router.get("/suggest", response_model=SuggestionResponse)
async def suggest_macro(
    name: str = Query(min_length=1, description="Macro name to check"),
    service: LintService = Depends(get_lint_service),
) -> SuggestionResponse:
    """Check one macro name and suggest a correction if it is unknown."""
    return SuggestionResponse(**asdict(service.suggest(name)))
