"""API request/response Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LintRequest(BaseModel):
    """Request body for POST /lint."""

    content: str = Field(description="Twee document source to lint")
    source: str = Field(default="<string>", description="Label echoed back in the report")


class VocabularyResponse(BaseModel):
    """Response for GET /vocabulary."""

    count: int
    macros: list[str] = []


class SuggestionResponse(BaseModel):
    """Response for GET /vocabulary/suggest."""

    name: str
    valid: bool
    suggestion: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = ""
