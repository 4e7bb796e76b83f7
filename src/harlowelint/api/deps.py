"""Dependency injection for FastAPI — the app-scoped LintService."""

from __future__ import annotations

from fastapi import Request

from harlowelint.service.lint_service import LintService


def get_lint_service(request: Request) -> LintService:
    """FastAPI ``Depends`` provider for the LintService built in ``create_app``."""
    return request.app.state.lint_service
