"""FastAPI application factory for the Harlowe linter."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from harlowelint import __version__
from harlowelint.api.middleware import RequestBodyLimitMiddleware, RequestTimingMiddleware
from harlowelint.api.routers import lint, vocabulary
from harlowelint.api.schemas import HealthResponse
from harlowelint.models.vocabulary import Vocabulary
from harlowelint.parser.docs import load_vocabulary
from harlowelint.parser.loader import DocumentLoader
from harlowelint.service.lint_service import LintService
from harlowelint.settings import Settings

logger = logging.getLogger("harlowelint.api")


def create_app(settings: Settings | None = None, vocab: Vocabulary | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    The vocabulary is loaded once here (from ``settings.vocabulary_path``
    unless *vocab* is given); a ``VocabularyError`` aborts startup.
    """
    if settings is None:
        settings = Settings()
    if vocab is None:
        vocab = load_vocabulary(settings.vocabulary_path)

    app = FastAPI(
        title="Harlowe Linter",
        description="Validates Harlowe macro names and delimiters in Twee documents.",
        version=__version__,
    )
    app.state.settings = settings
    app.state.lint_service = LintService(
        vocab,
        loader=DocumentLoader(max_document_size=settings.max_document_size),
        workers=settings.lint_workers,
    )

    # Middleware
    app.add_middleware(RequestBodyLimitMiddleware)
    app.add_middleware(RequestTimingMiddleware)

    app.include_router(lint.router, prefix="/lint", tags=["lint"])
    app.include_router(vocabulary.router, prefix="/vocabulary", tags=["vocabulary"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    return app


def main() -> None:
    """Run the REST API server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger.info(
        "Harlowe Linter API v%s starting (host=%s, port=%d)",
        __version__, settings.api_server_host, settings.api_server_port,
    )

    uvicorn.run(
        "harlowelint.api.app:create_app",
        factory=True,
        host=settings.api_server_host,
        port=settings.api_server_port,
        log_level=settings.log_level.lower(),
    )
