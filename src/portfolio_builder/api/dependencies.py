"""Shared dependencies for API routes."""

from __future__ import annotations

from fastapi import HTTPException, status

from portfolio_builder.services.llm_providers import LLMError
from portfolio_builder.services.llm_service import LLMService


def get_llm_service() -> LLMService:
    """Build the LLM service from environment configuration.

    Raises:
        HTTPException: 503 if no provider can be configured (e.g. missing
            ``GEMINI_API_KEY``).
    """
    try:
        return LLMService()
    except LLMError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"AI text suggestions are not configured: {e}",
        ) from None
