"""AI text suggestion routes for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_builder.api.dependencies import get_llm_service
from portfolio_builder.api.schemas.ai import (
    BioRequest,
    ProjectDescriptionRequest,
    TextSuggestionResponse,
)
from portfolio_builder.services.ai_text import enhance_project_description, generate_bio
from portfolio_builder.services.llm_providers import LLMError
from portfolio_builder.services.llm_service import LLMService

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/bio", response_model=TextSuggestionResponse)
def suggest_bio(
    request: BioRequest,
    service: Annotated[LLMService, Depends(get_llm_service)],
) -> TextSuggestionResponse:
    """Generate a replacement biography."""
    try:
        text = generate_bio(request.name, request.title, request.current_bio, service=service)
    except LLMError:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to generate bio. Try again.",
        ) from None
    return TextSuggestionResponse(text=text)


@router.post("/project-description", response_model=TextSuggestionResponse)
def suggest_project_description(
    request: ProjectDescriptionRequest,
    service: Annotated[LLMService, Depends(get_llm_service)],
) -> TextSuggestionResponse:
    """Rewrite a project description."""
    try:
        text = enhance_project_description(request.title, request.description, service=service)
    except LLMError:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to enhance description.",
        ) from None
    return TextSuggestionResponse(text=text)
