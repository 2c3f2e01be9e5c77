"""Pydantic schemas for AI text suggestion endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BioRequest(BaseModel):
    """Request body for generating a biography."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    title: str
    current_bio: str = ""


class ProjectDescriptionRequest(BaseModel):
    """Request body for rewriting a project description."""

    title: str
    description: str = ""


class TextSuggestionResponse(BaseModel):
    text: str
