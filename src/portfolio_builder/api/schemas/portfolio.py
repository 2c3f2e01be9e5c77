"""Pydantic schemas for portfolio rendering endpoints.

Field names follow the editor's camelCase JSON; snake_case names are
accepted as well.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from portfolio_builder.models import PortfolioState


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MetaSchema(_CamelModel):
    title: str
    description: str
    favicon: str
    og_image: str


class ThemeSchema(_CamelModel):
    """Theme settings. ``layout`` and ``font`` accept any string."""

    layout: str
    font: str
    primary_color: str
    background_color: str
    background_image: str
    background_overlay: float = Field(ge=0.0, le=1.0)
    text_color: str


class ProfileSchema(_CamelModel):
    name: str
    title: str
    bio: str
    avatar: str
    location: str
    resume_url: str


class ExperienceSchema(_CamelModel):
    id: str
    company: str
    role: str
    period: str
    description: str


class ProjectSchema(_CamelModel):
    id: str
    title: str
    description: str
    link: str
    image_url: str
    tags: list[str] = []


class SocialLinkSchema(_CamelModel):
    id: str
    platform: str
    url: str


class PortfolioSchema(_CamelModel):
    """Complete portfolio snapshot as sent by the editor."""

    meta: MetaSchema
    theme: ThemeSchema
    profile: ProfileSchema
    skills: list[str]
    experiences: list[ExperienceSchema]
    socials: list[SocialLinkSchema]
    projects: list[ProjectSchema]

    def to_state(self) -> PortfolioState:
        return PortfolioState.from_dict(self.model_dump(by_alias=True))

    @classmethod
    def from_state(cls, state: PortfolioState) -> PortfolioSchema:
        return cls.model_validate(state.to_dict())


class LayoutListResponse(BaseModel):
    layouts: list[str]
