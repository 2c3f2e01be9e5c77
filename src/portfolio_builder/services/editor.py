"""Editor operations on portfolio snapshots.

Every function returns a new :class:`PortfolioState`; the input snapshot is
never modified. Field names use the model's snake_case attribute names.
"""

from __future__ import annotations

import uuid
from dataclasses import fields, replace
from typing import Any, TypeVar

from portfolio_builder.constants.theme_constants import Platform
from portfolio_builder.models import Experience, PortfolioState, Project, SocialLink

__all__ = [
    "add_experience",
    "add_project",
    "add_social",
    "new_id",
    "parse_skills",
    "parse_tags",
    "remove_experience",
    "remove_project",
    "remove_social",
    "set_project_tags_from_text",
    "set_skills_from_text",
    "update_experience",
    "update_meta",
    "update_profile",
    "update_project",
    "update_social",
    "update_theme",
]

_T = TypeVar("_T")

DEFAULT_PROJECT = {
    "title": "New Project",
    "description": "A brief description of your project.",
    "link": "#",
    "image_url": "",
    "tags": ("React", "Design"),
}

DEFAULT_EXPERIENCE = {
    "company": "Company Name",
    "role": "Role Title",
    "period": "2023 - Present",
    "description": "Describe your role and achievements...",
}


def new_id() -> str:
    """Return a fresh identifier for a list entry."""
    return uuid.uuid4().hex


def _changed(record: _T, changes: dict[str, Any]) -> _T:
    """Return a copy of *record* with *changes* applied.

    Raises:
        KeyError: If a change names a field the record does not have.
    """
    allowed = {f.name for f in fields(record)} - {"id"}
    unknown = sorted(set(changes) - allowed)
    if unknown:
        msg = f"Unknown field(s) for {type(record).__name__}: {', '.join(unknown)}"
        raise KeyError(msg)
    if "tags" in changes:
        tags = changes["tags"]
        changes = {**changes, "tags": (tags,) if isinstance(tags, str) else tuple(tags)}
    return replace(record, **changes)


def _replace_at(items: tuple[_T, ...], index: int, item: _T) -> tuple[_T, ...]:
    if not 0 <= index < len(items):
        raise IndexError(f"Index {index} out of range for {len(items)} item(s)")
    return items[:index] + (item,) + items[index + 1 :]


def _remove_at(items: tuple[_T, ...], index: int) -> tuple[_T, ...]:
    if not 0 <= index < len(items):
        raise IndexError(f"Index {index} out of range for {len(items)} item(s)")
    return items[:index] + items[index + 1 :]


# ---------------------------------------------------------------------------
# Profile / theme / meta
# ---------------------------------------------------------------------------


def update_profile(state: PortfolioState, **changes: Any) -> PortfolioState:
    return replace(state, profile=_changed(state.profile, changes))


def update_theme(state: PortfolioState, **changes: Any) -> PortfolioState:
    return replace(state, theme=_changed(state.theme, changes))


def update_meta(state: PortfolioState, **changes: Any) -> PortfolioState:
    return replace(state, meta=_changed(state.meta, changes))


def parse_skills(text: str) -> tuple[str, ...]:
    """Split comma-separated *text* into trimmed, non-empty skills."""
    return tuple(part.strip() for part in text.split(",") if part.strip())


def set_skills_from_text(state: PortfolioState, text: str) -> PortfolioState:
    return replace(state, skills=parse_skills(text))


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------


def parse_tags(text: str) -> tuple[str, ...]:
    """Split comma-separated *text* into trimmed tags.

    Empty entries are kept, so ``"a,,b"`` yields an empty middle tag.
    """
    return tuple(part.strip() for part in text.split(","))


def add_project(state: PortfolioState, **overrides: Any) -> PortfolioState:
    """Append a placeholder project, optionally overriding its fields."""
    project = _changed(Project(id=new_id(), **DEFAULT_PROJECT), overrides)
    return replace(state, projects=state.projects + (project,))


def update_project(state: PortfolioState, index: int, **changes: Any) -> PortfolioState:
    if not 0 <= index < len(state.projects):
        raise IndexError(f"Index {index} out of range for {len(state.projects)} item(s)")
    project = _changed(state.projects[index], changes)
    return replace(state, projects=_replace_at(state.projects, index, project))


def set_project_tags_from_text(state: PortfolioState, index: int, text: str) -> PortfolioState:
    return update_project(state, index, tags=parse_tags(text))


def remove_project(state: PortfolioState, index: int) -> PortfolioState:
    return replace(state, projects=_remove_at(state.projects, index))


# ---------------------------------------------------------------------------
# Experience
# ---------------------------------------------------------------------------


def add_experience(state: PortfolioState, **overrides: Any) -> PortfolioState:
    """Append a placeholder experience entry, optionally overriding its fields."""
    experience = _changed(Experience(id=new_id(), **DEFAULT_EXPERIENCE), overrides)
    return replace(state, experiences=state.experiences + (experience,))


def update_experience(state: PortfolioState, index: int, **changes: Any) -> PortfolioState:
    if not 0 <= index < len(state.experiences):
        raise IndexError(f"Index {index} out of range for {len(state.experiences)} item(s)")
    experience = _changed(state.experiences[index], changes)
    return replace(state, experiences=_replace_at(state.experiences, index, experience))


def remove_experience(state: PortfolioState, index: int) -> PortfolioState:
    return replace(state, experiences=_remove_at(state.experiences, index))


# ---------------------------------------------------------------------------
# Socials
# ---------------------------------------------------------------------------


def add_social(
    state: PortfolioState,
    platform: str = Platform.WEBSITE,
    url: str = "",
) -> PortfolioState:
    social = SocialLink(id=new_id(), platform=str(platform), url=url)
    return replace(state, socials=state.socials + (social,))


def update_social(state: PortfolioState, index: int, **changes: Any) -> PortfolioState:
    if not 0 <= index < len(state.socials):
        raise IndexError(f"Index {index} out of range for {len(state.socials)} item(s)")
    social = _changed(state.socials[index], changes)
    return replace(state, socials=_replace_at(state.socials, index, social))


def remove_social(state: PortfolioState, index: int) -> PortfolioState:
    return replace(state, socials=_remove_at(state.socials, index))
