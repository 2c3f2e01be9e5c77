"""AI rewrites for the bio and project description fields.

The result is a plain string that replaces the field in a new snapshot.
The renderer treats it like any other user text.
"""

from __future__ import annotations

import logging

from portfolio_builder.models import PortfolioState
from portfolio_builder.services.editor import update_profile, update_project
from portfolio_builder.services.llm_providers import LLMError
from portfolio_builder.services.llm_service import LLMService

__all__ = [
    "enhance_project_description",
    "generate_bio",
    "suggest_bio",
    "suggest_project_description",
]

logger = logging.getLogger(__name__)

BIO_MAX_WORDS = 80
PROJECT_MAX_WORDS = 40

_PLAIN_TEXT_RULES = (
    "You write short copy for personal portfolio websites. "
    "Return plain text only: no markdown, no quotes around the answer, no preamble."
)


def _get_service(service: LLMService | None) -> LLMService:
    if service is not None:
        return service
    try:
        return LLMService()
    except LLMError:
        raise
    except Exception as e:
        raise LLMError(f"Failed to initialize LLM service: {e}") from e


def _clean(text: str) -> str:
    """Trim whitespace and a single pair of wrapping quotes."""
    text = text.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'":
        text = text[1:-1].strip()
    return text


def generate_bio(
    name: str,
    title: str,
    current_bio: str,
    *,
    service: LLMService | None = None,
) -> str:
    """Write a professional yet engaging biography.

    Args:
        name: Person's name.
        title: Professional title.
        current_bio: Existing draft used as context, may be empty.
        service: LLM service to use. Defaults to the configured provider.

    Returns:
        The generated biography.

    Raises:
        LLMError: If the service is unavailable or the call fails.
    """
    llm = _get_service(service)
    user_content = (
        f"Write a professional yet engaging portfolio biography (max {BIO_MAX_WORDS} words) "
        f"for a person named {name} who is a {title}.\n"
        f'Current draft context (if any): "{current_bio}".\n'
        "Make it sound confident and approachable."
    )
    try:
        text = llm.generate_llm_response(
            system_instructions=_PLAIN_TEXT_RULES,
            user_content=user_content,
        )
    except LLMError:
        logger.exception("Bio generation failed for %s", name)
        raise
    except Exception as e:
        logger.exception("Bio generation failed for %s", name)
        raise LLMError(f"LLM API call failed: {e}") from e
    return _clean(text)


def enhance_project_description(
    title: str,
    description: str,
    *,
    service: LLMService | None = None,
) -> str:
    """Rewrite a project description to be more impactful and result-oriented.

    Raises:
        LLMError: If the service is unavailable or the call fails.
    """
    llm = _get_service(service)
    user_content = (
        "Refine this project description to be more impactful and result-oriented "
        f"(max {PROJECT_MAX_WORDS} words).\n"
        f"Project Title: {title}\n"
        f'Draft Description: "{description}"\n'
        "Return only the refined text."
    )
    try:
        text = llm.generate_llm_response(
            system_instructions=_PLAIN_TEXT_RULES,
            user_content=user_content,
        )
    except LLMError:
        logger.exception("Project description enhancement failed for %s", title)
        raise
    except Exception as e:
        logger.exception("Project description enhancement failed for %s", title)
        raise LLMError(f"LLM API call failed: {e}") from e
    return _clean(text)


def suggest_bio(state: PortfolioState, *, service: LLMService | None = None) -> PortfolioState:
    """Return a new snapshot whose bio is replaced by a generated one."""
    profile = state.profile
    bio = generate_bio(profile.name, profile.title, profile.bio, service=service)
    return update_profile(state, bio=bio)


def suggest_project_description(
    state: PortfolioState,
    index: int,
    *,
    service: LLMService | None = None,
) -> PortfolioState:
    """Return a new snapshot with project *index* description rewritten."""
    if not 0 <= index < len(state.projects):
        raise IndexError(f"Index {index} out of range for {len(state.projects)} item(s)")
    project = state.projects[index]
    description = enhance_project_description(
        project.title, project.description, service=service
    )
    return update_project(state, index, description=description)
