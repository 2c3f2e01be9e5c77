"""Section renderers shared by every layout.

Each function takes one slice of the snapshot plus the theme and returns
an HTML fragment. They never raise for well-typed input: empty strings
suppress only the element that depends on them.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import StrEnum
from typing import TYPE_CHECKING
from urllib.parse import quote

from portfolio_builder.constants.theme_constants import SIMPLE_ICONS_CDN_URL, Platform
from portfolio_builder.utils.markup import css_value, escape_html

if TYPE_CHECKING:
    from portfolio_builder.models import Experience, Project, SocialLink, Theme

__all__ = [
    "ChipStyle",
    "ExperienceStyle",
    "contact_email_target",
    "email_display_text",
    "find_first_social",
    "render_email_link",
    "render_experience_entries",
    "render_project_cards",
    "render_skill_chips",
    "render_social_icons",
    "social_icon_url",
]

_DISABLED_LINK_CLASSES = "opacity-50 pointer-events-none cursor-not-allowed"


class ChipStyle(StrEnum):
    SOFT = "soft"
    OUTLINE = "outline"


class ExperienceStyle(StrEnum):
    TIMELINE = "timeline"
    COLUMNS = "columns"
    CARDS = "cards"


def _color(theme: Theme) -> str:
    return escape_html(css_value(theme.primary_color))


# ---------------------------------------------------------------------------
# Socials
# ---------------------------------------------------------------------------


def social_icon_url(platform: str, primary_color: str) -> str:
    """Return the Simple Icons URL for *platform* tinted with *primary_color*.

    The color is passed without its leading ``#`` and lower-cased. The
    platform is used verbatim, so unknown or differently cased values resolve
    to a missing icon, matching how :func:`find_first_social` compares them.
    """
    slug = quote(platform, safe="")
    color = quote(css_value(primary_color).removeprefix("#").lower(), safe="")
    return f"{SIMPLE_ICONS_CDN_URL}/{slug}/{color}"


def render_social_icons(socials: Iterable[SocialLink], theme: Theme) -> str:
    """One linked icon per entry, in order, duplicates and empty URLs included."""
    icons = []
    for social in socials:
        src = escape_html(social_icon_url(social.platform, theme.primary_color))
        icons.append(
            f'<a href="{escape_html(social.url)}" target="_blank" rel="noopener noreferrer" '
            'class="social-icon transition-transform hover:-translate-y-1 opacity-80 '
            'hover:opacity-100">'
            f'<img src="{src}" alt="{escape_html(social.platform)}" class="w-6 h-6" />'
            "</a>"
        )
    return "\n".join(icons)


def find_first_social(socials: Iterable[SocialLink], platform: str) -> SocialLink | None:
    """Return the first entry whose platform equals *platform*.

    Later entries with the same platform are ignored.
    """
    for social in socials:
        if social.platform == platform:
            return social
    return None


def contact_email_target(socials: Iterable[SocialLink]) -> str:
    """Return the URL of the first ``email`` social, or ``""`` if there is none."""
    social = find_first_social(socials, Platform.EMAIL)
    return social.url if social else ""


def email_display_text(socials: Iterable[SocialLink], fallback: str = "Get in touch") -> str:
    """Return the email address without its scheme, or *fallback*."""
    target = contact_email_target(socials)
    if not target:
        return fallback
    return target.removeprefix("mailto:") or fallback


def render_email_link(
    socials: Sequence[SocialLink],
    *,
    label: str,
    css_class: str,
    style: str = "",
) -> str:
    """Render the contact call-to-action.

    The anchor is always emitted. Without an ``email`` social its target is
    empty and it is styled as disabled.
    """
    target = contact_email_target(socials)
    classes = css_class if target else f"{css_class} {_DISABLED_LINK_CLASSES}"
    disabled = "" if target else ' aria-disabled="true"'
    style_attr = f' style="{escape_html(style)}"' if style else ""
    return (
        f'<a href="{escape_html(target)}" class="{classes}"{style_attr}{disabled}>'
        f"{escape_html(label)}</a>"
    )


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------


def _render_project_card(project: Project, theme: Theme) -> str:
    image = ""
    if project.image_url:
        image = (
            '<div class="aspect-video w-full overflow-hidden bg-gray-100/10">'
            f'<img src="{escape_html(project.image_url)}" alt="{escape_html(project.title)}" '
            'class="w-full h-full object-cover transition-transform duration-500 '
            'group-hover:scale-105" loading="lazy" />'
            "</div>"
        )
    # Empty tags still render as (empty) chips.
    tags = "".join(
        '<span class="project-tag text-xs font-medium px-2 py-1 rounded-full bg-black/5 '
        f'dark:bg-white/10 opacity-70">{escape_html(tag)}</span>'
        for tag in project.tags
    )
    return (
        '<article class="project-card group relative bg-white/10 border border-white/10 '
        "dark:border-white/5 rounded-xl overflow-hidden shadow-sm hover:shadow-lg "
        "transition-all duration-300 hover:scale-[1.01] flex flex-col h-full "
        'backdrop-blur-sm">'
        f"{image}"
        '<div class="p-6 flex-1 flex flex-col">'
        f'<div class="flex flex-wrap gap-2 mb-3">{tags}</div>'
        f'<h3 class="text-xl font-bold mb-2">{escape_html(project.title)}</h3>'
        '<p class="opacity-80 leading-relaxed mb-6 text-sm flex-1">'
        f"{escape_html(project.description)}</p>"
        f'<a href="{escape_html(project.link)}" target="_blank" '
        'class="inline-flex items-center text-sm font-semibold hover:underline '
        f'decoration-2 underline-offset-4 mt-auto" style="color: {_color(theme)}">'
        "View Project &rarr;</a>"
        "</div>"
        "</article>"
    )


def render_project_cards(projects: Iterable[Project], theme: Theme) -> str:
    """One card per project, in order."""
    return "\n".join(_render_project_card(project, theme) for project in projects)


# ---------------------------------------------------------------------------
# Skills
# ---------------------------------------------------------------------------

_CHIP_CLASSES = {
    ChipStyle.SOFT: (
        "skill-chip px-3 py-1.5 rounded-lg bg-black/5 dark:bg-white/10 text-sm "
        "font-medium opacity-90"
    ),
    ChipStyle.OUTLINE: "skill-chip border border-current px-3 py-1 rounded-full text-sm",
}


def render_skill_chips(
    skills: Iterable[str],
    theme: Theme,
    *,
    style: ChipStyle = ChipStyle.SOFT,
) -> str:
    """One chip per skill, in order.

    Callers are responsible for omitting the surrounding container when
    there are no skills.
    """
    classes = _CHIP_CLASSES[style]
    return "\n".join(f'<span class="{classes}">{escape_html(skill)}</span>' for skill in skills)


# ---------------------------------------------------------------------------
# Experience
# ---------------------------------------------------------------------------


def _timeline_entry(exp: Experience, color: str) -> str:
    return (
        '<div class="experience-entry relative pl-8 border-l-2 border-dashed border-gray-300 '
        'dark:border-gray-700 pb-8 last:pb-0">'
        '<div class="absolute -left-[9px] top-0 w-4 h-4 rounded-full bg-white '
        f'dark:bg-gray-900 border-2" style="border-color: {color}"></div>'
        '<div class="mb-1 flex flex-wrap items-center gap-2">'
        f'<h4 class="font-bold text-lg">{escape_html(exp.role)}</h4>'
        f'<span class="text-sm opacity-60">at {escape_html(exp.company)}</span>'
        "</div>"
        '<p class="text-xs font-mono opacity-50 mb-2 uppercase tracking-wide">'
        f"{escape_html(exp.period)}</p>"
        f'<p class="opacity-80 text-sm leading-relaxed">{escape_html(exp.description)}</p>'
        "</div>"
    )


def _column_entry(exp: Experience, color: str) -> str:
    return (
        '<div class="experience-entry flex flex-col md:flex-row gap-2 md:gap-8 text-center '
        'md:text-left">'
        '<div class="md:w-32 flex-shrink-0 text-sm opacity-50 font-mono py-1">'
        f"{escape_html(exp.period)}</div>"
        "<div>"
        f'<h4 class="font-bold">{escape_html(exp.role)}</h4>'
        f'<p class="text-sm opacity-60 mb-2">{escape_html(exp.company)}</p>'
        f'<p class="opacity-80 text-sm">{escape_html(exp.description)}</p>'
        "</div>"
        "</div>"
    )


def _card_entry(exp: Experience, color: str) -> str:
    return (
        '<div class="experience-entry p-8 border border-current border-opacity-10 rounded-2xl '
        'hover:bg-white/5 transition-colors">'
        '<span class="text-sm font-mono opacity-50 mb-2 block">'
        f"{escape_html(exp.period)}</span>"
        f'<h3 class="text-2xl font-bold mb-1">{escape_html(exp.role)}</h3>'
        f'<div class="text-lg opacity-70 mb-4" style="color: {color}">'
        f"{escape_html(exp.company)}</div>"
        f'<p class="opacity-80 leading-relaxed">{escape_html(exp.description)}</p>'
        "</div>"
    )


_EXPERIENCE_RENDERERS = {
    ExperienceStyle.TIMELINE: _timeline_entry,
    ExperienceStyle.COLUMNS: _column_entry,
    ExperienceStyle.CARDS: _card_entry,
}


def render_experience_entries(
    experiences: Iterable[Experience],
    theme: Theme,
    *,
    style: ExperienceStyle = ExperienceStyle.TIMELINE,
) -> str:
    """One entry per experience showing period, role, company and description."""
    render = _EXPERIENCE_RENDERERS[style]
    color = _color(theme)
    return "\n".join(render(exp, color) for exp in experiences)
