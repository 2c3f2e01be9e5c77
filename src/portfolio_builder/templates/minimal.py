"""Minimal layout.

Single narrow centered column: header, work experience, projects and a
footer with a contact link and copyright line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from portfolio_builder.templates.base import PortfolioTemplate
from portfolio_builder.templates.sections import (
    ExperienceStyle,
    render_email_link,
    render_experience_entries,
    render_project_cards,
    render_skill_chips,
    render_social_icons,
)
from portfolio_builder.utils.markup import css_value

if TYPE_CHECKING:
    from portfolio_builder.models import PortfolioState

__all__ = ["MinimalPortfolioTemplate"]

_SECTION_HEADING = "text-xs font-bold uppercase tracking-widest opacity-40 text-center"


class MinimalPortfolioTemplate(PortfolioTemplate):
    """Centered single-column layout."""

    @property
    def name(self) -> str:  # pragma: no cover
        return "Minimal"

    def build(self, state: PortfolioState, *, year: int) -> str:
        return (
            '<div class="max-w-2xl mx-auto px-6 py-20 space-y-20 relative z-10">'
            f"{self._header(state)}"
            f"{self._experience(state)}"
            f"{self._projects(state)}"
            f"{self._footer(state, year)}"
            "</div>"
        )

    def _header(self, state: PortfolioState) -> str:
        profile, theme = state.profile, state.theme
        esc = self.escape

        avatar = ""
        if profile.avatar:
            avatar = (
                f'<img src="{esc(profile.avatar)}" alt="{esc(profile.name)}" '
                'class="w-24 h-24 rounded-full object-cover mx-auto ring-2 ring-offset-4 '
                'ring-offset-transparent shadow-lg" '
                f'style="--tw-ring-color: {self.primary(theme)}" />'
            )

        skills = ""
        if state.skills:
            skills = (
                '<div id="skills" class="flex flex-wrap gap-2 justify-center pt-2 max-w-lg '
                f'mx-auto">{render_skill_chips(state.skills, theme)}</div>'
            )

        return (
            '<header class="text-center space-y-8">'
            f"{avatar}"
            "<div>"
            '<h1 class="text-4xl md:text-5xl font-bold mb-4 tracking-tight">'
            f"{esc(profile.name)}</h1>"
            f'<p class="text-xl opacity-60 font-light">{esc(profile.title)}</p>'
            "</div>"
            '<p class="max-w-lg mx-auto text-lg leading-relaxed opacity-80">'
            f"{esc(profile.bio)}</p>"
            '<div class="flex gap-6 justify-center">'
            f"{render_social_icons(state.socials, theme)}"
            "</div>"
            f"{skills}"
            "</header>"
        )

    def _experience(self, state: PortfolioState) -> str:
        if not state.experiences:
            return ""
        entries = render_experience_entries(
            state.experiences, state.theme, style=ExperienceStyle.COLUMNS
        )
        return (
            '<section id="experience" class="space-y-10">'
            f'<h2 class="{_SECTION_HEADING}">Work Experience</h2>'
            f'<div class="space-y-10">{entries}</div>'
            "</section>"
        )

    def _projects(self, state: PortfolioState) -> str:
        return (
            '<section id="projects" class="space-y-10">'
            f'<h2 class="{_SECTION_HEADING}">Projects</h2>'
            '<div class="grid gap-12">'
            f"{render_project_cards(state.projects, state.theme)}"
            "</div>"
            "</section>"
        )

    def _footer(self, state: PortfolioState, year: int) -> str:
        link = render_email_link(
            state.socials,
            label="Get in touch",
            css_class="inline-block mb-8 text-2xl font-bold hover:underline",
            style=f"color: {css_value(state.theme.primary_color)}",
        )
        return (
            '<footer id="contact" class="text-center pt-12 border-t border-black/5 '
            'dark:border-white/10">'
            f"{link}"
            f'<p class="opacity-50 text-sm">&copy; {year} {self.escape(state.profile.name)}.</p>'
            "</footer>"
        )
