"""Bold layout.

Oversized hero with a split name and gradient surname, then experience
cards, a project grid and a large contact call-to-action. Also the
fallback for unrecognized layout names.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from portfolio_builder.templates.base import PortfolioTemplate
from portfolio_builder.templates.sections import (
    ChipStyle,
    ExperienceStyle,
    email_display_text,
    render_email_link,
    render_experience_entries,
    render_project_cards,
    render_skill_chips,
    render_social_icons,
)
from portfolio_builder.utils.markup import css_value

if TYPE_CHECKING:
    from portfolio_builder.models import PortfolioState

__all__ = ["BoldPortfolioTemplate"]


class BoldPortfolioTemplate(PortfolioTemplate):
    """Large hero layout with a project grid."""

    @property
    def name(self) -> str:  # pragma: no cover
        return "Bold"

    def build(self, state: PortfolioState, *, year: int) -> str:
        return (
            '<div class="min-h-screen flex flex-col relative z-10">'
            f"{self._hero(state)}"
            '<main class="flex-grow px-6 py-20 bg-black/5 dark:bg-white/5 backdrop-blur-md">'
            '<div class="max-w-7xl mx-auto space-y-24">'
            f"{self._experience(state)}"
            f"{self._projects(state)}"
            f"{self._contact(state)}"
            "</div>"
            "</main>"
            "</div>"
        )

    def _hero(self, state: PortfolioState) -> str:
        profile, theme = state.profile, state.theme
        esc = self.escape
        color = self.primary(theme)
        first, rest = self.split_name(profile.name)
        gradient = esc(
            f"background-image: linear-gradient(to right, {css_value(theme.primary_color)}, "
            f"{css_value(theme.text_color)})"
        )

        skills = ""
        if state.skills:
            chips = render_skill_chips(state.skills, theme, style=ChipStyle.OUTLINE)
            skills = f'<div id="skills" class="flex flex-wrap gap-2 opacity-80">{chips}</div>'

        resume = ""
        if profile.resume_url:
            resume = (
                '<span class="mx-2 opacity-20">|</span> '
                f'<a href="{esc(profile.resume_url)}" class="font-bold hover:underline">Resume</a>'
            )

        avatar = ""
        if profile.avatar:
            avatar = (
                f'<img src="{esc(profile.avatar)}" class="relative w-full h-full object-cover '
                "rounded-[3rem] rotate-3 hover:rotate-0 transition-transform duration-700 "
                f'shadow-2xl grayscale hover:grayscale-0" alt="{esc(profile.name)}" />'
            )

        return (
            '<header class="px-6 py-12 md:py-28 max-w-7xl mx-auto w-full grid grid-cols-1 '
            'md:grid-cols-2 gap-16 items-center">'
            '<div class="order-2 md:order-1 space-y-8">'
            '<div class="flex items-center gap-3">'
            '<span class="inline-block w-8 h-1 rounded-full" '
            f'style="background-color: {color}"></span>'
            '<span class="text-sm font-bold tracking-widest uppercase opacity-60">'
            f"{esc(profile.title)}</span>"
            "</div>"
            '<h1 class="text-5xl md:text-8xl font-extrabold leading-tight tracking-tighter" '
            f'aria-label="{esc(profile.name)}">'
            f"{esc(first)} <br/>"
            f'<span class="text-transparent bg-clip-text" style="{gradient}">{esc(rest)}</span>.'
            "</h1>"
            '<p class="text-xl md:text-2xl opacity-70 max-w-lg leading-relaxed">'
            f"{esc(profile.bio)}</p>"
            f"{skills}"
            '<div class="flex gap-6 pt-4 items-center">'
            f"{render_social_icons(state.socials, theme)}"
            f"{resume}"
            "</div>"
            "</div>"
            '<div class="order-1 md:order-2 flex justify-center md:justify-end">'
            '<div class="relative w-72 h-72 md:w-[500px] md:h-[500px]">'
            '<div class="absolute inset-0 rounded-full blur-[100px] opacity-30 animate-pulse" '
            f'style="background-color: {color}"></div>'
            f"{avatar}"
            "</div>"
            "</div>"
            "</header>"
        )

    def _experience(self, state: PortfolioState) -> str:
        if not state.experiences:
            return ""
        entries = render_experience_entries(
            state.experiences, state.theme, style=ExperienceStyle.CARDS
        )
        return (
            '<section id="experience">'
            '<h2 class="text-4xl font-extrabold mb-12">Experience</h2>'
            f'<div class="grid grid-cols-1 md:grid-cols-2 gap-8">{entries}</div>'
            "</section>"
        )

    def _projects(self, state: PortfolioState) -> str:
        return (
            '<section id="projects">'
            '<h2 class="text-4xl font-extrabold mb-12">Featured Work</h2>'
            '<div class="grid grid-cols-1 md:grid-cols-2 lg:grid-cols-3 gap-8">'
            f"{render_project_cards(state.projects, state.theme)}"
            "</div>"
            "</section>"
        )

    def _contact(self, state: PortfolioState) -> str:
        link = render_email_link(
            state.socials,
            label=email_display_text(state.socials),
            css_class=(
                "inline-block text-2xl md:text-3xl border-b-4 border-current pb-2 "
                "hover:opacity-70 transition-opacity"
            ),
            style=f"border-color: {css_value(state.theme.primary_color)}",
        )
        return (
            '<section id="contact" class="py-20 text-center">'
            '<h2 class="text-4xl md:text-6xl font-black mb-8">Ready to collaborate?</h2>'
            f"{link}"
            "</section>"
        )
