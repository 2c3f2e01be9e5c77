"""Modern layout.

Sticky profile sidebar on the left, experience timeline, single-column
project list and a contact card on the right.
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
    from portfolio_builder.models import PortfolioState, Profile, Theme

__all__ = ["ModernPortfolioTemplate"]

_PIN_ICON = (
    '<svg width="14" height="14" fill="none" stroke="currentColor" viewBox="0 0 24 24">'
    '<path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" '
    'd="M17.657 16.657L13.414 20.9a1.998 1.998 0 01-2.827 0l-4.244-4.243a8 8 0 1111.314 0z">'
    "</path>"
    '<path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" '
    'd="M15 11a3 3 0 11-6 0 3 3 0 016 0z"></path></svg>'
)

_MAIL_ICON = (
    '<svg width="300" height="300" viewBox="0 0 24 24" fill="currentColor">'
    '<path d="M20 4H4c-1.1 0-1.99.9-1.99 2L2 18c0 1.1.9 2 2 2h16c1.1 0 2-.9 2-2V6'
    'c0-1.1-.9-2-2-2zm0 4l-8 5-8-5V6l8 5 8-5v2z"/></svg>'
)

_SECTION_HEADING = (
    "text-2xl font-bold mb-8 flex items-center gap-3 pb-4 border-b border-black/5 "
    "dark:border-white/10"
)


class ModernPortfolioTemplate(PortfolioTemplate):
    """Two-column layout with a sticky sidebar."""

    @property
    def name(self) -> str:  # pragma: no cover
        return "Modern"

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------

    def build(self, state: PortfolioState, *, year: int) -> str:
        return (
            '<div class="max-w-6xl mx-auto px-6 py-12 md:py-24 grid grid-cols-1 '
            'md:grid-cols-12 gap-12 relative z-10">'
            f"{self._sidebar(state)}"
            '<div class="md:col-span-8 lg:col-span-9 space-y-20">'
            f"{self._experience(state)}"
            f"{self._projects(state)}"
            f"{self._contact(state)}"
            "</div>"
            "</div>"
        )

    # ------------------------------------------------------------------
    # internal helpers
    # ------------------------------------------------------------------

    def _avatar(self, profile: Profile, theme: Theme) -> str:
        if not profile.avatar:
            return ""
        color = self.primary(theme)
        return (
            '<div class="relative inline-block mx-auto md:mx-0">'
            f'<img src="{self.escape(profile.avatar)}" alt="{self.escape(profile.name)}" '
            'class="w-32 h-32 md:w-48 md:h-48 rounded-full object-cover border-4 shadow-xl '
            f'relative z-10 bg-white" style="border-color: {color}" />'
            '<div class="absolute inset-0 rounded-full blur-2xl opacity-40 -z-10 transform '
            f'translate-y-4" style="background-color: {color}"></div>'
            "</div>"
        )

    def _sidebar(self, state: PortfolioState) -> str:
        profile, theme = state.profile, state.theme
        esc = self.escape
        color = self.primary(theme)

        location = ""
        if profile.location:
            location = (
                '<p class="text-sm opacity-60 mt-1 flex items-center justify-center '
                f'md:justify-start gap-1">{_PIN_ICON} {esc(profile.location)}</p>'
            )

        skills = ""
        if state.skills:
            skills = (
                '<div id="skills" class="pt-4">'
                '<h3 class="text-xs font-bold uppercase tracking-widest opacity-50 mb-3">'
                "Skills</h3>"
                '<div class="flex flex-wrap gap-2 justify-center md:justify-start">'
                f"{render_skill_chips(state.skills, theme)}"
                "</div>"
                "</div>"
            )

        resume = ""
        if profile.resume_url:
            resume = (
                f'<a href="{esc(profile.resume_url)}" class="inline-block px-6 py-2.5 '
                "rounded-full font-medium text-white transition-all hover:opacity-90 "
                'hover:shadow-lg w-full md:w-auto text-center" '
                f'style="background-color: {color}">Download Resume</a>'
            )

        return (
            '<div class="md:col-span-4 lg:col-span-3 space-y-8 md:sticky md:top-24 h-fit">'
            '<div class="space-y-6 text-center md:text-left">'
            f"{self._avatar(profile, theme)}"
            "<div>"
            '<h1 class="text-3xl md:text-4xl font-bold tracking-tight mb-2 leading-tight">'
            f"{esc(profile.name)}</h1>"
            f'<p class="text-lg opacity-75 font-medium" style="color: {color}">'
            f"{esc(profile.title)}</p>"
            f"{location}"
            "</div>"
            f'<p class="opacity-80 leading-relaxed text-sm md:text-base">{esc(profile.bio)}</p>'
            f"{skills}"
            '<div class="flex gap-4 justify-center md:justify-start pt-4">'
            f"{render_social_icons(state.socials, theme)}"
            "</div>"
            f"{resume}"
            "</div>"
            "</div>"
        )

    def _experience(self, state: PortfolioState) -> str:
        if not state.experiences:
            return ""
        entries = render_experience_entries(
            state.experiences, state.theme, style=ExperienceStyle.TIMELINE
        )
        return (
            '<section id="experience">'
            f'<h2 class="{_SECTION_HEADING}"><span class="text-2xl">⚡</span> Experience</h2>'
            f'<div class="ml-2">{entries}</div>'
            "</section>"
        )

    def _projects(self, state: PortfolioState) -> str:
        return (
            '<section id="projects">'
            f'<h2 class="{_SECTION_HEADING}"><span class="text-2xl">🚀</span> '
            "Selected Projects</h2>"
            '<div class="grid grid-cols-1 gap-8">'
            f"{render_project_cards(state.projects, state.theme)}"
            "</div>"
            "</section>"
        )

    def _contact(self, state: PortfolioState) -> str:
        link = render_email_link(
            state.socials,
            label="Send me an email",
            css_class=(
                "inline-flex items-center gap-2 px-8 py-3 rounded-full text-white "
                "font-semibold transition-transform hover:scale-105"
            ),
            style=f"background-color: {css_value(state.theme.primary_color)}",
        )
        return (
            '<section id="contact" class="bg-black/5 dark:bg-white/10 rounded-3xl p-8 '
            'md:p-12 text-center md:text-left relative overflow-hidden">'
            '<div class="relative z-10">'
            "<h2 class=\"text-3xl font-bold mb-4\">Let's build something great.</h2>"
            '<p class="opacity-70 mb-8 max-w-lg text-lg">Interested in working together? '
            "I'm always open to discussing new projects and opportunities.</p>"
            f"{link}"
            "</div>"
            '<div class="absolute right-0 bottom-0 opacity-10 transform translate-x-1/3 '
            f'translate-y-1/3">{_MAIL_ICON}</div>'
            "</section>"
        )
