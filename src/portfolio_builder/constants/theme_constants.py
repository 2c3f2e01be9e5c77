"""Closed value sets for theme and social fields.

The editor stores these as plain strings, so every enum here exposes a
``parse`` classmethod that maps arbitrary input onto a member without
raising.
"""

from __future__ import annotations

from enum import StrEnum


class Layout(StrEnum):
    """Page composition strategies."""

    MODERN = "modern"
    MINIMAL = "minimal"
    BOLD = "bold"

    @classmethod
    def parse(cls, value: object) -> Layout:
        """Return the matching layout, or :attr:`DEFAULT_LAYOUT` if unknown.

        Matching is exact: ``"Modern"`` is not ``"modern"``.
        """
        try:
            return cls(str(value))
        except ValueError:
            return DEFAULT_LAYOUT


class Font(StrEnum):
    """Web fonts offered by the theme editor."""

    INTER = "Inter"
    PLAYFAIR_DISPLAY = "Playfair Display"
    SPACE_GROTESK = "Space Grotesk"

    @classmethod
    def parse(cls, value: object) -> Font:
        """Return the matching font, or :attr:`DEFAULT_FONT` if unknown."""
        try:
            return cls(str(value))
        except ValueError:
            return DEFAULT_FONT


class Platform(StrEnum):
    """Social platforms with a known icon."""

    GITHUB = "github"
    TWITTER = "twitter"
    LINKEDIN = "linkedin"
    INSTAGRAM = "instagram"
    YOUTUBE = "youtube"
    EMAIL = "email"
    WEBSITE = "website"


DEFAULT_LAYOUT = Layout.BOLD
DEFAULT_FONT = Font.INTER

# External resources referenced by the generated page (never fetched here).
GOOGLE_FONTS_CSS_URL = "https://fonts.googleapis.com/css2"
GOOGLE_FONTS_WEIGHTS = "wght@300;400;500;600;700"
SIMPLE_ICONS_CDN_URL = "https://cdn.simpleicons.org"
TAILWIND_CDN_URL = "https://cdn.tailwindcss.com"

# CSS functions accepted verbatim as a background value.
GRADIENT_FUNCTIONS = (
    "linear-gradient(",
    "radial-gradient(",
    "conic-gradient(",
    "repeating-linear-gradient(",
    "repeating-radial-gradient(",
    "repeating-conic-gradient(",
)
