"""HTML document shell wrapped around a layout fragment."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import quote

from portfolio_builder.constants.theme_constants import (
    GOOGLE_FONTS_CSS_URL,
    GOOGLE_FONTS_WEIGHTS,
    TAILWIND_CDN_URL,
    Font,
)
from portfolio_builder.utils.markup import css_background_image, css_value, escape_html

if TYPE_CHECKING:
    from portfolio_builder.models import PortfolioState, Theme

__all__ = [
    "assemble_document",
    "body_background_css",
    "font_family_css",
    "font_stylesheet_url",
    "format_opacity",
    "has_background_image",
    "overlay_css",
]

logger = logging.getLogger(__name__)


def _resolve_font(font: str) -> Font:
    resolved = Font.parse(font)
    if resolved.value != font:
        logger.debug("Unknown font %r, using %s", font, resolved.value)
    return resolved


def font_stylesheet_url(font: str) -> str:
    """Return the Google Fonts stylesheet URL for *font*.

    Every space in the family name becomes ``+``.
    """
    family = quote(_resolve_font(font).value, safe=" ").replace(" ", "+")
    return f"{GOOGLE_FONTS_CSS_URL}?family={family}:{GOOGLE_FONTS_WEIGHTS}&display=swap"


def font_family_css(font: str) -> str:
    """Return a ``font-family`` value with a ``sans-serif`` fallback."""
    return f"'{_resolve_font(font).value}', sans-serif"


def has_background_image(theme: Theme) -> bool:
    return bool(theme.background_image.strip())


def format_opacity(value: float) -> str:
    """Clamp *value* to ``[0, 1]`` and format it without trailing zeros."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        number = 1.0
    if number != number:  # NaN
        number = 1.0
    return f"{min(max(number, 0.0), 1.0):.15g}"


def body_background_css(theme: Theme) -> str:
    """Return the background declarations for ``body``."""
    if has_background_image(theme):
        return (
            f"background-image: {css_background_image(theme.background_image)}; "
            "background-size: cover; background-position: center; "
            "background-attachment: fixed;"
        )
    return f"background-color: {css_value(theme.background_color)};"


def overlay_css(theme: Theme) -> str:
    """Return the overlay rule, or ``""`` when there is no background image."""
    if not has_background_image(theme):
        return ""
    return (
        ".bg-overlay { position: fixed; top: 0; left: 0; width: 100%; height: 100%; "
        "z-index: 0; pointer-events: none; "
        f"background-color: {css_value(theme.background_color)}; "
        f"opacity: {format_opacity(theme.background_overlay)}; }}"
    )


def assemble_document(state: PortfolioState, fragment: str) -> str:
    """Wrap a layout *fragment* into a complete standalone HTML document."""
    meta, theme = state.meta, state.theme
    esc = escape_html
    text_color = css_value(theme.text_color)
    text_class = esc(text_color.replace(" ", ""))
    overlay_rule = overlay_css(theme)
    overlay = '<div class="bg-overlay"></div>\n' if overlay_rule else ""

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{esc(meta.title)}</title>
<meta name="description" content="{esc(meta.description)}">
<meta property="og:title" content="{esc(meta.title)}">
<meta property="og:description" content="{esc(meta.description)}">
<meta property="og:image" content="{esc(meta.og_image)}">
<meta property="og:type" content="website">
<link rel="icon" href="{esc(meta.favicon)}">
<link href="{esc(font_stylesheet_url(theme.font))}" rel="stylesheet">
<script src="{TAILWIND_CDN_URL}"></script>
<style>
body {{ font-family: {font_family_css(theme.font)}; color: {text_color}; {body_background_css(theme)} }}
{overlay_rule}
</style>
</head>
<body class="min-h-screen transition-colors duration-300 relative text-[{text_class}]">
{overlay}{fragment}
</body>
</html>
"""
