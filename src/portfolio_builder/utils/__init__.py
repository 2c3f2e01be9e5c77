"""Utility functions and helpers"""

from portfolio_builder.utils.markup import (
    css_background_image,
    css_url,
    css_value,
    escape_html,
    is_css_gradient,
)

__all__ = [
    "css_background_image",
    "css_url",
    "css_value",
    "escape_html",
    "is_css_gradient",
]
