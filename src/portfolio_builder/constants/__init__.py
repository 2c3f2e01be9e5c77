from __future__ import annotations

from portfolio_builder.constants.theme_constants import (
    DEFAULT_FONT,
    DEFAULT_LAYOUT,
    Font,
    Layout,
    Platform,
)

__all__ = [
    "DEFAULT_FONT",
    "DEFAULT_LAYOUT",
    "Font",
    "Layout",
    "Platform",
]
