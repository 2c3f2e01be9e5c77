"""Layout registry for portfolio rendering."""

from __future__ import annotations

import logging

from portfolio_builder.constants.theme_constants import DEFAULT_LAYOUT, Layout
from portfolio_builder.templates.base import PortfolioTemplate
from portfolio_builder.templates.bold import BoldPortfolioTemplate
from portfolio_builder.templates.document import assemble_document
from portfolio_builder.templates.minimal import MinimalPortfolioTemplate
from portfolio_builder.templates.modern import ModernPortfolioTemplate

__all__ = [
    "PortfolioTemplate",
    "assemble_document",
    "get_template",
    "list_templates",
    "resolve_layout",
]

logger = logging.getLogger(__name__)

_REGISTRY: dict[Layout, PortfolioTemplate] = {
    Layout.MODERN: ModernPortfolioTemplate(),
    Layout.MINIMAL: MinimalPortfolioTemplate(),
    Layout.BOLD: BoldPortfolioTemplate(),
}


def resolve_layout(name: object) -> Layout:
    """Map a raw layout value onto a registered :class:`Layout`.

    Unrecognized values resolve to the default layout instead of raising.
    """
    layout = Layout.parse(name)
    if layout is DEFAULT_LAYOUT and str(name) != DEFAULT_LAYOUT.value:
        logger.debug("Unknown layout %r, falling back to %s", name, DEFAULT_LAYOUT.value)
    return layout


def get_template(name: object) -> PortfolioTemplate:
    """Return the layout registered under *name*, or the default layout."""
    return _REGISTRY[resolve_layout(name)]


def list_templates() -> list[str]:
    """Return sorted names of all registered layouts."""
    return sorted(layout.value for layout in _REGISTRY)
