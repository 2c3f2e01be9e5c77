"""Portfolio rendering service.

Selects the layout named by the snapshot's theme, renders its fragment and
wraps it into a standalone HTML document.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any

from portfolio_builder.models import PortfolioState
from portfolio_builder.templates import assemble_document, get_template

__all__ = [
    "render_portfolio",
    "render_portfolio_from_dict",
]


def render_portfolio(state: PortfolioState, *, year: int | None = None) -> str:
    """Render *state* into a complete HTML document.

    Args:
        state: Snapshot to render. It is only read.
        year: Year for copyright lines. Defaults to the current year.

    Returns:
        The UTF-8 HTML document as a string.
    """
    if year is None:
        year = date.today().year
    template = get_template(state.theme.layout)
    fragment = template.build(state, year=year)
    return assemble_document(state, fragment)


def render_portfolio_from_dict(data: Mapping[str, Any], *, year: int | None = None) -> str:
    """Render a camelCase JSON payload (see :meth:`PortfolioState.from_dict`)."""
    return render_portfolio(PortfolioState.from_dict(data), year=year)
