"""Services"""

from portfolio_builder.services.renderer import (
    render_portfolio,
    render_portfolio_from_dict,
)

__all__ = [
    "render_portfolio",
    "render_portfolio_from_dict",
]
