"""Route handlers for the API."""

from portfolio_builder.api.routes import ai, health, portfolio

__all__ = [
    "ai",
    "health",
    "portfolio",
]
