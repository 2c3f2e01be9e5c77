"""Data models and type definitions"""

from portfolio_builder.models.portfolio import (
    Experience,
    Meta,
    PortfolioState,
    Profile,
    Project,
    SocialLink,
    Theme,
    default_portfolio,
)

__all__ = [
    "Experience",
    "Meta",
    "PortfolioState",
    "Profile",
    "Project",
    "SocialLink",
    "Theme",
    "default_portfolio",
]
