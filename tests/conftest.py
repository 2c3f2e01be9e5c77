from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

import pytest

from portfolio_builder.models import (
    Meta,
    PortfolioState,
    Profile,
    Theme,
    default_portfolio,
)


@pytest.fixture
def sample_state() -> PortfolioState:
    """The starter portfolio shipped with the editor."""
    return default_portfolio()


@pytest.fixture
def bare_state() -> PortfolioState:
    """A snapshot with every sequence empty and every optional field blank."""
    return PortfolioState(
        meta=Meta(title="Bare"),
        theme=Theme(layout="modern"),
        profile=Profile(name="Bare Person"),
    )


@pytest.fixture
def make_state() -> Callable[..., PortfolioState]:
    """Factory for variants of the starter portfolio.

    Keyword arguments matching :class:`PortfolioState` fields replace those
    fields; any other keyword replaces the matching :class:`Theme` field.
    """

    def _make(**overrides: object) -> PortfolioState:
        base = default_portfolio()
        state_fields = {"meta", "profile", "skills", "experiences", "socials", "projects"}
        state_changes = {k: v for k, v in overrides.items() if k in state_fields}
        theme_changes = {k: v for k, v in overrides.items() if k not in state_fields}
        return replace(base, theme=replace(base.theme, **theme_changes), **state_changes)

    return _make
