"""Abstract base class for pluggable portfolio layouts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from portfolio_builder.utils.markup import css_value, escape_html

if TYPE_CHECKING:
    from portfolio_builder.models import PortfolioState, Theme

__all__ = ["PortfolioTemplate"]


class PortfolioTemplate(ABC):
    """Interface that every layout must implement.

    A layout only produces the page body fragment; the document shell is
    added by :func:`portfolio_builder.templates.document.assemble_document`.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable layout name shown in the UI."""

    @abstractmethod
    def build(self, state: PortfolioState, *, year: int) -> str:
        """Return the layout fragment for *state*.

        Args:
            state: Snapshot to render.
            year: Year used in copyright lines.
        """

    # ------------------------------------------------------------------
    # Shared helpers available to all layouts
    # ------------------------------------------------------------------

    @staticmethod
    def escape(text: object) -> str:
        return escape_html(text)

    @staticmethod
    def primary(theme: Theme) -> str:
        """Return the primary color escaped for a ``style`` attribute."""
        return escape_html(css_value(theme.primary_color))

    @staticmethod
    def split_name(name: str) -> tuple[str, str]:
        """Split *name* into its first word and the remainder.

        ``"Ada King Lovelace"`` becomes ``("Ada", "King Lovelace")``.
        """
        first, _, rest = name.partition(" ")
        return first, rest
