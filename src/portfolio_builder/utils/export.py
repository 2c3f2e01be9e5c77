"""Export utilities for writing a rendered portfolio to disk."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

from portfolio_builder.services.renderer import render_portfolio

if TYPE_CHECKING:
    from portfolio_builder.models import PortfolioState

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_FILENAME = "index.html"


def _sanitize_filename(name: str) -> str:
    """Remove or replace characters that are invalid in filenames."""
    # Replace invalid characters with underscores
    sanitized = re.sub(r'[<>:"/\\|?*]', "_", name)
    # Remove leading/trailing whitespace and dots
    sanitized = sanitized.strip(". ")
    return sanitized or DEFAULT_EXPORT_FILENAME


def export_portfolio(
    state: PortfolioState,
    output_dir: Path | str,
    *,
    filename: str = DEFAULT_EXPORT_FILENAME,
    year: int | None = None,
) -> Path:
    """Render *state* and write it as a UTF-8 HTML file.

    Args:
        state: Snapshot to export.
        output_dir: Directory to write into. Created if missing.
        filename: Output file name.
        year: Year for copyright lines. Defaults to the current year.

    Returns:
        Path to the created file.
    """
    html_document = render_portfolio(state, year=year)
    output_dir = Path(output_dir)
    output_path = output_dir / _sanitize_filename(filename)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html_document, encoding="utf-8")
    except OSError:
        logger.exception("Failed to export portfolio to %s", output_path)
        raise
    return output_path
