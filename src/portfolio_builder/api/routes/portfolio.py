"""Portfolio rendering routes for the API."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from portfolio_builder.api.schemas.portfolio import LayoutListResponse, PortfolioSchema
from portfolio_builder.models import default_portfolio
from portfolio_builder.services.renderer import render_portfolio
from portfolio_builder.templates import list_templates
from portfolio_builder.utils.export import DEFAULT_EXPORT_FILENAME

router = APIRouter(prefix="/portfolio", tags=["portfolio"])

# Mirrors an <iframe sandbox="allow-scripts allow-same-origin"> preview.
PREVIEW_CSP = "sandbox allow-scripts allow-same-origin"


@router.get("/default", response_model=PortfolioSchema, response_model_by_alias=True)
def get_default_portfolio() -> PortfolioSchema:
    """Return the starter portfolio the editor opens with."""
    return PortfolioSchema.from_state(default_portfolio())


@router.get("/layouts", response_model=LayoutListResponse)
def get_layouts() -> LayoutListResponse:
    """List the available layout names."""
    return LayoutListResponse(layouts=list_templates())


@router.post(
    "/preview",
    response_class=HTMLResponse,
    summary="Render a live preview",
    description="Render the portfolio to HTML for display in a sandboxed frame.",
)
def preview_portfolio(payload: PortfolioSchema) -> HTMLResponse:
    html_document = render_portfolio(payload.to_state())
    return HTMLResponse(
        content=html_document,
        headers={"Content-Security-Policy": PREVIEW_CSP},
    )


@router.post(
    "/export",
    response_class=HTMLResponse,
    summary="Export as index.html",
    description="Render the portfolio and return it as a downloadable HTML file.",
)
def export_portfolio(payload: PortfolioSchema) -> HTMLResponse:
    html_document = render_portfolio(payload.to_state())
    return HTMLResponse(
        content=html_document,
        headers={
            "Content-Disposition": f'attachment; filename="{DEFAULT_EXPORT_FILENAME}"',
        },
    )
