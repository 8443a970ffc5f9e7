# =============================================================================
# app/routers/pages.py - HTML Pages
# =============================================================================
# Server-rendered pages. Each one goes through RootLayout so it gets the
# shared document shell and header.
# =============================================================================

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from app.dependencies import RootLayoutDep

router = APIRouter(include_in_schema=False)


@router.get("/", response_class=HTMLResponse, name="home")
async def home(request: Request, layout: RootLayoutDep) -> HTMLResponse:
    """Landing page."""
    return layout.render(request, "home.html")
