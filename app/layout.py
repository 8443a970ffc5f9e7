# =============================================================================
# app/layout.py - Root Page Layout
# =============================================================================
# Every HTML page is rendered through RootLayout, which wraps it in the shared
# document shell (templates/layout.html):
# - <html lang> and the title/description meta tags, declared once
# - the shared header component, directly followed by the page content
#
# Pages are Jinja2 templates that extend "layout.html" and fill the
# "content" block. Pre-rendered HTML can be wrapped with RootLayout.wrap().
# =============================================================================

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from core.models.page import PageMetadata

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
STATIC_DIR = Path(__file__).resolve().parent / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


class RootLayout:
    """
    Renders pages inside the shared document shell.

    Example:
        layout = RootLayout(PageMetadata(title="PreDelivery App", description="..."))
        return layout.render(request, "home.html")
    """

    def __init__(self, metadata: PageMetadata, environment: Jinja2Templates = templates):
        self.metadata = metadata
        self.templates = environment

    def render(
        self,
        request: Request,
        template_name: str,
        context: dict[str, Any] | None = None,
        status_code: int = 200,
    ) -> HTMLResponse:
        """Render a page template that extends layout.html."""
        page_context = {"metadata": self.metadata, **(context or {})}
        return self.templates.TemplateResponse(
            request,
            template_name,
            page_context,
            status_code=status_code,
        )

    def wrap(self, request: Request, content: str, status_code: int = 200) -> HTMLResponse:
        """Wrap already-rendered HTML in the layout. `content` is not escaped."""
        return self.render(request, "page.html", {"content": content}, status_code=status_code)
