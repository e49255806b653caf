"""FastAPI router for the server-rendered login and home pages."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"


def build_pages_router() -> APIRouter:
    """Build router exposing Jinja2 server-rendered pages."""

    templates = Jinja2Templates(directory=str(_TEMPLATE_DIR))
    router = APIRouter(tags=["pages"])

    @router.get("/login", response_class=HTMLResponse)
    async def render_login_page(request: Request) -> HTMLResponse:
        return templates.TemplateResponse(
            request=request,
            name="login.html",
            context={"page_title": "Login"},
        )

    @router.get("/home", response_class=HTMLResponse)
    async def render_home_page(request: Request) -> HTMLResponse:
        return templates.TemplateResponse(
            request=request,
            name="home.html",
            context={"page_title": "Home"},
        )

    return router
