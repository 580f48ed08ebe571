"""
LinkVault Backend — Index Page and Static Assets
==================================================

What:  Serves the single-page UI. GET / returns index.html with the site
       title filled in; every path that no route matches falls through to
       the packaged static/ directory.
How:   The index template has one `{{ site_title }}` placeholder that is
       replaced with the HTML-escaped configured title on every request.
       Assets are served by Starlette's StaticFiles installed as the router's
       fallback, not as a route. A path that matches a route with another
       method (e.g. GET /api/categories/5) therefore still answers 405, and
       StaticFiles keeps asset lookups inside the static root.
"""

import html
from pathlib import Path

import aiofiles
from fastapi import APIRouter
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from linkvault.config import settings

router = APIRouter(tags=["Pages"])

STATIC_ROOT = Path(__file__).resolve().parent.parent / "static"
TITLE_PLACEHOLDER = "{{ site_title }}"

# Installed as app.router.default by create_app()
static_files = StaticFiles(directory=STATIC_ROOT, html=False)


def render_index(template: str, title: str) -> str:
    """Substitute the site title into the index template."""
    return template.replace(TITLE_PLACEHOLDER, html.escape(title))


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index() -> HTMLResponse:
    async with aiofiles.open(STATIC_ROOT / "index.html", "r", encoding="utf-8") as f:
        template = await f.read()
    return HTMLResponse(render_index(template, settings.site.title))
