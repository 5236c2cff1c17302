"""
Snippets — Marketing Routes
============================

What:  /performance and /reliability, each a single Hero on the base layout.
How:   The Hero fragment comes from render_hero and is dropped into
       marketing/page.html unescaped; the fragment escapes its own fields.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from snippets.views.hero import PERFORMANCE, RELIABILITY, HeroPage, render_hero
from snippets.views.rendering import render

router = APIRouter(tags=["Marketing"])


def _hero_page(hero: HeroPage) -> HTMLResponse:
    hero_html = render_hero(hero.image_src, hero.image_alt, hero.title)
    return HTMLResponse(render("marketing/page.html", title=hero.title, hero_html=hero_html))


@router.get("/performance", response_class=HTMLResponse, summary="Performance page")
async def performance() -> HTMLResponse:
    return _hero_page(PERFORMANCE)


@router.get("/reliability", response_class=HTMLResponse, summary="Reliability page")
async def reliability() -> HTMLResponse:
    return _hero_page(RELIABILITY)
