"""
Snippets — HTML Page Route Handlers
====================================

What:  The snippet pages and the form posts that mutate snippets.
How:   Reads form fields, delegates to SnippetService, and turns the
       NavigateTo outcome into a 303 See Other redirect.
Who:   Browsers submitting the create / edit / delete forms.

Route Inventory:
    GET  /                       list page
    GET  /snippets/new           create form
    POST /snippets/new           create_snippet → 303 "/" or re-rendered form
    GET  /snippets/{id}          detail page
    GET  /snippets/{id}/edit     edit form
    POST /snippets/{id}/edit     edit_snippet   → 303 "/snippets/{id}"
    POST /snippets/{id}/delete   delete_snippet → 303 "/"
"""

import logging
from functools import partial

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from snippets.database import get_db_session
from snippets.schemas.snippet import NavigateTo
from snippets.services.snippet_service import snippet_service
from snippets.views.forms import SnippetCreateForm
from snippets.views.rendering import render

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Snippets"])


def navigate(outcome: NavigateTo) -> RedirectResponse:
    # 303 so the browser follows a form POST with a GET
    return RedirectResponse(url=outcome.url, status_code=303)


@router.get("/", response_class=HTMLResponse, summary="List snippets")
async def index(db: AsyncSession = Depends(get_db_session)) -> HTMLResponse:
    page = await snippet_service.list_snippets(db=db, limit=100)
    return HTMLResponse(render("snippets/index.html", snippets=page.snippets))


@router.get("/snippets/new", response_class=HTMLResponse, summary="Create snippet form")
async def new_snippet_form(db: AsyncSession = Depends(get_db_session)) -> HTMLResponse:
    form = SnippetCreateForm(action=partial(snippet_service.create_snippet, db))
    return HTMLResponse(form.render())


@router.post(
    "/snippets/new",
    response_class=HTMLResponse,
    summary="Create a snippet",
    responses={
        200: {"description": "Submission rejected; form re-rendered with the message"},
        303: {"description": "Snippet created; redirect to /"},
    },
)
async def create_snippet(request: Request, db: AsyncSession = Depends(get_db_session)):
    """
    Submit the create form.

    The raw form mapping goes to the service untouched; title and code
    may arrive missing or as uploads, and the service decides.
    """
    fields = await request.form()
    form = SnippetCreateForm(action=partial(snippet_service.create_snippet, db))

    outcome = await form.submit(fields)
    if isinstance(outcome, NavigateTo):
        return navigate(outcome)

    return HTMLResponse(form.render())


@router.get("/snippets/{snippet_id}", response_class=HTMLResponse, summary="Show a snippet")
async def show_snippet(snippet_id: int, db: AsyncSession = Depends(get_db_session)) -> HTMLResponse:
    snippet = await snippet_service.get_snippet(db=db, snippet_id=snippet_id)
    return HTMLResponse(render("snippets/show.html", snippet=snippet))


@router.get("/snippets/{snippet_id}/edit", response_class=HTMLResponse, summary="Edit snippet form")
async def edit_snippet_form(snippet_id: int, db: AsyncSession = Depends(get_db_session)) -> HTMLResponse:
    snippet = await snippet_service.get_snippet(db=db, snippet_id=snippet_id)
    return HTMLResponse(render("snippets/edit.html", snippet=snippet))


@router.post("/snippets/{snippet_id}/edit", summary="Replace a snippet's code")
async def edit_snippet(
    snippet_id: int,
    code: str = Form(""),
    db: AsyncSession = Depends(get_db_session),
) -> RedirectResponse:
    outcome = await snippet_service.edit_snippet(db=db, snippet_id=snippet_id, code=code)
    return navigate(outcome)


@router.post("/snippets/{snippet_id}/delete", summary="Delete a snippet")
async def delete_snippet(
    snippet_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> RedirectResponse:
    outcome = await snippet_service.delete_snippet(db=db, snippet_id=snippet_id)
    return navigate(outcome)
