"""
Snippets — JSON API Route Handlers
===================================

What:  Read-only JSON access to snippets.
How:   Extracts query parameters, delegates to SnippetService, returns JSON.

Routes:
    GET /api/snippets        paginated list (newest first)
    GET /api/snippets/{id}   single snippet
"""

import logging

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from snippets.database import get_db_session
from snippets.schemas.snippet import (
    ErrorResponse,
    SnippetListResponse,
    SnippetResponse,
)
from snippets.services.snippet_service import snippet_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["API"])


@router.get(
    "/snippets",
    response_model=SnippetListResponse,
    responses={
        200: {"description": "Page of snippets", "model": SnippetListResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List snippets with pagination",
)
async def list_snippets(
    response: Response,
    limit: int = Query(default=20, ge=1, le=100, description="Items per page (max 100)"),
    offset: int = Query(default=0, ge=0, description="Number of snippets to skip"),
    db: AsyncSession = Depends(get_db_session),
) -> SnippetListResponse:
    """
    List snippets, newest first.

    The total is also sent as X-Total-Count for clients that only read
    headers.
    """
    result = await snippet_service.list_snippets(db=db, limit=limit, offset=offset)
    response.headers["X-Total-Count"] = str(result.total_count)
    return result


@router.get(
    "/snippets/{snippet_id}",
    response_model=SnippetResponse,
    responses={
        200: {"description": "Snippet", "model": SnippetResponse},
        404: {"description": "Snippet not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single snippet by ID",
)
async def get_snippet(
    snippet_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> SnippetResponse:
    return await snippet_service.get_snippet(db=db, snippet_id=snippet_id)
