"""
Snippets — Snippet Service (Mutation Operations)
=================================================

What:  create / edit / delete snippets and the reads their pages need.
How:   Each mutation performs one SnippetStore call and answers with a
       NavigateTo outcome; create_snippet may answer with a FormState
       instead.
Who:   Called by the HTML route handlers (through SnippetCreateForm for
       create) and by the JSON API for reads.

Create flow:
    Idle → Validating ─┬─ Rejected(message) ─────────────▶ FormState
                       └─ Persisting ─┬─ Failed(message) ─▶ FormState
                                      └─ Succeeded ───────▶ NavigateTo("/")

Error containment is deliberately uneven:
    - create_snippet turns every failure into a FormState message
    - edit_snippet / delete_snippet let NotFoundError and DatabaseError
      propagate to the global exception handlers
"""

import logging
from typing import Any, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from snippets.exceptions import NotFoundError, SnippetsError
from snippets.schemas.snippet import (
    CreateSnippetOutcome,
    FormState,
    NavigateTo,
    SnippetListResponse,
    SnippetResponse,
)
from snippets.services.snippet_store import snippet_store

logger = logging.getLogger(__name__)

TITLE_MIN_LENGTH = 3
CODE_MIN_LENGTH = 10

GENERIC_ERROR_MESSAGE = "Something went wrong"


class SnippetService:
    """
    Business logic for snippet operations.

    Stateless; receives the request's AsyncSession on every call.
    """

    async def create_snippet(
        self,
        db: AsyncSession,
        form_state: FormState,
        fields: Mapping[str, Any],
    ) -> CreateSnippetOutcome:
        """
        Validate a submitted create form and insert the snippet.

        Args:
            db: Async database session
            form_state: Display state from the previous round trip (unused;
                        it is part of the form action signature)
            fields: Submitted form fields; values may be of any type

        Returns:
            FormState with an error message when the submission is rejected
            or the insert fails, NavigateTo("/") otherwise.
        """
        title = fields.get("title")
        code = fields.get("code")

        if not isinstance(title, str) or len(title) < TITLE_MIN_LENGTH:
            return FormState(message="Title must be longer")

        if not isinstance(code, str) or len(code) < CODE_MIN_LENGTH:
            return FormState(message="Code must be longer")

        try:
            await snippet_store.insert(db, title=title, code=code)
        except SnippetsError as e:
            logger.warning("Create snippet failed: %s", e.message)
            return FormState(message=e.message)
        except Exception as e:
            logger.exception("Unexpected error creating snippet: %s", e)
            return FormState(message=GENERIC_ERROR_MESSAGE)

        return NavigateTo(url="/")

    async def edit_snippet(self, db: AsyncSession, snippet_id: int, code: str) -> NavigateTo:
        """
        Replace a snippet's code and navigate to its detail page.

        No length validation and no error containment: NotFoundError and
        DatabaseError reach the caller.
        """
        await snippet_store.update_code(db, snippet_id, code)
        return NavigateTo(url=f"/snippets/{snippet_id}")

    async def delete_snippet(self, db: AsyncSession, snippet_id: int) -> NavigateTo:
        """Remove a snippet and navigate to the root. Failures propagate."""
        await snippet_store.delete(db, snippet_id)
        return NavigateTo(url="/")

    async def get_snippet(self, db: AsyncSession, snippet_id: int) -> SnippetResponse:
        """
        Raises:
            NotFoundError: no snippet with this id (→ 404)
        """
        snippet = await snippet_store.get(db, snippet_id)
        if snippet is None:
            raise NotFoundError(resource="snippet", resource_id=snippet_id)
        return SnippetResponse.model_validate(snippet)

    async def list_snippets(
        self,
        db: AsyncSession,
        limit: int = 20,
        offset: int = 0,
    ) -> SnippetListResponse:
        """
        One page of snippets, newest first.

        Fetches limit + 1 rows so has_more needs no extra query.
        """
        rows = await snippet_store.list_recent(db, limit=limit + 1, offset=offset)
        total_count = await snippet_store.count(db)

        has_more = len(rows) > limit
        if has_more:
            rows = rows[:limit]

        return SnippetListResponse(
            snippets=[SnippetResponse.model_validate(row) for row in rows],
            total_count=total_count,
            has_more=has_more,
        )


snippet_service = SnippetService()
