"""
Snippets — Snippet Store (Persistence Operations)
==================================================

What:  The only code that talks to the `snippet` table.
How:   Each method runs one ORM operation on the request's AsyncSession and
       flushes. Committing is left to get_db_session.
Who:   Called by SnippetService.

Error translation:
    SQLAlchemyError → DatabaseError carrying the driver's message
    Unknown id      → NotFoundError (update_code, delete)
"""

import logging
from typing import List, Optional

from sqlalchemy import desc, func, select
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from snippets.exceptions import DatabaseError, NotFoundError
from snippets.models.snippet import Snippet

logger = logging.getLogger(__name__)


def _database_error(operation: str, exc: SQLAlchemyError, **context) -> DatabaseError:
    # DBAPIError.__str__ appends the statement and a docs link; the
    # driver exception alone is the readable part.
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        text = str(exc.orig)
    else:
        text = str(exc)
    logger.error("Store %s failed: %s", operation, text)
    return DatabaseError(
        message=text,
        context={"operation": operation, "error_type": type(exc).__name__, **context},
    )


class SnippetStore:
    """
    Insert / update / delete / read snippets.

    Stateless; the session is passed in for every call.
    """

    async def insert(self, db: AsyncSession, title: str, code: str) -> Snippet:
        """Insert one snippet and return it with its database-assigned id."""
        snippet = Snippet(title=title, code=code)
        try:
            db.add(snippet)
            await db.flush()
        except SQLAlchemyError as e:
            # The caller keeps using this session after a failed insert
            await db.rollback()
            raise _database_error("insert", e) from e
        logger.info("Snippet %s inserted", snippet.id)
        return snippet

    async def get(self, db: AsyncSession, snippet_id: int) -> Optional[Snippet]:
        try:
            return await db.get(Snippet, snippet_id)
        except SQLAlchemyError as e:
            raise _database_error("get", e, snippet_id=snippet_id) from e

    async def update_code(self, db: AsyncSession, snippet_id: int, code: str) -> Snippet:
        """
        Replace the code of one snippet.

        Raises:
            NotFoundError: no snippet with this id
            DatabaseError: the store rejected the update
        """
        snippet = await self.get(db, snippet_id)
        if snippet is None:
            raise NotFoundError(resource="snippet", resource_id=snippet_id)

        snippet.code = code
        try:
            await db.flush()
        except SQLAlchemyError as e:
            raise _database_error("update", e, snippet_id=snippet_id) from e
        logger.info("Snippet %s code updated", snippet_id)
        return snippet

    async def delete(self, db: AsyncSession, snippet_id: int) -> None:
        """
        Remove one snippet.

        Raises:
            NotFoundError: no snippet with this id
            DatabaseError: the store rejected the delete
        """
        snippet = await self.get(db, snippet_id)
        if snippet is None:
            raise NotFoundError(resource="snippet", resource_id=snippet_id)

        try:
            await db.delete(snippet)
            await db.flush()
        except SQLAlchemyError as e:
            raise _database_error("delete", e, snippet_id=snippet_id) from e
        logger.info("Snippet %s deleted", snippet_id)

    async def list_recent(self, db: AsyncSession, limit: int, offset: int = 0) -> List[Snippet]:
        """Newest first (highest id first)."""
        query = select(Snippet).order_by(desc(Snippet.id)).offset(offset).limit(limit)
        try:
            result = await db.execute(query)
        except SQLAlchemyError as e:
            raise _database_error("list", e) from e
        return list(result.scalars().all())

    async def count(self, db: AsyncSession) -> int:
        try:
            result = await db.execute(select(func.count(Snippet.id)))
        except SQLAlchemyError as e:
            raise _database_error("count", e) from e
        return result.scalar() or 0


snippet_store = SnippetStore()
