"""
Snippets — Snippet SQLAlchemy Model
====================================

What:  ORM model representing the `snippet` table.
Who:   Used by SnippetStore for CRUD operations and by Alembic.

Table Design:
    - Integer autoincrement primary key, assigned by the database on insert
    - title / code: TEXT, no database-level length limits; the minimum
      lengths are enforced by SnippetService.create_snippet only
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from snippets.database import Base


class Snippet(Base):
    """
    A titled piece of code.

    Lifecycle:
        1. Inserted by create_snippet (id assigned by the database)
        2. code replaced in place by edit_snippet
        3. Removed by delete_snippet (hard delete)
    """

    __tablename__ = "snippet"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    title: Mapped[str] = mapped_column(Text, nullable=False)

    code: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Snippet(id={self.id}, title='{self.title}')>"
