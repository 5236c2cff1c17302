"""
Snippets — Application Package Initializer
===========================================

What: Marks the `snippets` directory as a Python package.
Who:  Imported by uvicorn (`snippets.main:app`), Alembic, and pytest.

Architecture Note:
    Two independent flows share one FastAPI process:

    ┌─────────────────────────────────────┐
    │      Routes (HTML pages + JSON)     │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Views (forms, hero, templates)    │  ← Presentation state
    ├─────────────────────────────────────┤
    │   Services (mutations, store)       │  ← Validation, navigation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    - Snippets: create / edit / delete text snippets via form posts.
    - Corp pages: static marketing pages built from the Hero component.
"""

__version__ = "1.0.0"
