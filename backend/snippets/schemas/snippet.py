"""
Snippets — Pydantic Schemas
============================

What:  Pydantic models for API responses and for the outcomes of the
       snippet mutation operations.
Why:   Schemas are separate from SQLAlchemy models so the API contract and
       the form round-trip state can evolve independently of the table.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Mutation Outcomes — What create/edit/delete hand back to the HTTP layer
# ══════════════════════════════════════════════════════════════════════════


class FormState(BaseModel):
    """
    What:  Display state of the create form.
    When:  Returned by create_snippet whenever it does NOT navigate away.

    An empty message means "no error"; the form only shows the error block
    when the message is non-empty.
    """
    message: str = Field(default="", description="Validation or store error text")


class NavigateTo(BaseModel):
    """
    What:  Success outcome of a mutation: the page the client goes to next.
    How:   Routes turn it into a 303 See Other redirect.
    """
    url: str = Field(description="Path to navigate to")


CreateSnippetOutcome = Union[NavigateTo, FormState]


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the JSON API returns
# ══════════════════════════════════════════════════════════════════════════


class SnippetResponse(BaseModel):
    """Full representation of a snippet."""
    id: int = Field(description="Snippet identifier")
    title: str = Field(description="Snippet title")
    code: str = Field(description="Snippet code")

    model_config = {"from_attributes": True}


class SnippetListResponse(BaseModel):
    """
    Offset-paginated snippet listing, newest first.

    has_more is computed by fetching one row past the page.
    """
    snippets: List[SnippetResponse] = Field(description="Page of snippets")
    total_count: int = Field(description="Total number of snippets")
    has_more: bool = Field(description="Whether more pages are available")


class ErrorResponse(BaseModel):
    """Standardized error response format for all API errors."""
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
