"""
Snippets — Snippet Service Unit Tests
======================================

What:  Tests for SnippetService create / edit / delete and reads.
How:   The module-level snippet_store is patched; no database involved.

What we test:
    ✅ Title / code minimum lengths and non-string field values
    ✅ Exactly one insert with the submitted values, then NavigateTo("/")
    ✅ Store errors become form messages on create
    ✅ Edit / delete navigate and let store errors propagate
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from snippets.exceptions import DatabaseError, NotFoundError
from snippets.schemas.snippet import FormState, NavigateTo
from snippets.services.snippet_service import SnippetService

STORE = "snippets.services.snippet_service.snippet_store"


class TestCreateSnippetValidation:
    """Rejected submissions never reach the store."""

    def setup_method(self):
        self.service = SnippetService()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title", ["", "a", "Hi"])
    async def test_short_title_rejected(self, mock_db_session, title):
        with patch(STORE) as mock_store:
            mock_store.insert = AsyncMock()

            result = await self.service.create_snippet(
                mock_db_session, FormState(), {"title": title, "code": "console.log(1)"}
            )

            assert result == FormState(message="Title must be longer")
            mock_store.insert.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title", [None, 12345, b"Hello", ["Hello"]])
    async def test_non_string_title_rejected(self, mock_db_session, title):
        with patch(STORE) as mock_store:
            mock_store.insert = AsyncMock()

            result = await self.service.create_snippet(
                mock_db_session, FormState(), {"title": title, "code": "console.log(1)"}
            )

            assert result.message == "Title must be longer"
            mock_store.insert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_title_rejected(self, mock_db_session):
        with patch(STORE) as mock_store:
            mock_store.insert = AsyncMock()

            result = await self.service.create_snippet(
                mock_db_session, FormState(), {"code": "console.log(1)"}
            )

            assert result.message == "Title must be longer"
            mock_store.insert.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", ["", "x=1", "123456789"])
    async def test_short_code_rejected(self, mock_db_session, code):
        with patch(STORE) as mock_store:
            mock_store.insert = AsyncMock()

            result = await self.service.create_snippet(
                mock_db_session, FormState(), {"title": "Hello", "code": code}
            )

            assert result == FormState(message="Code must be longer")
            mock_store.insert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_non_string_code_rejected(self, mock_db_session):
        with patch(STORE) as mock_store:
            mock_store.insert = AsyncMock()

            result = await self.service.create_snippet(
                mock_db_session, FormState(), {"title": "Hello", "code": 1234567890}
            )

            assert result.message == "Code must be longer"
            mock_store.insert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_title_checked_before_code(self, mock_db_session):
        with patch(STORE) as mock_store:
            mock_store.insert = AsyncMock()

            result = await self.service.create_snippet(
                mock_db_session, FormState(), {"title": "Hi", "code": "x"}
            )

            assert result.message == "Title must be longer"


class TestCreateSnippetPersist:
    """Valid submissions insert once and navigate to the root."""

    def setup_method(self):
        self.service = SnippetService()

    @pytest.mark.asyncio
    async def test_valid_submission_inserts_and_navigates(self, mock_db_session):
        with patch(STORE) as mock_store:
            mock_store.insert = AsyncMock()

            result = await self.service.create_snippet(
                mock_db_session, FormState(), {"title": "Hello", "code": "console.log(42)"}
            )

            assert result == NavigateTo(url="/")
            mock_store.insert.assert_awaited_once_with(
                mock_db_session, title="Hello", code="console.log(42)"
            )

    @pytest.mark.asyncio
    async def test_minimum_lengths_accepted(self, mock_db_session):
        with patch(STORE) as mock_store:
            mock_store.insert = AsyncMock()

            result = await self.service.create_snippet(
                mock_db_session, FormState(), {"title": "abc", "code": "0123456789"}
            )

            assert isinstance(result, NavigateTo)
            mock_store.insert.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_prior_form_state_is_ignored(self, mock_db_session):
        with patch(STORE) as mock_store:
            mock_store.insert = AsyncMock()

            result = await self.service.create_snippet(
                mock_db_session,
                FormState(message="Title must be longer"),
                {"title": "Hello", "code": "console.log(42)"},
            )

            assert result == NavigateTo(url="/")

    @pytest.mark.asyncio
    async def test_store_error_becomes_message(self, mock_db_session):
        with patch(STORE) as mock_store:
            mock_store.insert = AsyncMock(side_effect=DatabaseError(message="database is locked"))

            result = await self.service.create_snippet(
                mock_db_session, FormState(), {"title": "Hello", "code": "console.log(42)"}
            )

            assert result == FormState(message="database is locked")
            mock_store.insert.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unexpected_error_becomes_generic_message(self, mock_db_session, caplog):
        with patch(STORE) as mock_store:
            mock_store.insert = AsyncMock(side_effect=RuntimeError("driver exploded"))

            with caplog.at_level("ERROR", logger="snippets.services.snippet_service"):
                result = await self.service.create_snippet(
                    mock_db_session, FormState(), {"title": "Hello", "code": "console.log(42)"}
                )

            assert result == FormState(message="Something went wrong")
            # The raw error is kept for operators
            assert "driver exploded" in caplog.text


class TestEditSnippet:
    def setup_method(self):
        self.service = SnippetService()

    @pytest.mark.asyncio
    async def test_edit_updates_code_and_navigates_to_detail(self, mock_db_session):
        with patch(STORE) as mock_store:
            mock_store.update_code = AsyncMock()

            result = await self.service.edit_snippet(mock_db_session, 7, "new code")

            assert result == NavigateTo(url="/snippets/7")
            mock_store.update_code.assert_awaited_once_with(mock_db_session, 7, "new code")

    @pytest.mark.asyncio
    async def test_edit_does_not_validate_length(self, mock_db_session):
        with patch(STORE) as mock_store:
            mock_store.update_code = AsyncMock()

            result = await self.service.edit_snippet(mock_db_session, 3, "x")

            assert result.url == "/snippets/3"
            mock_store.update_code.assert_awaited_once_with(mock_db_session, 3, "x")

    @pytest.mark.asyncio
    async def test_edit_missing_snippet_propagates(self, mock_db_session):
        with patch(STORE) as mock_store:
            mock_store.update_code = AsyncMock(
                side_effect=NotFoundError(resource="snippet", resource_id=99)
            )

            with pytest.raises(NotFoundError):
                await self.service.edit_snippet(mock_db_session, 99, "new code")

    @pytest.mark.asyncio
    async def test_edit_store_failure_propagates(self, mock_db_session):
        with patch(STORE) as mock_store:
            mock_store.update_code = AsyncMock(side_effect=DatabaseError(message="gone"))

            with pytest.raises(DatabaseError):
                await self.service.edit_snippet(mock_db_session, 1, "new code")


class TestDeleteSnippet:
    def setup_method(self):
        self.service = SnippetService()

    @pytest.mark.asyncio
    async def test_delete_removes_and_navigates_to_root(self, mock_db_session):
        with patch(STORE) as mock_store:
            mock_store.delete = AsyncMock()

            result = await self.service.delete_snippet(mock_db_session, 4)

            assert result == NavigateTo(url="/")
            mock_store.delete.assert_awaited_once_with(mock_db_session, 4)

    @pytest.mark.asyncio
    async def test_delete_missing_snippet_propagates(self, mock_db_session):
        with patch(STORE) as mock_store:
            mock_store.delete = AsyncMock(
                side_effect=NotFoundError(resource="snippet", resource_id=4)
            )

            with pytest.raises(NotFoundError):
                await self.service.delete_snippet(mock_db_session, 4)


class TestReads:
    def setup_method(self):
        self.service = SnippetService()

    @pytest.mark.asyncio
    async def test_get_snippet_found(self, mock_db_session, sample_snippet):
        with patch(STORE) as mock_store:
            mock_store.get = AsyncMock(return_value=sample_snippet)

            result = await self.service.get_snippet(mock_db_session, 1)

            assert result.id == 1
            assert result.code == "console.log(42)"

    @pytest.mark.asyncio
    async def test_get_snippet_not_found(self, mock_db_session):
        with patch(STORE) as mock_store:
            mock_store.get = AsyncMock(return_value=None)

            with pytest.raises(NotFoundError):
                await self.service.get_snippet(mock_db_session, 1)

    @pytest.mark.asyncio
    async def test_list_snippets_trims_extra_row(self, mock_db_session):
        rows = [
            SimpleNamespace(id=i, title=f"Title {i}", code="print('hello')")
            for i in (3, 2, 1)
        ]
        with patch(STORE) as mock_store:
            mock_store.list_recent = AsyncMock(return_value=rows)
            mock_store.count = AsyncMock(return_value=3)

            result = await self.service.list_snippets(mock_db_session, limit=2)

            mock_store.list_recent.assert_awaited_once_with(mock_db_session, limit=3, offset=0)
            assert [s.id for s in result.snippets] == [3, 2]
            assert result.total_count == 3
            assert result.has_more is True
