"""
StaffDesk Backend — Category Service Unit Tests
=================================================
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from app.exceptions import DatabaseError, ValidationError
from app.services.category_service import CategoryService


class TestCategoryService:

    def setup_method(self):
        self.service = CategoryService()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", [None, ""])
    async def test_create_without_name_never_inserts(self, mock_db_session, name):
        with pytest.raises(ValidationError, match="Category name is required."):
            await self.service.create_category(mock_db_session, name)
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_inserts_and_commits(self, mock_db_session):
        await self.service.create_category(mock_db_session, "Engineering")

        statement = mock_db_session.execute.await_args.args[0]
        assert statement.compile().params == {"name": "Engineering"}
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_list_maps_rows(self, mock_db_session):
        row = MagicMock(id=1)
        row.name = "Engineering"  # name= in the constructor names the mock itself
        result = MagicMock()
        result.scalars.return_value.all.return_value = [row]
        mock_db_session.execute.return_value = result

        categories = await self.service.list_categories(mock_db_session)

        assert [(c.id, c.name) for c in categories] == [(1, "Engineering")]

    @pytest.mark.asyncio
    async def test_list_failure_becomes_database_error(self, mock_db_session):
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("refused"))
        )
        with pytest.raises(DatabaseError):
            await self.service.list_categories(mock_db_session)
