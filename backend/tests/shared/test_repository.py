"""Tests for the repository base class."""

import httpx
import pytest
from unittest.mock import MagicMock
from postgrest.exceptions import APIError as PostgrestAPIError

from modules.orders.repository import OrderRepository
from modules.users.repository import UserRepository
from shared.exceptions import ExternalServiceError
from shared.repository import BaseRepository


@pytest.mark.parametrize("repository_class", [OrderRepository, UserRepository])
def test_repositories_share_the_service_client(repository_class):
    db = MagicMock()
    repo = repository_class(db)
    assert isinstance(repo, BaseRepository)
    assert repo._db is db


class TestExecute:

    @pytest.fixture
    def repo(self):
        return OrderRepository(MagicMock())

    def test_returns_the_response(self, repo):
        query = MagicMock()
        query.execute.return_value.data = [{"id": "order-1"}]

        assert repo._execute(query, "list orders").data == [{"id": "order-1"}]
        query.execute.assert_called_once_with()

    @pytest.mark.parametrize("error", [
        PostgrestAPIError({"message": "permission denied for table orders", "code": "42501"}),
        httpx.ConnectError("connection refused"),
        httpx.ReadTimeout("timed out"),
    ])
    def test_database_failures_become_external_service_errors(self, repo, error):
        query = MagicMock()
        query.execute.side_effect = error

        with pytest.raises(ExternalServiceError) as exc_info:
            repo._execute(query, "create order")

        assert exc_info.value.service == "supabase"
        assert exc_info.value.message == "Database operation failed: create order"
        assert exc_info.value.__cause__ is error

    def test_programming_errors_are_not_wrapped(self, repo):
        query = MagicMock()
        query.execute.side_effect = TypeError("bad query")

        with pytest.raises(TypeError):
            repo._execute(query, "create order")
