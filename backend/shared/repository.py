"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the translation of database failures.
"""

from typing import Any, TypeVar, Generic

import httpx
from postgrest.exceptions import APIError as PostgrestAPIError
from supabase import Client

from .exceptions import ExternalServiceError


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Query execution that raises ExternalServiceError when Supabase fails
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class OrderRepository(BaseRepository[Order]):
            def list_for_user(self, user_id: str) -> list[Order]:
                query = self._db.table("orders").select("*").eq("user_id", user_id)
                result = self._execute(query, "list orders")
                return [self._map_to_order(row) for row in result.data]
    """

    service_name = "supabase"

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, query: Any, operation: str) -> Any:
        """
        Execute a query builder.

        Raises:
            ExternalServiceError: If PostgREST rejects the query or the
                request never reaches Supabase.
        """
        try:
            return query.execute()
        except (PostgrestAPIError, httpx.HTTPError) as e:
            raise ExternalServiceError(
                f"Database operation failed: {operation}",
                service=self.service_name,
                details={"reason": str(e)},
            ) from e
