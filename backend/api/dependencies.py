"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.catalog.service import CatalogService
    from modules.orders.interfaces import IOrderService
    from modules.orders.repository import OrderRepository
    from modules.orders.validation import OrderValidator
    from modules.users.interfaces import IUserService
    from modules.users.repository import UserRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._auth_service: "IAuthService | None" = None
        self._catalog_service: "CatalogService | None" = None
        self._user_repository: "UserRepository | None" = None
        self._user_service: "IUserService | None" = None
        self._order_repository: "OrderRepository | None" = None
        self._order_validator: "OrderValidator | None" = None
        self._order_service: "IOrderService | None" = None

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService()
        return self._auth_service

    @property
    def catalog(self) -> "CatalogService":
        """Get the catalog service instance."""
        if self._catalog_service is None:
            from modules.catalog.service import CatalogService
            self._catalog_service = CatalogService()
        return self._catalog_service

    @property
    def user_repository(self) -> "UserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def users(self) -> "IUserService":
        """Get the user directory service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(self.user_repository)
        return self._user_service

    @property
    def order_repository(self) -> "OrderRepository":
        """Get the order repository instance."""
        if self._order_repository is None:
            from modules.orders.repository import OrderRepository
            from shared.database import get_supabase_client
            self._order_repository = OrderRepository(get_supabase_client())
        return self._order_repository

    @property
    def order_validator(self) -> "OrderValidator":
        """Get the order validator, configured from settings."""
        if self._order_validator is None:
            from modules.orders.validation import OrderPolicy, OrderValidator
            from shared.config import get_settings
            self._order_validator = OrderValidator(
                OrderPolicy.from_settings(get_settings()),
                self.catalog,
            )
        return self._order_validator

    @property
    def orders(self) -> "IOrderService":
        """Get the order service instance."""
        if self._order_service is None:
            from modules.orders.service import OrderService
            self._order_service = OrderService(
                repository=self.order_repository,
                validator=self.order_validator,
            )
        return self._order_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._auth_service = None
        self._catalog_service = None
        self._user_repository = None
        self._user_service = None
        self._order_repository = None
        self._order_validator = None
        self._order_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_catalog_service() -> "CatalogService":
    """FastAPI dependency for catalog service."""
    return get_container().catalog


def get_user_service() -> "IUserService":
    """FastAPI dependency for user directory service."""
    return get_container().users


def get_order_service() -> "IOrderService":
    """FastAPI dependency for order service."""
    return get_container().orders
