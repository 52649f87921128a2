"""
OrderDesk client.

Talks to the OrderDesk API on behalf of a signed-in user:
- session: credential persistence
- api: HTTP client for every endpoint
- state: immutable view state and its transitions
- dashboard: concurrent bootstrap of profile, orders and options
- cli: terminal front end
"""

from .api import OrderDeskClient
from .exceptions import APIError, ClientError, SessionExpiredError
from .session import SessionStore

__all__ = [
    "OrderDeskClient",
    "APIError",
    "ClientError",
    "SessionExpiredError",
    "SessionStore",
]
