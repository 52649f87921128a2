"""
OrderDesk API package.

Provides the FastAPI application for the OrderDesk order placement service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
