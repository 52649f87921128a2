"""
Dashboard loading.

Profile, orders and catalog options are fetched concurrently. The dashboard
is shown only when all three succeed; otherwise a single error state with a
retry hint replaces it.
"""

import asyncio
import logging
from typing import Union

from pydantic import BaseModel, ConfigDict

from .api import OrderDeskClient
from .exceptions import ClientError, SessionExpiredError
from .state import DashboardState

logger = logging.getLogger(__name__)


class DashboardError(BaseModel):
    """Shown instead of the dashboard when loading fails."""

    model_config = ConfigDict(frozen=True)

    message: str
    hint: str = "Run the command again to retry."


async def load_dashboard(client: OrderDeskClient) -> Union[DashboardState, DashboardError]:
    """
    Load everything the dashboard needs.

    Raises:
        SessionExpiredError: If the API rejected the credential.
    """
    results = await asyncio.gather(
        client.get_profile(),
        client.get_orders(),
        client.get_options(),
        return_exceptions=True,
    )

    failures = [r for r in results if isinstance(r, BaseException)]
    for failure in failures:
        if isinstance(failure, SessionExpiredError) or not isinstance(failure, ClientError):
            raise failure

    if failures:
        logger.warning(f"Dashboard load failed: {failures[0]}")
        return DashboardError(message=f"Failed to load data: {failures[0].message}")

    profile, orders, options = results
    return DashboardState(profile=profile, orders=orders, options=options)
