"""
Service Factory
Builds service facades from stubs and client settings.

Usage:
    from tradeclient.factory import create_orders_service
    
    orders = create_orders_service(blocking_stub, async_stub)
"""

import logging
from typing import Optional

from tradeclient.config import ClientSettings, get_settings
from tradeclient.core.ports import OrdersAsyncStub, OrdersBlockingStub
from tradeclient.services.orders import OrdersService

logger = logging.getLogger(__name__)


def create_orders_service(
    blocking_stub: OrdersBlockingStub,
    async_stub: OrdersAsyncStub,
    settings: Optional[ClientSettings] = None,
    readonly_mode: Optional[bool] = None,
) -> OrdersService:
    """
    Create an orders service.
    
    Args:
        blocking_stub: Blocking stub for the orders service
        async_stub: Callback-style stub for the orders service
        settings: Client settings (None reads the cached settings)
        readonly_mode: Overrides settings.readonly_mode when given
    
    Returns:
        OrdersService bound to the given stubs
    """
    settings = settings or get_settings()
    if readonly_mode is None:
        readonly_mode = settings.readonly_mode
    
    logger.info(f"Orders service created ({'read-only' if readonly_mode else 'full access'})")
    return OrdersService(blocking_stub, async_stub, readonly_mode)
