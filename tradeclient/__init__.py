"""
tradeclient: order lifecycle facade over a remote trading-platform RPC service.

Blocking and Future-returning forms of every operation; transport, auth and
retries belong to the stubs passed in.
"""

__version__ = "0.1.0"

from tradeclient.core.errors import (
    ApiError,
    InvalidArgumentError,
    ReadonlyModeViolationError,
    SandboxModeViolationError,
    TradeClientError,
)
from tradeclient.core.types import (
    OrderDirection,
    OrderState,
    OrderType,
    PostOrderResponse,
    PriceType,
    Quotation,
    Timestamp,
)
from tradeclient.factory import create_orders_service
from tradeclient.services.orders import OrdersService

__all__ = [
    "ApiError",
    "InvalidArgumentError",
    "ReadonlyModeViolationError",
    "SandboxModeViolationError",
    "TradeClientError",
    "OrderDirection",
    "OrderState",
    "OrderType",
    "PostOrderResponse",
    "PriceType",
    "Quotation",
    "Timestamp",
    "OrdersService",
    "create_orders_service",
]
