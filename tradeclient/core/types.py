"""
Wire payloads for the orders service.

Pydantic schemas mirroring the remote request/response shapes. Request
models are built by the service; response models pass through unchanged.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
NANO_LIMIT = 999_999_999


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Enums
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class OrderDirection(str, Enum):
    """Order direction enum."""
    UNSPECIFIED = "ORDER_DIRECTION_UNSPECIFIED"
    BUY = "ORDER_DIRECTION_BUY"
    SELL = "ORDER_DIRECTION_SELL"


class OrderType(str, Enum):
    """Order type enum."""
    UNSPECIFIED = "ORDER_TYPE_UNSPECIFIED"
    LIMIT = "ORDER_TYPE_LIMIT"
    MARKET = "ORDER_TYPE_MARKET"
    BESTPRICE = "ORDER_TYPE_BESTPRICE"


class PriceType(str, Enum):
    """Price type hint for replace requests."""
    UNSPECIFIED = "PRICE_TYPE_UNSPECIFIED"
    POINT = "PRICE_TYPE_POINT"
    CURRENCY = "PRICE_TYPE_CURRENCY"


class OrderExecutionReportStatus(str, Enum):
    """Execution status as reported by the remote side."""
    UNSPECIFIED = "EXECUTION_REPORT_STATUS_UNSPECIFIED"
    FILL = "EXECUTION_REPORT_STATUS_FILL"
    REJECTED = "EXECUTION_REPORT_STATUS_REJECTED"
    CANCELLED = "EXECUTION_REPORT_STATUS_CANCELLED"
    NEW = "EXECUTION_REPORT_STATUS_NEW"
    PARTIALLYFILL = "EXECUTION_REPORT_STATUS_PARTIALLYFILL"


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Value Types
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class WireModel(BaseModel):
    """Base class for immutable wire payloads."""
    model_config = ConfigDict(frozen=True, extra="forbid")


class Quotation(WireModel):
    """Price as whole units plus billionths."""
    units: int = Field(default=0, ge=INT64_MIN, le=INT64_MAX)
    nano: int = Field(default=0, ge=-NANO_LIMIT, le=NANO_LIMIT)


class MoneyValue(WireModel):
    """Amount in a currency, same layout as Quotation."""
    currency: str = ""
    units: int = Field(default=0, ge=INT64_MIN, le=INT64_MAX)
    nano: int = Field(default=0, ge=-NANO_LIMIT, le=NANO_LIMIT)


class Timestamp(WireModel):
    """Seconds and nanoseconds since the Unix epoch."""
    seconds: int = 0
    nanos: int = Field(default=0, ge=0, le=NANO_LIMIT)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Requests
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class PostOrderRequest(WireModel):
    instrument_id: str
    quantity: int = Field(ge=INT64_MIN, le=INT64_MAX)
    price: Quotation
    direction: OrderDirection
    account_id: str
    order_type: OrderType
    order_id: str


class CancelOrderRequest(WireModel):
    account_id: str
    order_id: str


class GetOrderStateRequest(WireModel):
    account_id: str
    order_id: str


class GetOrdersRequest(WireModel):
    account_id: str


class ReplaceOrderRequest(WireModel):
    account_id: str
    order_id: str
    idempotency_key: str
    quantity: int = Field(ge=INT64_MIN, le=INT64_MAX)
    price: Quotation
    price_type: PriceType = PriceType.UNSPECIFIED


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Responses
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class PostOrderResponse(BaseModel):
    """Placement acknowledgement. Unknown remote fields are kept as-is."""
    model_config = ConfigDict(frozen=True, extra="allow")

    order_id: str
    execution_report_status: OrderExecutionReportStatus = OrderExecutionReportStatus.UNSPECIFIED
    lots_requested: int = 0
    lots_executed: int = 0
    initial_order_price: Optional[MoneyValue] = None
    executed_order_price: Optional[MoneyValue] = None
    total_order_amount: Optional[MoneyValue] = None
    initial_commission: Optional[MoneyValue] = None
    executed_commission: Optional[MoneyValue] = None
    direction: OrderDirection = OrderDirection.UNSPECIFIED
    order_type: OrderType = OrderType.UNSPECIFIED
    message: str = ""
    instrument_uid: str = ""
    order_request_id: str = ""


class CancelOrderResponse(WireModel):
    time: Timestamp


class OrderState(BaseModel):
    """Order snapshot from the remote side. Unknown remote fields are kept as-is."""
    model_config = ConfigDict(frozen=True, extra="allow")

    order_id: str
    execution_report_status: OrderExecutionReportStatus = OrderExecutionReportStatus.UNSPECIFIED
    lots_requested: int = 0
    lots_executed: int = 0
    initial_order_price: Optional[MoneyValue] = None
    executed_order_price: Optional[MoneyValue] = None
    total_order_amount: Optional[MoneyValue] = None
    direction: OrderDirection = OrderDirection.UNSPECIFIED
    order_type: OrderType = OrderType.UNSPECIFIED
    order_date: Optional[Timestamp] = None
    instrument_uid: str = ""
    order_request_id: str = ""


class GetOrdersResponse(WireModel):
    orders: list[OrderState] = Field(default_factory=list)
