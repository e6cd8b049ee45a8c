"""
Orders Service
Post, cancel, query and replace orders on the remote trading platform.

Every operation comes in two forms: ``*_sync`` blocks and returns the
result, the plain name returns a ``concurrent.futures.Future``. Both forms
share request assembly and validation; only the invoker differs.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future
from datetime import datetime
from typing import Any, Callable, List, Optional, Type, TypeVar
from uuid import uuid4

from pydantic import BaseModel, ValidationError

from tradeclient.core.errors import InvalidArgumentError
from tradeclient.core.ports import OrdersAsyncStub, OrdersBlockingStub
from tradeclient.core.types import (
    CancelOrderRequest,
    CancelOrderResponse,
    GetOrderStateRequest,
    GetOrdersRequest,
    GetOrdersResponse,
    OrderDirection,
    OrderState,
    OrderType,
    PostOrderRequest,
    PostOrderResponse,
    PriceType,
    Quotation,
    ReplaceOrderRequest,
)
from tradeclient.utils.calls import (
    preprocess_input_order_id,
    then_apply,
    unary_async_call,
    unary_call,
)
from tradeclient.utils.dates import timestamp_to_datetime
from tradeclient.utils.validation import check_readonly

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Default Resolution
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def resolve_order_id(order_id: Optional[str]) -> str:
    """Caller's order id, or a fresh random UUID4 string."""
    return str(uuid4()) if order_id is None else order_id


def resolve_idempotency_key(idempotency_key: Optional[str]) -> str:
    """Caller's idempotency key, or an empty string. Never generated."""
    return "" if idempotency_key is None else idempotency_key


def resolve_price_type(price_type: Optional[PriceType]) -> PriceType:
    return PriceType.UNSPECIFIED if price_type is None else price_type


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Request Assembly
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def _build(model: Type[M], **fields: Any) -> M:
    try:
        return model(**fields)
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid {model.__name__}: {e}") from e


def build_post_order_request(
    instrument_id: str,
    quantity: int,
    price: Quotation,
    direction: OrderDirection,
    account_id: str,
    order_type: OrderType,
    order_id: Optional[str] = None,
) -> PostOrderRequest:
    return _build(
        PostOrderRequest,
        instrument_id=instrument_id,
        quantity=quantity,
        price=price,
        direction=direction,
        account_id=account_id,
        order_type=order_type,
        order_id=preprocess_input_order_id(resolve_order_id(order_id)),
    )


def build_cancel_order_request(account_id: str, order_id: str) -> CancelOrderRequest:
    return _build(CancelOrderRequest, account_id=account_id, order_id=order_id)


def build_get_order_state_request(account_id: str, order_id: str) -> GetOrderStateRequest:
    return _build(GetOrderStateRequest, account_id=account_id, order_id=order_id)


def build_get_orders_request(account_id: str) -> GetOrdersRequest:
    return _build(GetOrdersRequest, account_id=account_id)


def build_replace_order_request(
    account_id: str,
    quantity: int,
    price: Quotation,
    idempotency_key: Optional[str],
    order_id: str,
    price_type: Optional[PriceType] = None,
) -> ReplaceOrderRequest:
    return _build(
        ReplaceOrderRequest,
        account_id=account_id,
        price=price,
        quantity=quantity,
        idempotency_key=resolve_idempotency_key(idempotency_key),
        order_id=order_id,
        price_type=resolve_price_type(price_type),
    )


def _cancel_time(response: CancelOrderResponse) -> datetime:
    return timestamp_to_datetime(response.time)


def _orders_list(response: GetOrdersResponse) -> List[OrderState]:
    return list(response.orders)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Invokers
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class BlockingInvoker:
    """Runs a stub method on the calling thread and returns the result."""

    def __init__(self, stub: OrdersBlockingStub) -> None:
        self._stub = stub

    def __call__(
        self,
        method: str,
        request: BaseModel,
        transform: Optional[Callable[[Any], Any]] = None,
    ) -> Any:
        call = getattr(self._stub, method)
        if transform is None:
            return unary_call(lambda: call(request))
        return unary_call(lambda: transform(call(request)))


class AsyncInvoker:
    """Starts a callback-style stub method and returns a Future."""

    def __init__(self, stub: OrdersAsyncStub) -> None:
        self._stub = stub

    def __call__(
        self,
        method: str,
        request: BaseModel,
        transform: Optional[Callable[[Any], Any]] = None,
    ) -> Future:
        call = getattr(self._stub, method)
        future = unary_async_call(lambda observer: call(request, observer))
        if transform is None:
            return future
        return then_apply(future, transform)


Invoker = Callable[..., Any]


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Service
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class OrdersService:
    """
    Order lifecycle operations against the remote orders service.

    Holds no state beyond its construction arguments, so one instance can be
    shared between threads. Read-only mode rejects posting and cancelling
    locally, before any request is built or sent.
    """

    def __init__(
        self,
        blocking_stub: OrdersBlockingStub,
        async_stub: OrdersAsyncStub,
        readonly_mode: bool,
    ) -> None:
        """
        Initialize orders service.

        Args:
            blocking_stub: Stub whose methods return responses directly
            async_stub: Stub whose methods report to a response observer
            readonly_mode: Reject mutating operations locally
        """
        self._blocking_stub = blocking_stub
        self._async_stub = async_stub
        self._readonly_mode = readonly_mode
        self._blocking = BlockingInvoker(blocking_stub)
        self._async = AsyncInvoker(async_stub)

    @property
    def readonly_mode(self) -> bool:
        return self._readonly_mode

    @property
    def blocking_stub(self) -> OrdersBlockingStub:
        return self._blocking_stub

    @property
    def async_stub(self) -> OrdersAsyncStub:
        return self._async_stub

    # ── Post ─────────────────────────────────────────────────────────────

    def _post_order(
        self,
        invoke: Invoker,
        instrument_id: str,
        quantity: int,
        price: Quotation,
        direction: OrderDirection,
        account_id: str,
        order_type: OrderType,
        order_id: Optional[str],
    ) -> Any:
        check_readonly(self._readonly_mode)
        request = build_post_order_request(
            instrument_id, quantity, price, direction, account_id, order_type, order_id
        )
        logger.debug(
            f"PostOrder: {request.direction.value} {request.quantity} {request.instrument_id} "
            f"account={request.account_id} order_id={request.order_id}"
        )
        return invoke("PostOrder", request)

    def post_order_sync(
        self,
        instrument_id: str,
        quantity: int,
        price: Quotation,
        direction: OrderDirection,
        account_id: str,
        order_type: OrderType,
        order_id: Optional[str] = None,
    ) -> PostOrderResponse:
        """
        Place an order and wait for the acknowledgement.

        Args:
            instrument_id: FIGI or instrument uid
            quantity: Number of lots
            price: Limit price (ignored by the remote side for market orders)
            direction: Buy or sell
            account_id: Account to trade on
            order_type: Market or limit
            order_id: Idempotency key; a random UUID4 is used when omitted

        Raises:
            ReadonlyModeViolationError: Client is in read-only mode
            ApiError: Remote call failed
        """
        return self._post_order(
            self._blocking, instrument_id, quantity, price, direction, account_id, order_type, order_id
        )

    def post_order(
        self,
        instrument_id: str,
        quantity: int,
        price: Quotation,
        direction: OrderDirection,
        account_id: str,
        order_type: OrderType,
        order_id: Optional[str] = None,
    ) -> "Future[PostOrderResponse]":
        """Non-blocking post_order_sync. Read-only violations raise immediately."""
        return self._post_order(
            self._async, instrument_id, quantity, price, direction, account_id, order_type, order_id
        )

    # ── Cancel ───────────────────────────────────────────────────────────

    def _cancel_order(self, invoke: Invoker, account_id: str, order_id: str) -> Any:
        check_readonly(self._readonly_mode)
        request = build_cancel_order_request(account_id, order_id)
        logger.debug(f"CancelOrder: account={account_id} order_id={order_id}")
        return invoke("CancelOrder", request, _cancel_time)

    def cancel_order_sync(self, account_id: str, order_id: str) -> datetime:
        """Cancel an order. Returns the cancellation time reported by the remote side."""
        return self._cancel_order(self._blocking, account_id, order_id)

    def cancel_order(self, account_id: str, order_id: str) -> "Future[datetime]":
        return self._cancel_order(self._async, account_id, order_id)

    # ── Queries ──────────────────────────────────────────────────────────

    def get_order_state_sync(self, account_id: str, order_id: str) -> OrderState:
        return self._blocking("GetOrderState", build_get_order_state_request(account_id, order_id))

    def get_order_state(self, account_id: str, order_id: str) -> "Future[OrderState]":
        return self._async("GetOrderState", build_get_order_state_request(account_id, order_id))

    def get_orders_sync(self, account_id: str) -> List[OrderState]:
        """Active orders of the account, in the order the remote side lists them."""
        return self._blocking("GetOrders", build_get_orders_request(account_id), _orders_list)

    def get_orders(self, account_id: str) -> "Future[List[OrderState]]":
        return self._async("GetOrders", build_get_orders_request(account_id), _orders_list)

    # ── Replace ──────────────────────────────────────────────────────────

    def _replace_order(
        self,
        invoke: Invoker,
        account_id: str,
        quantity: int,
        price: Quotation,
        idempotency_key: Optional[str],
        order_id: str,
        price_type: Optional[PriceType],
    ) -> Any:
        # No read-only guard here; see DESIGN.md.
        request = build_replace_order_request(
            account_id, quantity, price, idempotency_key, order_id, price_type
        )
        logger.debug(
            f"ReplaceOrder: account={account_id} order_id={order_id} quantity={request.quantity}"
        )
        return invoke("ReplaceOrder", request)

    def replace_order_sync(
        self,
        account_id: str,
        quantity: int,
        price: Quotation,
        idempotency_key: Optional[str],
        order_id: str,
        price_type: Optional[PriceType] = None,
    ) -> PostOrderResponse:
        """
        Cancel an order and place a new one in its stead, on the remote side.

        Args:
            account_id: Account number
            quantity: Number of lots
            price: Price per instrument
            idempotency_key: New request id for the placement (max 36 chars);
                an empty string is sent when omitted
            order_id: Exchange id of the order being replaced
            price_type: Price type hint, unspecified when omitted

        Returns:
            Placement acknowledgement for the new order
        """
        return self._replace_order(
            self._blocking, account_id, quantity, price, idempotency_key, order_id, price_type
        )

    def replace_order(
        self,
        account_id: str,
        quantity: int,
        price: Quotation,
        idempotency_key: Optional[str],
        order_id: str,
        price_type: Optional[PriceType] = None,
    ) -> "Future[PostOrderResponse]":
        return self._replace_order(
            self._async, account_id, quantity, price, idempotency_key, order_id, price_type
        )
