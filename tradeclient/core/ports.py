"""Stub protocols consumed by the orders service."""

from __future__ import annotations

from typing import Protocol, TypeVar

from .types import (
    CancelOrderRequest,
    CancelOrderResponse,
    GetOrderStateRequest,
    GetOrdersRequest,
    GetOrdersResponse,
    OrderState,
    PostOrderRequest,
    PostOrderResponse,
    ReplaceOrderRequest,
)

T_contra = TypeVar("T_contra", contravariant=True)


class ResponseObserver(Protocol[T_contra]):
    def on_next(self, value: T_contra) -> None:
        """Deliver the response value."""

    def on_error(self, error: BaseException) -> None:
        """Deliver a transport or remote failure."""

    def on_completed(self) -> None:
        """Signal the end of the call."""


class OrdersBlockingStub(Protocol):
    def PostOrder(self, request: PostOrderRequest) -> PostOrderResponse:
        ...

    def CancelOrder(self, request: CancelOrderRequest) -> CancelOrderResponse:
        ...

    def GetOrderState(self, request: GetOrderStateRequest) -> OrderState:
        ...

    def GetOrders(self, request: GetOrdersRequest) -> GetOrdersResponse:
        ...

    def ReplaceOrder(self, request: ReplaceOrderRequest) -> PostOrderResponse:
        ...


class OrdersAsyncStub(Protocol):
    """Callback-style stub: each method starts the call and returns at once."""

    def PostOrder(
        self, request: PostOrderRequest, observer: ResponseObserver[PostOrderResponse]
    ) -> None:
        ...

    def CancelOrder(
        self, request: CancelOrderRequest, observer: ResponseObserver[CancelOrderResponse]
    ) -> None:
        ...

    def GetOrderState(
        self, request: GetOrderStateRequest, observer: ResponseObserver[OrderState]
    ) -> None:
        ...

    def GetOrders(
        self, request: GetOrdersRequest, observer: ResponseObserver[GetOrdersResponse]
    ) -> None:
        ...

    def ReplaceOrder(
        self, request: ReplaceOrderRequest, observer: ResponseObserver[PostOrderResponse]
    ) -> None:
        ...
