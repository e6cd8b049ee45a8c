from __future__ import annotations

import uuid
from datetime import datetime, timezone

import pytest

from tradeclient.core.errors import ApiError, InvalidArgumentError, ReadonlyModeViolationError
from tradeclient.core.types import (
    CancelOrderResponse,
    GetOrdersResponse,
    OrderDirection,
    OrderExecutionReportStatus,
    OrderState,
    OrderType,
    PostOrderRequest,
    PostOrderResponse,
    PriceType,
    Quotation,
    ReplaceOrderRequest,
    Timestamp,
)
from tradeclient.services.orders import (
    OrdersService,
    resolve_idempotency_key,
    resolve_order_id,
    resolve_price_type,
)

PRICE = Quotation(units=100, nano=0)
CANCEL_TIME = Timestamp(seconds=1700000000, nanos=0)
CANCELLED_AT = datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)


def _responses() -> dict:
    return {
        "PostOrder": PostOrderResponse(
            order_id="exch-1",
            execution_report_status=OrderExecutionReportStatus.NEW,
            lots_requested=10,
        ),
        "CancelOrder": CancelOrderResponse(time=CANCEL_TIME),
        "GetOrderState": OrderState(order_id="ord-1", lots_requested=3, stages=[{"price": 1}]),
        "GetOrders": GetOrdersResponse(
            orders=[OrderState(order_id="ord-1"), OrderState(order_id="ord-2")]
        ),
        "ReplaceOrder": PostOrderResponse(order_id="exch-2"),
    }


class _BlockingStub:
    def __init__(self, error: BaseException | None = None) -> None:
        self.requests: list[tuple[str, object]] = []
        self.responses = _responses()
        self.error = error

    def _call(self, method: str, request):
        self.requests.append((method, request))
        if self.error is not None:
            raise self.error
        return self.responses[method]

    def PostOrder(self, request):
        return self._call("PostOrder", request)

    def CancelOrder(self, request):
        return self._call("CancelOrder", request)

    def GetOrderState(self, request):
        return self._call("GetOrderState", request)

    def GetOrders(self, request):
        return self._call("GetOrders", request)

    def ReplaceOrder(self, request):
        return self._call("ReplaceOrder", request)


class _AsyncStub:
    def __init__(self, error: BaseException | None = None) -> None:
        self.requests: list[tuple[str, object]] = []
        self.responses = _responses()
        self.error = error

    def _call(self, method: str, request, observer) -> None:
        self.requests.append((method, request))
        if self.error is not None:
            observer.on_error(self.error)
            return
        observer.on_next(self.responses[method])
        observer.on_completed()

    def PostOrder(self, request, observer) -> None:
        self._call("PostOrder", request, observer)

    def CancelOrder(self, request, observer) -> None:
        self._call("CancelOrder", request, observer)

    def GetOrderState(self, request, observer) -> None:
        self._call("GetOrderState", request, observer)

    def GetOrders(self, request, observer) -> None:
        self._call("GetOrders", request, observer)

    def ReplaceOrder(self, request, observer) -> None:
        self._call("ReplaceOrder", request, observer)


def _service(readonly: bool = False, error: BaseException | None = None):
    blocking = _BlockingStub(error)
    async_stub = _AsyncStub(error)
    return OrdersService(blocking, async_stub, readonly), blocking, async_stub


def test_post_order_sync_generates_order_id_and_returns_response() -> None:
    service, blocking, _ = _service()

    response = service.post_order_sync(
        "BBG000B9XRY4", 10, PRICE, OrderDirection.BUY, "acc-1", OrderType.LIMIT, None
    )

    assert response is blocking.responses["PostOrder"]
    method, request = blocking.requests[0]
    assert method == "PostOrder"
    assert isinstance(request, PostOrderRequest)
    assert request.quantity == 10
    assert request.instrument_id == "BBG000B9XRY4"
    assert request.account_id == "acc-1"
    assert request.price == PRICE
    assert request.order_id
    assert str(uuid.UUID(request.order_id)) == request.order_id


def test_post_order_generated_ids_differ_between_calls() -> None:
    service, blocking, _ = _service()

    for _ in range(2):
        service.post_order_sync("FIGI", 1, PRICE, OrderDirection.SELL, "acc-1", OrderType.MARKET)

    first, second = (request.order_id for _, request in blocking.requests)
    assert first != second


def test_post_order_keeps_caller_order_id() -> None:
    service, blocking, _ = _service()

    service.post_order_sync("FIGI", 1, PRICE, OrderDirection.BUY, "acc-1", OrderType.LIMIT, "my-id")

    assert blocking.requests[0][1].order_id == "my-id"


def test_post_order_async_resolves_with_response() -> None:
    service, _, async_stub = _service()

    future = service.post_order(
        "BBG000B9XRY4", 10, PRICE, OrderDirection.BUY, "acc-1", OrderType.LIMIT, None
    )

    assert future.result(timeout=1) is async_stub.responses["PostOrder"]
    assert len(async_stub.requests) == 1
    assert async_stub.requests[0][1].quantity == 10


@pytest.mark.parametrize("call", ["post_order_sync", "post_order"])
def test_readonly_blocks_post_before_any_request(call: str) -> None:
    service, blocking, async_stub = _service(readonly=True)

    with pytest.raises(ReadonlyModeViolationError):
        getattr(service, call)("FIGI", 1, PRICE, OrderDirection.BUY, "acc-1", OrderType.LIMIT)

    assert blocking.requests == []
    assert async_stub.requests == []


@pytest.mark.parametrize("call", ["cancel_order_sync", "cancel_order"])
def test_readonly_blocks_cancel_before_any_request(call: str) -> None:
    service, blocking, async_stub = _service(readonly=True)

    with pytest.raises(ReadonlyModeViolationError):
        getattr(service, call)("acc-1", "ord-1")

    assert blocking.requests == []
    assert async_stub.requests == []


def test_readonly_still_allows_reads() -> None:
    service, blocking, _ = _service(readonly=True)

    assert service.get_order_state_sync("acc-1", "ord-1").order_id == "ord-1"
    assert len(service.get_orders_sync("acc-1")) == 2
    assert len(blocking.requests) == 2


def test_cancel_order_decodes_timestamp() -> None:
    service, blocking, _ = _service()

    assert service.cancel_order_sync("acc-1", "ord-1") == CANCELLED_AT
    request = blocking.requests[0][1]
    assert (request.account_id, request.order_id) == ("acc-1", "ord-1")


def test_cancel_order_async_decodes_timestamp() -> None:
    service, _, _ = _service()

    assert service.cancel_order("acc-1", "ord-1").result(timeout=1) == CANCELLED_AT


def test_get_order_state_passes_remote_fields_through() -> None:
    service, _, async_stub = _service()

    state = service.get_order_state("acc-1", "ord-1").result(timeout=1)

    assert state is async_stub.responses["GetOrderState"]
    assert state.stages == [{"price": 1}]


def test_get_orders_returns_ordered_list() -> None:
    service, blocking, async_stub = _service()

    sync_orders = service.get_orders_sync("acc-1")
    async_orders = service.get_orders("acc-1").result(timeout=1)

    assert [o.order_id for o in sync_orders] == ["ord-1", "ord-2"]
    assert [o.order_id for o in async_orders] == ["ord-1", "ord-2"]
    assert blocking.requests[0][1].account_id == "acc-1"
    assert async_stub.requests[0][1].account_id == "acc-1"


def test_replace_order_defaults_idempotency_key_to_empty_string() -> None:
    service, blocking, _ = _service()

    response = service.replace_order_sync("acc-1", 5, PRICE, None, "ord-1")

    assert response is blocking.responses["ReplaceOrder"]
    request = blocking.requests[0][1]
    assert isinstance(request, ReplaceOrderRequest)
    assert request.idempotency_key == ""
    assert request.price_type == PriceType.UNSPECIFIED
    assert request.order_id == "ord-1"
    assert request.quantity == 5


def test_default_id_policies_differ_between_post_and_replace() -> None:
    service, blocking, _ = _service()

    service.post_order_sync("FIGI", 1, PRICE, OrderDirection.BUY, "acc-1", OrderType.LIMIT, None)
    service.replace_order_sync("acc-1", 1, PRICE, None, "ord-1", None)

    post_request = blocking.requests[0][1]
    replace_request = blocking.requests[1][1]
    assert uuid.UUID(post_request.order_id).version == 4
    assert replace_request.idempotency_key == ""


def test_replace_order_async_keeps_caller_values() -> None:
    service, _, async_stub = _service()

    future = service.replace_order("acc-1", 2, PRICE, "key-1", "ord-1", PriceType.CURRENCY)

    assert future.result(timeout=1).order_id == "exch-2"
    request = async_stub.requests[0][1]
    assert request.idempotency_key == "key-1"
    assert request.price_type == PriceType.CURRENCY


def test_replace_order_is_not_blocked_in_readonly_mode() -> None:
    service, blocking, _ = _service(readonly=True)

    service.replace_order_sync("acc-1", 1, PRICE, None, "ord-1")

    assert blocking.requests[0][0] == "ReplaceOrder"


def test_remote_failure_raises_translated_error_sync() -> None:
    original = ConnectionError("remote down")
    service, _, _ = _service(error=original)

    with pytest.raises(ApiError) as exc_info:
        service.get_orders_sync("acc-1")

    assert exc_info.value.__cause__ is original


def test_remote_failure_rejects_future() -> None:
    original = ConnectionError("remote down")
    service, _, _ = _service(error=original)

    future = service.cancel_order("acc-1", "ord-1")

    error = future.exception(timeout=1)
    assert isinstance(error, ApiError)
    assert error.__cause__ is original


def test_quantity_outside_int64_is_rejected_locally() -> None:
    service, blocking, _ = _service()

    with pytest.raises(InvalidArgumentError):
        service.post_order_sync("FIGI", 2**63, PRICE, OrderDirection.BUY, "acc-1", OrderType.LIMIT)

    assert blocking.requests == []


def test_construction_fields_are_exposed() -> None:
    service, blocking, async_stub = _service(readonly=True)

    assert service.readonly_mode is True
    assert service.blocking_stub is blocking
    assert service.async_stub is async_stub


def test_default_resolvers() -> None:
    assert resolve_order_id("given") == "given"
    assert uuid.UUID(resolve_order_id(None)).version == 4
    assert resolve_idempotency_key(None) == ""
    assert resolve_idempotency_key("key") == "key"
    assert resolve_price_type(None) == PriceType.UNSPECIFIED
    assert resolve_price_type(PriceType.POINT) == PriceType.POINT
