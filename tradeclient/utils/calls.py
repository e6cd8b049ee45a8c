"""
Call adapters over the remote stubs.

unary_call runs a blocking operation and translates failures into ApiError.
unary_async_call turns a callback-style call into a Future. Neither adapter
retries or applies timeouts.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, InvalidStateError
from typing import Any, Callable, Generic, TypeVar

from tradeclient.core.errors import ApiError, TradeClientError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

MAX_ORDER_ID_LENGTH = 36


def _status_part(error: BaseException, name: str) -> Any:
    # gRPC-style errors expose code()/details() as methods
    attr = getattr(error, name, None)
    if callable(attr):
        try:
            return attr()
        except Exception:
            return None
    return attr


def translate_error(error: BaseException) -> TradeClientError:
    """Map a transport/remote exception onto the client's error type."""
    if isinstance(error, TradeClientError):
        return error

    code = _status_part(error, "code")
    details = _status_part(error, "details")
    if code is not None and not isinstance(code, str):
        code = getattr(code, "name", None) or str(code)

    message = details or str(error) or type(error).__name__
    translated = ApiError(str(message), code=code, details=details)
    translated.__cause__ = error
    return translated


def unary_call(operation: Callable[[], T]) -> T:
    """Invoke a blocking remote operation and return its response unchanged."""
    try:
        return operation()
    except TradeClientError:
        raise
    except Exception as e:
        translated = translate_error(e)
        logger.warning(f"Remote call failed: {translated}")
        raise translated from e


def _settle(future: Future, result: Any = None, error: BaseException | None = None) -> None:
    try:
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(result)
    except InvalidStateError:
        # Cancelled by the caller or already completed.
        logger.debug("Dropping completion for a settled future")


class FutureObserver(Generic[T]):
    """Response observer that settles a Future on the first completion."""

    def __init__(self, future: "Future[T]") -> None:
        self._future = future

    @property
    def future(self) -> "Future[T]":
        return self._future

    def on_next(self, value: T) -> None:
        _settle(self._future, result=value)

    def on_error(self, error: BaseException) -> None:
        translated = translate_error(error)
        logger.warning(f"Remote call failed: {translated}")
        _settle(self._future, error=translated)

    def on_completed(self) -> None:
        pass


def unary_async_call(start: Callable[[FutureObserver[T]], Any]) -> "Future[T]":
    """
    Start a callback-style remote call and return a pending Future.

    ``start`` is called exactly once with an observer. Cancelling the
    returned Future only detaches the caller; the remote call goes on.
    """
    future: Future = Future()
    observer: FutureObserver[T] = FutureObserver(future)
    try:
        start(observer)
    except Exception as e:
        observer.on_error(e)
    return future


def then_apply(source: "Future[T]", fn: Callable[[T], R]) -> "Future[R]":
    """Derive a Future holding ``fn(result)``. Errors and cancellation pass through."""
    derived: Future = Future()

    def _propagate(done: Future) -> None:
        if done.cancelled():
            derived.cancel()
            return
        error = done.exception()
        if error is not None:
            _settle(derived, error=error)
            return
        try:
            value = fn(done.result())
        except Exception as e:
            _settle(derived, error=translate_error(e))
            return
        _settle(derived, result=value)

    def _cancel_source(done: Future) -> None:
        if done.cancelled():
            source.cancel()

    derived.add_done_callback(_cancel_source)
    source.add_done_callback(_propagate)
    return derived


def preprocess_input_order_id(order_id: str) -> str:
    """Trim an order id to the remote idempotency-key limit."""
    if not order_id.strip():
        return order_id.strip()
    return order_id[:MAX_ORDER_ID_LENGTH]
