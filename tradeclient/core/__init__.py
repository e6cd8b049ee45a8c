"""Core contracts: errors, wire payloads and stub protocols."""

from tradeclient.core.errors import (
    ApiError,
    InvalidArgumentError,
    ReadonlyModeViolationError,
    SandboxModeViolationError,
    TradeClientError,
)

__all__ = [
    "TradeClientError",
    "ApiError",
    "InvalidArgumentError",
    "ReadonlyModeViolationError",
    "SandboxModeViolationError",
]
