"""Typed errors for the trading client."""

from __future__ import annotations

from typing import Optional


class TradeClientError(Exception):
    """Base class for client errors."""


class ReadonlyModeViolationError(TradeClientError):
    """Raised when a mutating call is attempted on a read-only client."""

    def __init__(self, message: str = "Mutating operations are not allowed in read-only mode") -> None:
        super().__init__(message)


class SandboxModeViolationError(TradeClientError):
    """Raised when an operation is not available in sandbox mode."""

    def __init__(self, message: str = "Operation is not available in sandbox mode") -> None:
        super().__init__(message)


class InvalidArgumentError(TradeClientError, ValueError):
    """Raised when a call argument fails local validation."""


class ApiError(TradeClientError):
    """
    Remote or transport failure.

    The original exception is kept on ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[str] = None,
    ) -> None:
        self.code = code
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.code:
            return f"[{self.code}] {message}"
        return message
