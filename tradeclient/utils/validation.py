"""
Local guards checked before any remote call.

Each guard returns None or raises a typed error from
tradeclient.core.errors. No I/O.
"""

from __future__ import annotations

from datetime import datetime

from tradeclient.core.errors import (
    InvalidArgumentError,
    ReadonlyModeViolationError,
    SandboxModeViolationError,
)

TO_IS_NOT_AFTER_FROM_MESSAGE = "End of the period cannot be earlier than its start."
WRONG_PAGE_MESSAGE = "Page numbers must be non-negative integers."


def check_page(page: int) -> None:
    if page < 0:
        raise InvalidArgumentError(WRONG_PAGE_MESSAGE)


def check_from_to(from_: datetime, to: datetime) -> None:
    """Reject a range whose end precedes its start. Equal bounds pass."""
    if from_ > to:
        raise InvalidArgumentError(TO_IS_NOT_AFTER_FROM_MESSAGE)


def check_readonly(readonly_mode: bool) -> None:
    if readonly_mode:
        raise ReadonlyModeViolationError()


def check_sandbox(sandbox_mode: bool) -> None:
    if sandbox_mode:
        raise SandboxModeViolationError()
