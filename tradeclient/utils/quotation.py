"""Decimal helpers for Quotation/MoneyValue."""

from __future__ import annotations

from decimal import Decimal
from typing import Union

from tradeclient.core.types import MoneyValue, Quotation

NANO = Decimal("1000000000")


def quotation_to_decimal(value: Union[Quotation, MoneyValue]) -> Decimal:
    return Decimal(value.units) + Decimal(value.nano) / NANO


def decimal_to_quotation(value: Decimal) -> Quotation:
    """
    Split a Decimal into units and nano.

    Both parts carry the sign of the input; digits past 1e-9 are dropped.
    """
    value = Decimal(value)
    units = int(value)
    nano = int((value - units) * NANO)
    return Quotation(units=units, nano=nano)
