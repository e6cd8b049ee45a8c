from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from tradeclient.core.types import MoneyValue, Quotation, Timestamp
from tradeclient.utils.dates import datetime_to_timestamp, timestamp_to_datetime
from tradeclient.utils.quotation import decimal_to_quotation, quotation_to_decimal


def test_timestamp_decodes_to_aware_utc_datetime() -> None:
    decoded = timestamp_to_datetime(Timestamp(seconds=1700000000, nanos=0))
    assert decoded == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
    assert decoded.tzinfo is not None


def test_timestamp_nanos_truncate_to_microseconds() -> None:
    decoded = timestamp_to_datetime(Timestamp(seconds=0, nanos=1_500))
    assert decoded == datetime(1970, 1, 1, 0, 0, 0, 1, tzinfo=timezone.utc)


def test_datetime_encodes_naive_values_as_utc() -> None:
    naive = datetime(2023, 11, 14, 22, 13, 20, 250_000)
    assert datetime_to_timestamp(naive) == Timestamp(seconds=1700000000, nanos=250_000_000)


def test_timestamp_rejects_out_of_range_nanos() -> None:
    with pytest.raises(ValidationError):
        Timestamp(seconds=0, nanos=1_000_000_000)


def test_quotation_decimal_conversion() -> None:
    assert quotation_to_decimal(Quotation(units=114, nano=250_000_000)) == Decimal("114.25")
    assert quotation_to_decimal(MoneyValue(currency="rub", units=-3, nano=-10)) == Decimal("-3.00000001")
    assert decimal_to_quotation(Decimal("114.25")) == Quotation(units=114, nano=250_000_000)
    assert decimal_to_quotation(Decimal("-1.5")) == Quotation(units=-1, nano=-500_000_000)


def test_decimal_to_quotation_drops_digits_past_nano() -> None:
    assert decimal_to_quotation(Decimal("0.0000000019")) == Quotation(units=0, nano=1)
