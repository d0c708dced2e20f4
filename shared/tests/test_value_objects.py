"""Tests for the shared Money and DateRange value objects."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from shared.domain.exceptions import InvalidInput
from shared.domain.value_objects import DateRange, Money


def test_date_range_requires_start_before_end():
    with pytest.raises(InvalidInput):
        DateRange(date(2030, 1, 10), date(2030, 1, 10))
    with pytest.raises(InvalidInput):
        DateRange(date(2030, 1, 11), date(2030, 1, 10))


def test_date_range_strips_time_of_day():
    dates = DateRange(datetime(2030, 1, 10, 18, 30), datetime(2030, 1, 12, 8, 0))

    assert dates.start_date == date(2030, 1, 10)
    assert dates.end_date == date(2030, 1, 12)
    assert dates.days == 2


def test_same_day_datetimes_are_a_zero_length_range():
    with pytest.raises(InvalidInput):
        DateRange(datetime(2030, 1, 10, 8, 0), datetime(2030, 1, 10, 20, 0))


@pytest.mark.parametrize(
    "other, expected",
    [
        ((date(2030, 1, 4), date(2030, 1, 6)), True),    # nested
        ((date(2030, 1, 1), date(2030, 1, 10)), True),   # enclosing
        ((date(2030, 1, 1), date(2030, 1, 3)), True),    # ends on our start day
        ((date(2030, 1, 7), date(2030, 1, 9)), True),    # starts on our end day
        ((date(2030, 1, 1), date(2030, 1, 2)), False),
        ((date(2030, 1, 8), date(2030, 1, 9)), False),
    ],
)
def test_overlap_includes_touching_boundaries(other, expected):
    booked = DateRange(date(2030, 1, 3), date(2030, 1, 7))
    candidate = DateRange(*other)

    assert booked.overlaps_with(candidate) is expected
    assert candidate.overlaps_with(booked) is expected


def test_money_rejects_negative_amounts():
    with pytest.raises(InvalidInput):
        Money(Decimal("-1"))


def test_money_multiplication_is_exact():
    rate = Money(Decimal("19.99"), "USD")

    assert (rate * 3).amount == Decimal("59.97")
    assert (rate * 3).currency == "USD"
    with pytest.raises(TypeError):
        rate * 1.5


def test_money_coerces_plain_numbers():
    assert Money(10).amount == Decimal("10")
    assert not Money(0).is_positive
