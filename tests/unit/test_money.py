"""Unit tests for money conversion and date helpers"""

import pytest
from datetime import date
from decimal import Decimal
from payplan_gateway.domain.exceptions import ValidationError
from payplan_gateway.domain.money import from_cents, round_half_up_cents, to_cents
from payplan_gateway.utils.date_utils import add_months, is_non_decreasing, subtract_days


@pytest.mark.parametrize(
    "value, cents",
    [
        (Decimal("8750.00"), 875000),
        ("0.005", 1),
        ("0.004", 0),
        (0.1, 10),
        (0.29, 29),
        (1200, 120000),
        ("1254.545", 125455),
    ],
)
def test_to_cents(value, cents):
    assert to_cents(value) == cents


def test_from_cents_has_two_places():
    assert from_cents(333334) == Decimal("3333.34")
    assert str(from_cents(50000)) == "500.00"
    assert str(from_cents(7)) == "0.07"


def test_round_half_up_cents():
    assert round_half_up_cents(Decimal("125454.5454")) == 125455
    assert round_half_up_cents(Decimal("2.5")) == 3
    assert round_half_up_cents(Decimal("2.4999")) == 2


def test_add_months_clamps_to_month_end():
    assert add_months(date(2025, 1, 31), 1) == date(2025, 2, 28)
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2025, 1, 31), 2) == date(2025, 3, 31)
    assert add_months(date(2025, 11, 30), 3) == date(2026, 2, 28)


def test_subtract_days():
    assert subtract_days(date(2025, 3, 1), 1) == date(2025, 2, 28)
    assert subtract_days(date(2025, 3, 1), 0) == date(2025, 3, 1)


def test_is_non_decreasing():
    assert is_non_decreasing([date(2025, 1, 1), date(2025, 1, 1), date(2025, 2, 1)])
    assert not is_non_decreasing([date(2025, 2, 1), date(2025, 1, 1)])
    assert is_non_decreasing([])


@pytest.mark.parametrize("value", [Decimal("1e30"), "Infinity", "NaN", "abc"])
def test_to_cents_rejects_unrepresentable_amounts(value):
    with pytest.raises(ValidationError) as exc_info:
        to_cents(value, "total_course_value")

    assert exc_info.value.field == "total_course_value"
