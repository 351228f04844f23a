"""
Property tests for the storefront rules.

Each test states a law that must hold for any input hypothesis
can generate, not just the worked examples in tests/unit.
"""

from datetime import datetime, timedelta

import pytest
from hypothesis import given
from hypothesis import strategies as st

from shopkit.adapters.clock import FixedClock
from shopkit.components.availability import is_online
from shopkit.components.eligibility import INVALID_COUNTRY_CODE, can_drive
from shopkit.components.pricing import INVALID_PRICE, calculate_discount, get_coupons
from shopkit.components.validation import is_price_in_range, is_valid_username
from shopkit.domain import EmptyStackError, Stack

prices = st.floats(min_value=0, max_value=1e9, allow_nan=False, allow_infinity=False)
codes = st.sampled_from([c.code for c in get_coupons()])
instants = st.datetimes(min_value=datetime(2000, 1, 1), max_value=datetime(2100, 1, 1))


# --- Stack ---
@given(st.lists(st.integers()))
def test_stack_pops_in_reverse_push_order(items: list[int]) -> None:
    stack: Stack[int] = Stack()
    for item in items:
        stack.push(item)

    assert stack.size() == len(items)
    assert [stack.pop() for _ in items] == list(reversed(items))
    assert stack.is_empty()


@given(st.lists(st.integers(), min_size=1))
def test_stack_peek_does_not_mutate(items: list[int]) -> None:
    stack = Stack(items)

    assert stack.peek() == items[-1]
    assert stack.size() == len(items)


@given(st.lists(st.integers()))
def test_stack_cleared_stack_raises(items: list[int]) -> None:
    stack = Stack(items)
    stack.clear()

    with pytest.raises(EmptyStackError):
        stack.pop()


# --- Pricing ---
@given(prices, codes)
def test_discount_formula(price: float, code: str) -> None:
    rate = {c.code: c.discount for c in get_coupons()}[code]
    assert calculate_discount(price, code) == pytest.approx(price * (1 - rate))


@given(prices, codes)
def test_discount_never_increases_price(price: float, code: str) -> None:
    assert calculate_discount(price, code) <= price


@given(prices, st.text().filter(lambda s: s not in {"SAVE10", "SAVE20"}))
def test_unknown_code_is_identity(price: float, code: str) -> None:
    assert calculate_discount(price, code) == price


@given(st.floats(max_value=-1e-9, allow_nan=False), codes)
def test_negative_price_is_invalid(price: float, code: str) -> None:
    assert calculate_discount(price, code) == INVALID_PRICE


# --- Validation ---
@given(st.floats(allow_nan=False), st.floats(allow_nan=False), st.floats(allow_nan=False))
def test_price_range_is_inclusive_interval(price: float, low: float, high: float) -> None:
    assert is_price_in_range(price, low, high) == (low <= price <= high)


@given(st.text(max_size=30))
def test_username_length_law(username: str) -> None:
    assert is_valid_username(username) == (5 <= len(username) <= 15)


# --- Eligibility ---
@given(st.integers(min_value=0, max_value=120), st.sampled_from([("US", 16), ("UK", 17)]))
def test_driving_age_law(age: int, country_min: tuple[str, int]) -> None:
    country, minimum = country_min
    assert can_drive(age, country) is (age >= minimum)


@given(st.integers(), st.text().filter(lambda s: s not in {"US", "UK"}))
def test_unsupported_country(age: int, country: str) -> None:
    assert can_drive(age, country) == INVALID_COUNTRY_CODE


# --- Availability ---
@given(instants)
def test_online_iff_within_store_hours(instant: datetime) -> None:
    assert is_online(FixedClock(instant)) == (8 <= instant.hour < 20)


@given(st.datetimes(min_value=datetime(2000, 1, 1), max_value=datetime(2099, 1, 1)))
def test_same_hour_next_day_has_same_status(instant: datetime) -> None:
    next_day = instant + timedelta(days=1)
    assert is_online(FixedClock(instant)) == is_online(FixedClock(next_day))
