"""Tests for guest-facing booking totals."""

from datetime import date

import pytest
from pydantic import ValidationError

from tour_pricing.engine.booking_quote import per_day_base_pricing, quote_booking
from tour_pricing.exceptions.custom import InvalidGuestCountError
from tour_pricing.schemas.pricing import BookingContext


def _ctx(currency, guests, lead_time, travel_date=date(2026, 3, 10)):
    return BookingContext(
        target_currency=currency,
        guest_count=guests,
        lead_time_days=lead_time,
        travel_date=travel_date,
    )


def test_total_is_per_guest_times_guests_plus_fee(base_pricing, rules, currencies):
    quote = quote_booking(base_pricing, rules, currencies, _ctx("USD", 2, 15), service_fee=5.0)
    assert quote.per_guest_price == 125.0
    assert quote.subtotal == 250.0
    assert quote.service_fee == 5.0
    assert quote.total == 255.0
    assert quote.symbol == "$"
    assert quote.guest_count == 2


def test_service_fee_converted_to_target_currency(base_pricing, rules, currencies):
    quote = quote_booking(base_pricing, rules, currencies, _ctx("EUR", 5, 35), service_fee=5.0)
    assert quote.per_guest_price == 81.28
    assert quote.subtotal == 406.4
    assert quote.service_fee == 4.25
    assert quote.total == 410.65
    assert quote.applied_rules == ["season", "group", "early"]


def test_no_fee_by_default(base_pricing, rules, currencies):
    quote = quote_booking(base_pricing, rules, currencies, _ctx("JPY", 1, 3))
    assert quote.service_fee == 0.0
    assert quote.total == 13750.0


def test_invalid_guest_count_propagates(base_pricing, rules, currencies):
    with pytest.raises(InvalidGuestCountError):
        quote_booking(base_pricing, rules, currencies, _ctx("USD", 0, 3))


# --- per_day_base_pricing ---


def test_per_day_base_pricing():
    pricing = per_day_base_pricing(3, "USD")
    assert pricing.base_price == 150.0
    assert pricing.minimum_price == 0.0
    assert pricing.maximum_price == 150.0


def test_per_day_base_pricing_custom_bounds():
    pricing = per_day_base_pricing(2, "USD", rate_per_day=80, minimum_price=100, maximum_price=400)
    assert pricing.base_price == 160.0
    assert pricing.minimum_price == 100
    assert pricing.maximum_price == 400


def test_per_day_base_pricing_needs_a_day():
    with pytest.raises(ValidationError):
        per_day_base_pricing(0, "USD")


def test_per_day_tour_quote(currencies):
    pricing = per_day_base_pricing(3, "USD")
    quote = quote_booking(pricing, [], currencies, _ctx("JPY", 2, 10))
    assert quote.per_guest_price == 16500.0
    assert quote.subtotal == 33000.0
    assert quote.total == 33000.0
