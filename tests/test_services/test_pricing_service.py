"""Tests for PricingService over the default snapshot."""

from datetime import date

import pytest

from tour_pricing.engine.defaults import default_snapshot
from tour_pricing.exceptions.custom import ScenarioTooLargeError
from tour_pricing.schemas.pricing import BasePricing, BookingContext, PricingSnapshot
from tour_pricing.services.pricing import PricingService
from tour_pricing.snapshots import SnapshotStore

SUMMER_DAY = date(2026, 7, 10)


def _service(store=None, **kwargs):
    if store is None:
        store = SnapshotStore(default_snapshot())
    return PricingService(store, **kwargs)


def _ctx(currency="USD", guests=1, lead_time=15, travel_date=SUMMER_DAY):
    return BookingContext(
        target_currency=currency,
        guest_count=guests,
        lead_time_days=lead_time,
        travel_date=travel_date,
    )


def test_quote_uses_current_snapshot():
    service = _service()
    assert service.quote(_ctx("EUR", 5, 35)).per_guest_price == 81.28


def test_quote_follows_replaced_snapshot():
    store = SnapshotStore(default_snapshot())
    service = _service(store)
    store.toggle_rule("1")
    assert service.quote(_ctx()).per_guest_price == 100.0


def test_inline_snapshot_is_not_published():
    store = SnapshotStore(default_snapshot())
    service = _service(store)
    draft = PricingSnapshot(
        base_pricing=BasePricing(
            base_price=200, base_currency="USD", minimum_price=50, maximum_price=500,
        ),
        rules=(),
        currencies=default_snapshot().currencies,
    )
    assert service.quote(_ctx(), snapshot=draft).per_guest_price == 200.0
    assert service.quote(_ctx()).per_guest_price == 125.0
    assert store.current().version == 1


def test_booking_quote_adds_service_fee():
    service = _service(service_fee=5.0)
    quote = service.booking_quote(_ctx("EUR", 5, 35))
    assert quote.total == 410.65


def test_booking_quote_per_day_pricing():
    service = _service(service_fee=5.0, rate_per_day=50.0)
    # 3 days × 50 = 150, +25% season is capped at the flat price
    quote = service.booking_quote(_ctx("USD", 2, 15), days=3)
    assert quote.per_guest_price == 150.0
    assert quote.subtotal == 300.0
    assert quote.total == 305.0


def test_booking_quote_per_day_group_discount():
    service = _service(rate_per_day=50.0)
    quote = service.booking_quote(_ctx("USD", 5, 15, date(2026, 10, 1)), days=3)
    # Off season: 150 × 0.85
    assert quote.per_guest_price == 127.5


def test_scenarios_within_limit():
    service = _service(max_scenario_cells=8)
    table = service.scenarios(["USD", "EUR"], [1, 5], [3, 35], as_of=date(2026, 7, 1))
    assert len(table.cells) == 8


def test_scenarios_over_limit():
    service = _service(max_scenario_cells=7)
    with pytest.raises(ScenarioTooLargeError) as exc_info:
        service.scenarios(["USD", "EUR"], [1, 5], [3, 35])
    assert exc_info.value.cells == 8
    assert exc_info.value.limit == 7


def test_preview_rows():
    rows = _service().preview(as_of=date(2026, 7, 1))
    assert len(rows) == 6
    assert rows[0].five_guests == 106.25
