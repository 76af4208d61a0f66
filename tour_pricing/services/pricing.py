import logging
from datetime import date

from tour_pricing.engine.booking_quote import per_day_base_pricing, quote_booking
from tour_pricing.engine.currency_table import CurrencyTable
from tour_pricing.engine.price_calculator import compute
from tour_pricing.engine.rule_set import PricingRuleSet
from tour_pricing.engine.scenario_matrix import build, preview_table
from tour_pricing.exceptions.custom import ScenarioTooLargeError
from tour_pricing.schemas.pricing import (
    BookingContext,
    BookingQuote,
    PreviewRow,
    PriceResult,
    PricingSnapshot,
    ScenarioTable,
)
from tour_pricing.snapshots import SnapshotStore, validate_snapshot

logger = logging.getLogger(__name__)


class PricingService:
    def __init__(
        self,
        store: SnapshotStore,
        service_fee: float = 0.0,
        max_scenario_cells: int = 500,
        rate_per_day: float = 50.0,
    ) -> None:
        self._store = store
        self._service_fee = service_fee
        self._max_scenario_cells = max_scenario_cells
        self._rate_per_day = rate_per_day

    def _resolve(self, snapshot: PricingSnapshot | None) -> PricingSnapshot:
        # An inline snapshot previews unsaved config without publishing it
        if snapshot is None:
            return self._store.current()
        validate_snapshot(snapshot)
        return snapshot

    def quote(
        self, context: BookingContext, snapshot: PricingSnapshot | None = None,
    ) -> PriceResult:
        snap = self._resolve(snapshot)
        result = compute(
            snap.base_pricing,
            PricingRuleSet(snap.rules),
            CurrencyTable(snap.currencies),
            context,
        )
        logger.info(
            "Quoted %s %s per guest (v%s, rules=%s)",
            result.per_guest_price, result.currency, snap.version, result.applied_rules,
        )
        return result

    def booking_quote(self, context: BookingContext, days: int | None = None) -> BookingQuote:
        """Quote a full booking; *days* switches to flat per-day tour pricing."""
        snap = self._store.current()
        base_pricing = snap.base_pricing
        if days is not None:
            base_pricing = per_day_base_pricing(
                days, base_pricing.base_currency, rate_per_day=self._rate_per_day,
            )
        return quote_booking(
            base_pricing,
            PricingRuleSet(snap.rules),
            CurrencyTable(snap.currencies),
            context,
            service_fee=self._service_fee,
        )

    def scenarios(
        self,
        currencies: list[str],
        guest_counts: list[int],
        lead_times: list[int],
        as_of: date | None = None,
        snapshot: PricingSnapshot | None = None,
    ) -> ScenarioTable:
        cells = len(currencies) * len(guest_counts) * len(lead_times)
        if cells > self._max_scenario_cells:
            raise ScenarioTooLargeError(cells, self._max_scenario_cells)

        snap = self._resolve(snapshot)
        return build(
            snap.base_pricing,
            PricingRuleSet(snap.rules),
            CurrencyTable(snap.currencies),
            currencies,
            guest_counts,
            lead_times,
            as_of=as_of,
        )

    def preview(self, as_of: date | None = None) -> list[PreviewRow]:
        snap = self._store.current()
        return preview_table(
            snap.base_pricing,
            PricingRuleSet(snap.rules),
            CurrencyTable(snap.currencies),
            as_of=as_of,
        )
