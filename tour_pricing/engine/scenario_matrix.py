"""Admin preview: the same pricing config quoted across many contexts."""

from collections.abc import Iterable, Sequence
from datetime import date, timedelta

from tour_pricing.engine.currency_table import CurrencyTable, as_currency_table
from tour_pricing.engine.price_calculator import compute
from tour_pricing.engine.rule_set import PricingRuleSet, as_rule_set
from tour_pricing.schemas.pricing import (
    BasePricing,
    BookingContext,
    CurrencyRate,
    PreviewRow,
    PricingRule,
    ScenarioCell,
    ScenarioTable,
)

# (guest_count, lead_time_days) per preview column
PREVIEW_COLUMNS: dict[str, tuple[int, int]] = {
    "base": (1, 15),
    "one_guest": (1, 15),
    "five_guests": (5, 15),
    "early_bird": (1, 35),
    "last_minute": (1, 3),
}

PREVIEW_CURRENCY_LIMIT = 6


def build(
    base_pricing: BasePricing,
    rules: PricingRuleSet | Iterable[PricingRule],
    currency_table: CurrencyTable | Iterable[CurrencyRate],
    currencies: Sequence[str],
    guest_counts: Sequence[int],
    lead_times: Sequence[int],
    as_of: date | None = None,
) -> ScenarioTable:
    """Quote every (currency, guest count, lead time) combination.

    Cells are ordered currency first, then guest count, then lead time.
    Each cell travels on ``as_of + lead_time`` (today by default) so
    seasonal rules can be evaluated.
    """
    if as_of is None:
        as_of = date.today()
    table = as_currency_table(currency_table)
    rule_set = as_rule_set(rules)

    cells: list[ScenarioCell] = []
    for currency in currencies:
        for guests in guest_counts:
            for lead_time in lead_times:
                travel_date = as_of + timedelta(days=lead_time)
                result = compute(
                    base_pricing,
                    rule_set,
                    table,
                    BookingContext(
                        target_currency=currency,
                        guest_count=guests,
                        lead_time_days=lead_time,
                        travel_date=travel_date,
                    ),
                )
                cells.append(ScenarioCell(
                    currency=currency,
                    guest_count=guests,
                    lead_time_days=lead_time,
                    travel_date=travel_date,
                    per_guest_price=result.per_guest_price,
                    applied_rules=result.applied_rules,
                ))

    return ScenarioTable(
        currencies=list(currencies),
        guest_counts=list(guest_counts),
        lead_times=list(lead_times),
        cells=cells,
    )


def preview_table(
    base_pricing: BasePricing,
    rules: PricingRuleSet | Iterable[PricingRule],
    currency_table: CurrencyTable | Iterable[CurrencyRate],
    currencies: Sequence[str] | None = None,
    as_of: date | None = None,
) -> list[PreviewRow]:
    """One row per currency with the PREVIEW_COLUMNS scenarios.

    Without *currencies*, the first PREVIEW_CURRENCY_LIMIT table entries are used.
    """
    table = as_currency_table(currency_table)
    if currencies is None:
        currencies = table.codes[:PREVIEW_CURRENCY_LIMIT]

    guest_counts = sorted({g for g, _ in PREVIEW_COLUMNS.values()})
    lead_times = sorted({d for _, d in PREVIEW_COLUMNS.values()})
    matrix = build(
        base_pricing, rules, table, currencies, guest_counts, lead_times, as_of=as_of,
    )

    rows: list[PreviewRow] = []
    for currency in currencies:
        prices = {
            column: matrix.price(currency, guests, lead_time)
            for column, (guests, lead_time) in PREVIEW_COLUMNS.items()
        }
        rows.append(PreviewRow(currency=currency, symbol=table.symbol_of(currency), **prices))
    return rows
