"""Guest-facing booking totals built on top of the per-guest price."""

from collections.abc import Iterable

from tour_pricing.engine.currency_table import CurrencyTable, as_currency_table
from tour_pricing.engine.price_calculator import (
    compute,
    conversion_rate,
    round_money,
    to_decimal,
)
from tour_pricing.engine.rule_set import PricingRuleSet
from tour_pricing.schemas.pricing import (
    BasePricing,
    BookingContext,
    BookingQuote,
    CurrencyRate,
    PricingRule,
)


def per_day_base_pricing(
    days: int,
    base_currency: str,
    rate_per_day: float = 50.0,
    minimum_price: float = 0.0,
    maximum_price: float | None = None,
) -> BasePricing:
    """Flat per-day pricing for multi-day tours (days × rate_per_day).

    Without an explicit *maximum_price* the cap is the flat price itself,
    so only discounts can move it.
    """
    base_price = days * rate_per_day
    return BasePricing(
        base_price=base_price,
        base_currency=base_currency,
        minimum_price=minimum_price,
        maximum_price=base_price if maximum_price is None else maximum_price,
    )


def quote_booking(
    base_pricing: BasePricing,
    rules: PricingRuleSet | Iterable[PricingRule],
    currency_table: CurrencyTable | Iterable[CurrencyRate],
    context: BookingContext,
    service_fee: float = 0.0,
) -> BookingQuote:
    """Per-guest price × guests, plus a flat service fee in the target currency.

    The fee is authored in the base currency and is not clamped or
    adjusted by rules.
    """
    table = as_currency_table(currency_table)
    result = compute(base_pricing, rules, table, context)

    rate = conversion_rate(table, base_pricing.base_currency, context.target_currency)
    per_guest = to_decimal(result.per_guest_price)
    subtotal = round_money(per_guest * context.guest_count)
    fee = round_money(to_decimal(service_fee) * rate)

    return BookingQuote(
        currency=context.target_currency,
        symbol=table.symbol_of(context.target_currency),
        per_guest_price=result.per_guest_price,
        guest_count=context.guest_count,
        subtotal=float(subtotal),
        service_fee=float(fee),
        total=float(subtotal + fee),
        applied_rules=result.applied_rules,
    )
