"""Per-guest price calculation.

Calculation flow:
1. Start from the base price (base currency)
2. Fold active, applicable rules in set order; percentages compound
3. Convert to the target currency
4. Clamp to the converted minimum/maximum
5. Round half-up to 2 decimals

All arithmetic is done in Decimal so the half-up rounding is exact.
"""

import logging
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from tour_pricing.engine.currency_table import CurrencyTable, as_currency_table
from tour_pricing.engine.rule_evaluator import applies, effect_of
from tour_pricing.engine.rule_set import PricingRuleSet, as_rule_set
from tour_pricing.exceptions.custom import (
    InvalidBoundsError,
    InvalidGuestCountError,
    InvalidLeadTimeError,
)
from tour_pricing.schemas.pricing import (
    AdjustmentType,
    BasePricing,
    BookingContext,
    CurrencyRate,
    Effect,
    PriceResult,
    PricingRule,
    RuleApplication,
)

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
HUNDRED = Decimal(100)


def to_decimal(value: float | int) -> Decimal:
    return Decimal(str(value))


def round_money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def apply_effect(running: Decimal, effect: Effect) -> Decimal:
    amount = to_decimal(effect.amount)
    if effect.kind == AdjustmentType.percentage:
        return running * (1 + amount / HUNDRED)
    return running + amount


def conversion_rate(table: CurrencyTable, base_currency: str, target_currency: str) -> Decimal:
    """Rate from *base_currency* to *target_currency*.

    Table rates are relative to the table's base (rate 1.0); when the pricing
    is authored in that base this is simply the target's rate.
    """
    target_rate = table.rate_of(target_currency)
    base_rate = table.rate_of(base_currency)
    if base_rate == 1:
        return target_rate
    return target_rate / base_rate


def validate_inputs(base_pricing: BasePricing, context: BookingContext) -> None:
    if context.guest_count < 1:
        raise InvalidGuestCountError(context.guest_count)
    if context.lead_time_days < 0:
        raise InvalidLeadTimeError(context.lead_time_days)
    if base_pricing.minimum_price > base_pricing.maximum_price:
        raise InvalidBoundsError(base_pricing.minimum_price, base_pricing.maximum_price)


def compute(
    base_pricing: BasePricing,
    rules: PricingRuleSet | Iterable[PricingRule],
    currency_table: CurrencyTable | Iterable[CurrencyRate],
    context: BookingContext,
) -> PriceResult:
    """Compute the bookable per-guest price for one booking context.

    Raises InvalidGuestCountError, InvalidLeadTimeError, InvalidBoundsError,
    UnknownCurrencyError (base or target currency) or MissingTravelDateError
    (a seasonal rule with no travel date). Never partially succeeds.
    """
    validate_inputs(base_pricing, context)
    table = as_currency_table(currency_table)
    rate = conversion_rate(table, base_pricing.base_currency, context.target_currency)

    running = to_decimal(base_pricing.base_price)
    applied: list[str] = []
    breakdown: list[RuleApplication] = []

    for rule in as_rule_set(rules).active():
        if not applies(rule, context):
            continue
        effect = effect_of(rule)
        before = running
        running = apply_effect(running, effect)
        logger.debug("Rule %s applied: %s -> %s", rule.id, before, running)
        applied.append(rule.id)
        breakdown.append(RuleApplication(
            rule_id=rule.id,
            rule_name=rule.name,
            kind=effect.kind,
            amount=effect.amount,
            price_before=float(before),
            price_after=float(running),
        ))

    converted = running * rate
    min_price = to_decimal(base_pricing.minimum_price) * rate
    max_price = to_decimal(base_pricing.maximum_price) * rate
    final = max(min_price, min(max_price, converted))

    return PriceResult(
        per_guest_price=float(round_money(final)),
        currency=context.target_currency,
        applied_rules=applied,
        breakdown=breakdown,
    )
