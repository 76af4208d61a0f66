"""Pure predicates deciding whether a pricing rule fires for a booking.

No I/O, no side effects. Inactive rules are filtered out by the caller
and never reach this module.
"""

from datetime import date

from tour_pricing.exceptions.custom import MissingTravelDateError
from tour_pricing.schemas.pricing import (
    BookingContext,
    EarlyBirdCondition,
    Effect,
    GroupSizeCondition,
    LastMinuteCondition,
    MonthDay,
    PricingRule,
    SeasonalCondition,
)


def in_season(condition: SeasonalCondition, day: date) -> bool:
    """Check whether *day* falls within the month/day span, ends inclusive.

    Jun 1 - Aug 31  → plain range
    Dec 1 - Feb 28  → wraps the new year
    """
    start = condition.start.key()
    end = condition.end.key()
    current = MonthDay.of(day).key()
    if start <= end:
        return start <= current <= end
    return current >= start or current <= end


def applies(rule: PricingRule, context: BookingContext) -> bool:
    # Condition kind always matches rule.type (checked on PricingRule)
    condition = rule.condition

    if isinstance(condition, GroupSizeCondition):
        return context.guest_count >= condition.min_guests

    if isinstance(condition, EarlyBirdCondition):
        return context.lead_time_days >= condition.min_days

    if isinstance(condition, LastMinuteCondition):
        return context.lead_time_days <= condition.max_days

    if isinstance(condition, SeasonalCondition):
        if context.travel_date is None:
            raise MissingTravelDateError(rule.id)
        return in_season(condition, context.travel_date)

    raise ValueError(f"Unsupported rule type: {rule.type}")


def effect_of(rule: PricingRule) -> Effect:
    return Effect(kind=rule.adjustment_type, amount=rule.adjustment)
