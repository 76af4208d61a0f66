from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from tour_pricing.engine.currency_table import CurrencyTable
from tour_pricing.engine.rule_set import PricingRuleSet
from tour_pricing.exceptions.custom import InvalidBoundsError, UnknownCurrencyError
from tour_pricing.schemas.pricing import (
    BasePricing,
    CurrencyRate,
    PricingRule,
    PricingSnapshot,
)

logger = logging.getLogger(__name__)


def validate_snapshot(snapshot: PricingSnapshot) -> None:
    """Fail if the snapshot could never produce a quote."""
    table = CurrencyTable(snapshot.currencies)
    PricingRuleSet(snapshot.rules)
    pricing = snapshot.base_pricing
    if pricing.minimum_price > pricing.maximum_price:
        raise InvalidBoundsError(pricing.minimum_price, pricing.maximum_price)
    if pricing.base_currency not in table:
        raise UnknownCurrencyError(pricing.base_currency)


class SnapshotStore:
    """Holds the operator's current pricing snapshot.

    Readers get the whole snapshot reference; writers publish a new one with
    the next version. Nothing is ever mutated in place.
    """

    def __init__(self, initial: PricingSnapshot) -> None:
        validate_snapshot(initial)
        self._snapshot = initial
        self._lock = threading.RLock()

    def current(self) -> PricingSnapshot:
        return self._snapshot

    def replace(
        self,
        base_pricing: BasePricing | None = None,
        rules: Iterable[PricingRule] | None = None,
        currencies: Iterable[CurrencyRate] | None = None,
    ) -> PricingSnapshot:
        with self._lock:
            old = self._snapshot
            new = PricingSnapshot(
                version=old.version + 1,
                base_pricing=base_pricing if base_pricing is not None else old.base_pricing,
                rules=tuple(rules) if rules is not None else old.rules,
                currencies=tuple(currencies) if currencies is not None else old.currencies,
            )
            validate_snapshot(new)
            self._snapshot = new

        logger.info(
            "Pricing snapshot v%s published (%s rules, %s currencies)",
            new.version, len(new.rules), len(new.currencies),
        )
        return new

    def add_rule(self, rule: PricingRule) -> PricingSnapshot:
        with self._lock:
            rules = PricingRuleSet(self._snapshot.rules).with_rule(rule)
            return self.replace(rules=rules)

    def remove_rule(self, rule_id: str) -> PricingSnapshot:
        with self._lock:
            rules = PricingRuleSet(self._snapshot.rules).without_rule(rule_id)
            return self.replace(rules=rules)

    def toggle_rule(self, rule_id: str) -> PricingSnapshot:
        with self._lock:
            rules = PricingRuleSet(self._snapshot.rules).with_toggled(rule_id)
            return self.replace(rules=rules)
