from collections.abc import Iterable, Iterator

from tour_pricing.exceptions.custom import DuplicateRuleError, RuleNotFoundError
from tour_pricing.schemas.pricing import PricingRule


class PricingRuleSet:
    """Ordered, immutable list of pricing rules.

    Order matters: rules are applied left to right on the running price.
    Editing helpers return a new set and leave this one untouched.
    """

    def __init__(self, rules: Iterable[PricingRule] = ()) -> None:
        rules = tuple(rules)
        seen: set[str] = set()
        for rule in rules:
            if rule.id in seen:
                raise DuplicateRuleError(rule.id)
            seen.add(rule.id)
        self._rules = rules

    @property
    def rules(self) -> tuple[PricingRule, ...]:
        return self._rules

    def active(self) -> Iterator[PricingRule]:
        return (r for r in self._rules if r.is_active)

    def get(self, rule_id: str) -> PricingRule:
        for rule in self._rules:
            if rule.id == rule_id:
                return rule
        raise RuleNotFoundError(rule_id)

    def with_rule(self, rule: PricingRule) -> "PricingRuleSet":
        """Append *rule* at the end of the set."""
        return PricingRuleSet((*self._rules, rule))

    def without_rule(self, rule_id: str) -> "PricingRuleSet":
        self.get(rule_id)
        return PricingRuleSet(r for r in self._rules if r.id != rule_id)

    def with_toggled(self, rule_id: str) -> "PricingRuleSet":
        """Flip ``is_active`` on one rule, keeping its position."""
        self.get(rule_id)
        return PricingRuleSet(
            r.model_copy(update={"is_active": not r.is_active}) if r.id == rule_id else r
            for r in self._rules
        )

    def __iter__(self) -> Iterator[PricingRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)


def as_rule_set(rules: "PricingRuleSet | Iterable[PricingRule]") -> PricingRuleSet:
    if isinstance(rules, PricingRuleSet):
        return rules
    return PricingRuleSet(rules)
