"""Out-of-the-box operator configuration loaded into a fresh snapshot store."""

from tour_pricing.schemas.pricing import (
    AdjustmentType,
    BasePricing,
    CurrencyRate,
    EarlyBirdCondition,
    GroupSizeCondition,
    MonthDay,
    PricingRule,
    PricingSnapshot,
    RuleType,
    SeasonalCondition,
)

DEFAULT_CURRENCIES: tuple[CurrencyRate, ...] = (
    CurrencyRate(code="USD", name="US Dollar", rate=1.0, symbol="$"),
    CurrencyRate(code="EUR", name="Euro", rate=0.85, symbol="€"),
    CurrencyRate(code="GBP", name="British Pound", rate=0.73, symbol="£"),
    CurrencyRate(code="JPY", name="Japanese Yen", rate=110.0, symbol="¥"),
    CurrencyRate(code="CAD", name="Canadian Dollar", rate=1.25, symbol="C$"),
    CurrencyRate(code="AUD", name="Australian Dollar", rate=1.35, symbol="A$"),
    CurrencyRate(code="MXN", name="Mexican Peso", rate=20.0, symbol="$"),
    CurrencyRate(code="BRL", name="Brazilian Real", rate=5.2, symbol="R$"),
)

DEFAULT_BASE_PRICING = BasePricing(
    base_price=100.0,
    base_currency="USD",
    minimum_price=50.0,
    maximum_price=500.0,
)

DEFAULT_RULES: tuple[PricingRule, ...] = (
    PricingRule(
        id="1",
        name="Peak Season (Summer)",
        type=RuleType.seasonal,
        condition=SeasonalCondition(
            start=MonthDay(month=6, day=1),
            end=MonthDay(month=8, day=31),
        ),
        adjustment=25,
        adjustment_type=AdjustmentType.percentage,
    ),
    PricingRule(
        id="2",
        name="Group Discount (5+ people)",
        type=RuleType.group_size,
        condition=GroupSizeCondition(min_guests=5),
        adjustment=-15,
        adjustment_type=AdjustmentType.percentage,
    ),
    PricingRule(
        id="3",
        name="Early Bird (30+ days)",
        type=RuleType.early_bird,
        condition=EarlyBirdCondition(min_days=30),
        adjustment=-10,
        adjustment_type=AdjustmentType.percentage,
    ),
)


def default_snapshot() -> PricingSnapshot:
    return PricingSnapshot(
        version=1,
        base_pricing=DEFAULT_BASE_PRICING,
        rules=DEFAULT_RULES,
        currencies=DEFAULT_CURRENCIES,
    )
