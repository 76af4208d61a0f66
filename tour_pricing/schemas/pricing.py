from __future__ import annotations

import calendar
from datetime import date
from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RuleType(StrEnum):
    seasonal = "seasonal"
    group_size = "group_size"
    early_bird = "early_bird"
    last_minute = "last_minute"


class AdjustmentType(StrEnum):
    percentage = "percentage"
    fixed = "fixed"


class MonthDay(BaseModel):
    """A calendar day without a year, e.g. 06-01 for June 1st."""

    model_config = ConfigDict(frozen=True)

    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)

    @model_validator(mode="after")
    def _check_day_in_month(self) -> MonthDay:
        # Leap year so that Feb 29 is accepted
        last_day = calendar.monthrange(2000, self.month)[1]
        if self.day > last_day:
            raise ValueError(f"Day {self.day} is out of range for month {self.month}")
        return self

    @classmethod
    def of(cls, value: date) -> MonthDay:
        return cls(month=value.month, day=value.day)

    def key(self) -> tuple[int, int]:
        return (self.month, self.day)


class SeasonalCondition(BaseModel):
    """Inclusive month/day span. ``start`` after ``end`` wraps the new year."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["seasonal"] = "seasonal"
    start: MonthDay
    end: MonthDay


class GroupSizeCondition(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["group_size"] = "group_size"
    min_guests: int = Field(ge=1)


class EarlyBirdCondition(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["early_bird"] = "early_bird"
    min_days: int = Field(ge=0)


class LastMinuteCondition(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["last_minute"] = "last_minute"
    max_days: int = Field(ge=0)


RuleCondition = Annotated[
    SeasonalCondition | GroupSizeCondition | EarlyBirdCondition | LastMinuteCondition,
    Field(discriminator="kind"),
]


class PricingRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = ""
    type: RuleType
    condition: RuleCondition
    adjustment: float  # negative = discount, positive = surcharge
    adjustment_type: AdjustmentType = AdjustmentType.percentage
    is_active: bool = True

    @model_validator(mode="after")
    def _check_condition_matches_type(self) -> PricingRule:
        if self.condition.kind != self.type.value:
            raise ValueError(
                f"Rule {self.id} of type {self.type.value} "
                f"has a {self.condition.kind} condition"
            )
        return self


class Effect(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: AdjustmentType
    amount: float


class CurrencyRate(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=1)
    name: str = ""
    rate: float = Field(gt=0)  # target = base * rate
    symbol: str = ""


class BasePricing(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_price: float = Field(gt=0)
    base_currency: str
    minimum_price: float = Field(ge=0)
    maximum_price: float = Field(ge=0)


class BookingContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    target_currency: str
    guest_count: int
    lead_time_days: int
    travel_date: date | None = None

    @classmethod
    def for_travel_date(
        cls,
        travel_date: date,
        target_currency: str,
        guest_count: int,
        today: date | None = None,
    ) -> BookingContext:
        """Build a context whose lead time is the days from *today* to *travel_date*."""
        if today is None:
            today = date.today()
        return cls(
            target_currency=target_currency,
            guest_count=guest_count,
            lead_time_days=(travel_date - today).days,
            travel_date=travel_date,
        )


class RuleApplication(BaseModel):
    """One step of the fold, in base currency and unrounded."""

    rule_id: str
    rule_name: str
    kind: AdjustmentType
    amount: float
    price_before: float
    price_after: float


class PriceResult(BaseModel):
    per_guest_price: float
    currency: str
    applied_rules: list[str] = []
    breakdown: list[RuleApplication] = []


class BookingQuote(BaseModel):
    currency: str
    symbol: str
    per_guest_price: float
    guest_count: int
    subtotal: float
    service_fee: float
    total: float
    applied_rules: list[str] = []


class ScenarioCell(BaseModel):
    currency: str
    guest_count: int
    lead_time_days: int
    travel_date: date
    per_guest_price: float
    applied_rules: list[str] = []


class ScenarioTable(BaseModel):
    currencies: list[str]
    guest_counts: list[int]
    lead_times: list[int]
    cells: list[ScenarioCell] = []

    def row(self, currency: str) -> list[ScenarioCell]:
        return [c for c in self.cells if c.currency == currency]

    def price(self, currency: str, guest_count: int, lead_time_days: int) -> float:
        for cell in self.cells:
            if (
                cell.currency == currency
                and cell.guest_count == guest_count
                and cell.lead_time_days == lead_time_days
            ):
                return cell.per_guest_price
        raise KeyError((currency, guest_count, lead_time_days))


class PreviewRow(BaseModel):
    currency: str
    symbol: str
    base: float
    one_guest: float
    five_guests: float
    early_bird: float
    last_minute: float


class PricingSnapshot(BaseModel):
    """Everything a quote needs, published and replaced as a whole."""

    model_config = ConfigDict(frozen=True)

    version: int = 1
    base_pricing: BasePricing
    rules: tuple[PricingRule, ...] = ()
    currencies: tuple[CurrencyRate, ...]
