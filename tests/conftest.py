from datetime import date

import httpx
import pytest
from httpx import ASGITransport

from tour_pricing.schemas.pricing import (
    AdjustmentType,
    BasePricing,
    CurrencyRate,
    EarlyBirdCondition,
    GroupSizeCondition,
    MonthDay,
    PricingRule,
    RuleType,
    SeasonalCondition,
)


@pytest.fixture
def travel_date():
    # Any date is in season for the year-round rule below
    return date(2026, 3, 10)


@pytest.fixture
def base_pricing():
    return BasePricing(
        base_price=100, base_currency="USD", minimum_price=50, maximum_price=500,
    )


@pytest.fixture
def currencies():
    return [
        CurrencyRate(code="USD", name="US Dollar", rate=1.0, symbol="$"),
        CurrencyRate(code="EUR", name="Euro", rate=0.85, symbol="€"),
        CurrencyRate(code="JPY", name="Japanese Yen", rate=110.0, symbol="¥"),
    ]


@pytest.fixture
def rules():
    """Year-round +25% season, 5+ guests -15%, 30+ days ahead -10%."""
    return [
        PricingRule(
            id="season",
            name="Peak Season",
            type=RuleType.seasonal,
            condition=SeasonalCondition(
                start=MonthDay(month=1, day=1), end=MonthDay(month=12, day=31),
            ),
            adjustment=25,
            adjustment_type=AdjustmentType.percentage,
        ),
        PricingRule(
            id="group",
            name="Group Discount",
            type=RuleType.group_size,
            condition=GroupSizeCondition(min_guests=5),
            adjustment=-15,
            adjustment_type=AdjustmentType.percentage,
        ),
        PricingRule(
            id="early",
            name="Early Bird",
            type=RuleType.early_bird,
            condition=EarlyBirdCondition(min_days=30),
            adjustment=-10,
            adjustment_type=AdjustmentType.percentage,
        ),
    ]


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SERVICE_FEE", "5.0")
    monkeypatch.setenv("MAX_SCENARIO_CELLS", "50")


@pytest.fixture
async def client(mock_env):
    from tour_pricing.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
