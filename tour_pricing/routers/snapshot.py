import uuid

from fastapi import APIRouter
from pydantic import BaseModel, Field

from tour_pricing.dependencies import SnapshotStoreDep
from tour_pricing.schemas.pricing import (
    BasePricing,
    CurrencyRate,
    PricingRule,
    PricingSnapshot,
)

router = APIRouter()


class NewPricingRule(PricingRule):
    id: str = Field(default_factory=lambda: uuid.uuid4().hex[:12], min_length=1)


class SnapshotUpdate(BaseModel):
    base_pricing: BasePricing | None = None
    rules: list[PricingRule] | None = None
    currencies: list[CurrencyRate] | None = None


@router.get("/pricing/snapshot", response_model=PricingSnapshot)
async def get_snapshot(store: SnapshotStoreDep) -> PricingSnapshot:
    return store.current()


@router.put("/pricing/snapshot", response_model=PricingSnapshot)
async def replace_snapshot(update: SnapshotUpdate, store: SnapshotStoreDep) -> PricingSnapshot:
    return store.replace(
        base_pricing=update.base_pricing,
        rules=update.rules,
        currencies=update.currencies,
    )


@router.post("/pricing/rules", response_model=PricingSnapshot, status_code=201)
async def add_rule(rule: NewPricingRule, store: SnapshotStoreDep) -> PricingSnapshot:
    return store.add_rule(PricingRule.model_validate(rule.model_dump()))


@router.delete("/pricing/rules/{rule_id}", response_model=PricingSnapshot)
async def remove_rule(rule_id: str, store: SnapshotStoreDep) -> PricingSnapshot:
    return store.remove_rule(rule_id)


@router.post("/pricing/rules/{rule_id}/toggle", response_model=PricingSnapshot)
async def toggle_rule(rule_id: str, store: SnapshotStoreDep) -> PricingSnapshot:
    return store.toggle_rule(rule_id)


@router.get("/currencies", response_model=list[CurrencyRate])
async def list_currencies(store: SnapshotStoreDep) -> list[CurrencyRate]:
    return list(store.current().currencies)
