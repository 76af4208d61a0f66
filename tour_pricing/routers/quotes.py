from datetime import date

from fastapi import APIRouter
from pydantic import BaseModel, Field

from tour_pricing.dependencies import PricingDep
from tour_pricing.schemas.pricing import (
    BookingContext,
    BookingQuote,
    PreviewRow,
    PriceResult,
    PricingSnapshot,
    ScenarioTable,
)

router = APIRouter(prefix="/pricing")


class QuoteRequest(BaseModel):
    context: BookingContext
    snapshot: PricingSnapshot | None = None


class BookingQuoteRequest(BaseModel):
    context: BookingContext
    days: int | None = Field(default=None, ge=1)


class ScenarioRequest(BaseModel):
    currencies: list[str]
    guest_counts: list[int]
    lead_times: list[int]
    as_of: date | None = None
    snapshot: PricingSnapshot | None = None


@router.post("/quote", response_model=PriceResult)
async def quote(request: QuoteRequest, service: PricingDep) -> PriceResult:
    return service.quote(request.context, snapshot=request.snapshot)


@router.post("/booking-quote", response_model=BookingQuote)
async def booking_quote(request: BookingQuoteRequest, service: PricingDep) -> BookingQuote:
    return service.booking_quote(request.context, days=request.days)


@router.post("/scenarios", response_model=ScenarioTable)
async def scenarios(request: ScenarioRequest, service: PricingDep) -> ScenarioTable:
    return service.scenarios(
        request.currencies,
        request.guest_counts,
        request.lead_times,
        as_of=request.as_of,
        snapshot=request.snapshot,
    )


@router.get("/preview", response_model=list[PreviewRow])
async def preview(service: PricingDep, as_of: date | None = None) -> list[PreviewRow]:
    return service.preview(as_of=as_of)
