from typing import Annotated

from fastapi import Depends, Request

from tour_pricing.services.pricing import PricingService
from tour_pricing.snapshots import SnapshotStore


def get_pricing_service(request: Request) -> PricingService:
    return request.app.state.pricing_service


def get_snapshot_store(request: Request) -> SnapshotStore:
    return request.app.state.snapshot_store


PricingDep = Annotated[PricingService, Depends(get_pricing_service)]
SnapshotStoreDep = Annotated[SnapshotStore, Depends(get_snapshot_store)]
