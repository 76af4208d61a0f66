import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

from tour_pricing.config import Settings
from tour_pricing.engine.defaults import default_snapshot
from tour_pricing.exceptions.custom import (
    DuplicateRuleError,
    PricingError,
    RuleNotFoundError,
    UnknownCurrencyError,
)
from tour_pricing.exceptions.handlers import (
    duplicate_rule_error_handler,
    pricing_error_handler,
    rule_not_found_error_handler,
    unknown_currency_error_handler,
)
from tour_pricing.routers.quotes import router as quotes_router
from tour_pricing.routers.snapshot import router as snapshot_router
from tour_pricing.services.pricing import PricingService
from tour_pricing.snapshots import SnapshotStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )

    store = SnapshotStore(default_snapshot())
    app.state.snapshot_store = store
    app.state.pricing_service = PricingService(
        store,
        service_fee=settings.service_fee,
        max_scenario_cells=settings.max_scenario_cells,
        rate_per_day=settings.widget_rate_per_day,
    )
    logger.info("Pricing service ready (snapshot v%s)", store.current().version)

    yield


app = FastAPI(title="Tour Pricing", lifespan=lifespan)

app.add_exception_handler(UnknownCurrencyError, unknown_currency_error_handler)
app.add_exception_handler(RuleNotFoundError, rule_not_found_error_handler)
app.add_exception_handler(DuplicateRuleError, duplicate_rule_error_handler)
app.add_exception_handler(PricingError, pricing_error_handler)

app.include_router(quotes_router)
app.include_router(snapshot_router)
