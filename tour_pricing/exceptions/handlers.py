import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import DuplicateRuleError, PricingError, RuleNotFoundError, UnknownCurrencyError

logger = logging.getLogger(__name__)


async def unknown_currency_error_handler(
    _request: Request, exc: UnknownCurrencyError,
) -> JSONResponse:
    logger.warning("Unknown currency requested: %s", exc.code)
    return JSONResponse(status_code=404, content={"detail": exc.message})


async def rule_not_found_error_handler(
    _request: Request, exc: RuleNotFoundError,
) -> JSONResponse:
    logger.warning("Pricing rule not found: %s", exc.rule_id)
    return JSONResponse(status_code=404, content={"detail": exc.message})


async def duplicate_rule_error_handler(
    _request: Request, exc: DuplicateRuleError,
) -> JSONResponse:
    logger.warning("Duplicate pricing rule: %s", exc.rule_id)
    return JSONResponse(status_code=409, content={"detail": exc.message})


async def pricing_error_handler(_request: Request, exc: PricingError) -> JSONResponse:
    logger.warning("Pricing error: %s", exc.message)
    return JSONResponse(status_code=422, content={"detail": exc.message})
