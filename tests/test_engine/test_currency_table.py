"""Tests for CurrencyTable (immutable rate lookup)."""

from decimal import Decimal

import pytest

from tour_pricing.engine.currency_table import CurrencyTable, as_currency_table
from tour_pricing.exceptions.custom import InvalidCurrencyTableError, UnknownCurrencyError
from tour_pricing.schemas.pricing import CurrencyRate


def test_rate_of_known_currency(currencies):
    table = CurrencyTable(currencies)
    assert table.rate_of("EUR") == Decimal("0.85")
    assert table.rate_of("USD") == Decimal("1.0")
    assert table.rate_of("JPY") == Decimal("110.0")


def test_symbol_of_known_currency(currencies):
    table = CurrencyTable(currencies)
    assert table.symbol_of("EUR") == "€"


def test_unknown_currency_raises(currencies):
    table = CurrencyTable(currencies)
    with pytest.raises(UnknownCurrencyError) as exc_info:
        table.rate_of("XXX")
    assert exc_info.value.code == "XXX"
    with pytest.raises(UnknownCurrencyError):
        table.symbol_of("XXX")


def test_base_code_is_rate_one(currencies):
    assert CurrencyTable(currencies).base_code == "USD"


def test_codes_keep_insertion_order(currencies):
    table = CurrencyTable(currencies)
    assert table.codes == ["USD", "EUR", "JPY"]
    assert len(table) == 3
    assert "EUR" in table
    assert "XXX" not in table
    assert [c.code for c in table] == ["USD", "EUR", "JPY"]


def test_duplicate_code_rejected(currencies):
    with pytest.raises(InvalidCurrencyTableError):
        CurrencyTable([*currencies, CurrencyRate(code="EUR", rate=0.9)])


def test_table_without_base_rejected():
    with pytest.raises(InvalidCurrencyTableError):
        CurrencyTable([CurrencyRate(code="EUR", rate=0.85)])


def test_empty_table_rejected():
    with pytest.raises(InvalidCurrencyTableError):
        CurrencyTable([])


def test_as_currency_table_passthrough(currencies):
    table = CurrencyTable(currencies)
    assert as_currency_table(table) is table
    assert as_currency_table(currencies).codes == table.codes
