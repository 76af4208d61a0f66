"""Immutable currency lookup used by the price calculator.

A table is built once from a list of CurrencyRate and never changed;
loading new rates means building a new table.
"""

from collections.abc import Iterable, Iterator
from decimal import Decimal

from tour_pricing.exceptions.custom import InvalidCurrencyTableError, UnknownCurrencyError
from tour_pricing.schemas.pricing import CurrencyRate


class CurrencyTable:
    def __init__(self, currencies: Iterable[CurrencyRate]) -> None:
        rates: dict[str, CurrencyRate] = {}
        for currency in currencies:
            if currency.code in rates:
                raise InvalidCurrencyTableError(f"Duplicate currency code: {currency.code}")
            rates[currency.code] = currency

        base = next((c.code for c in rates.values() if c.rate == 1.0), None)
        if base is None:
            raise InvalidCurrencyTableError("Currency table has no base currency (rate 1.0)")

        self._rates = rates
        self._base_code = base

    @property
    def base_code(self) -> str:
        return self._base_code

    @property
    def codes(self) -> list[str]:
        return list(self._rates)

    def get(self, code: str) -> CurrencyRate:
        currency = self._rates.get(code)
        if currency is None:
            raise UnknownCurrencyError(code)
        return currency

    def rate_of(self, code: str) -> Decimal:
        # str() keeps the operator's decimal literal (0.85, not 0.84999...)
        return Decimal(str(self.get(code).rate))

    def symbol_of(self, code: str) -> str:
        return self.get(code).symbol

    def __contains__(self, code: object) -> bool:
        return code in self._rates

    def __iter__(self) -> Iterator[CurrencyRate]:
        return iter(self._rates.values())

    def __len__(self) -> int:
        return len(self._rates)


def as_currency_table(currencies: "CurrencyTable | Iterable[CurrencyRate]") -> CurrencyTable:
    if isinstance(currencies, CurrencyTable):
        return currencies
    return CurrencyTable(currencies)
