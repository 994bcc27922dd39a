"""
Shared in-memory stand-ins for the persistence boundary.
"""

from decimal import Decimal

import pytest

from domain.models.currency import CurrencyRate


class InMemoryPreferenceStore:
    def __init__(self):
        self.values: dict[str, str] = {}

    async def set_value(self, key: str, value: str) -> None:
        self.values[key] = value

    async def get_value(self, key: str) -> str | None:
        return self.values.get(key)

    async def remove_value(self, key: str) -> None:
        self.values.pop(key, None)


class InMemoryRateStore:
    """Rate cache store that records calls and can be told to fail writes."""

    def __init__(self):
        self.rates: dict[str, CurrencyRate] = {}
        self.calls: list[tuple[str, str]] = []
        self.failing_codes: set[str] = set()

    async def create(self, rate: CurrencyRate) -> bool:
        self.calls.append(('create', rate.code))
        if rate.code in self.failing_codes or rate.code in self.rates:
            return False
        self.rates[rate.code] = rate
        return True

    async def retrieve(self) -> list[CurrencyRate]:
        return [self.rates[code] for code in sorted(self.rates)]

    async def update(self, rate: CurrencyRate) -> bool:
        self.calls.append(('update', rate.code))
        if rate.code in self.failing_codes or rate.code not in self.rates:
            return False
        self.rates[rate.code] = rate
        return True

    async def delete(self, rate: CurrencyRate) -> bool:
        return self.rates.pop(rate.code, None) is not None

    async def exists(self, rate: CurrencyRate) -> bool:
        return rate.code in self.rates


@pytest.fixture
def preference_store():
    return InMemoryPreferenceStore()


@pytest.fixture
def rate_store():
    return InMemoryRateStore()


@pytest.fixture
def sample_rates():
    return [
        CurrencyRate(code='EUR', name='Euro', rate=Decimal('0.9')),
        CurrencyRate(code='JPY', name='Japanese Yen', rate=Decimal('149.5')),
    ]
