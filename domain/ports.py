from typing import Protocol

from domain.models.currency import CurrencyRate


class RateCacheStore(Protocol):
	"""Key-value store of currency rates keyed by code.

	Implementations swallow their own storage errors; mutations report success
	as a bool instead of raising.
	"""

	async def create(self, rate: CurrencyRate) -> bool: ...

	async def retrieve(self) -> list[CurrencyRate]: ...

	async def update(self, rate: CurrencyRate) -> bool: ...

	async def delete(self, rate: CurrencyRate) -> bool: ...

	async def exists(self, rate: CurrencyRate) -> bool: ...


class PreferenceStore(Protocol):
	async def set_value(self, key: str, value: str) -> None: ...

	async def get_value(self, key: str) -> str | None: ...

	async def remove_value(self, key: str) -> None: ...
