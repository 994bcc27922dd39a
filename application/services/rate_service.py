import asyncio
import logging
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from decimal import Decimal

from config.settings import ExchangeRateConfig
from domain.models.currency import CurrencyRate
from domain.ports import RateCacheStore
from infrastructure.cache.freshness import FreshnessTracker
from infrastructure.network import (
	CurrencyDirectory,
	ExchangeRateEndpoints,
	HttpClient,
	RatesResponse,
	UsageResponse,
)

logger = logging.getLogger(__name__)

UNKNOWN_CURRENCY_NAME = '-'


def merge_rates(rates: Mapping[str, Decimal], directory: Mapping[str, str]) -> list[CurrencyRate]:
	"""Combine a rate map and a name directory into rate records sorted by code.

	Codes missing from the directory keep a placeholder name; codes that only
	appear in the directory are dropped.
	"""
	return [
		CurrencyRate(code=code, name=directory.get(code, UNKNOWN_CURRENCY_NAME), rate=rate)
		for code, rate in sorted(rates.items())
	]


def _retrieve_refresh_exception(task: asyncio.Task) -> None:
	# Every waiter may have been cancelled; mark the failure as retrieved
	if not task.cancelled() and task.exception() is not None:
		logger.debug(f'Currency rate refresh finished with {task.exception().__class__.__name__}')


class ExchangeRateService:
	def __init__(
		self,
		client: HttpClient,
		repository: RateCacheStore,
		freshness: FreshnessTracker,
		endpoints: ExchangeRateEndpoints,
		config: ExchangeRateConfig,
		clock: Callable[[], datetime] | None = None,
	):
		self.client = client
		self.repository = repository
		self.freshness = freshness
		self.endpoints = endpoints
		self.config = config
		self.clock = clock or (lambda: datetime.now(UTC))
		self._refresh_task: asyncio.Task | None = None

	async def fetch_currency_rate(self) -> list[CurrencyRate]:
		cached = await self._cached_rates()
		if cached:
			logger.debug(f'Serving {len(cached)} cached currency rates')
			return cached

		# Callers that miss the cache while a refresh is running wait on the same task
		if self._refresh_task is None or self._refresh_task.done():
			self._refresh_task = asyncio.create_task(self._refresh())
			self._refresh_task.add_done_callback(_retrieve_refresh_exception)
		return await asyncio.shield(self._refresh_task)

	async def fetch_rates_history(self, date: str) -> RatesResponse:
		return await self.client.request(self.endpoints.history(date), RatesResponse)

	async def fetch_usage(self) -> UsageResponse:
		return await self.client.request(self.endpoints.usage(), UsageResponse)

	async def invalidate(self) -> None:
		await self.freshness.clear()
		logger.info('Currency rate cache invalidated')

	async def _cached_rates(self) -> list[CurrencyRate]:
		if not await self.freshness.is_valid(self.clock(), self.config.cache_ttl_minutes):
			return []
		return await self.repository.retrieve()

	async def _refresh(self) -> list[CurrencyRate]:
		logger.info('Refreshing currency rates from the exchange rate API')
		try:
			latest, currencies = await asyncio.gather(
				self.client.request(self.endpoints.latest(), RatesResponse),
				self.client.request(self.endpoints.currencies(), CurrencyDirectory),
			)
		except Exception as e:
			logger.error(f'Failed while fetching currency rates: {e}')
			raise

		merged = merge_rates(latest.rates or {}, currencies)

		if await self._persist(merged):
			await self.freshness.stamp(self.clock())
		else:
			logger.warning('Some currency rates were not persisted; freshness mark left unchanged')

		logger.info(f'Fetched {len(merged)} currency rates')
		return merged

	async def _persist(self, rates: list[CurrencyRate]) -> bool:
		all_saved = True
		for rate in rates:
			if await self.repository.exists(rate):
				saved = await self.repository.update(rate)
			else:
				saved = await self.repository.create(rate)
			all_saved = all_saved and saved
		return all_saved
