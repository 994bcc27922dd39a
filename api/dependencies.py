import logging
from typing import Annotated

import httpx
from fastapi import Depends
from redis.asyncio import Redis

from application.services import ConversionService, ExchangeRateService
from config.settings import ExchangeRateConfig, get_settings
from infrastructure.cache import FreshnessTracker, RedisPreferenceStore
from infrastructure.network import ExchangeRateEndpoints, HttpClient
from infrastructure.persistence.database import Database
from infrastructure.persistence.repositories.currency import CurrencyRateRepository

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	db: Database | None = None
	redis_client: Redis | None = None
	http_client: HttpClient | None = None
	config: ExchangeRateConfig | None = None
	rate_service: ExchangeRateService | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.config = ExchangeRateConfig.from_settings(settings)
	deps.db = Database(settings.DATABASE_URL)
	deps.redis_client = Redis.from_url(settings.REDIS_URL, decode_responses=True)
	deps.http_client = HttpClient(
		client=httpx.AsyncClient(timeout=httpx.Timeout(settings.HTTP_TIMEOUT_SECONDS))
	)

	# One service instance so overlapping refreshes share a single in-flight fetch
	deps.rate_service = ExchangeRateService(
		client=deps.http_client,
		repository=CurrencyRateRepository(deps.db),
		freshness=FreshnessTracker(
			RedisPreferenceStore(deps.redis_client), ttl_minutes=deps.config.cache_ttl_minutes
		),
		endpoints=ExchangeRateEndpoints(settings.EXCHANGE_RATE_BASE_URL, settings.APP_ID),
		config=deps.config,
	)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.redis_client:
		await deps.redis_client.aclose()
	if deps.db:
		await deps.db.close()
	if deps.http_client:
		await deps.http_client.close()

	logger.info('Cleanup complete')


def get_exchange_rate_config() -> ExchangeRateConfig:
	if deps.config is None:
		raise RuntimeError('Configuration not initialized')
	return deps.config


def get_rate_service() -> ExchangeRateService:
	if deps.rate_service is None:
		raise RuntimeError('Exchange rate service not initialized')
	return deps.rate_service


def get_conversion_service(
	rate_service: Annotated[ExchangeRateService, Depends(get_rate_service)],
	config: Annotated[ExchangeRateConfig, Depends(get_exchange_rate_config)],
) -> ConversionService:
	return ConversionService(rate_service=rate_service, config=config)
