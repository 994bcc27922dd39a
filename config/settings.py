from dataclasses import dataclass
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	DATABASE_URL: str = 'sqlite+aiosqlite:///./xchange.db'

	REDIS_URL: str = 'redis://localhost:6379'

	# Exchange rate API
	EXCHANGE_RATE_BASE_URL: str = 'https://openexchangerates.org/api'
	APP_ID: str = ''
	HTTP_TIMEOUT_SECONDS: int = 10

	# Rates
	CACHE_TIME_OUT_MINUTES: int = 30
	DEFAULT_BASE_CURRENCY_CODE: str = 'USD'
	DEFAULT_TARGET_CURRENCY_CODE: str = 'JPY'
	DEFAULT_MAX_DIGIT_LIMIT: int = 12

	# Application
	APP_NAME: str = 'XChange Rates API'
	DEBUG: bool = True
	LOG_LEVEL: str = 'INFO'
	LOG_DIRECTORY: str = 'logs'

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@dataclass(frozen=True)
class ExchangeRateConfig:
	base_currency_code: str = 'USD'
	default_target_code: str = 'JPY'
	cache_ttl_minutes: int = 30
	max_digit_limit: int = 12

	@classmethod
	def from_settings(cls, settings: Settings) -> 'ExchangeRateConfig':
		return cls(
			base_currency_code=settings.DEFAULT_BASE_CURRENCY_CODE.upper(),
			default_target_code=settings.DEFAULT_TARGET_CURRENCY_CODE.upper(),
			cache_ttl_minutes=settings.CACHE_TIME_OUT_MINUTES,
			max_digit_limit=settings.DEFAULT_MAX_DIGIT_LIMIT,
		)


@lru_cache
def get_settings() -> Settings:
	return Settings()
