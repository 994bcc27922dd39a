import logging
from datetime import UTC, datetime, timedelta

from domain.ports import PreferenceStore

logger = logging.getLogger(__name__)

LATEST_CURRENCY_RATE_REQUEST_TIMESTAMP = 'LATEST_CURRENCY_RATE_REQUEST_TIMESTAMP'


def _as_utc(moment: datetime) -> datetime:
	if moment.tzinfo is None:
		return moment.replace(tzinfo=UTC)
	return moment.astimezone(UTC)


class FreshnessTracker:
	"""Remembers when the rate set was last fully refreshed."""

	def __init__(
		self,
		preferences: PreferenceStore,
		ttl_minutes: int = 30,
		key: str = LATEST_CURRENCY_RATE_REQUEST_TIMESTAMP,
	):
		self.preferences = preferences
		self.ttl_minutes = ttl_minutes
		self.key = key

	async def stamp(self, now: datetime) -> None:
		await self.preferences.set_value(self.key, _as_utc(now).isoformat())

	async def last_stamp(self) -> datetime | None:
		value = await self.preferences.get_value(self.key)
		if value is None:
			return None
		try:
			return _as_utc(datetime.fromisoformat(value))
		except ValueError:
			logger.warning(f'Ignoring malformed freshness stamp {value!r}')
			return None

	async def is_valid(self, now: datetime, ttl_minutes: int | None = None) -> bool:
		stamp = await self.last_stamp()
		if stamp is None:
			return False

		ttl = timedelta(minutes=self.ttl_minutes if ttl_minutes is None else ttl_minutes)
		elapsed = _as_utc(now) - stamp
		# A stamp from the future means the clock moved; refresh rather than trust it
		return timedelta(0) <= elapsed < ttl

	async def clear(self) -> None:
		await self.preferences.remove_value(self.key)
