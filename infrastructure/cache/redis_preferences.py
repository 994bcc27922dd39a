import logging

from redis import asyncio as redis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


class RedisPreferenceStore:
	"""Single-value preferences kept in Redis under ``preferences:<key>``.

	Redis errors are logged and never raised: a failed read looks like a
	missing value and a failed write or removal is skipped.
	"""

	def __init__(self, redis_client: redis.Redis):
		self.redis = redis_client

	def _make_key(self, key: str) -> str:
		return f'preferences:{key}'

	async def set_value(self, key: str, value: str) -> None:
		try:
			await self.redis.set(self._make_key(key), value)
		except RedisError as e:
			logger.error(f'Failed while storing preference {key}: {e}')

	async def get_value(self, key: str) -> str | None:
		try:
			data = await self.redis.get(self._make_key(key))
		except RedisError as e:
			logger.error(f'Failed while reading preference {key}: {e}')
			return None

		if data is None:
			return None
		if isinstance(data, bytes):
			return data.decode('utf-8')
		return data

	async def remove_value(self, key: str) -> None:
		try:
			await self.redis.delete(self._make_key(key))
		except RedisError as e:
			logger.error(f'Failed while removing preference {key}: {e}')
