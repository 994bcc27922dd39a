from .freshness import LATEST_CURRENCY_RATE_REQUEST_TIMESTAMP, FreshnessTracker
from .redis_preferences import RedisPreferenceStore

__all__ = ['FreshnessTracker', 'LATEST_CURRENCY_RATE_REQUEST_TIMESTAMP', 'RedisPreferenceStore']
