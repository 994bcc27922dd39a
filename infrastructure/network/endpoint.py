from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Endpoint:
	"""Descriptor of a single HTTP call against the exchange rate API."""

	base_url: str
	path: str
	method: str = 'GET'
	headers: dict[str, str] = field(default_factory=dict)
	body: dict[str, Any] | None = None
	query_params: dict[str, Any] = field(default_factory=dict)

	def build_url(self) -> str:
		# Query values are joined as-is; callers pass pre-encoded values.
		url = f'{self.base_url.rstrip("/")}{self.path}'
		if self.query_params:
			query = '&'.join(f'{key}={value}' for key, value in self.query_params.items())
			url = f'{url}?{query}'
		return url


class ExchangeRateEndpoints:
	"""Builds the Open Exchange Rates endpoints used by the service."""

	def __init__(self, base_url: str, app_id: str):
		self.base_url = base_url
		self.app_id = app_id

	@property
	def headers(self) -> dict[str, str]:
		return {
			'Accept': 'application/json',
			'Authorization': f'Token {self.app_id}',
		}

	def _endpoint(self, path: str) -> Endpoint:
		return Endpoint(base_url=self.base_url, path=path, method='GET', headers=self.headers)

	def latest(self) -> Endpoint:
		return self._endpoint('/latest.json')

	def history(self, date: str) -> Endpoint:
		return self._endpoint(f'/historical/{date}.json')

	def currencies(self) -> Endpoint:
		return self._endpoint('/currencies.json')

	def usage(self) -> Endpoint:
		return self._endpoint('/usage.json')
