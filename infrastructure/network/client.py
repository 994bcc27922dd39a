import json
import logging
from typing import TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from domain.exceptions.currency import (
	ConstructionError,
	DecodingError,
	NetworkError,
	UnknownNetworkError,
)
from infrastructure.network.endpoint import Endpoint
from infrastructure.network.schemas import GeneralErrorBody

logger = logging.getLogger(__name__)

T = TypeVar('T')


class HttpClient:
	"""Issues typed requests against an ``Endpoint`` and maps failures to ``NetworkError``.

	One attempt per call; there is no retry or backoff at this layer.
	"""

	def __init__(self, client: httpx.AsyncClient | None = None, timeout: int = 10):
		self._client = client or httpx.AsyncClient(timeout=timeout)

	async def request(self, endpoint: Endpoint, response_type: type[T]) -> T:
		method, url, headers, content = self._construct_request(endpoint)
		logger.debug(f'{method} {url}')

		try:
			response = await self._client.request(method, url, headers=headers, content=content)
		except httpx.RequestError as e:
			logger.error(f'Request to {url} failed: {e.__class__.__name__}')
			raise UnknownNetworkError(f'Request failed: {e.__class__.__name__}') from e

		if not 200 <= response.status_code < 300:
			error = self._map_error_response(response)
			logger.error(f'{method} {url} returned HTTP {response.status_code}: {error.message}')
			raise error

		try:
			return TypeAdapter(response_type).validate_json(response.content)
		except ValidationError as e:
			logger.error(f'Failed to decode response from {url}: {e.error_count()} error(s)')
			raise DecodingError(f'Failed to decode response from {endpoint.path}') from e

	def _construct_request(self, endpoint: Endpoint) -> tuple[str, str, dict[str, str], bytes | None]:
		if not endpoint.base_url:
			raise ConstructionError('[Bad Request] Base url is empty.')

		url = endpoint.build_url()
		try:
			parsed = httpx.URL(url)
		except httpx.InvalidURL as e:
			raise ConstructionError(f'[Bad Request] Invalid url: {url}') from e
		if not parsed.scheme or not parsed.host:
			raise ConstructionError(f'[Bad Request] Invalid url: {url}')

		headers = dict(endpoint.headers)
		content = None
		if endpoint.body is not None:
			try:
				content = json.dumps(endpoint.body).encode('utf-8')
			except (TypeError, ValueError) as e:
				raise ConstructionError('[Bad Request] Request body is not JSON serializable.') from e
			headers.setdefault('Content-Type', 'application/json')

		return endpoint.method.upper(), url, headers, content

	def _map_error_response(self, response: httpx.Response) -> NetworkError:
		try:
			body = GeneralErrorBody.model_validate_json(response.content)
		except ValidationError:
			logger.warning(f'Could not decode error body for HTTP {response.status_code}')
			return UnknownNetworkError()

		status = body.status if body.status is not None else response.status_code
		return NetworkError.from_status(status, body.description)

	async def close(self) -> None:
		await self._client.aclose()
