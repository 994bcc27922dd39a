# nosec B101


import json
from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from domain.exceptions.currency import (
    BadRequestError,
    ConstructionError,
    DecodingError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    UnauthorizedError,
    UnderMaintenanceError,
    UnknownNetworkError,
)
from infrastructure.network import CurrencyDirectory, Endpoint, HttpClient, RatesResponse


def make_response(status_code: int, body) -> Mock:
    response = Mock()
    response.status_code = status_code
    response.content = body if isinstance(body, bytes) else json.dumps(body).encode()
    return response


def make_client(response: Mock) -> tuple[HttpClient, AsyncMock]:
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.request.return_value = response
    return HttpClient(client=mock_client), mock_client


ENDPOINT = Endpoint(
    base_url='https://openexchangerates.org/api',
    path='/latest.json',
    headers={'Authorization': 'Token app-123'},
)


# ============================================================================
# TEST: request() - Success Scenarios
# ============================================================================

@pytest.mark.asyncio
async def test_request_decodes_rates_response():
    client, mock_client = make_client(make_response(200, {
        'disclaimer': 'Usage subject to terms',
        'license': 'https://openexchangerates.org/license',
        'timestamp': 1696406400,
        'base': 'USD',
        'rates': {'EUR': 0.9, 'JPY': 149.5},
    }))

    result = await client.request(ENDPOINT, RatesResponse)

    assert isinstance(result, RatesResponse)
    assert result.base == 'USD'
    assert result.timestamp == 1696406400
    assert result.rates == {'EUR': Decimal('0.9'), 'JPY': Decimal('149.5')}


@pytest.mark.asyncio
async def test_request_decodes_plain_mapping():
    client, _ = make_client(make_response(200, {'EUR': 'Euro', 'JPY': 'Japanese Yen'}))

    result = await client.request(ENDPOINT, CurrencyDirectory)

    assert result == {'EUR': 'Euro', 'JPY': 'Japanese Yen'}


@pytest.mark.asyncio
async def test_request_sends_method_url_and_headers():
    client, mock_client = make_client(make_response(200, {'rates': {}}))
    endpoint = Endpoint(
        base_url='https://openexchangerates.org/api/',
        path='/latest.json',
        headers={'Authorization': 'Token app-123'},
        query_params={'base': 'USD', 'symbols': 'EUR,JPY'},
    )

    await client.request(endpoint, RatesResponse)

    mock_client.request.assert_called_once()
    call_args = mock_client.request.call_args
    assert call_args[0][0] == 'GET'
    assert call_args[0][1] == 'https://openexchangerates.org/api/latest.json?base=USD&symbols=EUR,JPY'
    assert call_args[1]['headers'] == {'Authorization': 'Token app-123'}
    assert call_args[1]['content'] is None


@pytest.mark.asyncio
async def test_request_serializes_body_as_json():
    client, mock_client = make_client(make_response(200, {}))
    endpoint = Endpoint(
        base_url='https://example.com', path='/convert', method='post', body={'amount': 10}
    )

    await client.request(endpoint, RatesResponse)

    call_args = mock_client.request.call_args
    assert call_args[0][0] == 'POST'
    assert json.loads(call_args[1]['content']) == {'amount': 10}
    assert call_args[1]['headers']['Content-Type'] == 'application/json'


# ============================================================================
# TEST: request() - HTTP Error Mapping
# ============================================================================

@pytest.mark.asyncio
@pytest.mark.parametrize('status_code, error_class', [
    (400, BadRequestError),
    (401, UnauthorizedError),
    (403, ForbiddenError),
    (404, NotFoundError),
    (500, ServerError),
    (503, UnderMaintenanceError),
    (429, UnknownNetworkError),
])
async def test_request_maps_status_to_typed_error(status_code, error_class):
    client, _ = make_client(make_response(status_code, {
        'error': True,
        'status': status_code,
        'message': 'error',
        'description': 'Something went wrong',
    }))

    with pytest.raises(error_class) as exc_info:
        await client.request(ENDPOINT, RatesResponse)

    if error_class is not UnknownNetworkError:
        assert exc_info.value.status_code == status_code
        assert exc_info.value.message == 'Something went wrong'
    else:
        assert exc_info.value.status_code == 520


@pytest.mark.asyncio
async def test_request_prefers_status_from_error_body():
    client, _ = make_client(make_response(400, {
        'error': True,
        'status': 401,
        'message': 'invalid_app_id',
        'description': 'Invalid App ID provided.',
    }))

    with pytest.raises(UnauthorizedError) as exc_info:
        await client.request(ENDPOINT, RatesResponse)

    assert 'Invalid App ID' in exc_info.value.message


@pytest.mark.asyncio
async def test_request_falls_back_to_http_status_when_body_has_none():
    client, _ = make_client(make_response(404, {'error': True}))

    with pytest.raises(NotFoundError) as exc_info:
        await client.request(ENDPOINT, RatesResponse)

    assert exc_info.value.message == NotFoundError.default_message


@pytest.mark.asyncio
async def test_request_undecodable_error_body_is_unknown():
    client, _ = make_client(make_response(503, b'<html>Service Unavailable</html>'))

    with pytest.raises(UnknownNetworkError) as exc_info:
        await client.request(ENDPOINT, RatesResponse)

    assert exc_info.value.status_code == 520


# ============================================================================
# TEST: request() - Decoding, Transport and Construction Failures
# ============================================================================

@pytest.mark.asyncio
async def test_request_decode_failure_raises_decoding_error():
    client, _ = make_client(make_response(200, {'rates': 'not-a-map'}))

    with pytest.raises(DecodingError):
        await client.request(ENDPOINT, RatesResponse)


@pytest.mark.asyncio
async def test_request_invalid_json_raises_decoding_error():
    client, _ = make_client(make_response(200, b'{ invalid json }'))

    with pytest.raises(DecodingError):
        await client.request(ENDPOINT, CurrencyDirectory)


@pytest.mark.asyncio
async def test_request_network_timeout_is_unknown_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.request.side_effect = httpx.TimeoutException('Request timed out')
    client = HttpClient(client=mock_client)

    with pytest.raises(UnknownNetworkError) as exc_info:
        await client.request(ENDPOINT, RatesResponse)

    assert 'request failed' in str(exc_info.value).lower()
    mock_client.request.assert_called_once()


@pytest.mark.asyncio
@pytest.mark.parametrize('base_url', ['', 'not a url', '/relative/only'])
async def test_request_malformed_endpoint_raises_construction_error(base_url):
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    client = HttpClient(client=mock_client)

    with pytest.raises(ConstructionError):
        await client.request(Endpoint(base_url=base_url, path='/latest.json'), RatesResponse)

    mock_client.request.assert_not_called()


@pytest.mark.asyncio
async def test_request_unserializable_body_raises_construction_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    client = HttpClient(client=mock_client)
    endpoint = Endpoint(base_url='https://example.com', path='/x', body={'when': object()})

    with pytest.raises(ConstructionError):
        await client.request(endpoint, RatesResponse)

    mock_client.request.assert_not_called()
