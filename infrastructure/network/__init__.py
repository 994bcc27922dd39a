from .client import HttpClient
from .endpoint import Endpoint, ExchangeRateEndpoints
from .schemas import CurrencyDirectory, GeneralErrorBody, RatesResponse, UsageResponse

__all__ = [
	'CurrencyDirectory',
	'Endpoint',
	'ExchangeRateEndpoints',
	'GeneralErrorBody',
	'HttpClient',
	'RatesResponse',
	'UsageResponse',
]
