from .responses import (
	ConversionResponse,
	CurrencyRateResponse,
	CurrencyRatesResponse,
	RatesHistoryResponse,
)

__all__ = [
	'ConversionResponse',
	'CurrencyRateResponse',
	'CurrencyRatesResponse',
	'RatesHistoryResponse',
]
