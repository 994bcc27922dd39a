from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from api.dependencies import get_conversion_service, get_rate_service
from api.schemas import (
	ConversionResponse,
	CurrencyRateResponse,
	CurrencyRatesResponse,
	RatesHistoryResponse,
)
from application.services import ConversionService, ExchangeRateService
from domain.exceptions.currency import InvalidCurrencyError
from infrastructure.network import UsageResponse

router = APIRouter(prefix='/api', tags=['rates'])

CurrencyCode = Annotated[str, Path(min_length=3, max_length=5)]


@router.get(
	'/rates',
	response_model=CurrencyRatesResponse,
	status_code=status.HTTP_200_OK,
	summary='List cached or freshly fetched currency rates',
)
async def get_currency_rates(
	service: Annotated[ExchangeRateService, Depends(get_rate_service)],
) -> CurrencyRatesResponse:
	rates = await service.fetch_currency_rate()
	return CurrencyRatesResponse(
		base=service.config.base_currency_code,
		rates=[CurrencyRateResponse(code=r.code, name=r.name, rate=r.rate) for r in rates],
	)


@router.post(
	'/rates/refresh',
	response_model=CurrencyRatesResponse,
	status_code=status.HTTP_200_OK,
	summary='Drop the freshness mark and refetch rates',
)
async def refresh_currency_rates(
	service: Annotated[ExchangeRateService, Depends(get_rate_service)],
) -> CurrencyRatesResponse:
	await service.invalidate()
	rates = await service.fetch_currency_rate()
	return CurrencyRatesResponse(
		base=service.config.base_currency_code,
		rates=[CurrencyRateResponse(code=r.code, name=r.name, rate=r.rate) for r in rates],
	)


@router.get(
	'/rates/default',
	response_model=CurrencyRateResponse,
	status_code=status.HTTP_200_OK,
	summary='Get the rate of the configured default target currency',
)
async def get_default_target_rate(
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> CurrencyRateResponse:
	rate = await service.default_target()
	if rate is None:
		raise InvalidCurrencyError(f'Default currency {service.config.default_target_code} has no rate')
	return CurrencyRateResponse(code=rate.code, name=rate.name, rate=rate.rate)


@router.get(
	'/rates/{code}',
	response_model=CurrencyRateResponse,
	status_code=status.HTTP_200_OK,
	summary='Get a single currency rate',
)
async def get_currency_rate(
	code: CurrencyCode,
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> CurrencyRateResponse:
	rate = await service.get_currency(code.upper())
	return CurrencyRateResponse(code=rate.code, name=rate.name, rate=rate.rate)


@router.get(
	'/convert/{from_currency}/{to_currency}/{amount}',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount',
)
async def convert_currency(
	from_currency: CurrencyCode,
	to_currency: CurrencyCode,
	amount: Annotated[Decimal, Path(gt=0)],
	service: Annotated[ConversionService, Depends(get_conversion_service)],
) -> ConversionResponse:
	result = await service.convert(amount, from_currency.upper(), to_currency.upper())
	return ConversionResponse(
		from_currency=result.from_currency,
		to_currency=result.to_currency,
		original_amount=result.original_amount,
		converted_amount=result.converted_amount,
		exchange_rate=result.exchange_rate,
	)


@router.get(
	'/history/{date}',
	response_model=RatesHistoryResponse,
	status_code=status.HTTP_200_OK,
	summary='Get historical rates for a date',
)
async def get_rates_history(
	date: Annotated[str, Path(pattern=r'^\d{4}-\d{2}-\d{2}$')],
	service: Annotated[ExchangeRateService, Depends(get_rate_service)],
) -> RatesHistoryResponse:
	history = await service.fetch_rates_history(date)
	return RatesHistoryResponse(
		date=date,
		base=history.base,
		timestamp=history.timestamp,
		rates=history.rates or {},
	)


@router.get(
	'/usage',
	response_model=UsageResponse,
	status_code=status.HTTP_200_OK,
	summary='Exchange rate API plan usage',
)
async def get_usage(
	service: Annotated[ExchangeRateService, Depends(get_rate_service)],
) -> UsageResponse:
	return await service.fetch_usage()
