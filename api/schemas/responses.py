from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class CurrencyRateResponse(BaseModel):
	code: str = Field(..., description='Currency code')
	name: str = Field(..., description='Display name, "-" when unknown')
	rate: Decimal = Field(..., description='Rate relative to the base currency')


class CurrencyRatesResponse(BaseModel):
	base: str = Field(..., description='Base currency every rate is quoted against')
	rates: list[CurrencyRateResponse] = Field(..., description='Rates sorted by code')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'base': 'USD',
				'rates': [
					{'code': 'EUR', 'name': 'Euro', 'rate': 0.9},
					{'code': 'JPY', 'name': 'Japanese Yen', 'rate': 149.5},
				],
			}
		}
	)


class ConversionResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	original_amount: Decimal = Field(..., description='Original amount requested')
	converted_amount: Decimal = Field(..., description='Converted amount, two decimal places')
	exchange_rate: Decimal = Field(..., description='Cross rate used for conversion')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'from_currency': 'USD',
				'to_currency': 'EUR',
				'original_amount': 100.00,
				'converted_amount': 90.00,
				'exchange_rate': 0.9,
			}
		}
	)


class RatesHistoryResponse(BaseModel):
	date: str = Field(..., description='Requested date, YYYY-MM-DD')
	base: str | None = Field(None, description='Base currency reported by the API')
	timestamp: int | None = Field(None, description='Unix timestamp of the snapshot')
	rates: dict[str, Decimal] = Field(default_factory=dict, description='Rates by code')
