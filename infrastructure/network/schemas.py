from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class ResponseModel(BaseModel):
	model_config = ConfigDict(extra='ignore')


class RatesResponse(ResponseModel):
	"""Body of ``/latest.json`` and ``/historical/{date}.json``."""

	disclaimer: str | None = None
	license: str | None = None
	timestamp: int | None = None
	base: str | None = None
	rates: dict[str, Decimal] | None = None

	@field_validator('rates', mode='before')
	@classmethod
	def rates_as_decimal(cls, v: Any):
		# Go through str() so 0.9 stays Decimal('0.9') instead of the binary float expansion
		if isinstance(v, dict):
			return {
				code: Decimal(str(value)) if isinstance(value, float) else value
				for code, value in v.items()
			}
		return v


CurrencyDirectory = dict[str, str]


class UsagePlanFeatures(ResponseModel):
	base: bool | None = None
	symbols: bool | None = None
	experimental: bool | None = None
	convert: bool | None = None
	ohlc: bool | None = None
	spot: bool | None = None


class UsagePlan(ResponseModel):
	name: str | None = None
	quota: str | None = None
	update_frequency: str | None = None
	features: UsagePlanFeatures | None = None


class UsageDetail(ResponseModel):
	requests: int | None = None
	requests_quota: int | None = None
	requests_remaining: int | None = None
	days_elapsed: int | None = None
	days_remaining: int | None = None
	daily_average: int | None = None


class UsageData(ResponseModel):
	app_id: str | None = None
	status: str | None = None
	plan: UsagePlan | None = None
	usage: UsageDetail | None = None


class UsageResponse(ResponseModel):
	"""Body of ``/usage.json``."""

	status: int | None = None
	data: UsageData | None = None


class GeneralErrorBody(ResponseModel):
	"""Error payload sent by the API alongside non-2xx statuses."""

	error: bool | None = None
	status: int | None = None
	message: str | None = None
	description: str | None = None
