from decimal import ROUND_HALF_EVEN, Decimal

from application.services.rate_service import ExchangeRateService
from config.settings import ExchangeRateConfig
from domain.exceptions.currency import InvalidAmountError, InvalidCurrencyError
from domain.models.currency import Conversion, CurrencyRate

TWO_PLACES = Decimal('0.01')


class ConversionService:
	def __init__(self, rate_service: ExchangeRateService, config: ExchangeRateConfig):
		self.rate_service = rate_service
		self.config = config

	async def get_currency(self, code: str) -> CurrencyRate:
		return self._lookup(await self._rates_by_code(), code)

	async def default_target(self) -> CurrencyRate | None:
		rates = await self._rates_by_code()
		return rates.get(self.config.default_target_code)

	async def convert(self, amount: Decimal, from_currency: str, to_currency: str) -> Conversion:
		self.validate_amount(amount)

		rates = await self._rates_by_code()
		source = self._lookup(rates, from_currency)
		target = self._lookup(rates, to_currency)

		if source.rate == 0:
			raise InvalidCurrencyError(f'Currency {from_currency} has no usable rate')

		# Rates are quoted against the base currency, so hop through it
		converted_amount = (amount / source.rate * target.rate).quantize(TWO_PLACES, rounding=ROUND_HALF_EVEN)

		return Conversion(
			from_currency=from_currency,
			to_currency=to_currency,
			original_amount=amount,
			converted_amount=converted_amount,
			exchange_rate=target.rate / source.rate,
		)

	def validate_amount(self, amount: Decimal) -> None:
		if amount <= 0:
			raise InvalidAmountError('Amount must be greater than zero')

		integer_digits = len(str(int(amount)))
		if integer_digits > self.config.max_digit_limit:
			raise InvalidAmountError(
				f'Amount exceeds the maximum of {self.config.max_digit_limit} digits'
			)

	def _lookup(self, rates: dict[str, CurrencyRate], code: str) -> CurrencyRate:
		if code not in rates:
			raise InvalidCurrencyError(f'Currency {code} is not supported')
		return rates[code]

	async def _rates_by_code(self) -> dict[str, CurrencyRate]:
		rates = {rate.code: rate for rate in await self.rate_service.fetch_currency_rate()}
		base = self.config.base_currency_code
		rates.setdefault(base, CurrencyRate(code=base, name=base, rate=Decimal('1')))
		return rates
