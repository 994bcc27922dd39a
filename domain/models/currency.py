from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CurrencyRate:
	code: str
	name: str
	rate: Decimal  # Relative to the base currency


@dataclass(frozen=True)
class Conversion:
	from_currency: str
	to_currency: str
	original_amount: Decimal
	converted_amount: Decimal
	exchange_rate: Decimal
