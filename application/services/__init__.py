from .conversion_service import ConversionService
from .rate_service import ExchangeRateService, merge_rates

__all__ = ['ConversionService', 'ExchangeRateService', 'merge_rates']
