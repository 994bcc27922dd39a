import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.currency import (
	InvalidAmountError,
	InvalidCurrencyError,
	NetworkError,
	UnderMaintenanceError,
	UnknownNetworkError,
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(InvalidCurrencyError)
	async def invalid_currency_handler(request: Request, exc: InvalidCurrencyError):
		return JSONResponse(status_code=400, content={'detail': str(exc)})

	@app.exception_handler(InvalidAmountError)
	async def invalid_amount_handler(request: Request, exc: InvalidAmountError):
		return JSONResponse(status_code=400, content={'detail': str(exc)})

	@app.exception_handler(NetworkError)
	async def network_error_handler(request: Request, exc: NetworkError):
		logger.error(f'Exchange rate API error ({exc.status_code}): {exc.message}')
		unavailable = isinstance(exc, UnderMaintenanceError | UnknownNetworkError)
		return JSONResponse(
			status_code=503 if unavailable else 502,
			content={'detail': exc.message, 'upstream_status': exc.status_code},
		)
