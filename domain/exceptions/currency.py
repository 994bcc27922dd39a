class CurrencyException(Exception):
	pass


class InvalidCurrencyError(CurrencyException):
	pass


class InvalidAmountError(CurrencyException):
	pass


class NetworkError(CurrencyException):
	"""Failure talking to the exchange rate API.

	Every subclass has a fixed ``status_code`` and a default message used when
	the server did not send a description.
	"""

	status_code: int = 520
	default_message: str = '[Unknown] Network error cannot be define.'

	def __init__(self, description: str | None = None):
		self.description = description
		super().__init__(self.message)

	@property
	def message(self) -> str:
		return self.description or self.default_message

	@classmethod
	def from_status(cls, status_code: int, description: str | None = None) -> 'NetworkError':
		error_class = _STATUS_ERRORS.get(status_code)
		if error_class is None:
			return UnknownNetworkError(description)
		return error_class(description)


class BadRequestError(NetworkError):
	status_code = 400
	default_message = '[Bad Request] Please check your url request.'


class UnauthorizedError(NetworkError):
	status_code = 401
	default_message = '[Unauthorized] Please check your credentials.'


class ForbiddenError(NetworkError):
	status_code = 403
	default_message = '[No Permission] Please check your permission.'


class NotFoundError(NetworkError):
	status_code = 404
	default_message = '[Not Found] The url you looking for not found.'


class ServerError(NetworkError):
	status_code = 500
	default_message = '[Server Error] Server is currently not available.'


class UnderMaintenanceError(NetworkError):
	status_code = 503
	default_message = '[Under Maintenance] Please get back later.'


class UnknownNetworkError(NetworkError):
	pass


class DecodingError(NetworkError):
	default_message = '[Decoding Error] Response body does not match the expected shape.'


class ConstructionError(NetworkError):
	default_message = '[Bad Request] Failed while constructing url.'


_STATUS_ERRORS: dict[int, type[NetworkError]] = {
	400: BadRequestError,
	401: UnauthorizedError,
	403: ForbiddenError,
	404: NotFoundError,
	500: ServerError,
	503: UnderMaintenanceError,
}
