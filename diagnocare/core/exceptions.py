"""Domain errors raised below the HTTP layer.

Routes translate these into ``HTTPException`` responses.
"""


class DiagnoCareError(Exception):
    """Base class for every error raised by the service layer."""


class InvalidTokenError(DiagnoCareError):
    """Bearer token failed signature, format or expiry checks."""


class NotFoundError(DiagnoCareError):
    """The document targeted by an update or transaction does not exist."""


class SlotsUnavailableError(DiagnoCareError):
    """A diagnostic test has no free slot left to book."""


class PaymentProcessorError(DiagnoCareError):
    """The payment processor could not create a payment intent."""
