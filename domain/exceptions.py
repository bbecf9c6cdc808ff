"""Domain exceptions."""

from typing import Optional


class DomainException(Exception):
    """Base exception for domain errors."""
    pass


class PaymentFailedError(DomainException):
    """Raised when a declined payment is turned into an exception."""

    def __init__(self, error, message: Optional[str] = None):
        self.error = error
        super().__init__(message or error.message)
