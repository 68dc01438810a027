# Request validation

from .payment_validator import (
    PaymentValidator,
    ValidationErrors,
    ALLOWED_CURRENCIES,
    TYPE_ERROR_MESSAGES,
)

__all__ = [
    "PaymentValidator",
    "ValidationErrors",
    "ALLOWED_CURRENCIES",
    "TYPE_ERROR_MESSAGES",
]
