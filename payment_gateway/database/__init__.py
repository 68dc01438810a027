# Database modules

from .payments import payment_db, PaymentDatabase

__all__ = [
    "payment_db",
    "PaymentDatabase",
]
