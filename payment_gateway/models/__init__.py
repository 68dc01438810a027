# Payment Gateway Models

from .payment import PaymentStatus, PostPaymentRequest, PostPaymentResponse, ProblemDetails
from .bank import BankRequest, BankResult, AcquiringBankPaymentResponse

__all__ = [
    "PaymentStatus",
    "PostPaymentRequest",
    "PostPaymentResponse",
    "ProblemDetails",
    "BankRequest",
    "BankResult",
    "AcquiringBankPaymentResponse",
]
