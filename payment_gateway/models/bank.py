"""Acquiring bank wire models"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, StrictBool, StrictStr

from .payment import PostPaymentRequest


@dataclass(frozen=True)
class BankRequest:
    """Payment as sent to the acquiring bank"""
    card_number: str
    expiry_date: str
    currency: str
    amount: int
    cvv: str

    @classmethod
    def from_payment_request(cls, request: PostPaymentRequest) -> "BankRequest":
        """Build the bank payload from a validated payment request"""
        return cls(
            card_number=request.card_number,
            expiry_date=f"{request.expiry_month:02d}/{request.expiry_year}",
            currency=request.currency,
            amount=request.amount,
            cvv=str(request.cvv),
        )

    def to_payload(self) -> dict:
        """Convert to the JSON body expected by the bank"""
        return {
            "card_number": self.card_number,
            "expiry_date": self.expiry_date,
            "currency": self.currency,
            "amount": self.amount,
            "cvv": self.cvv,
        }


@dataclass(frozen=True)
class BankResult:
    """Outcome of a bank call. `authorized` only means something when `success` is set."""
    success: bool
    authorized: bool = False
    authorization_code: Optional[str] = None

    @classmethod
    def failure(cls) -> "BankResult":
        return cls(success=False)


class AcquiringBankPaymentResponse(BaseModel):
    """Body returned by the bank for a 2xx response"""
    authorized: StrictBool = False
    authorization_code: Optional[StrictStr] = None
