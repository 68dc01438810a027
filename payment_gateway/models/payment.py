"""Payment models for the gateway API"""

from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, StrictInt
from pydantic.alias_generators import to_camel


class PaymentStatus(str, Enum):
    AUTHORIZED = "Authorized"
    DECLINED = "Declined"
    REJECTED = "Rejected"


class PostPaymentRequest(BaseModel):
    """
    Payment submitted by a merchant.

    Every field is optional here so that missing values reach the
    validator and are reported alongside the other violations. Numbers
    must arrive as JSON integers; "123" and true are type errors.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    card_number: Optional[str] = None
    expiry_month: Optional[StrictInt] = None
    expiry_year: Optional[StrictInt] = None
    currency: Optional[str] = None
    amount: Optional[StrictInt] = None
    cvv: Optional[StrictInt] = None


class PostPaymentResponse(BaseModel):
    """Processed payment as stored and returned to callers"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: UUID
    expiry_month: int
    expiry_year: int
    amount: int
    card_number_last_four: str
    currency: str
    status: PaymentStatus


class ProblemDetails(BaseModel):
    """Error body for failures that are not caused by the caller's input"""
    type: str = "about:blank"
    title: str
    status: int
    detail: Optional[str] = None
