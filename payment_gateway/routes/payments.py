"""Payment API routes"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from ..core.config import settings
from ..database.payments import payment_db
from ..models.payment import (
    PaymentStatus,
    PostPaymentRequest,
    PostPaymentResponse,
    ProblemDetails,
)
from ..services.bank_client import AcquiringBankClient
from ..services.payments_service import AcquiringBank, PaymentsService
from ..validation.payment_validator import PaymentValidator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/payments", tags=["Payments"])

# Shared instances, created on first use
acquiring_bank: Optional[AcquiringBankClient] = None
payment_validator = PaymentValidator()


def get_payment_validator() -> PaymentValidator:
    """Get payment validator"""
    return payment_validator


def get_acquiring_bank() -> AcquiringBank:
    """Get or create acquiring bank client"""
    global acquiring_bank
    if acquiring_bank is None:
        acquiring_bank = AcquiringBankClient(
            base_url=settings.bank_base_url,
            timeout=settings.bank_timeout_seconds,
        )
    return acquiring_bank


async def close_acquiring_bank() -> None:
    """Close the shared bank client so the next startup builds a fresh one"""
    global acquiring_bank
    if acquiring_bank is not None:
        await acquiring_bank.close()
        acquiring_bank = None


def get_payments_service(
    bank: AcquiringBank = Depends(get_acquiring_bank),
) -> PaymentsService:
    """Build payments service over the shared store"""
    return PaymentsService(payment_db=payment_db, acquiring_bank=bank)


@router.post(
    "",
    response_model=PostPaymentResponse,
    status_code=201,
    responses={
        422: {"description": "Validation failed, keyed by field name"},
        502: {"description": "Acquiring bank unavailable", "model": ProblemDetails},
    },
)
async def create_payment(
    request: PostPaymentRequest,
    validator: PaymentValidator = Depends(get_payment_validator),
    service: PaymentsService = Depends(get_payments_service),
):
    """
    Submit a card payment.

    Authorized and declined payments are stored and returned with 201.
    If the bank cannot be reached the payment is rejected with 502 and
    is not stored.
    """
    errors = validator.validate(request)
    if errors:
        logger.info(f"Payment request failed validation: {sorted(errors)}")
        return JSONResponse(status_code=422, content=errors)

    payment = await service.create_payment(request)

    if payment.status == PaymentStatus.REJECTED:
        problem = ProblemDetails(
            title="Bad Gateway",
            status=502,
            detail="The acquiring bank could not process the payment.",
        )
        return JSONResponse(status_code=502, content=problem.model_dump())

    return payment


@router.get("/{payment_id}", response_model=PostPaymentResponse)
async def get_payment(
    payment_id: str,
    service: PaymentsService = Depends(get_payments_service),
):
    """Get payment details"""
    try:
        payment_uuid = UUID(payment_id)
    except ValueError:
        raise HTTPException(status_code=404, detail="Payment not found") from None

    payment = await service.get_payment(payment_uuid)
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    return payment
