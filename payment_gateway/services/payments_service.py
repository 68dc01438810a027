"""
Payments Service

Runs a validated payment through the acquiring bank, derives its
status, and keeps the masked record.
"""

import logging
import uuid
from typing import Optional, Protocol
from uuid import UUID

from ..database.payments import PaymentDatabase
from ..models.bank import BankRequest, BankResult
from ..models.payment import PaymentStatus, PostPaymentRequest, PostPaymentResponse

logger = logging.getLogger(__name__)


class AcquiringBank(Protocol):
    async def process_payment(self, request: BankRequest) -> BankResult:
        ...


def derive_status(result: BankResult) -> PaymentStatus:
    """Map a bank outcome to a payment status"""
    if not result.success:
        return PaymentStatus.REJECTED
    if result.authorized:
        return PaymentStatus.AUTHORIZED
    return PaymentStatus.DECLINED


class PaymentsService:
    """Coordinates the bank call and payment storage"""

    def __init__(self, payment_db: PaymentDatabase, acquiring_bank: AcquiringBank):
        self.payment_db = payment_db
        self.acquiring_bank = acquiring_bank

    async def create_payment(self, request: PostPaymentRequest) -> PostPaymentResponse:
        """
        Process a validated payment request.

        Rejected payments are returned to the caller but never stored,
        so they cannot be retrieved later.
        """
        card_number_last_four = request.card_number[-4:]

        bank_result = await self.acquiring_bank.process_payment(
            BankRequest.from_payment_request(request)
        )
        status = derive_status(bank_result)

        payment = PostPaymentResponse(
            id=uuid.uuid4(),
            expiry_month=request.expiry_month,
            expiry_year=request.expiry_year,
            amount=request.amount,
            card_number_last_four=card_number_last_four,
            currency=request.currency,
            status=status,
        )

        logger.info(
            f"Payment {payment.id} {status.value}: {payment.amount} {payment.currency} "
            f"card ending {card_number_last_four}"
        )

        if status == PaymentStatus.REJECTED:
            return payment

        self.payment_db.add(payment)
        return payment

    async def get_payment(self, payment_id: UUID) -> Optional[PostPaymentResponse]:
        """Get a stored payment by ID"""
        return self.payment_db.get(payment_id)
