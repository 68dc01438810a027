"""Payment storage for the gateway"""

import threading
from typing import Optional
from uuid import UUID

from ..models.payment import PostPaymentResponse


class PaymentDatabase:
    """In-memory payment storage"""

    def __init__(self):
        self.payments: dict[UUID, PostPaymentResponse] = {}
        self._write_lock = threading.Lock()

    def add(self, payment: PostPaymentResponse) -> None:
        """Store a processed payment; ids are server-generated and unique"""
        with self._write_lock:
            self.payments[payment.id] = payment

    def get(self, payment_id: UUID) -> Optional[PostPaymentResponse]:
        """Get a payment by ID"""
        # Single dict lookups are atomic; only writers take the lock
        return self.payments.get(payment_id)

    def __len__(self) -> int:
        return len(self.payments)

    def __contains__(self, payment_id: object) -> bool:
        return payment_id in self.payments


# Singleton instance
payment_db = PaymentDatabase()
