# Services

from .bank_client import AcquiringBankClient
from .payments_service import AcquiringBank, PaymentsService, derive_status

__all__ = ["AcquiringBankClient", "AcquiringBank", "PaymentsService", "derive_status"]
