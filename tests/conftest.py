"""
Pytest configuration and fixtures.
"""
from datetime import datetime
from typing import Any, Iterator

import pytest
from fastapi.testclient import TestClient

from payment_gateway.database.payments import PaymentDatabase
from payment_gateway.main import app
from payment_gateway.models.bank import BankRequest, BankResult
from payment_gateway.routes.payments import get_payment_validator, get_payments_service
from payment_gateway.services.payments_service import PaymentsService
from payment_gateway.validation.payment_validator import PaymentValidator

FIXED_NOW = datetime(2025, 1, 15, 12, 30)


class StubAcquiringBank:
    """Acquiring bank double that records requests and returns a canned result."""

    def __init__(self, result: BankResult):
        self.result = result
        self.requests: list[BankRequest] = []

    async def process_payment(self, request: BankRequest) -> BankResult:
        self.requests.append(request)
        return self.result


@pytest.fixture
def validator() -> PaymentValidator:
    """Validator pinned to 15 January 2025."""
    return PaymentValidator(clock=lambda: FIXED_NOW)


@pytest.fixture
def payment_data() -> dict[str, Any]:
    """Valid payment request body."""
    return {
        "cardNumber": "2222405343248877",
        "expiryMonth": 4,
        "expiryYear": 2030,
        "currency": "GBP",
        "amount": 100,
        "cvv": 123,
    }


@pytest.fixture
def database() -> PaymentDatabase:
    """Fresh store per test."""
    return PaymentDatabase()


@pytest.fixture
def bank() -> StubAcquiringBank:
    """Bank that authorizes everything unless a test changes `result`."""
    return StubAcquiringBank(
        BankResult(success=True, authorized=True, authorization_code="0bb07405-6d44-4b50-a14f-7ae0beff13ad")
    )


@pytest.fixture
def client(
    validator: PaymentValidator,
    database: PaymentDatabase,
    bank: StubAcquiringBank,
) -> Iterator[TestClient]:
    """HTTP client with the bank, store and clock replaced."""
    app.dependency_overrides[get_payment_validator] = lambda: validator
    app.dependency_overrides[get_payments_service] = lambda: PaymentsService(
        payment_db=database,
        acquiring_bank=bank,
    )
    yield TestClient(app)
    app.dependency_overrides.clear()
