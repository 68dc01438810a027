"""
Acquiring Bank Client

HTTP client for the acquiring bank's payment endpoint.
Every failure mode is reported as an unsuccessful BankResult.
"""

import asyncio
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from ..models.bank import AcquiringBankPaymentResponse, BankRequest, BankResult

logger = logging.getLogger(__name__)

PAYMENTS_PATH = "/payments"


class AcquiringBankClient:
    """
    Client for the acquiring bank.

    Makes a single attempt per payment. Transport errors, timeouts,
    non-2xx statuses and malformed bodies all collapse into
    BankResult(success=False).
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize bank client.

        Args:
            base_url: Base URL of the bank API
            timeout: Limit in seconds for the whole exchange with the bank
            http_client: Pre-configured client, mainly for tests
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http_client = http_client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
        )

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    async def process_payment(self, request: BankRequest) -> BankResult:
        """Send a payment to the bank and translate the outcome"""
        try:
            # httpx timeouts apply per read; wait_for bounds the whole call
            response = await asyncio.wait_for(
                self._http_client.post(
                    PAYMENTS_PATH,
                    json=request.to_payload(),
                    headers={"Accept": "application/json"},
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(f"Bank did not answer within {self.timeout}s")
            return BankResult.failure()
        except httpx.HTTPError as e:
            logger.warning(f"Bank request failed: {type(e).__name__}: {e}")
            return BankResult.failure()

        if not response.is_success:
            logger.warning(f"Bank returned status {response.status_code}")
            return BankResult.failure()

        bank_response = self._parse_response(response)
        if bank_response is None:
            return BankResult.failure()

        return BankResult(
            success=True,
            authorized=bank_response.authorized,
            authorization_code=bank_response.authorization_code,
        )

    @staticmethod
    def _parse_response(response: httpx.Response) -> Optional[AcquiringBankPaymentResponse]:
        """Parse a 2xx body; keys are matched case-insensitively"""
        try:
            body = response.json()
        except ValueError:
            logger.error(f"Bank returned a non-JSON body: {response.text[:200]!r}")
            return None

        if not isinstance(body, dict):
            logger.error(f"Bank returned unexpected JSON: {type(body).__name__}")
            return None

        try:
            return AcquiringBankPaymentResponse.model_validate(
                {str(key).lower(): value for key, value in body.items()}
            )
        except ValidationError as e:
            logger.error(f"Bank response did not match contract: {e.error_count()} error(s)")
            return None
