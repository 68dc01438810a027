"""
Payment Request Validation

Checks a submitted payment against the card, expiry, currency, amount
and CVV rules. Every rule is evaluated so callers get the full list of
problems in one response.
"""

from collections import defaultdict
from typing import Optional

from ..core.clock import Clock, system_clock
from ..models.payment import PostPaymentRequest

ALLOWED_CURRENCIES = ("GBP", "USD", "EUR")

CARD_NUMBER_MIN_LENGTH = 14
CARD_NUMBER_MAX_LENGTH = 19
CVV_MIN = 100
CVV_MAX = 9999

CARD_NUMBER_REQUIRED = "Card number is required."
CARD_NUMBER_LENGTH = "Card number must be between 14-19 characters long."
CARD_NUMBER_NUMERIC = "Card number must only contain numeric characters."
EXPIRY_MONTH_REQUIRED = "Expiry month is required."
EXPIRY_MONTH_RANGE = "Expiry month must be between 1-12."
EXPIRY_YEAR_REQUIRED = "Expiry year is required."
EXPIRY_IN_PAST = "Card expiry must be in the future."
EXPIRY_YEAR_INVALID = "Expiry year must be a whole number."
CURRENCY_REQUIRED = "Currency is required."
CURRENCY_NOT_ALLOWED = "Currency must be GBP, USD or EUR."
AMOUNT_REQUIRED = "Amount is required."
AMOUNT_RANGE = "Amount must be an integer greater than 0."
CVV_REQUIRED = "CVV is required."
CVV_RANGE = "CVV must be 3-4 characters long."

# Message reported when a field arrives with the wrong JSON type
TYPE_ERROR_MESSAGES = {
    "cardNumber": CARD_NUMBER_NUMERIC,
    "expiryMonth": EXPIRY_MONTH_RANGE,
    "expiryYear": EXPIRY_YEAR_INVALID,
    "currency": CURRENCY_NOT_ALLOWED,
    "amount": AMOUNT_RANGE,
    "cvv": CVV_RANGE,
}

ValidationErrors = dict[str, list[str]]


class PaymentValidator:
    """Validates payment requests against a pluggable clock"""

    def __init__(self, clock: Clock = system_clock):
        self._clock = clock

    def validate(self, request: PostPaymentRequest) -> ValidationErrors:
        """
        Validate a payment request.

        Returns:
            Mapping of JSON field name to violation messages; empty when valid
        """
        errors: defaultdict[str, list[str]] = defaultdict(list)

        self._check_card_number(request.card_number, errors["cardNumber"])
        self._check_expiry_month(request.expiry_month, errors["expiryMonth"])
        if request.expiry_year is None:
            errors["expiryYear"].append(EXPIRY_YEAR_REQUIRED)
        self._check_expiry_date(request.expiry_month, request.expiry_year, errors["expiryYear"])
        self._check_currency(request.currency, errors["currency"])
        self._check_amount(request.amount, errors["amount"])
        self._check_cvv(request.cvv, errors["cvv"])

        return {field: messages for field, messages in errors.items() if messages}

    @staticmethod
    def _check_card_number(card_number: Optional[str], errors: list[str]) -> None:
        if not card_number or not card_number.strip():
            errors.append(CARD_NUMBER_REQUIRED)
            return

        if not CARD_NUMBER_MIN_LENGTH <= len(card_number) <= CARD_NUMBER_MAX_LENGTH:
            errors.append(CARD_NUMBER_LENGTH)
        # str.isdigit() also accepts superscripts and other unicode digits
        if not (card_number.isascii() and card_number.isdigit()):
            errors.append(CARD_NUMBER_NUMERIC)

    @staticmethod
    def _check_expiry_month(expiry_month: Optional[int], errors: list[str]) -> None:
        if expiry_month is None:
            errors.append(EXPIRY_MONTH_REQUIRED)
        elif not 1 <= expiry_month <= 12:
            errors.append(EXPIRY_MONTH_RANGE)

    def _check_expiry_date(
        self,
        expiry_month: Optional[int],
        expiry_year: Optional[int],
        errors: list[str],
    ) -> None:
        """A card expiring in the current month counts as expired."""
        if expiry_month is None or expiry_year is None or not 1 <= expiry_month <= 12:
            return

        now = self._clock()
        if (expiry_year, expiry_month) <= (now.year, now.month):
            errors.append(EXPIRY_IN_PAST)

    @staticmethod
    def _check_currency(currency: Optional[str], errors: list[str]) -> None:
        if not currency or not currency.strip():
            errors.append(CURRENCY_REQUIRED)
        elif currency not in ALLOWED_CURRENCIES:
            errors.append(CURRENCY_NOT_ALLOWED)

    @staticmethod
    def _check_amount(amount: Optional[int], errors: list[str]) -> None:
        if amount is None:
            errors.append(AMOUNT_REQUIRED)
        elif amount < 1:
            errors.append(AMOUNT_RANGE)

    @staticmethod
    def _check_cvv(cvv: Optional[int], errors: list[str]) -> None:
        if cvv is None:
            errors.append(CVV_REQUIRED)
        elif not CVV_MIN <= cvv <= CVV_MAX:
            errors.append(CVV_RANGE)
