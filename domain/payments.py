import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import structlog

from .exceptions import PaymentFailedError
from .random_source import RandomSource

logger = structlog.get_logger(__name__)

PAYMENT_LIMIT = 10000.0
CARD_NUMBER_LENGTH = 16
EXPIRED_CARD_DATE = "01/20"
NETWORK_ERROR_RATE = 0.1


class PaymentError(Enum):
    """Closed set of reasons a payment can be declined."""
    INSUFFICIENT_FUNDS = "Insufficient funds to complete the transaction."
    INVALID_CARD = "The card information is invalid."
    CARD_EXPIRED = "The card has expired."
    NETWORK_ERROR = "Network error occurred during payment processing."
    PAYMENT_LIMIT_EXCEEDED = "The payment amount exceeds the allowed limit."
    CASH_REGISTER_EMPTY = "Cash register is empty and cannot provide change."

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class PaymentResult:
    """Outcome of a single payment attempt."""
    processor: str
    amount: float
    error: Optional[PaymentError] = None
    remaining: Optional[float] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        if self.error is not None:
            return self.error.message
        return f"{self.processor} payment of ${self.amount:.2f} processed successfully."

    def raise_for_error(self):
        """Raise PaymentFailedError if the payment was declined."""
        if self.error is not None:
            raise PaymentFailedError(self.error)


class PaymentProcessor(ABC):
    """Abstract payment method."""

    name: str = ""

    @abstractmethod
    def process_payment(self, amount: float) -> PaymentResult:
        """Validate and execute a payment of the given amount."""
        pass

    def _declined(self, amount: float, error: PaymentError) -> PaymentResult:
        logger.warning("payment_declined", processor=self.name, amount=amount, error=error.name)
        return PaymentResult(processor=self.name, amount=amount, error=error)


class CreditCardProcessor(PaymentProcessor):
    """
    Simulated card payments.

    Checks run in a fixed order and the first failure wins. The balance is
    only compared against, never charged.
    """

    name = "Credit Card"

    def __init__(
        self,
        card_number: str,
        expiry_date: str,
        cvv: str,
        balance: float,
        random_source: Optional[RandomSource] = None,
    ):
        self.card_number = card_number
        self.expiry_date = expiry_date
        self.cvv = cvv
        self.balance = balance
        self.random_source = random_source or random.Random()

    def process_payment(self, amount: float) -> PaymentResult:
        if amount <= 0:
            return self._declined(amount, PaymentError.INVALID_CARD)
        if amount > PAYMENT_LIMIT:
            return self._declined(amount, PaymentError.PAYMENT_LIMIT_EXCEEDED)
        if len(self.card_number) != CARD_NUMBER_LENGTH:
            return self._declined(amount, PaymentError.INVALID_CARD)
        if self.expiry_date == EXPIRED_CARD_DATE:
            return self._declined(amount, PaymentError.CARD_EXPIRED)
        if amount > self.balance:
            return self._declined(amount, PaymentError.INSUFFICIENT_FUNDS)
        if self.random_source.random() < NETWORK_ERROR_RATE:
            return self._declined(amount, PaymentError.NETWORK_ERROR)

        logger.info("payment_processed", processor=self.name, amount=amount)
        return PaymentResult(processor=self.name, amount=amount)


class CashProcessor(PaymentProcessor):
    """Cash payments drawn against the money in the register."""

    name = "Cash"

    def __init__(self, cash_in_register: float):
        self.cash_in_register = cash_in_register

    def process_payment(self, amount: float) -> PaymentResult:
        if amount <= 0:
            # Same kind as the card processor uses for a bad amount.
            return self._declined(amount, PaymentError.INVALID_CARD)
        if self.cash_in_register < amount:
            return self._declined(amount, PaymentError.CASH_REGISTER_EMPTY)

        self.cash_in_register -= amount
        logger.info(
            "payment_processed",
            processor=self.name,
            amount=amount,
            remaining=self.cash_in_register,
        )
        return PaymentResult(processor=self.name, amount=amount, remaining=self.cash_in_register)
