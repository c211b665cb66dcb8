"""
Simulated payment gateway

Approves every charge unless `failure_rate` > 0, in which case a random
draw below the rate declines with one of the canned issuer messages.
"""

import random
import string
import time
from decimal import Decimal
from typing import Optional

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.partier.app.interface.i_payment_processor import IPaymentProcessor, PaymentResult


PAYMENT_ERRORS = (
    'Payment declined by issuer',
    'Insufficient funds',
    'Payment method expired',
    'Network error during processing',
)

CARD_LAST4 = {'creditcard': '4242'}

_BASE36_DIGITS = string.digits + string.ascii_lowercase


def to_base36(number: int) -> str:
    if number == 0:
        return '0'
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return ''.join(reversed(digits))


class MockPaymentProcessor(IPaymentProcessor):
    def __init__(
        self,
        *,
        failure_rate: Optional[float] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.failure_rate = settings.PAYMENT_FAILURE_RATE if failure_rate is None else failure_rate
        self.rng = rng or random.Random()

    def generate_transaction_id(self) -> str:
        suffix = ''.join(self.rng.choices(string.ascii_uppercase + string.digits, k=6))
        return f'TXN{to_base36(int(time.time() * 1000))}{suffix}'

    @Logger.io
    async def charge(self, *, amount: Decimal, method: Optional[str]) -> PaymentResult:
        if self.failure_rate > 0 and self.rng.random() < self.failure_rate:
            error = self.rng.choice(PAYMENT_ERRORS)
            Logger.base.warning(f'💳 [PAYMENT] Declined {amount} via {method}: {error}')
            return PaymentResult(success=False, error=error)

        transaction_id = self.generate_transaction_id()
        Logger.base.info(f'💳 [PAYMENT] Approved {amount} via {method} ({transaction_id})')
        return PaymentResult(
            success=True,
            transaction_id=transaction_id,
            last4=CARD_LAST4.get(method or ''),
        )
