from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

import attrs


@attrs.frozen
class PaymentResult:
    success: bool
    transaction_id: Optional[str] = None
    last4: Optional[str] = None
    error: Optional[str] = None


class IPaymentProcessor(ABC):
    @abstractmethod
    async def charge(self, *, amount: Decimal, method: Optional[str]) -> PaymentResult:
        pass
