from typing import Any, Dict, Optional

import attrs

from src.service.partier.domain.value_object.price_breakdown import PriceBreakdown


DEFAULT_PAYMENT_METHOD = 'Automatic Payment'

PAYMENT_METHOD_NAMES = {
    'applepay': 'Apple Pay',
    'creditcard': 'Credit Card',
    'paypal': 'PayPal',
}


def payment_method_name(method: Optional[str]) -> str:
    if not method:
        return DEFAULT_PAYMENT_METHOD
    return PAYMENT_METHOD_NAMES.get(method, method)


@attrs.frozen
class PaymentDetails:
    """Payment metadata stored alongside the ticket (opaque to the ticket itself)."""

    method: str
    price: PriceBreakdown
    status: str = 'approved'
    transaction_id: Optional[str] = None
    last4: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        details: Dict[str, Any] = {
            'method': self.method,
            'subtotal': f'{self.price.subtotal:.2f}',
            'serviceFee': f'{self.price.service_fee:.2f}',
            'tax': f'{self.price.tax:.2f}',
            'total': f'{self.price.total:.2f}',
            'status': self.status,
        }
        if self.transaction_id:
            details['transactionId'] = self.transaction_id
        if self.last4:
            details['last4'] = self.last4
        return details
