from src.service.partier.domain.value_object.payment_details import PaymentDetails
from src.service.partier.domain.value_object.price_breakdown import PriceBreakdown
from src.service.partier.domain.value_object.reference_number import ReferenceNumber

__all__ = [
    'PaymentDetails',
    'PriceBreakdown',
    'ReferenceNumber',
]
