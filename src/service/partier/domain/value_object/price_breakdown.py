from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

import attrs

from src.platform.exception.exceptions import DomainError


SERVICE_FEE_RATE = Decimal('0.10')
TAX_RATE = Decimal('0.07')
CENT = Decimal('0.01')

Amount = Union[Decimal, int, str]


def round_money(amount: Amount) -> Decimal:
    try:
        return Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise DomainError(f'Invalid amount: {amount}') from e


def calculate_service_fee(subtotal: Amount) -> Decimal:
    return round_money(Decimal(subtotal) * SERVICE_FEE_RATE)


def calculate_tax(subtotal: Amount) -> Decimal:
    return round_money(Decimal(subtotal) * TAX_RATE)


def calculate_total(subtotal: Amount, service_fee: Amount, tax: Amount) -> Decimal:
    # fee and tax arrive already rounded; the sum is rounded once more
    return round_money(Decimal(subtotal) + Decimal(service_fee) + Decimal(tax))


@attrs.frozen
class PriceBreakdown:
    subtotal: Decimal
    service_fee: Decimal
    tax: Decimal
    total: Decimal

    @classmethod
    def from_subtotal(cls, subtotal: Amount) -> 'PriceBreakdown':
        subtotal = round_money(subtotal)
        service_fee = calculate_service_fee(subtotal)
        tax = calculate_tax(subtotal)
        return cls(
            subtotal=subtotal,
            service_fee=service_fee,
            tax=tax,
            total=calculate_total(subtotal, service_fee, tax),
        )

    @classmethod
    def for_purchase(cls, *, unit_price: Amount, quantity: int) -> 'PriceBreakdown':
        return cls.from_subtotal(Decimal(unit_price) * quantity)
