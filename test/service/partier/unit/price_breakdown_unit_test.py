"""
Unit tests for ticket pricing

subtotal = unit price x quantity, plus a 10% service fee and 7% tax,
each rounded half-up to cents before they are summed.
"""

from decimal import Decimal

import pytest

from src.platform.exception.exceptions import DomainError
from src.service.partier.domain.value_object.payment_details import (
    PaymentDetails,
    payment_method_name,
)
from src.service.partier.domain.value_object.price_breakdown import (
    PriceBreakdown,
    round_money,
)


@pytest.mark.unit
class TestPriceBreakdown:
    def test_single_hundred_dollar_ticket(self):
        # Act
        price = PriceBreakdown.for_purchase(unit_price=Decimal('100.00'), quantity=1)

        # Assert
        assert price.subtotal == Decimal('100.00')
        assert price.service_fee == Decimal('10.00')
        assert price.tax == Decimal('7.00')
        assert price.total == Decimal('117.00')

    def test_quantity_multiplies_subtotal(self):
        price = PriceBreakdown.for_purchase(unit_price=Decimal('25.00'), quantity=2)

        assert price.subtotal == Decimal('50.00')
        assert price.total == Decimal('58.50')

    def test_fee_and_tax_round_half_up(self):
        """
        Given a subtotal of 0.05
        When fee (0.005) and tax (0.0035) are computed
        Then the fee rounds up to 0.01 and the tax down to 0.00
        """
        price = PriceBreakdown.from_subtotal(Decimal('0.05'))

        assert price.service_fee == Decimal('0.01')
        assert price.tax == Decimal('0.00')
        assert price.total == Decimal('0.06')

    def test_free_ticket_costs_nothing(self):
        price = PriceBreakdown.for_purchase(unit_price=Decimal('0'), quantity=3)

        assert price.total == Decimal('0.00')

    @pytest.mark.parametrize(
        'amount,expected',
        [
            ('1.005', Decimal('1.01')),
            ('2.675', Decimal('2.68')),
            ('3.004', Decimal('3.00')),
            (7, Decimal('7.00')),
        ],
    )
    def test_round_money(self, amount, expected):
        assert round_money(amount) == expected

    @pytest.mark.parametrize('amount', [Decimal('1e30'), 'not-a-number'])
    def test_round_money_rejects_unrepresentable_amount(self, amount):
        with pytest.raises(DomainError, match='Invalid amount'):
            round_money(amount)


@pytest.mark.unit
class TestPaymentDetails:
    @pytest.mark.parametrize(
        'method,expected',
        [
            ('creditcard', 'Credit Card'),
            ('paypal', 'PayPal'),
            ('applepay', 'Apple Pay'),
            (None, 'Automatic Payment'),
            ('', 'Automatic Payment'),
            ('crypto', 'crypto'),
        ],
    )
    def test_payment_method_display_name(self, method, expected):
        assert payment_method_name(method) == expected

    def test_to_dict_carries_breakdown_as_strings(self):
        # Arrange
        details = PaymentDetails(
            method='Credit Card',
            price=PriceBreakdown.from_subtotal(Decimal('100')),
            transaction_id='TXNabc123XYZ789',
            last4='4242',
        )

        # Act
        result = details.to_dict()

        # Assert
        assert result == {
            'method': 'Credit Card',
            'subtotal': '100.00',
            'serviceFee': '10.00',
            'tax': '7.00',
            'total': '117.00',
            'status': 'approved',
            'transactionId': 'TXNabc123XYZ789',
            'last4': '4242',
        }

    def test_to_dict_omits_missing_card_data(self):
        details = PaymentDetails(
            method='PayPal', price=PriceBreakdown.from_subtotal(Decimal('10'))
        )

        result = details.to_dict()

        assert 'last4' not in result
        assert 'transactionId' not in result
