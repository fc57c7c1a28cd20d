"""Tests for the pure settlement arithmetic."""

import pytest
from datetime import date
from decimal import Decimal

from apps.groups.models import ChitGroup
from apps.auctions.services import (
    calculate_settlement,
    validate_bid,
    max_allowed_bid,
    InvalidBidAmountError,
)


def _group(**overrides):
    fields = dict(
        group_name='Unsaved',
        total_people=10,
        total_amount=Decimal('100000.00'),
        tenure=10,
        start_date=date(2024, 8, 1),
        rate=Decimal('10000.00'),
        commission=Decimal('2.00'),
    )
    fields.update(overrides)
    # Never saved: settlement is pure arithmetic
    return ChitGroup(**fields)


class TestCalculateSettlement:

    def test_worked_example(self):
        settlement = calculate_settlement(_group(), Decimal('70000'))

        assert settlement.commission_amount == Decimal('2000.00')
        assert settlement.discount == Decimal('30000.00')
        assert settlement.net_discount == Decimal('28000.00')
        assert settlement.dividend_per_member == Decimal('2800.00')
        assert settlement.final_amount_to_be_paid == Decimal('7200.00')
        assert settlement.amount_paid_to_winner == Decimal('62800.00')

    @pytest.mark.parametrize('total,commission,rate,people,bid', [
        ('100000', '2', '10000', 10, '70000'),
        ('50000', '5', '2500', 20, '40000'),
        ('200000', '0', '10000', 20, '150000'),
        ('300000', '3.5', '15000', 20, '291000'),
    ])
    def test_identities_hold(self, total, commission, rate, people, bid):
        group = _group(
            total_amount=Decimal(total), commission=Decimal(commission),
            rate=Decimal(rate), total_people=people,
        )
        bid = Decimal(bid)
        s = calculate_settlement(group, bid)

        assert s.final_amount_to_be_paid == group.rate - s.dividend_per_member
        assert s.dividend_per_member == (
            (group.total_amount - bid - s.commission_amount) / people
        ).quantize(Decimal('0.01'))
        assert s.amount_paid_to_winner == bid - s.final_amount_to_be_paid

    def test_dividend_rounded_to_paisa(self):
        group = _group(total_amount=Decimal('100000'), commission=Decimal('0'), total_people=3)
        s = calculate_settlement(group, Decimal('90000'))

        assert s.dividend_per_member == Decimal('3333.33')
        assert s.final_amount_to_be_paid == Decimal('6666.67')

    def test_commission_unset_is_zero(self):
        s = calculate_settlement(_group(commission=None), Decimal('70000'))

        assert s.commission_amount == Decimal('0.00')
        assert s.net_discount == Decimal('30000.00')

    def test_rate_unset_leaves_installment_empty(self):
        s = calculate_settlement(_group(rate=None), Decimal('70000'))

        assert s.dividend_per_member == Decimal('2800.00')
        assert s.final_amount_to_be_paid is None
        assert s.amount_paid_to_winner is None

    def test_zero_people_treated_as_one(self):
        s = calculate_settlement(_group(total_people=0), Decimal('70000'))

        assert s.dividend_per_member == Decimal('28000.00')


class TestValidateBid:

    def test_max_allowed_bid(self):
        assert max_allowed_bid(_group()) == Decimal('98000.00')

    def test_bid_equal_to_max_accepted(self):
        validate_bid(_group(), Decimal('98000.00'))

    def test_bid_above_max_rejected(self):
        with pytest.raises(InvalidBidAmountError):
            validate_bid(_group(), Decimal('98000.01'))

    @pytest.mark.parametrize('amount', ['0', '-1'])
    def test_non_positive_rejected(self, amount):
        with pytest.raises(InvalidBidAmountError):
            validate_bid(_group(), Decimal(amount))

    def test_bid_below_min_bid_still_settled(self):
        group = _group(min_bid=Decimal('80000'))

        validate_bid(group, Decimal('70000'))
        settlement = calculate_settlement(group, Decimal('70000'))

        assert settlement.final_amount_to_be_paid == Decimal('7200.00')
