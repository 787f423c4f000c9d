"""Tests for discount amount calculation"""

from datetime import timedelta
from decimal import Decimal

import pytest

from discount_service.models import DiscountType
from discount_service.services.calculator import calculate_best_discount, calculate_discount

from .factories import FIXED_NOW, make_rule


class TestPercentageDiscount:

    def test_percentage_of_base(self):
        rule = make_rule("P40", DiscountType.BRAND, 40)
        assert calculate_discount(rule, Decimal("4000.00")) == Decimal("1600.00")

    def test_percentage_is_rounded_half_up(self):
        rule = make_rule("P15", DiscountType.BRAND, 15)
        assert calculate_discount(rule, Decimal("33.33")) == Decimal("5.00")

    @pytest.mark.parametrize("base", ["100.00", "4999.99", "5000.00", "123456.78"])
    def test_never_exceeds_cap(self, base):
        rule = make_rule("CAPPED", DiscountType.VOUCHER, 50, maximum_discount_amount=Decimal("500"))
        discount = calculate_discount(rule, Decimal(base))
        assert discount <= Decimal("500")
        assert discount == min(Decimal(base) / 2, Decimal("500")).quantize(Decimal("0.01"))

    def test_cap_result_has_two_digits(self):
        rule = make_rule("CAPPED", DiscountType.VOUCHER, 69, maximum_discount_amount=Decimal("5000"))
        assert str(calculate_discount(rule, Decimal("100000.00"))) == "5000.00"


class TestFixedDiscount:

    def test_fixed_amount(self):
        rule = make_rule("FLAT300", DiscountType.VOUCHER, 300, is_percentage=False)
        assert calculate_discount(rule, Decimal("1000.00")) == Decimal("300.00")

    @pytest.mark.parametrize("base", ["0.00", "120.50", "299.99"])
    def test_never_exceeds_base(self, base):
        rule = make_rule("FLAT300", DiscountType.VOUCHER, 300, is_percentage=False)
        assert calculate_discount(rule, Decimal(base)) == Decimal(base)

    def test_cap_does_not_apply_to_fixed_amounts(self):
        rule = make_rule(
            "FLAT300", DiscountType.VOUCHER, 300,
            is_percentage=False,
            maximum_discount_amount=Decimal("100"),
        )
        assert calculate_discount(rule, Decimal("1000.00")) == Decimal("300.00")


class TestBestDiscount:

    def test_picks_largest(self):
        rules = [
            make_rule("SMALL", DiscountType.BRAND, 10),
            make_rule("BIG", DiscountType.BRAND, 30),
            make_rule("MID", DiscountType.BRAND, 20),
        ]
        amount, rule = calculate_best_discount(rules, Decimal("1000.00"), FIXED_NOW)
        assert amount == Decimal("300.00")
        assert rule.name == "BIG"

    def test_cap_can_change_winner(self):
        rules = [
            make_rule("BIGCAPPED", DiscountType.BRAND, 50, maximum_discount_amount=Decimal("100")),
            make_rule("FLAT", DiscountType.BRAND, 150, is_percentage=False),
        ]
        amount, rule = calculate_best_discount(rules, Decimal("1000.00"), FIXED_NOW)
        assert (amount, rule.name) == (Decimal("150.00"), "FLAT")

    def test_skips_invalid_rules(self):
        rules = [
            make_rule("EXPIRED", DiscountType.BRAND, 90, valid_to=FIXED_NOW - timedelta(days=1)),
            make_rule("INACTIVE", DiscountType.BRAND, 80, is_active=False),
            make_rule("LIVE", DiscountType.BRAND, 10),
        ]
        amount, rule = calculate_best_discount(rules, Decimal("1000.00"), FIXED_NOW)
        assert (amount, rule.name) == (Decimal("100.00"), "LIVE")

    def test_no_valid_rules_gives_zero(self):
        amount, rule = calculate_best_discount([], Decimal("1000.00"), FIXED_NOW)
        assert amount == Decimal("0.00")
        assert rule is None

    def test_tie_goes_to_first_listed_rule(self):
        rules = [
            make_rule("FIRST", DiscountType.BRAND, 10, priority=1),
            make_rule("SECOND", DiscountType.BRAND, 100, is_percentage=False, priority=99),
        ]
        amount, rule = calculate_best_discount(rules, Decimal("1000.00"), FIXED_NOW)
        assert amount == Decimal("100.00")
        assert rule.name == "FIRST"
