"""Tests for discount rule model validation"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from discount_service.models import DiscountType
from discount_service.services.validity import is_rule_valid

from .factories import FIXED_NOW, make_rule


class TestRuleTimestamps:

    def test_aware_timestamp_becomes_naive_local_time(self):
        aware = datetime(2099, 1, 1, tzinfo=timezone.utc)
        rule = make_rule("UTC", DiscountType.VOUCHER, 10, valid_to=aware)

        assert rule.valid_to.tzinfo is None
        assert rule.valid_to == aware.astimezone().replace(tzinfo=None)

    def test_naive_timestamp_is_kept(self):
        rule = make_rule("LOCAL", DiscountType.VOUCHER, 10, valid_to=FIXED_NOW)
        assert rule.valid_to == FIXED_NOW

    def test_aware_rule_is_checked_against_naive_clock(self):
        rule = make_rule(
            "UTC", DiscountType.VOUCHER, 10,
            valid_from=datetime(2000, 1, 1, tzinfo=timezone.utc),
            valid_to=datetime(2099, 1, 1, tzinfo=timezone.utc),
        )
        assert is_rule_valid(rule, FIXED_NOW)

    def test_mixed_naive_and_aware_window(self):
        rule = make_rule(
            "MIXED", DiscountType.VOUCHER, 10,
            valid_from=FIXED_NOW,
            valid_to=datetime(2099, 1, 1, tzinfo=timezone.utc),
        )
        assert rule.valid_from < rule.valid_to

    def test_mixed_window_out_of_order_is_rejected(self):
        with pytest.raises(ValidationError):
            make_rule(
                "BACKWARDS", DiscountType.VOUCHER, 10,
                valid_from=FIXED_NOW,
                valid_to=datetime(2000, 1, 1, tzinfo=timezone.utc),
            )


class TestRuleValues:

    def test_percentage_over_100_is_rejected(self):
        with pytest.raises(ValidationError):
            make_rule("TOOMUCH", DiscountType.VOUCHER, 150)

    def test_fixed_amount_over_100_is_allowed(self):
        rule = make_rule("FLAT500", DiscountType.VOUCHER, 500, is_percentage=False)
        assert rule.discount_value == 500

    def test_empty_window_is_rejected(self):
        with pytest.raises(ValidationError):
            make_rule(
                "EMPTY", DiscountType.VOUCHER, 10,
                valid_from=FIXED_NOW,
                valid_to=FIXED_NOW,
            )

    def test_window_may_end_after_it_starts(self):
        rule = make_rule(
            "DAY", DiscountType.VOUCHER, 10,
            valid_from=FIXED_NOW,
            valid_to=FIXED_NOW + timedelta(days=1),
        )
        assert rule.valid_to - rule.valid_from == timedelta(days=1)
