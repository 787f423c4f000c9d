"""Discount amount calculation"""

from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional

from ..core.money import ZERO, percentage_of, to_money
from ..models.discount import DiscountRule
from .validity import is_rule_valid


def calculate_discount(rule: DiscountRule, amount: Decimal) -> Decimal:
    """
    Discount a single rule grants on `amount`.

    Percentage rules are limited by `maximum_discount_amount` when one is
    set. Fixed rules never exceed the amount they apply to.
    """
    if rule.is_percentage:
        discount = percentage_of(amount, rule.discount_value)
        cap = rule.maximum_discount_amount
        if cap is not None and discount > to_money(cap):
            discount = cap
    else:
        discount = rule.discount_value
        if discount > amount:
            discount = amount

    return to_money(discount)


def calculate_best_discount(
    rules: Iterable[DiscountRule],
    amount: Decimal,
    now: datetime,
) -> tuple[Decimal, Optional[DiscountRule]]:
    """
    Largest discount any currently valid rule grants on `amount`.

    Returns the amount together with the rule that produced it. When two
    rules tie, the one listed first wins. Rule priority is not consulted.
    """
    best_amount = ZERO
    best_rule = None

    for rule in rules:
        if not is_rule_valid(rule, now):
            continue
        discount = calculate_discount(rule, amount)
        if best_rule is None or discount > best_amount:
            best_amount = discount
            best_rule = rule

    return best_amount, best_rule
