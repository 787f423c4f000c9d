"""Rule validity and customer eligibility checks"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from ..models.customer import CustomerProfile
from ..models.discount import DiscountRule
from ..models.product import CartItem


def is_rule_valid(rule: DiscountRule, now: datetime) -> bool:
    """
    Whether a rule can be used at `now`.

    The validity window is open at both ends: a rule is not yet valid at
    exactly `valid_from` and already expired at exactly `valid_to`.
    """
    if not rule.is_active:
        return False

    if rule.valid_from is not None and not now > rule.valid_from:
        return False

    if rule.valid_to is not None and not now < rule.valid_to:
        return False

    return True


def is_customer_eligible(rule: DiscountRule, customer: CustomerProfile) -> bool:
    """Tier gate; rules without required tiers are open to everyone"""
    if not rule.required_customer_tiers:
        return True
    return customer.tier in rule.required_customer_tiers


def meets_minimum_cart_value(rule: DiscountRule, cart_value: Decimal) -> bool:
    if rule.minimum_cart_value is None:
        return True
    return cart_value >= rule.minimum_cart_value


def _matches(allowed: Optional[list[str]], value: str) -> bool:
    return not allowed or value in allowed


def is_voucher_applicable_to_cart(rule: DiscountRule, cart_items: Sequence[CartItem]) -> bool:
    """
    Check a voucher's brand/category restrictions against the cart.

    An unrestricted voucher covers the whole cart. Otherwise at least one
    item has to satisfy the brand list and the category list at once.
    """
    if not rule.applicable_brands and not rule.applicable_categories:
        return True

    return any(
        _matches(rule.applicable_brands, item.product.brand)
        and _matches(rule.applicable_categories, item.product.category)
        for item in cart_items
    )
