# Pricing services

from .validity import (
    is_rule_valid,
    is_customer_eligible,
    meets_minimum_cart_value,
    is_voucher_applicable_to_cart,
)
from .calculator import calculate_discount, calculate_best_discount
from .pricing import DiscountService, NO_DISCOUNTS_MESSAGE, calculate_original_price

__all__ = [
    "is_rule_valid",
    "is_customer_eligible",
    "meets_minimum_cart_value",
    "is_voucher_applicable_to_cart",
    "calculate_discount",
    "calculate_best_discount",
    "DiscountService",
    "NO_DISCOUNTS_MESSAGE",
    "calculate_original_price",
]
