"""
Cart pricing

Stacks discounts on a cart in a fixed order:

1. brand and category discounts, best rule per item
2. a voucher code, if the customer supplied one
3. a bank offer for the paying bank, first qualifying offer wins

Each stage works on the price left over by the previous one. Every applied
discount is recorded in an ordered ledger that is returned with the result.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional, Sequence

from ..core.exceptions import (
    CodeValidationError,
    DiscountCalculationError,
    PricingValidationError,
)
from ..core.money import ZERO, line_total, to_money
from ..database.base import DiscountRuleRepository
from ..models.customer import CustomerProfile, PaymentInfo
from ..models.discount import DiscountedPrice, DiscountRule, DiscountType
from ..models.product import CartItem
from .calculator import calculate_best_discount, calculate_discount
from .validity import (
    is_customer_eligible,
    is_rule_valid,
    is_voucher_applicable_to_cart,
    meets_minimum_cart_value,
)

logger = logging.getLogger(__name__)

NO_DISCOUNTS_MESSAGE = "No discounts applied."


class DiscountService:
    """
    Prices carts against the rules held by a rule repository.

    The service keeps no state between calls; all rule data is read from
    the repository on demand.
    """

    def __init__(
        self,
        repository: DiscountRuleRepository,
        clock: Callable[[], datetime] = datetime.now,
        currency_symbol: str = "₹",
    ):
        self.repository = repository
        self.clock = clock
        self.currency_symbol = currency_symbol

    def calculate_cart_discounts(
        self,
        cart_items: Sequence[CartItem],
        customer: CustomerProfile,
        discount_code: Optional[str] = None,
        payment_info: Optional[PaymentInfo] = None,
    ) -> DiscountedPrice:
        """
        Price a cart with every applicable discount stacked in order.

        Raises:
            PricingValidationError: cart is missing or empty, or customer is missing
            DiscountCalculationError: anything else went wrong
        """
        self._validate_inputs(cart_items, customer)

        try:
            now = self.clock()
            original_price = calculate_original_price(cart_items)
            applied_discounts: dict[str, Decimal] = {}

            current_price = self._apply_brand_and_category_discounts(
                cart_items, original_price, applied_discounts, now
            )

            if discount_code is not None and discount_code.strip():
                current_price = self._apply_voucher_discount(
                    cart_items,
                    customer,
                    discount_code.strip(),
                    original_price,
                    current_price,
                    applied_discounts,
                    now,
                )

            if payment_info is not None and payment_info.bank_name is not None:
                current_price = self._apply_bank_offer(
                    customer, payment_info.bank_name, current_price, applied_discounts, now
                )

            return DiscountedPrice(
                original_price=original_price,
                final_price=current_price,
                applied_discounts=applied_discounts,
                message=self._build_message(applied_discounts, original_price, current_price),
            )
        except Exception as e:
            logger.error(f"Error calculating cart discounts: {e}", exc_info=True)
            raise DiscountCalculationError(f"Failed to calculate discounts: {e}") from e

    def validate_discount_code(
        self,
        code: Optional[str],
        cart_items: Sequence[CartItem],
        customer: CustomerProfile,
    ) -> bool:
        """
        Whether `code` can be used on this cart by this customer right now.

        Nothing is priced. An unknown, expired or inapplicable code simply
        yields False.

        Raises:
            PricingValidationError: cart or customer is missing
            CodeValidationError: the check itself failed unexpectedly
        """
        if code is None or not code.strip():
            return False

        if cart_items is None:
            raise PricingValidationError("Cart items cannot be null")
        if customer is None:
            raise PricingValidationError("Customer profile cannot be null")

        try:
            rule = self.repository.find_by_name(code.strip())
            if rule is None:
                return False

            reason = self._code_rejection_reason(
                rule, cart_items, customer, calculate_original_price(cart_items), self.clock()
            )
            if reason:
                logger.debug(f"Code {code} rejected: {reason}")
                return False
            return True
        except Exception as e:
            logger.error(f"Error validating discount code {code}: {e}", exc_info=True)
            raise CodeValidationError(f"Failed to validate discount code: {e}") from e

    @staticmethod
    def _validate_inputs(cart_items: Sequence[CartItem], customer: CustomerProfile) -> None:
        if not cart_items:
            raise PricingValidationError("Cart items cannot be null or empty")
        if customer is None:
            raise PricingValidationError("Customer profile cannot be null")

    def _apply_brand_and_category_discounts(
        self,
        cart_items: Sequence[CartItem],
        current_price: Decimal,
        applied_discounts: dict[str, Decimal],
        now: datetime,
    ) -> Decimal:
        total_discount = ZERO

        for item in cart_items:
            product = item.product
            item_total = line_total(product.current_price, item.quantity)

            brand_discount, brand_rule = calculate_best_discount(
                self.repository.find_brand_discounts(product.brand), item_total, now
            )
            if brand_discount > 0:
                total_discount = to_money(total_discount + brand_discount)
                self._merge(applied_discounts, f"BRAND_{product.brand}_DISCOUNT", brand_discount)
                logger.debug(f"{brand_rule.name}: {brand_discount} off {product.id}")

            category_discount, category_rule = calculate_best_discount(
                self.repository.find_category_discounts(product.category), item_total, now
            )
            # An item can never be discounted below zero
            category_discount = min(category_discount, item_total - brand_discount)
            if category_discount > 0:
                total_discount = to_money(total_discount + category_discount)
                self._merge(
                    applied_discounts, f"CATEGORY_{product.category}_DISCOUNT", category_discount
                )
                logger.debug(f"{category_rule.name}: {category_discount} off {product.id}")

        return to_money(current_price - total_discount)

    def _apply_voucher_discount(
        self,
        cart_items: Sequence[CartItem],
        customer: CustomerProfile,
        code: str,
        original_price: Decimal,
        current_price: Decimal,
        applied_discounts: dict[str, Decimal],
        now: datetime,
    ) -> Decimal:
        rule = self.repository.find_by_name(code)
        if rule is None:
            logger.info(f"Voucher {code} skipped: no such code")
            return current_price

        reason = self._code_rejection_reason(rule, cart_items, customer, original_price, now)
        if reason is None and rule.type != DiscountType.VOUCHER:
            reason = f"{rule.type.value} rules cannot be redeemed as vouchers"
        if reason:
            logger.info(f"Voucher {code} skipped: {reason}")
            return current_price

        discount = calculate_discount(rule, current_price)
        if discount > 0:
            applied_discounts[f"VOUCHER_{code}"] = discount
            logger.info(f"Voucher {rule.name} applied: {discount}")
            return to_money(current_price - discount)

        return current_price

    def _apply_bank_offer(
        self,
        customer: CustomerProfile,
        bank_name: str,
        current_price: Decimal,
        applied_discounts: dict[str, Decimal],
        now: datetime,
    ) -> Decimal:
        # First qualifying offer wins, not the largest
        for offer in self.repository.find_bank_offers(bank_name):
            if not is_rule_valid(offer, now) or not is_customer_eligible(offer, customer):
                continue
            discount = calculate_discount(offer, current_price)
            if discount > 0:
                applied_discounts[f"BANK_{bank_name}_OFFER"] = discount
                logger.info(f"Bank offer {offer.name} applied: {discount}")
                return to_money(current_price - discount)

        return current_price

    @staticmethod
    def _code_rejection_reason(
        rule: DiscountRule,
        cart_items: Sequence[CartItem],
        customer: CustomerProfile,
        cart_value: Decimal,
        now: datetime,
    ) -> Optional[str]:
        """Why a looked-up code cannot be used, or None if it can"""
        if not is_rule_valid(rule, now):
            return "inactive or outside its validity window"
        if not is_customer_eligible(rule, customer):
            return f"tier {customer.tier} is not eligible"
        if not meets_minimum_cart_value(rule, cart_value):
            return f"cart value {cart_value} is below the minimum {rule.minimum_cart_value}"
        if rule.type == DiscountType.VOUCHER and not is_voucher_applicable_to_cart(rule, cart_items):
            return "no cart item matches its brand/category restrictions"
        return None

    @staticmethod
    def _merge(applied_discounts: dict[str, Decimal], key: str, amount: Decimal) -> None:
        applied_discounts[key] = to_money(applied_discounts.get(key, ZERO) + amount)

    def _build_message(
        self,
        applied_discounts: dict[str, Decimal],
        original_price: Decimal,
        final_price: Decimal,
    ) -> str:
        if not applied_discounts:
            return NO_DISCOUNTS_MESSAGE

        descriptions = ", ".join(
            f"{key} ({self.currency_symbol}{amount})"
            for key, amount in applied_discounts.items()
        )
        savings = to_money(original_price - final_price)
        return f"Applied discounts: {descriptions}. Total savings: {self.currency_symbol}{savings}"


def calculate_original_price(cart_items: Sequence[CartItem]) -> Decimal:
    """Sum of unit price times quantity over the cart, rounded"""
    return to_money(sum(
        (item.product.current_price * item.quantity for item in cart_items),
        ZERO,
    ))
