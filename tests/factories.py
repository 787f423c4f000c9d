"""Builders for test carts, customers and rules"""

from datetime import datetime
from decimal import Decimal

from discount_service.models import (
    BrandTier,
    CartItem,
    CustomerProfile,
    DiscountRule,
    Product,
)

FIXED_NOW = datetime(2026, 3, 15, 12, 0, 0)


def fixed_clock() -> datetime:
    return FIXED_NOW


def make_product(brand="PUMA", category="T-shirts", price="2000.00", product_id=None) -> Product:
    return Product(
        id=product_id or f"{brand}_{category}".upper(),
        brand=brand,
        category=category,
        current_price=Decimal(price),
        base_price=Decimal(price),
        brand_tier=BrandTier.PREMIUM,
    )


def make_item(quantity=1, size="L", **product_kwargs) -> CartItem:
    return CartItem(product=make_product(**product_kwargs), quantity=quantity, size=size)


def make_customer(tier="GOLD") -> CustomerProfile:
    return CustomerProfile(
        id="CUSTOMER_001",
        tier=tier,
        email="john.doe@example.com",
        total_purchase_value=Decimal("50000.00"),
        order_count=15,
    )


def make_rule(name, discount_type, value, **kwargs) -> DiscountRule:
    return DiscountRule(
        name=name,
        type=discount_type,
        discount_value=Decimal(str(value)),
        **kwargs,
    )
