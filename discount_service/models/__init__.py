# Discount Service Models

from .product import Product, BrandTier, CartItem
from .customer import CustomerProfile, PaymentInfo
from .discount import DiscountType, DiscountRule, DiscountedPrice
from .requests import CalculateDiscountRequest, ValidateCodeRequest, ValidateCodeResponse

__all__ = [
    "Product",
    "BrandTier",
    "CartItem",
    "CustomerProfile",
    "PaymentInfo",
    "DiscountType",
    "DiscountRule",
    "DiscountedPrice",
    "CalculateDiscountRequest",
    "ValidateCodeRequest",
    "ValidateCodeResponse",
]
