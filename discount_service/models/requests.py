"""API request and response models"""

from typing import Optional

from pydantic import BaseModel

from .product import CartItem
from .customer import CustomerProfile, PaymentInfo


class CalculateDiscountRequest(BaseModel):
    """Request to price a cart"""
    cart_items: list[CartItem]
    customer: CustomerProfile
    discount_code: Optional[str] = None
    payment_info: Optional[PaymentInfo] = None


class ValidateCodeRequest(BaseModel):
    """Request to check a discount code against a cart"""
    code: str
    cart_items: list[CartItem]
    customer: CustomerProfile


class ValidateCodeResponse(BaseModel):
    """Outcome of a code check"""
    code: str
    valid: bool
