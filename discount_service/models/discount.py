"""Discount rule and pricing result models"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class DiscountType(str, Enum):
    BRAND = "BRAND"
    CATEGORY = "CATEGORY"
    BANK_OFFER = "BANK_OFFER"
    VOUCHER = "VOUCHER"
    CUSTOMER_TIER = "CUSTOMER_TIER"  # reserved


class DiscountRule(BaseModel):
    """
    A configured discount.

    `name` doubles as the code customers type in (e.g. "SUPER69") and is
    unique ignoring case. Unset applicability lists mean "no restriction".
    """
    id: Optional[str] = None
    name: str = Field(min_length=1)
    type: DiscountType
    discount_value: Decimal = Field(ge=0)
    is_percentage: bool = True
    applicable_brands: Optional[list[str]] = None
    applicable_categories: Optional[list[str]] = None
    applicable_banks: Optional[list[str]] = None
    required_customer_tiers: Optional[list[str]] = None
    minimum_cart_value: Optional[Decimal] = Field(default=None, ge=0)
    maximum_discount_amount: Optional[Decimal] = Field(default=None, ge=0)
    valid_from: Optional[datetime] = None
    valid_to: Optional[datetime] = None
    is_active: bool = True
    priority: int = 0
    description: Optional[str] = None

    class Config:
        frozen = True

    @field_validator("valid_from", "valid_to")
    @classmethod
    def to_local_time(cls, value: Optional[datetime]) -> Optional[datetime]:
        # Validity is checked against the naive local clock
        if value is not None and value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value

    @model_validator(mode="after")
    def check_rule(self) -> "DiscountRule":
        if self.is_percentage and self.discount_value > 100:
            raise ValueError("percentage discounts cannot exceed 100")
        if self.valid_from is not None and self.valid_to is not None:
            if self.valid_from >= self.valid_to:
                raise ValueError("valid_from must be earlier than valid_to")
        return self


class DiscountedPrice(BaseModel):
    """Outcome of pricing one cart"""
    original_price: Decimal
    final_price: Decimal
    # Insertion order is application order
    applied_discounts: dict[str, Decimal] = {}
    message: str

    @property
    def total_savings(self) -> Decimal:
        return self.original_price - self.final_price
