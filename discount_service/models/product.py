"""Product and cart models"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class BrandTier(str, Enum):
    PREMIUM = "PREMIUM"
    REGULAR = "REGULAR"
    BUDGET = "BUDGET"


class Product(BaseModel):
    """Product as priced at cart assembly"""
    id: str
    brand: str
    category: str
    current_price: Decimal = Field(ge=0)
    base_price: Optional[Decimal] = Field(default=None, ge=0)
    brand_tier: Optional[BrandTier] = None

    class Config:
        frozen = True


class CartItem(BaseModel):
    """Line in a shopping cart"""
    product: Product
    quantity: int = Field(gt=0)
    size: Optional[str] = None

    class Config:
        frozen = True
