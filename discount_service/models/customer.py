"""Customer and payment models"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class CustomerProfile(BaseModel):
    """Customer placing the order"""
    id: str
    tier: str
    email: Optional[str] = None
    # Loyalty aggregates, not consulted by the pricing pipeline
    total_purchase_value: Optional[Decimal] = Field(default=None, ge=0)
    order_count: Optional[int] = Field(default=None, ge=0)

    class Config:
        frozen = True


class PaymentInfo(BaseModel):
    """How the customer intends to pay"""
    method: str
    bank_name: Optional[str] = None
    card_type: Optional[str] = None

    class Config:
        frozen = True
