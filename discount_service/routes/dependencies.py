"""Shared route dependencies"""

from typing import Optional

from ..core.config import settings
from ..database.rules import rule_db
from ..services.pricing import DiscountService

# Initialize services (would be dependency injected in production)
discount_service: Optional[DiscountService] = None


def get_discount_service() -> DiscountService:
    """Get or create the discount service"""
    global discount_service
    if discount_service is None:
        discount_service = DiscountService(
            repository=rule_db,
            clock=rule_db.clock,
            currency_symbol=settings.currency_symbol,
        )
    return discount_service
