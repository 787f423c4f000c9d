# API Routes

from .discounts import router as discounts_router
from .rules import router as rules_router

__all__ = ["discounts_router", "rules_router"]
