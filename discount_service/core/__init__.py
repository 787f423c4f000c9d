# Core modules

from .config import settings, get_settings
from .exceptions import (
    DiscountServiceError,
    PricingValidationError,
    DiscountCalculationError,
    CodeValidationError,
    DuplicateRuleNameError,
)

__all__ = [
    "settings",
    "get_settings",
    "DiscountServiceError",
    "PricingValidationError",
    "DiscountCalculationError",
    "CodeValidationError",
    "DuplicateRuleNameError",
]
