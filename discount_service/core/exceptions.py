"""Errors raised by the discount service"""


class DiscountServiceError(Exception):
    """Base exception for discount service errors"""
    pass


class PricingValidationError(DiscountServiceError):
    """The caller supplied an unusable cart or customer"""
    pass


class DiscountCalculationError(DiscountServiceError):
    """Unexpected failure while computing a cart price"""
    pass


class CodeValidationError(DiscountServiceError):
    """Unexpected failure while validating a discount code"""
    pass


class DuplicateRuleNameError(DiscountServiceError):
    """Another stored rule already uses this name"""

    def __init__(self, name: str):
        super().__init__(f"A discount rule named '{name}' already exists")
        self.name = name
