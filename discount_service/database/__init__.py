# Database modules

from .base import DiscountRuleRepository
from .rules import (
    rule_db,
    InMemoryDiscountRuleDatabase,
    build_sample_rules,
    seed_sample_rules,
)

__all__ = [
    "DiscountRuleRepository",
    "rule_db",
    "InMemoryDiscountRuleDatabase",
    "build_sample_rules",
    "seed_sample_rules",
]
