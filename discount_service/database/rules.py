"""Discount rule storage"""

import threading
import uuid
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable, Optional

from ..core.exceptions import DuplicateRuleNameError
from ..models.discount import DiscountRule, DiscountType
from ..services.validity import is_rule_valid


class InMemoryDiscountRuleDatabase:
    """
    In-memory discount rule storage.

    Rules are kept in insertion order, so every lookup returns them in the
    order they were first saved. All access goes through one lock and reads
    hand back fresh lists.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock
        self._rules: dict[str, DiscountRule] = {}
        self._lock = threading.RLock()

    def find_all_active(self) -> list[DiscountRule]:
        """Rules that are active and inside their validity window right now"""
        now = self.clock()
        with self._lock:
            rules = list(self._rules.values())
        return [rule for rule in rules if is_rule_valid(rule, now)]

    def find_by_type(self, discount_type: DiscountType) -> list[DiscountRule]:
        return [rule for rule in self.find_all_active() if rule.type == discount_type]

    def find_by_name(self, name: str) -> Optional[DiscountRule]:
        """Active rule whose name matches, ignoring case"""
        wanted = name.lower()
        return next(
            (rule for rule in self.find_all_active() if rule.name.lower() == wanted),
            None,
        )

    def find_brand_discounts(self, brand: str) -> list[DiscountRule]:
        return [
            rule for rule in self.find_by_type(DiscountType.BRAND)
            if rule.applicable_brands is not None and brand in rule.applicable_brands
        ]

    def find_category_discounts(self, category: str) -> list[DiscountRule]:
        return [
            rule for rule in self.find_by_type(DiscountType.CATEGORY)
            if rule.applicable_categories is not None and category in rule.applicable_categories
        ]

    def find_bank_offers(self, bank_name: str) -> list[DiscountRule]:
        return [
            rule for rule in self.find_by_type(DiscountType.BANK_OFFER)
            if rule.applicable_banks is not None and bank_name in rule.applicable_banks
        ]

    def save(self, rule: DiscountRule) -> DiscountRule:
        """
        Add or replace a rule.

        Rules without an id get a fresh one. Saving a rule under an id that
        already exists replaces it in place.

        Raises:
            DuplicateRuleNameError: another rule already uses this name
        """
        if rule.id is None:
            rule = rule.model_copy(update={"id": str(uuid.uuid4())})

        with self._lock:
            clash = next(
                (
                    existing for existing in self._rules.values()
                    if existing.id != rule.id and existing.name.lower() == rule.name.lower()
                ),
                None,
            )
            if clash:
                raise DuplicateRuleNameError(rule.name)
            self._rules[rule.id] = rule
        return rule

    def delete_by_id(self, rule_id: str) -> bool:
        """Delete a rule"""
        with self._lock:
            if rule_id in self._rules:
                del self._rules[rule_id]
                return True
        return False

    def get_rule(self, rule_id: str) -> Optional[DiscountRule]:
        """Get a rule by ID, active or not"""
        with self._lock:
            return self._rules.get(rule_id)

    def get_all_rules(self) -> list[DiscountRule]:
        """Every stored rule, including inactive and expired ones"""
        with self._lock:
            return list(self._rules.values())

    def clear(self) -> None:
        with self._lock:
            self._rules.clear()


def build_sample_rules(now: datetime) -> list[DiscountRule]:
    """Demo rule set with validity windows placed around `now`"""
    return [
        DiscountRule(
            name="PUMA40",
            type=DiscountType.BRAND,
            discount_value=Decimal("40"),
            applicable_brands=["PUMA"],
            minimum_cart_value=Decimal("1000"),
            maximum_discount_amount=Decimal("2000"),
            valid_from=now - timedelta(days=30),
            valid_to=now + timedelta(days=30),
            priority=10,
            description="Minimum 40% off on PUMA products",
        ),
        DiscountRule(
            name="TSHIRT10",
            type=DiscountType.CATEGORY,
            discount_value=Decimal("10"),
            applicable_categories=["T-shirts"],
            minimum_cart_value=Decimal("500"),
            maximum_discount_amount=Decimal("500"),
            valid_from=now - timedelta(days=15),
            valid_to=now + timedelta(days=45),
            priority=5,
            description="Extra 10% off on T-shirts",
        ),
        DiscountRule(
            name="ICICI10",
            type=DiscountType.BANK_OFFER,
            discount_value=Decimal("10"),
            applicable_banks=["ICICI"],
            minimum_cart_value=Decimal("1000"),
            maximum_discount_amount=Decimal("1000"),
            valid_from=now - timedelta(days=7),
            valid_to=now + timedelta(days=60),
            priority=1,
            description="10% instant discount on ICICI Bank cards",
        ),
        DiscountRule(
            name="SUPER69",
            type=DiscountType.VOUCHER,
            discount_value=Decimal("69"),
            minimum_cart_value=Decimal("2000"),
            maximum_discount_amount=Decimal("5000"),
            required_customer_tiers=["GOLD", "PLATINUM"],
            valid_from=now - timedelta(days=5),
            valid_to=now + timedelta(days=10),
            priority=15,
            description="SUPER69 - 69% off for Gold and Platinum customers",
        ),
        DiscountRule(
            name="NIKE30",
            type=DiscountType.BRAND,
            discount_value=Decimal("30"),
            applicable_brands=["Nike"],
            minimum_cart_value=Decimal("2000"),
            maximum_discount_amount=Decimal("1500"),
            valid_from=now - timedelta(days=20),
            valid_to=now + timedelta(days=20),
            priority=8,
            description="30% off on Nike products",
        ),
        DiscountRule(
            name="HDFC15",
            type=DiscountType.BANK_OFFER,
            discount_value=Decimal("15"),
            applicable_banks=["HDFC"],
            minimum_cart_value=Decimal("3000"),
            maximum_discount_amount=Decimal("800"),
            valid_from=now - timedelta(days=10),
            valid_to=now + timedelta(days=30),
            priority=2,
            description="15% instant discount on HDFC Bank cards",
        ),
        DiscountRule(
            name="SHOES15",
            type=DiscountType.CATEGORY,
            discount_value=Decimal("15"),
            applicable_categories=["Shoes"],
            minimum_cart_value=Decimal("2000"),
            maximum_discount_amount=Decimal("1000"),
            valid_from=now - timedelta(days=5),
            valid_to=now + timedelta(days=25),
            priority=6,
            description="15% off on Shoes",
        ),
    ]


def seed_sample_rules(db: InMemoryDiscountRuleDatabase) -> int:
    """Replace the store contents with the demo rule set"""
    db.clear()
    rules = build_sample_rules(db.clock())
    for rule in rules:
        db.save(rule)
    return len(rules)


# Singleton instance
rule_db = InMemoryDiscountRuleDatabase()
