"""Rule store interface"""

from typing import Optional, Protocol

from ..models.discount import DiscountRule, DiscountType


class DiscountRuleRepository(Protocol):
    """
    Read and write operations the pricing engine relies on.

    Every `find_*` method only returns rules that are active and inside
    their validity window. Implementations must tolerate concurrent reads
    interleaved with writes.
    """

    def find_all_active(self) -> list[DiscountRule]: ...

    def find_by_type(self, discount_type: DiscountType) -> list[DiscountRule]: ...

    def find_by_name(self, name: str) -> Optional[DiscountRule]: ...

    def find_brand_discounts(self, brand: str) -> list[DiscountRule]: ...

    def find_category_discounts(self, category: str) -> list[DiscountRule]: ...

    def find_bank_offers(self, bank_name: str) -> list[DiscountRule]: ...

    def save(self, rule: DiscountRule) -> DiscountRule: ...

    def delete_by_id(self, rule_id: str) -> bool: ...
