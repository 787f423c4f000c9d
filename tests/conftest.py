"""Shared fixtures for discount service tests"""

import pytest

from discount_service.database.rules import InMemoryDiscountRuleDatabase, seed_sample_rules
from discount_service.models import PaymentInfo
from discount_service.services.pricing import DiscountService

from .factories import fixed_clock, make_customer, make_item


@pytest.fixture
def store():
    return InMemoryDiscountRuleDatabase(clock=fixed_clock)


@pytest.fixture
def seeded_store(store):
    seed_sample_rules(store)
    return store


@pytest.fixture
def service(seeded_store):
    return DiscountService(seeded_store, clock=fixed_clock)


@pytest.fixture
def empty_service(store):
    return DiscountService(store, clock=fixed_clock)


@pytest.fixture
def puma_cart():
    """2x PUMA T-shirt at 2000.00"""
    return [make_item(quantity=2)]


@pytest.fixture
def mixed_cart():
    return [
        make_item(quantity=1, size="L"),
        make_item(brand="Nike", category="Shoes", price="5000.00", quantity=1, size="42"),
        make_item(brand="Adidas", category="T-shirts", price="1800.00", quantity=2, size="M"),
    ]


@pytest.fixture
def gold_customer():
    return make_customer("GOLD")


@pytest.fixture
def icici_payment():
    return PaymentInfo(method="CARD", bank_name="ICICI", card_type="CREDIT")


@pytest.fixture
def hdfc_payment():
    return PaymentInfo(method="CARD", bank_name="HDFC", card_type="DEBIT")
