"""Pytest configuration and shared fixtures."""

import logging

import pytest
import structlog

from domain.cart import ShoppingCart
from domain.models import Product
from infrastructure.log import close_logger
from infrastructure.random_source import FixedRandomSource


@pytest.fixture(autouse=True)
def quiet_logs():
    """Keep structlog output out of captured stdout."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL))
    yield
    close_logger()
    structlog.reset_defaults()


@pytest.fixture(scope="function")
def cart():
    """Create an empty cart for testing."""
    return ShoppingCart()


@pytest.fixture
def products():
    """Products used throughout the cart tests."""
    return {
        "laptop": Product(name="Laptop", price=1299.99),
        "phone": Product(name="Smartphone", price=799.99),
        "charger": Product(name="USB-C Charger", price=19.99),
    }


@pytest.fixture
def no_network_error():
    """Random source whose draw never triggers a network error."""
    return FixedRandomSource(0.5)


@pytest.fixture
def network_error():
    """Random source whose draw always triggers a network error."""
    return FixedRandomSource(0.0)
