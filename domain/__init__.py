"""Domain layer package."""

from .models import Post, Product
from .discounts import DiscountStrategy, NoDiscountStrategy, PercentageDiscountStrategy
from .cart import ShoppingCart
from .payments import (
    PaymentError,
    PaymentResult,
    PaymentProcessor,
    CreditCardProcessor,
    CashProcessor,
)
from .random_source import RandomSource
from .services import CheckoutService
from .exceptions import DomainException, PaymentFailedError

__all__ = [
    'Post',
    'Product',
    'DiscountStrategy',
    'NoDiscountStrategy',
    'PercentageDiscountStrategy',
    'ShoppingCart',
    'PaymentError',
    'PaymentResult',
    'PaymentProcessor',
    'CreditCardProcessor',
    'CashProcessor',
    'RandomSource',
    'CheckoutService',
    'DomainException',
    'PaymentFailedError',
]
