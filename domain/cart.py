from typing import List, Optional, Tuple

import structlog

from .discounts import DiscountStrategy, NoDiscountStrategy
from .models import Product

logger = structlog.get_logger(__name__)

SEPARATOR = "-" * 24


class ShoppingCart:
    """
    In-memory shopping cart.

    One cart is created per session by the caller and handed to whatever
    needs it. There is no locking: a cart must only be used from one thread.
    """

    def __init__(self, discount_strategy: Optional[DiscountStrategy] = None):
        self._products: List[Product] = []
        self.discount_strategy: DiscountStrategy = discount_strategy or NoDiscountStrategy()

    def _find(self, name: str) -> Optional[Product]:
        for item in self._products:
            if item.name == name:
                return item
        return None

    def add_product(self, product: Product, quantity: int = 1):
        """Add a product, bumping the quantity if one with the same name is present."""
        item = self._find(product.name)
        if item is not None:
            item.quantity += quantity
        else:
            item = Product(name=product.name, price=product.price, quantity=quantity)
            self._products.append(item)
        logger.debug("cart_product_added", name=product.name, quantity=item.quantity)

    def remove_product(self, product: Product):
        """Remove every entry with the product's name. Unknown products are ignored."""
        self._products = [p for p in self._products if p.name != product.name]
        logger.debug("cart_product_removed", name=product.name)

    def clear(self):
        """Remove everything from the cart."""
        self._products.clear()
        logger.debug("cart_cleared")

    def set_discount_strategy(self, strategy: DiscountStrategy):
        """Replace the active discount strategy."""
        self.discount_strategy = strategy
        logger.debug("cart_discount_changed", strategy=repr(strategy))

    @property
    def products(self) -> Tuple[Product, ...]:
        return tuple(self._products)

    def subtotal(self) -> float:
        """Sum of price times quantity over the cart contents."""
        return sum(p.price * p.quantity for p in self._products)

    def discount(self) -> float:
        return self.discount_strategy.calculate_discount(self.subtotal())

    def total(self) -> float:
        """Subtotal minus the active strategy's discount."""
        return self.subtotal() - self.discount()

    def is_empty(self) -> bool:
        return len(self._products) == 0

    def __len__(self):
        return len(self._products)

    def display(self):
        """Print the cart contents followed by subtotal, discount and total."""
        if self.is_empty():
            print("Shopping cart is empty.")
            return

        print("Shopping Cart Contents:")
        print(SEPARATOR)
        for p in self._products:
            print(f"{p.name} - ${p.price:.2f} x {p.quantity} = ${p.line_total:.2f}")
        print(SEPARATOR)
        print(f"Subtotal: ${self.subtotal():.2f}")
        print(f"Discount: ${self.discount():.2f}")
        print(f"Total: ${self.total():.2f}")
        print(SEPARATOR)
