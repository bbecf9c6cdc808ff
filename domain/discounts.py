from abc import ABC, abstractmethod

MAX_PERCENTAGE = 100.0


class DiscountStrategy(ABC):
    """Abstract discount applied to a cart subtotal."""

    @abstractmethod
    def calculate_discount(self, total: float) -> float:
        """Return the amount to take off the given subtotal."""
        pass


class NoDiscountStrategy(DiscountStrategy):
    """Strategy that never discounts."""

    def calculate_discount(self, total: float) -> float:
        return 0.0

    def __repr__(self):
        return "NoDiscountStrategy()"


class PercentageDiscountStrategy(DiscountStrategy):
    """Takes a fixed percentage off the subtotal."""

    def __init__(self, percentage: float):
        # Only the upper bound is enforced; negative values surcharge the cart.
        self.percentage = min(percentage, MAX_PERCENTAGE)

    def calculate_discount(self, total: float) -> float:
        return total * (self.percentage / 100.0)

    def __repr__(self):
        return f"PercentageDiscountStrategy(percentage={self.percentage})"
