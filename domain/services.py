import structlog

from .cart import ShoppingCart
from .payments import PaymentProcessor, PaymentResult

logger = structlog.get_logger(__name__)


class CheckoutService:
    """Domain service that pays for a cart."""

    def __init__(self, cart: ShoppingCart):
        self.cart = cart

    def checkout(self, processor: PaymentProcessor) -> PaymentResult:
        """
        Pay the cart total with the given processor.

        Args:
            processor: Payment method to charge

        Returns:
            Result of the payment attempt. The cart is emptied only on success.
        """
        amount = self.cart.total()
        logger.info("checkout_started", processor=processor.name, amount=amount, items=len(self.cart))

        result = processor.process_payment(amount)
        if result.succeeded:
            self.cart.clear()
            logger.info("checkout_completed", processor=processor.name, amount=amount)
        return result
