"""Main application entry point."""

import logging
import sys

from domain.cart import ShoppingCart
from domain.discounts import PercentageDiscountStrategy
from domain.models import Post, Product
from domain.payments import CashProcessor, CreditCardProcessor, PaymentProcessor
from domain.random_source import RandomSource
from domain.services import CheckoutService
from infrastructure.config import load_settings
from infrastructure.log import setup_logger
from infrastructure.random_source import SeededRandomSource


def attempt_payment(processor: PaymentProcessor, amount: float):
    """Run one payment and print its outcome."""
    result = processor.process_payment(amount)
    if result.succeeded:
        print(result.message)
        if result.remaining is not None:
            print(f"Remaining cash in register: ${result.remaining:.2f}")
        print("✅ Transaction completed successfully")
    else:
        print(f"❌ Payment Error: {result.message}")
    return result


def run_posts():
    """Exercise 1: posts."""
    post1 = Post(author="Alice", content="Just finished my first iOS assignment!", likes=15)
    post2 = Post(author="Bob", content="Learning Swift classes is fun!", likes=7)
    post1.display()
    post2.display()


def run_cart(cart: ShoppingCart):
    """Exercise 2: shopping cart with a swappable discount."""
    laptop = Product(name="Laptop", price=1299.99)
    phone = Product(name="Smartphone", price=799.99)
    charger = Product(name="USB-C Charger", price=19.99)

    cart.add_product(laptop)
    cart.add_product(phone, quantity=2)
    cart.add_product(charger, quantity=3)

    print("Cart with no discount:")
    cart.display()

    cart.set_discount_strategy(PercentageDiscountStrategy(percentage=10.0))
    print("\nCart with 10% discount:")
    cart.display()

    cart.remove_product(phone)
    print("\nCart after removing smartphones:")
    cart.display()

    cart.clear()
    print("\nCart after clearing:")
    cart.display()


def run_payments(random_source: RandomSource):
    """Exercise 3: payment processors."""
    credit_card = CreditCardProcessor(
        card_number="1234567890123456",
        expiry_date="12/25",
        cvv="123",
        balance=5000.0,
        random_source=random_source,
    )
    expired_card = CreditCardProcessor(
        card_number="9876543210987654",
        expiry_date="01/20",
        cvv="456",
        balance=1000.0,
        random_source=random_source,
    )
    cash = CashProcessor(cash_in_register=200.0)

    print("\n--- Payment Processing Examples ---")

    print("\nAttempting credit card payment of $50.00:")
    attempt_payment(credit_card, 50.0)

    print("\nAttempting large credit card payment of $20000.00:")
    attempt_payment(credit_card, 20000.0)

    print("\nAttempting payment with expired card:")
    attempt_payment(expired_card, 30.0)

    print("\nAttempting cash payment of $75.00:")
    attempt_payment(cash, 75.0)

    print("\nAttempting cash payment of $300.00 (register only has $200.00):")
    attempt_payment(cash, 300.0)

    return cash


def run_checkout(cart: ShoppingCart, processor: PaymentProcessor):
    """Pay for a small cart in one go."""
    cart.add_product(Product(name="USB-C Charger", price=19.99), quantity=2)

    print("\n--- Checkout ---")
    cart.display()
    result = CheckoutService(cart).checkout(processor)
    if result.succeeded:
        print(result.message)
    else:
        print(f"❌ Checkout failed: {result.message}")
    return result


def main():
    """Run all three exercises."""
    settings = load_settings()
    setup_logger(settings.log_file, level=settings.log_level)
    random_source = SeededRandomSource(settings.random_seed)

    run_posts()

    cart = ShoppingCart()
    run_cart(cart)

    cash = run_payments(random_source)
    run_checkout(cart, cash)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logging.error("Script interrupted by user (KeyboardInterrupt).", exc_info=True)
        sys.exit(1)
    except Exception:
        logging.exception("Unhandled exception occurred:")
        sys.exit(1)
