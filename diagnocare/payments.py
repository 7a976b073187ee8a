"""Stripe payment intents for test bookings."""

import logging
from decimal import Decimal

import stripe

from diagnocare.core import config
from diagnocare.core.exceptions import PaymentProcessorError

logger = logging.getLogger(__name__)


def to_minor_units(price: float) -> int:
    """Convert a price in currency units to whole cents, truncating fractions."""
    return int(Decimal(str(price)) * 100)


def create_payment_intent(price: float) -> str:
    """Create a card payment intent for ``price`` and return its client secret.

    Raises:
        PaymentProcessorError: if Stripe is not configured or rejects the call.
    """
    if not config.STRIPE_SECRET_KEY:
        raise PaymentProcessorError("STRIPE_SECRET_KEY is not configured.")

    amount = to_minor_units(price)
    try:
        payment_intent = stripe.PaymentIntent.create(
            amount=amount,
            currency=config.STRIPE_CURRENCY,
            payment_method_types=["card"],
            api_key=config.STRIPE_SECRET_KEY,
        )
    except stripe.StripeError as exc:
        logger.warning("Payment intent creation failed for amount %s: %s", amount, exc)
        raise PaymentProcessorError(str(exc)) from exc

    return payment_intent.client_secret
