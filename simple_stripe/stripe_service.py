import logging

import stripe

from simple_stripe.config import DEFAULT_API_VERSION
from simple_stripe.errors import ConfigurationError

logger = logging.getLogger(__name__)


def create_client(secret_key: str) -> stripe.StripeClient:
    if not secret_key:
        raise ConfigurationError("A Stripe secret key is required")

    logger.debug("Creating Stripe client", extra={"api_version": DEFAULT_API_VERSION})
    return stripe.StripeClient(secret_key, stripe_version=DEFAULT_API_VERSION)
