from pathlib import Path
from typing import Optional

import stripe

from simple_stripe.config import load_settings
from simple_stripe.customers import CustomerFacade
from simple_stripe.payment_intents import PaymentIntentFacade
from simple_stripe.setup_intents import SetupIntentFacade
from simple_stripe.stripe_service import create_client


class SimpleStripe:
    """Thin facade over the Stripe API returning compact records.

    Usage:
        simple = SimpleStripe("sk_test_...")
        intent = await simple.payment_intent.generate(2500, customer="cus_123")
        secret = await simple.payment_intent.get_client_secret(intent.id)

    The instance holds no state beyond the Stripe client and is safe to share
    between concurrent tasks.
    """

    def __init__(
        self,
        secret_key: str,
        client: Optional[stripe.StripeClient] = None,
    ):
        self._client = client or create_client(secret_key)
        self.payment_intent = PaymentIntentFacade(self._client)
        self.setup_intent = SetupIntentFacade(self._client)
        self.customer = CustomerFacade(self._client)

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "SimpleStripe":
        settings = load_settings(env_path)
        return cls(settings["secret_key"])
