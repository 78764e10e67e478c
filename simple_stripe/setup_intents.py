import logging
from typing import Optional

import stripe

from simple_stripe.models import SimpleSetupIntent
from simple_stripe.status import PaymentIntentStatus, parse_payment_intent_status

logger = logging.getLogger(__name__)


class SetupIntentFacade:
    """Setup intents save a card for later off-session charges."""

    def __init__(self, client: stripe.StripeClient):
        self._client = client

    async def _retrieve(self, id: str):
        logger.debug("Retrieving setup intent", extra={"setup_intent": id})
        return await self._client.v1.setup_intents.retrieve_async(id)

    async def generate(self, customer: Optional[str] = None, usage: str = "off_session") -> SimpleSetupIntent:
        params = {"payment_method_types": ["card"], "usage": usage}
        if customer is not None:
            params["customer"] = customer

        intent = await self._client.v1.setup_intents.create_async(params=params)
        logger.info("Setup intent created", extra={"setup_intent": intent.id, "customer": customer})
        return SimpleSetupIntent(
            id=intent.id,
            status=parse_payment_intent_status(intent.status),
            status_text=intent.status,
        )

    async def get_client_secret(self, id: str) -> Optional[str]:
        intent = await self._retrieve(id)
        return getattr(intent, "client_secret", None)

    async def get_status(self, id: str) -> PaymentIntentStatus:
        intent = await self._retrieve(id)
        return parse_payment_intent_status(intent.status)
