import logging
from typing import Optional

import stripe

from simple_stripe.models import PaymentIntentDetails, SimplePaymentIntent, from_timestamp
from simple_stripe.status import PaymentIntentStatus, parse_payment_intent_status

logger = logging.getLogger(__name__)


def to_simple_payment_intent(intent) -> SimplePaymentIntent:
    return SimplePaymentIntent(
        id=intent.id,
        status=parse_payment_intent_status(intent.status),
        status_text=intent.status,
    )


class PaymentIntentFacade:
    def __init__(self, client: stripe.StripeClient):
        self._client = client

    async def _retrieve(self, id: str):
        logger.debug("Retrieving payment intent", extra={"payment_intent": id})
        return await self._client.v1.payment_intents.retrieve_async(id)

    async def generate(
        self, amount: int, customer: Optional[str] = None, currency: str = "eur"
    ) -> SimplePaymentIntent:
        """Create a payment intent and return its summary.

        `amount` is in the smallest currency unit (cents for eur). Stripe
        validates amount and currency; nothing is checked locally.
        """
        params = {"amount": amount, "currency": currency}
        if customer is not None:
            params["customer"] = customer

        intent = await self._client.v1.payment_intents.create_async(params=params)
        logger.info(
            "Payment intent created",
            extra={"payment_intent": intent.id, "amount": amount, "currency": currency},
        )
        return to_simple_payment_intent(intent)

    async def get_client_secret(self, id: str) -> Optional[str]:
        intent = await self._retrieve(id)
        return getattr(intent, "client_secret", None)

    async def get_status(self, id: str) -> PaymentIntentStatus:
        intent = await self._retrieve(id)
        return parse_payment_intent_status(intent.status)

    async def get_details(self, id: str) -> PaymentIntentDetails:
        intent = await self._retrieve(id)
        return PaymentIntentDetails(
            id=intent.id,
            status=parse_payment_intent_status(intent.status),
            status_text=intent.status,
            client_secret=getattr(intent, "client_secret", None),
            created=from_timestamp(intent.created),
            amount=intent.amount,
            amount_received=intent.amount_received,
            currency=intent.currency,
            customer=getattr(intent, "customer", None),
            payment_method=getattr(intent, "payment_method", None),
        )

    async def pay_off_session(self, intent_id: str, method_id: str) -> SimplePaymentIntent:
        """Attach `method_id` to an existing intent, then confirm it.

        The two calls are not atomic. If confirmation fails the intent keeps
        the attached payment method; use get_status to inspect it before retrying.
        """
        await self._client.v1.payment_intents.update_async(
            intent_id, params={"payment_method": method_id}
        )
        intent = await self._client.v1.payment_intents.confirm_async(
            intent_id, params={"payment_method": method_id}
        )
        logger.info(
            "Payment intent confirmed",
            extra={"payment_intent": intent.id, "status": intent.status},
        )
        return to_simple_payment_intent(intent)
