import asyncio
import logging
from typing import Optional, Union

import stripe

from simple_stripe.models import (
    ActiveCustomerDetails,
    CardExpiry,
    CustomerCreateParams,
    CustomerDetails,
    DeclinedCharge,
    DeletedCustomerDetails,
    PaymentMethod,
    SimpleCustomer,
    SimplePaymentIntent,
    from_timestamp,
)
from simple_stripe.payment_intents import to_simple_payment_intent
from simple_stripe.status import parse_payment_intent_status

logger = logging.getLogger(__name__)


def _is_older_duplicate(method, neighbour) -> bool:
    return method.card.fingerprint == neighbour.card.fingerprint and method.created < neighbour.created


def select_duplicate_cards(methods: list) -> list:
    """Pick the saved cards to detach from a listing of a customer's cards.

    A card is flagged when it shares its fingerprint with its neighbour in
    listing order and was created before it. The first card is compared with
    the second, every other card with the one before it. Only adjacent
    duplicates are detected: identical fingerprints separated by another card
    are left alone.
    """
    flagged = []
    for index, method in enumerate(methods):
        if index == 0:
            if len(methods) > 1 and _is_older_duplicate(method, methods[1]):
                flagged.append(method)
        elif _is_older_duplicate(method, methods[index - 1]):
            flagged.append(method)
    return flagged


def to_payment_method(method) -> PaymentMethod:
    card = method.card
    return PaymentMethod(
        id=method.id,
        brand=card.brand,
        exp=CardExpiry(month=card.exp_month, year=card.exp_year),
        last4=card.last4,
    )


class CustomerFacade:
    def __init__(self, client: stripe.StripeClient):
        self._client = client

    async def _list_cards(self, id: str) -> list:
        # Single page: customers are expected to hold far fewer cards than the page size
        response = await self._client.v1.payment_methods.list_async(
            params={"customer": id, "type": "card"}
        )
        return list(getattr(response, "data", None) or [])

    async def create(
        self, details: Optional[Union[CustomerCreateParams, dict]] = None
    ) -> SimpleCustomer:
        if isinstance(details, CustomerCreateParams):
            params = details.to_params()
        else:
            params = dict(details or {})

        customer = await self._client.v1.customers.create_async(params=params)
        logger.info("Customer created", extra={"customer": customer.id})
        return SimpleCustomer(id=customer.id)

    async def get_details(self, id: str) -> CustomerDetails:
        logger.debug("Retrieving customer", extra={"customer": id})
        customer = await self._client.v1.customers.retrieve_async(id)
        if getattr(customer, "deleted", False):
            return DeletedCustomerDetails(id=customer.id)
        return ActiveCustomerDetails(
            id=customer.id,
            created=from_timestamp(customer.created),
            description=getattr(customer, "description", None),
        )

    async def get_payment_methods(self, id: str) -> list[PaymentMethod]:
        """List the customer's saved cards, e.g. to show them on a checkout page."""
        return [to_payment_method(method) for method in await self._list_cards(id)]

    async def flush_duplicate_payment_methods(self, id: str) -> int:
        """Detach the older copy of every card saved twice in a row.

        Returns the number of cards flagged for detaching. All detach calls run
        concurrently and are awaited together; a failed detach is logged and
        still counted.
        """
        flagged = select_duplicate_cards(await self._list_cards(id))
        results = await asyncio.gather(
            *(self._client.v1.payment_methods.detach_async(method.id) for method in flagged),
            return_exceptions=True,
        )
        for method, result in zip(flagged, results):
            if isinstance(result, BaseException):
                logger.warning(
                    "Failed to detach duplicate payment method",
                    extra={"customer": id, "payment_method": method.id, "error": str(result)},
                )

        logger.info(
            "Flushed duplicate payment methods",
            extra={"customer": id, "flagged": len(flagged)},
        )
        return len(flagged)

    async def charge(
        self, customer_id: str, method_id: str, amount: int, currency: str = "eur"
    ) -> Union[SimplePaymentIntent, DeclinedCharge]:
        """Charge a saved payment method with the customer absent.

        A card decline is returned as a DeclinedCharge carrying the declined
        intent's status; every other Stripe error propagates.
        """
        try:
            intent = await self._client.v1.payment_intents.create_async(
                params={
                    "amount": amount,
                    "currency": currency,
                    "customer": customer_id,
                    "payment_method": method_id,
                    "off_session": True,
                    "confirm": True,
                }
            )
        except stripe.CardError as exc:
            error = getattr(exc, "error", None)
            intent = getattr(error, "payment_intent", None)
            if intent is None:
                raise
            decline_code = getattr(error, "decline_code", None)
            logger.warning(
                "Off-session charge declined",
                extra={
                    "customer": customer_id,
                    "payment_intent": intent.id,
                    "code": exc.code,
                    "decline_code": decline_code,
                },
            )
            return DeclinedCharge(
                id=intent.id,
                status=parse_payment_intent_status(intent.status),
                status_text=intent.status,
                decline_code=decline_code,
                message=getattr(error, "message", None),
            )

        logger.info(
            "Off-session charge attempted",
            extra={"customer": customer_id, "payment_intent": intent.id, "status": intent.status},
        )
        return to_simple_payment_intent(intent)
