"""
Simplified records returned by the SimpleStripe facades.

Every record is a frozen snapshot of the provider-side object at the time of
the call. Nothing here is cached or persisted.
"""
from datetime import datetime, timezone
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

from simple_stripe.status import PaymentIntentStatus


def from_timestamp(seconds: int) -> datetime:
    """Stripe sends epoch seconds; records carry aware UTC datetimes."""
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class SimplePaymentIntent(_Record):
    id: str
    status: PaymentIntentStatus
    status_text: str


class DeclinedCharge(SimplePaymentIntent):
    """Outcome of an off-session charge the card issuer refused."""

    decline_code: Optional[str] = None
    message: Optional[str] = None


class PaymentIntentDetails(SimplePaymentIntent):
    client_secret: Optional[str] = None
    created: datetime
    amount: int
    amount_received: int
    currency: str
    customer: Optional[str] = None
    payment_method: Optional[str] = None


class SimpleSetupIntent(_Record):
    id: str
    status: PaymentIntentStatus
    status_text: str


class SimpleCustomer(_Record):
    id: str


class DeletedCustomerDetails(SimpleCustomer):
    deleted: Literal[True] = True


class ActiveCustomerDetails(SimpleCustomer):
    deleted: Literal[False] = False
    created: datetime
    description: Optional[str] = None


# Tagged on `deleted`: only the active shape carries created and description
CustomerDetails = Union[ActiveCustomerDetails, DeletedCustomerDetails]


class CardExpiry(_Record):
    month: int
    year: int


class PaymentMethod(_Record):
    id: str
    brand: str
    exp: CardExpiry
    last4: str


class CustomerCreateParams(_Record):
    email: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    phone: Optional[str] = None
    metadata: Optional[dict[str, str]] = None

    def to_params(self) -> dict:
        return self.model_dump(exclude_none=True)
