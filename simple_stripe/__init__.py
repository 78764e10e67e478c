from simple_stripe.client import SimpleStripe
from simple_stripe.errors import CardError, ConfigurationError, StripeError
from simple_stripe.models import (
    ActiveCustomerDetails,
    CardExpiry,
    CustomerCreateParams,
    CustomerDetails,
    DeclinedCharge,
    DeletedCustomerDetails,
    PaymentIntentDetails,
    PaymentMethod,
    SimpleCustomer,
    SimplePaymentIntent,
    SimpleSetupIntent,
)
from simple_stripe.status import PaymentIntentStatus

__all__ = [
    "ActiveCustomerDetails",
    "CardError",
    "CardExpiry",
    "ConfigurationError",
    "CustomerCreateParams",
    "CustomerDetails",
    "DeclinedCharge",
    "DeletedCustomerDetails",
    "PaymentIntentDetails",
    "PaymentIntentStatus",
    "PaymentMethod",
    "SimpleCustomer",
    "SimplePaymentIntent",
    "SimpleSetupIntent",
    "SimpleStripe",
    "StripeError",
]
