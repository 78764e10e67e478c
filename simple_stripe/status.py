from enum import Enum


class PaymentIntentStatus(str, Enum):
    REQUIRES_PAYMENT_METHOD = "requires_payment_method"
    REQUIRES_CONFIRMATION = "requires_confirmation"
    REQUIRES_ACTION = "requires_action"
    PROCESSING = "processing"
    REQUIRES_CAPTURE = "requires_capture"
    CANCELLED = "canceled"
    SUCCEEDED = "succeeded"
    UNKNOWN = "unknown"


_STATUS_BY_TEXT = {
    "requires_payment_method": PaymentIntentStatus.REQUIRES_PAYMENT_METHOD,
    "requires_confirmation": PaymentIntentStatus.REQUIRES_CONFIRMATION,
    "requires_action": PaymentIntentStatus.REQUIRES_ACTION,
    "processing": PaymentIntentStatus.PROCESSING,
    "requires_capture": PaymentIntentStatus.REQUIRES_CAPTURE,
    "canceled": PaymentIntentStatus.CANCELLED,
    "succeeded": PaymentIntentStatus.SUCCEEDED,
}


def parse_payment_intent_status(status) -> PaymentIntentStatus:
    """Map a Stripe status string onto PaymentIntentStatus.

    Anything Stripe may add later (or a missing status) degrades to UNKNOWN.
    """
    return _STATUS_BY_TEXT.get(status, PaymentIntentStatus.UNKNOWN)
