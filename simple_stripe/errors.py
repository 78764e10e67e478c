import stripe

# Provider errors are surfaced untouched; these aliases let callers catch them
# without importing the SDK themselves.
StripeError = stripe.StripeError
CardError = stripe.CardError


class ConfigurationError(RuntimeError):
    """Raised when the Stripe secret key is missing or empty."""
