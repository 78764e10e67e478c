import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from simple_stripe.errors import ConfigurationError

# Stripe API version the record projections were written against. Not configurable.
DEFAULT_API_VERSION = "2020-08-27"


def load_settings(env_path: Optional[Path] = None) -> dict:
    """Read the Stripe secret key from the environment, loading a .env file first.

    Variables already present in the process environment win over the file.
    """
    load_dotenv(dotenv_path=env_path or Path.cwd() / ".env")

    secret_key = os.getenv("STRIPE_SECRET_KEY")
    if not secret_key:
        raise ConfigurationError("STRIPE_SECRET_KEY is not set. Check your .env file.")

    return {"secret_key": secret_key}
