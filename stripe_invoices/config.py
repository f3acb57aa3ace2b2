import os

from dotenv import load_dotenv

from stripe_invoices.errors import ConfigurationError

load_dotenv()

DEFAULT_API_BASE = "https://api.stripe.com/v1"
DEFAULT_TIMEOUT = 30.0


def get_secret_key():
    return os.getenv("STRIPE_SECRET_KEY")


def get_api_base():
    return os.getenv("STRIPE_API_BASE", DEFAULT_API_BASE)


def get_timeout():
    value = os.getenv("STRIPE_TIMEOUT", DEFAULT_TIMEOUT)
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(f"STRIPE_TIMEOUT must be a number of seconds, got {value!r}")


def get_log_level():
    return os.getenv("LOG_LEVEL", "INFO").upper()
