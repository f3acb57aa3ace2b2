from typing import Optional


class StripeError(Exception):
    """
    Base class for every error raised while talking to the Stripe API
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(StripeError):
    """
    The request never got a response (connection refused, timeout, DNS...)
    """


class ApiError(StripeError):
    """
    Stripe answered with a structured error payload
    """

    def __init__(
        self,
        message: str,
        http_status: int,
        error_type: Optional[str] = None,
        code: Optional[str] = None,
        param: Optional[str] = None,
    ):
        super().__init__(message)
        self.http_status = http_status
        self.error_type = error_type
        self.code = code
        self.param = param

    def to_dict(self) -> dict:
        error = {"type": self.error_type, "message": self.message}
        if self.code:
            error["code"] = self.code
        if self.param:
            error["param"] = self.param
        return {"error": error}


class EncodeError(StripeError):
    """
    Request parameters could not be serialized
    """


class DecodeError(StripeError):
    """
    Response body did not match the expected shape
    """


class ConfigurationError(StripeError, ValueError):
    """
    Client settings are missing or malformed
    """


class MissingSecretKeyError(ConfigurationError):
    """
    No STRIPE_SECRET_KEY is configured
    """
