import logging
from enum import Enum
from typing import Any, Mapping, Optional, Type, TypeVar, Union
from urllib.parse import urlencode

import requests
from pydantic import BaseModel, ValidationError

from stripe_invoices import config
from stripe_invoices.errors import (
    ApiError,
    DecodeError,
    EncodeError,
    MissingSecretKeyError,
    TransportError,
)
from stripe_invoices.models import StripeParams

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

Body = Union[BaseModel, Mapping[str, Any]]


def _dump(params: Body) -> dict:
    if isinstance(params, StripeParams):
        return params.to_body()
    if isinstance(params, BaseModel):
        return params.model_dump(mode="json", exclude_none=True)
    return {key: value for key, value in params.items() if value is not None}


def encode_query(params: Optional[Body]) -> str:
    """
    Encode flat parameters as a URL query string, keeping field order.
    Returns an empty string when nothing is set.
    """
    if params is None:
        return ""
    pairs = []
    for key, value in _dump(params).items():
        if isinstance(value, Enum):
            value = value.value
        if isinstance(value, bool):
            pairs.append((key, "true" if value else "false"))
        elif isinstance(value, (str, int, float)):
            pairs.append((key, str(value)))
        else:
            raise EncodeError(
                f"Cannot encode parameter '{key}' of type {type(value).__name__} in a query string"
            )
    return urlencode(pairs)


class Client:
    """
    Thin HTTP client for the Stripe REST API.

    Every call authenticates, sends JSON, and validates the JSON response
    into the requested model. Failures are raised as StripeError subclasses.
    """

    def __init__(
        self,
        secret_key: str,
        api_base: str = config.DEFAULT_API_BASE,
        timeout: float = config.DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": f"Bearer {secret_key}",
        }

    def get(self, path: str, model: Type[M]) -> M:
        return self._request("GET", path, model)

    def post(self, path: str, body: Body, model: Type[M]) -> M:
        return self._request("POST", path, model, json=_dump(body))

    def post_empty(self, path: str, model: Type[M]) -> M:
        return self._request("POST", path, model)

    def close(self):
        self.session.close()

    def _request(self, method: str, path: str, model: Type[M], json: Optional[dict] = None) -> M:
        logger.debug(f"{method} {path}")
        try:
            response = self.session.request(
                method,
                f"{self.api_base}{path}",
                headers=self.headers,
                json=json,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise TransportError(str(e)) from e

        if not 200 <= response.status_code < 300:
            error = self._api_error(response)
            logger.warning(f"{method} {path} returned {error.http_status}: {error.message}")
            raise error

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning(f"{method} {path} returned a non-JSON body")
            raise DecodeError(f"Response body is not valid JSON: {e}") from e

        try:
            return model.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"{method} {path} returned an unexpected {model.__name__} shape")
            raise DecodeError(str(e)) from e

    @staticmethod
    def _api_error(response) -> ApiError:
        try:
            error = response.json().get("error") or {}
        except (ValueError, AttributeError):
            error = {}
        if not isinstance(error, dict):
            error = {}
        return ApiError(
            error.get("message") or f"Stripe API returned status {response.status_code}",
            http_status=response.status_code,
            error_type=error.get("type"),
            code=error.get("code"),
            param=error.get("param"),
        )


def get_client() -> Client:
    """
    Create and return a Client instance using environment variables
    """
    secret_key = config.get_secret_key()
    if not secret_key:
        raise MissingSecretKeyError("STRIPE_SECRET_KEY is not set")
    return Client(
        secret_key,
        api_base=config.get_api_base(),
        timeout=config.get_timeout(),
    )
