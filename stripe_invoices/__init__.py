from stripe_invoices.client import Client, get_client
from stripe_invoices.errors import (
    ApiError,
    ConfigurationError,
    DecodeError,
    EncodeError,
    MissingSecretKeyError,
    StripeError,
    TransportError,
)
from stripe_invoices.invoices import (
    Invoice,
    InvoiceCreateParams,
    InvoiceItem,
    InvoiceItemParams,
    InvoiceItemType,
    InvoiceListParams,
    InvoiceParams,
    InvoiceUpdateParams,
    Period,
)
from stripe_invoices.models import Coupon, Discount, ListObject, Plan

__all__ = [
    "ApiError",
    "Client",
    "ConfigurationError",
    "Coupon",
    "DecodeError",
    "Discount",
    "EncodeError",
    "Invoice",
    "InvoiceCreateParams",
    "InvoiceItem",
    "InvoiceItemParams",
    "InvoiceItemType",
    "InvoiceListParams",
    "InvoiceParams",
    "InvoiceUpdateParams",
    "ListObject",
    "MissingSecretKeyError",
    "Period",
    "Plan",
    "StripeError",
    "TransportError",
    "get_client",
]
