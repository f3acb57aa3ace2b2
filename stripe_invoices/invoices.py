from enum import Enum
from typing import Optional

from pydantic import Field, NonNegativeInt, field_validator

from stripe_invoices.client import Client, encode_query
from stripe_invoices.models import (
    Currency,
    Discount,
    ListObject,
    Metadata,
    Plan,
    StripeObject,
    StripeParams,
    Timestamp,
)


class InvoiceParams(StripeParams):
    """
    Parameters for creating or updating an invoice.

    See https://stripe.com/docs/api#create_invoice and https://stripe.com/docs/api#update_invoice
    """

    application_fee: Optional[NonNegativeInt] = None
    customer: Optional[str] = None
    description: Optional[str] = None
    statement_descriptor: Optional[str] = None
    subscription: Optional[str] = None
    tax_percent: Optional[float] = None
    closed: Optional[bool] = None
    forgiven: Optional[bool] = None


InvoiceCreateParams = InvoiceParams
InvoiceUpdateParams = InvoiceParams


class InvoiceItemParams(StripeParams):
    amount: Optional[int] = None
    currency: Optional[Currency] = None
    customer: Optional[str] = None
    description: Optional[str] = None
    discountable: Optional[bool] = None
    invoice: Optional[str] = None
    # Flags, not a mapping or a subscription id
    metadata: Optional[bool] = None
    subscription: Optional[bool] = None


class InvoiceListParams(StripeParams):
    limit: Optional[NonNegativeInt] = None
    customer: Optional[str] = None


class Period(StripeObject):
    start: Timestamp
    end: Timestamp


class InvoiceItemType(str, Enum):
    INVOICEITEM = "invoiceitem"
    SUBSCRIPTION = "subscription"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class InvoiceItem(StripeObject):
    """
    A Stripe invoice line item.

    See https://stripe.com/docs/api#invoice_line_item_object
    """

    id: str
    amount: int
    currency: Currency
    description: Optional[str] = None
    discountable: bool
    livemode: bool
    metadata: Metadata
    period: Period
    plan: Optional[Plan] = None
    proration: bool
    quantity: Optional[NonNegativeInt] = None
    subscription: Optional[str] = None
    subscription_item: Optional[str] = None
    # Not sent back when the item is created through /invoiceitems
    item_type: InvoiceItemType = Field(default=InvoiceItemType.UNKNOWN, alias="type")

    @field_validator("item_type", mode="before")
    @classmethod
    def coerce_item_type(cls, value):
        if value is None:
            return InvoiceItemType.UNKNOWN
        return InvoiceItemType(value)

    @classmethod
    def create(cls, client: Client, params: InvoiceItemParams) -> "InvoiceItem":
        """
        Create an invoice line item.

        See https://stripe.com/docs/api#create_invoiceitem
        """
        return client.post("/invoiceitems", params, cls)


class Invoice(StripeObject):
    """
    A Stripe invoice.

    See https://stripe.com/docs/api#invoice_object
    """

    id: str
    amount_due: NonNegativeInt
    application_fee: Optional[NonNegativeInt] = None
    attempt_count: NonNegativeInt
    attempted: bool
    charge: Optional[str] = None
    closed: bool
    currency: Currency
    customer: str
    date: Timestamp
    description: Optional[str] = None
    discount: Optional[Discount] = None
    ending_balance: Optional[int] = None
    forgiven: bool
    lines: ListObject[InvoiceItem]
    livemode: bool
    metadata: Metadata
    next_payment_attempt: Optional[Timestamp] = None
    paid: bool
    period_end: Timestamp
    period_start: Timestamp
    receipt_number: Optional[str] = None
    starting_balance: int
    statement_descriptor: Optional[str] = None
    subscription: Optional[str] = None
    subscription_proration_date: Optional[Timestamp] = None
    subtotal: int
    tax: Optional[int] = None
    tax_percent: Optional[float] = None
    total: int
    webhooks_delivered_at: Optional[Timestamp] = None

    @classmethod
    def create(cls, client: Client, params: InvoiceParams) -> "Invoice":
        """
        Create a new invoice.

        See https://stripe.com/docs/api#create_invoice
        """
        return client.post("/invoices", params, cls)

    @classmethod
    def retrieve(cls, client: Client, invoice_id: str) -> "Invoice":
        """
        Retrieve the details of an invoice.

        See https://stripe.com/docs/api#retrieve_invoice
        """
        return client.get(f"/invoices/{invoice_id}", cls)

    @classmethod
    def pay(cls, client: Client, invoice_id: str) -> "Invoice":
        """
        Pay an invoice. No idempotency key is sent, so a retried call may charge twice.

        See https://stripe.com/docs/api#pay_invoice
        """
        return client.post_empty(f"/invoices/{invoice_id}/pay", cls)

    @classmethod
    def update(cls, client: Client, invoice_id: str, params: InvoiceParams) -> "Invoice":
        """
        Update an invoice.

        See https://stripe.com/docs/api#update_invoice
        """
        return client.post(f"/invoices/{invoice_id}", params, cls)

    @classmethod
    def list(cls, client: Client, params: Optional[InvoiceListParams] = None) -> "ListObject[Invoice]":
        """
        List invoices, optionally filtered by customer and capped by limit.

        See https://stripe.com/docs/api#list_invoices
        """
        query = encode_query(params)
        path = f"/invoices?{query}" if query else "/invoices"
        return client.get(path, ListObject[cls])
