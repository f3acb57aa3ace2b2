from unittest.mock import MagicMock

import pytest

from stripe_invoices.client import Client


@pytest.fixture
def invoice_item_payload() -> dict:
    return {
        "id": "ii_123",
        "object": "line_item",
        "amount": 2500,
        "currency": "usd",
        "description": "Pro plan",
        "discountable": True,
        "livemode": False,
        "metadata": {"order": "42"},
        "period": {"start": 1700000000, "end": 1702592000},
        "plan": {
            "id": "pro-monthly",
            "amount": 2500,
            "currency": "usd",
            "interval": "month",
            "interval_count": 1,
            "livemode": False,
            "metadata": {},
            "name": "Pro",
        },
        "proration": False,
        "quantity": 1,
        "subscription": "sub_123",
        "subscription_item": "si_123",
        "type": "subscription",
    }


@pytest.fixture
def invoice_payload(invoice_item_payload: dict) -> dict:
    return {
        "id": "in_123",
        "object": "invoice",
        "amount_due": 2250,
        "application_fee": None,
        "attempt_count": 0,
        "attempted": False,
        "charge": None,
        "closed": False,
        "currency": "usd",
        "customer": "cus_123",
        "date": 1700000000,
        "description": None,
        "discount": {
            "object": "discount",
            "coupon": {
                "id": "TENOFF",
                "duration": "once",
                "percent_off": 10.0,
                "valid": True,
            },
            "customer": "cus_123",
            "start": 1700000000,
            "end": None,
            "subscription": "sub_123",
        },
        "ending_balance": None,
        "forgiven": False,
        "lines": {
            "object": "list",
            "data": [invoice_item_payload],
            "has_more": False,
            "total_count": 1,
            "url": "/v1/invoices/in_123/lines",
        },
        "livemode": False,
        "metadata": {},
        "next_payment_attempt": 1700003600,
        "paid": False,
        "period_end": 1702592000,
        "period_start": 1700000000,
        "receipt_number": None,
        "starting_balance": 0,
        "subscription": "sub_123",
        "subtotal": 2500,
        "tax": None,
        "tax_percent": None,
        "total": 2250,
        "webhooks_delivered_at": 1700000100,
    }


@pytest.fixture
def invoice_list_payload(invoice_payload: dict) -> dict:
    return {
        "object": "list",
        "data": [invoice_payload],
        "has_more": True,
        "url": "/v1/invoices",
    }


@pytest.fixture
def stripe_client() -> MagicMock:
    """Collaborator double; assertions are made on the calls it receives."""
    return MagicMock(spec=Client)
