from typing import Annotated, Dict, Generic, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, NonNegativeInt, StringConstraints

# Three-letter ISO code, lowercase on the wire ("usd", "eur")
Currency = Annotated[str, StringConstraints(to_lower=True, min_length=3, max_length=3)]

# Seconds since the Unix epoch
Timestamp = int

Metadata = Dict[str, str]

T = TypeVar("T")


class StripeObject(BaseModel):
    """
    Base for every resource decoded from a Stripe response.
    Snapshots are read-only and ignore fields they do not know about.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class StripeParams(BaseModel):
    """
    Base for request parameters. Unset fields never reach the wire.
    """

    model_config = ConfigDict(extra="forbid")

    def to_body(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


class ListObject(StripeObject, Generic[T]):
    object: str = "list"
    data: Tuple[T, ...]
    has_more: bool
    url: Optional[str] = None
    total_count: Optional[NonNegativeInt] = None


class Coupon(StripeObject):
    id: str
    duration: str
    amount_off: Optional[NonNegativeInt] = None
    currency: Optional[Currency] = None
    duration_in_months: Optional[NonNegativeInt] = None
    livemode: Optional[bool] = None
    max_redemptions: Optional[NonNegativeInt] = None
    metadata: Metadata = {}
    percent_off: Optional[float] = None
    redeem_by: Optional[Timestamp] = None
    times_redeemed: Optional[NonNegativeInt] = None
    valid: Optional[bool] = None


class Discount(StripeObject):
    coupon: Coupon
    customer: str
    start: Timestamp
    end: Optional[Timestamp] = None
    subscription: Optional[str] = None


class Plan(StripeObject):
    id: str
    currency: Currency
    interval: str
    amount: Optional[NonNegativeInt] = None
    created: Optional[Timestamp] = None
    interval_count: Optional[NonNegativeInt] = None
    livemode: Optional[bool] = None
    metadata: Metadata = {}
    name: Optional[str] = None
    statement_descriptor: Optional[str] = None
    trial_period_days: Optional[NonNegativeInt] = None
