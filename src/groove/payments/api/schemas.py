"""Pydantic request/response schemas for the Payments API.

These are external contracts, separate from the internal Protean commands.
"""

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class TopUpRequest(BaseModel):
    amount: float

    model_config = {"json_schema_extra": {"examples": [{"amount": 50.0}]}}


class PayPalWebhookRequest(BaseModel):
    """A PayPal webhook notification. Only the fields we act on are declared."""

    id: str | None = None
    event_type: str
    resource: dict = {}

    model_config = {"extra": "allow"}


class ConfigureGatewayRequest(BaseModel):
    should_succeed: bool = True
    failure_reason: str = "Payment declined"


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"


class PaymentSessionResponse(BaseModel):
    payment_id: str
    gateway_order_id: str
    approval_url: str | None = None
    amount: float
    currency: str
    order_id: str | None = None


class GatewayConfigResponse(BaseModel):
    gateway: str
    should_succeed: bool
    failure_reason: str
