"""FastAPI routes for PayPal payments: cart payment, balance top-up and the webhook."""

from fastapi import APIRouter, HTTPException, Request

from groove.config import get_settings
from groove.payments.api.schemas import (
    ConfigureGatewayRequest,
    GatewayConfigResponse,
    PaymentSessionResponse,
    PayPalWebhookRequest,
    StatusResponse,
    TopUpRequest,
)
from groove.payments.checkout import start_balance_top_up, start_cart_payment
from groove.payments.gateway import get_gateway
from groove.payments.gateway.fake_adapter import FakePayPalGateway
from groove.payments.webhook import process_webhook_event

payment_router = APIRouter(prefix="/payments", tags=["payments"])


def _session_response(session) -> PaymentSessionResponse:
    return PaymentSessionResponse(
        payment_id=session.payment_id,
        gateway_order_id=session.gateway_order_id,
        approval_url=session.approval_url,
        amount=session.amount,
        currency=session.currency,
        order_id=session.order_id,
    )


@payment_router.post("/paypal/cart/{account_id}", status_code=201, response_model=PaymentSessionResponse)
def pay_cart_with_paypal(account_id: str) -> PaymentSessionResponse:
    """Start a PayPal payment for the account's active cart."""
    return _session_response(start_cart_payment(account_id))


@payment_router.post("/paypal/top-up/{account_id}", status_code=201, response_model=PaymentSessionResponse)
def top_up_balance(account_id: str, body: TopUpRequest) -> PaymentSessionResponse:
    """Start a PayPal payment that credits the account balance."""
    return _session_response(start_balance_top_up(account_id, body.amount))


@payment_router.post("/paypal/webhook", response_model=StatusResponse)
def paypal_webhook(request: Request, body: PayPalWebhookRequest) -> StatusResponse:
    """Receive a PayPal webhook notification."""
    headers = {key.lower(): value for key, value in request.headers.items()}
    if not get_gateway().verify_webhook_signature(headers, body.model_dump()):
        raise HTTPException(status_code=401, detail="Invalid webhook signature")

    outcome = process_webhook_event(body.event_type, body.resource)
    return StatusResponse(status=outcome.value)


@payment_router.post("/gateway/configure", response_model=GatewayConfigResponse)
async def configure_gateway(body: ConfigureGatewayRequest) -> GatewayConfigResponse:
    """Configure the fake PayPal gateway (non-production only)."""
    if get_settings().is_production:
        raise HTTPException(status_code=403, detail="Gateway configuration not available in production")

    gateway = get_gateway()
    if not isinstance(gateway, FakePayPalGateway):
        raise HTTPException(status_code=400, detail="Gateway configuration only available for FakePayPalGateway")

    gateway.configure(
        should_succeed=body.should_succeed,
        failure_reason=body.failure_reason,
    )
    return GatewayConfigResponse(
        gateway=type(gateway).__name__,
        should_succeed=gateway.should_succeed,
        failure_reason=gateway.failure_reason,
    )
