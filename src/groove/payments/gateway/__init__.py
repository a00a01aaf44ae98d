"""PayPal gateway factory.

Provides get_gateway() / set_gateway() to swap implementations:
- FakePayPalGateway for development and testing
- PayPalRestGateway when GROOVE_PAYMENT_GATEWAY=paypal
"""

from groove.config import get_settings
from groove.payments.gateway.fake_adapter import FakePayPalGateway
from groove.payments.gateway.paypal_adapter import PayPalRestGateway
from groove.payments.gateway.port import PayPalGateway

_current_gateway: PayPalGateway | None = None


def _build_gateway() -> PayPalGateway:
    settings = get_settings()
    if settings.payment_gateway == "paypal":
        return PayPalRestGateway(
            client_id=settings.paypal_client_id,
            client_secret=settings.paypal_client_secret,
            webhook_id=settings.paypal_webhook_id,
            base_url=settings.paypal_base_url,
            return_url=settings.paypal_return_url,
            cancel_url=settings.paypal_cancel_url,
        )
    return FakePayPalGateway()


def get_gateway() -> PayPalGateway:
    """Return the current gateway, building it from settings on first use."""
    global _current_gateway
    if _current_gateway is None:
        _current_gateway = _build_gateway()
    return _current_gateway


def set_gateway(gateway: PayPalGateway) -> None:
    """Override the active gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    """Reset to the gateway configured by settings."""
    global _current_gateway
    _current_gateway = None
