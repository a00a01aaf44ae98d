"""PayPal gateway port (abstract interface).

The contract every PayPal adapter implements, so the fake adapter used in
development and tests and the REST adapter used in production can be
swapped without touching application code.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class GatewayOrder:
    """A PayPal order created for the buyer to approve."""

    success: bool
    gateway_order_id: str | None = None
    approval_url: str | None = None
    failure_reason: str | None = None


@dataclass(frozen=True)
class CaptureResult:
    """Result of capturing an approved PayPal order."""

    success: bool
    capture_id: str | None = None
    gateway_status: str | None = None
    failure_reason: str | None = None


class PayPalGateway(ABC):
    """Abstract PayPal gateway interface."""

    @abstractmethod
    def create_order(self, amount: float, currency: str, custom_id: str) -> GatewayOrder:
        """Create a CAPTURE-intent order for the buyer to approve."""
        ...

    @abstractmethod
    def capture_order(self, gateway_order_id: str) -> CaptureResult:
        """Capture an order after the buyer approved it."""
        ...

    @abstractmethod
    def verify_webhook_signature(self, headers: dict[str, str], body: dict) -> bool:
        """Verify that a webhook delivery really comes from PayPal."""
        ...
