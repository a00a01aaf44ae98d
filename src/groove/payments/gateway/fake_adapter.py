"""Configurable fake PayPal gateway for development and testing.

Simulates PayPal without any external calls. Order creation and capture
can be switched to fail at runtime (see /payments/gateway/configure), and
every call is recorded in ``calls`` for assertions.
"""

from uuid import uuid4

from groove.payments.gateway.port import CaptureResult, GatewayOrder, PayPalGateway

TEST_SIGNATURE = "test-signature"


class FakePayPalGateway(PayPalGateway):
    """Configurable fake PayPal gateway."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Payment declined"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Payment declined") -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def create_order(self, amount: float, currency: str, custom_id: str) -> GatewayOrder:
        self.calls.append(
            {
                "method": "create_order",
                "amount": amount,
                "currency": currency,
                "custom_id": custom_id,
            }
        )

        if self.should_succeed:
            order_id = f"FAKE-{uuid4().hex[:12].upper()}"
            return GatewayOrder(
                success=True,
                gateway_order_id=order_id,
                approval_url=f"https://www.sandbox.paypal.com/checkoutnow?token={order_id}",
            )
        return GatewayOrder(success=False, failure_reason=self.failure_reason)

    def capture_order(self, gateway_order_id: str) -> CaptureResult:
        self.calls.append({"method": "capture_order", "gateway_order_id": gateway_order_id})

        if self.should_succeed:
            return CaptureResult(
                success=True,
                capture_id=f"FAKE-CAP-{uuid4().hex[:12].upper()}",
                gateway_status="COMPLETED",
            )
        return CaptureResult(
            success=False,
            gateway_status="DECLINED",
            failure_reason=self.failure_reason,
        )

    def verify_webhook_signature(self, headers: dict[str, str], body: dict) -> bool:  # noqa: ARG002
        return headers.get("paypal-transmission-sig") == TEST_SIGNATURE
