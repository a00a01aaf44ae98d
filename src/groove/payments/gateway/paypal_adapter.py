"""PayPal REST gateway adapter.

Talks to the PayPal REST API with ``requests``:
- OAuth2 client-credentials token (``/v1/oauth2/token``), cached until expiry
- Orders v2 create and capture (``/v2/checkout/orders``)
- Webhook signature verification (``/v1/notifications/verify-webhook-signature``)
"""

import time

import requests

from groove.payments.gateway.port import CaptureResult, GatewayOrder, PayPalGateway
from groove.utils.logging import get_logger

logger = get_logger(__name__)

REQUEST_TIMEOUT = 15

# Header names PayPal signs webhook deliveries with (lower-cased)
_SIGNATURE_HEADERS = {
    "auth_algo": "paypal-auth-algo",
    "cert_url": "paypal-cert-url",
    "transmission_id": "paypal-transmission-id",
    "transmission_sig": "paypal-transmission-sig",
    "transmission_time": "paypal-transmission-time",
}


class PayPalRestGateway(PayPalGateway):
    """Production PayPal adapter."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        webhook_id: str,
        base_url: str,
        return_url: str | None = None,
        cancel_url: str | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.webhook_id = webhook_id
        self.base_url = base_url.rstrip("/")
        self.return_url = return_url
        self.cancel_url = cancel_url
        self.session = session or requests.Session()
        self._token: str | None = None
        self._token_expires_at: float = 0.0

    # -------------------------------------------------------------------
    # Auth
    # -------------------------------------------------------------------
    def _access_token(self) -> str:
        now = time.time()
        if self._token and now < self._token_expires_at:
            return self._token

        response = self.session.post(
            f"{self.base_url}/v1/oauth2/token",
            auth=(self.client_id, self.client_secret),
            data={"grant_type": "client_credentials"},
            headers={"Accept": "application/json"},
            timeout=REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        payload = response.json()

        self._token = payload["access_token"]
        # Refresh a minute early
        self._token_expires_at = now + max(int(payload.get("expires_in", 0)) - 60, 0)
        return self._token

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._access_token()}",
            "Content-Type": "application/json",
        }

    # -------------------------------------------------------------------
    # Orders
    # -------------------------------------------------------------------
    def create_order(self, amount: float, currency: str, custom_id: str) -> GatewayOrder:
        body = {
            "intent": "CAPTURE",
            "purchase_units": [
                {
                    "amount": {"currency_code": currency, "value": f"{amount:.2f}"},
                    "custom_id": custom_id,
                }
            ],
        }
        if self.return_url and self.cancel_url:
            body["application_context"] = {
                "return_url": self.return_url,
                "cancel_url": self.cancel_url,
            }

        try:
            response = self.session.post(
                f"{self.base_url}/v2/checkout/orders",
                json=body,
                headers=self._headers(),
                timeout=REQUEST_TIMEOUT,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.error("PayPal order creation failed", custom_id=custom_id, error=str(exc))
            return GatewayOrder(success=False, failure_reason=str(exc))

        payload = response.json()
        approval_url = next(
            (link["href"] for link in payload.get("links", []) if link.get("rel") in ("approve", "payer-action")),
            None,
        )
        return GatewayOrder(success=True, gateway_order_id=payload["id"], approval_url=approval_url)

    def capture_order(self, gateway_order_id: str) -> CaptureResult:
        try:
            response = self.session.post(
                f"{self.base_url}/v2/checkout/orders/{gateway_order_id}/capture",
                headers=self._headers(),
                timeout=REQUEST_TIMEOUT,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.error("PayPal capture failed", gateway_order_id=gateway_order_id, error=str(exc))
            return CaptureResult(success=False, gateway_status="ERROR", failure_reason=str(exc))

        payload = response.json()
        status = payload.get("status")
        captures = [
            capture
            for unit in payload.get("purchase_units", [])
            for capture in unit.get("payments", {}).get("captures", [])
        ]
        capture_id = captures[0]["id"] if captures else None

        if status != "COMPLETED":
            return CaptureResult(
                success=False,
                capture_id=capture_id,
                gateway_status=status,
                failure_reason=f"Capture finished with status {status}",
            )
        return CaptureResult(success=True, capture_id=capture_id, gateway_status=status)

    # -------------------------------------------------------------------
    # Webhooks
    # -------------------------------------------------------------------
    def verify_webhook_signature(self, headers: dict[str, str], body: dict) -> bool:
        lowered = {key.lower(): value for key, value in headers.items()}
        if not all(lowered.get(header) for header in _SIGNATURE_HEADERS.values()):
            return False

        verification = {field: lowered[header] for field, header in _SIGNATURE_HEADERS.items()}
        verification["webhook_id"] = self.webhook_id
        verification["webhook_event"] = body

        try:
            response = self.session.post(
                f"{self.base_url}/v1/notifications/verify-webhook-signature",
                json=verification,
                headers=self._headers(),
                timeout=REQUEST_TIMEOUT,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.error("PayPal webhook verification failed", error=str(exc))
            return False

        return response.json().get("verification_status") == "SUCCESS"
