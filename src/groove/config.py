"""Runtime settings read from the environment.

Protean reads its own configuration (providers, brokers) separately;
these are the marketplace and PayPal settings the application code needs.
"""

import os
from dataclasses import dataclass

PAYPAL_SANDBOX_URL = "https://api-m.sandbox.paypal.com"


@dataclass(frozen=True)
class Settings:
    environment: str = "development"
    currency: str = "PLN"
    starting_balance: float = 1000.0
    payment_gateway: str = "fake"
    paypal_base_url: str = PAYPAL_SANDBOX_URL
    paypal_client_id: str = ""
    paypal_client_secret: str = ""
    paypal_webhook_id: str = ""
    paypal_return_url: str = "http://localhost:3000/payment/success"
    paypal_cancel_url: str = "http://localhost:3000/payment/cancel"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            environment=os.getenv("PROTEAN_ENV", "development").lower(),
            currency=os.getenv("GROOVE_CURRENCY", "PLN"),
            starting_balance=float(os.getenv("GROOVE_STARTING_BALANCE", "1000.0")),
            payment_gateway=os.getenv("GROOVE_PAYMENT_GATEWAY", "fake").lower(),
            paypal_base_url=os.getenv("PAYPAL_BASE_URL", PAYPAL_SANDBOX_URL).rstrip("/"),
            paypal_client_id=os.getenv("PAYPAL_CLIENT_ID", ""),
            paypal_client_secret=os.getenv("PAYPAL_CLIENT_SECRET", ""),
            paypal_webhook_id=os.getenv("PAYPAL_WEBHOOK_ID", ""),
            paypal_return_url=os.getenv("PAYPAL_RETURN_URL", cls.paypal_return_url),
            paypal_cancel_url=os.getenv("PAYPAL_CANCEL_URL", cls.paypal_cancel_url),
        )


def get_settings() -> Settings:
    """Settings are re-read on every call so tests can patch the environment."""
    return Settings.from_env()
