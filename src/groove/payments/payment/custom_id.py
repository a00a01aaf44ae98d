"""CustomId value object: the reference carried on a PayPal order.

PayPal echoes the purchase unit's ``custom_id`` back in webhook events.
It is encoded as ``<purpose>:<amount>:<account_id>``, for example
``CartPayment:59.90:3f2a...`` or ``AddBalance:100.00:3f2a...``.
"""

from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, String

from groove.domain import groove


class PaymentPurpose(Enum):
    CART_PAYMENT = "CartPayment"
    ADD_BALANCE = "AddBalance"


@groove.value_object
class CustomId:
    purpose: String(required=True, choices=PaymentPurpose)
    amount: Float(required=True, min_value=0.01)
    account_id: Identifier(required=True)

    def encode(self):
        return f"{self.purpose}:{self.amount:.2f}:{self.account_id}"

    @classmethod
    def parse(cls, raw):
        parts = (raw or "").split(":", 2)
        if len(parts) != 3 or not all(parts):
            raise ValidationError({"custom_id": [f"Malformed custom id: {raw!r}"]})

        purpose, amount, account_id = parts
        try:
            value = float(amount)
        except ValueError:
            raise ValidationError({"custom_id": [f"Malformed amount in custom id: {raw!r}"]}) from None

        return cls(purpose=purpose, amount=value, account_id=account_id)
