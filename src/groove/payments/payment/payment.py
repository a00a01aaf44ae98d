"""Payment aggregate: one PayPal order and what its capture pays for.

A payment either settles a cart order or tops up an account balance.
It is looked up by the PayPal order id when the approval webhook arrives.

State Machine:
    CREATED → CAPTURED
    CREATED → FAILED
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, String

from groove.domain import groove
from groove.payments.payment.custom_id import CustomId, PaymentPurpose
from groove.payments.payment.events import PaymentCaptured, PaymentFailed, PaymentInitiated


class PaymentStatus(Enum):
    CREATED = "Created"
    CAPTURED = "Captured"
    FAILED = "Failed"


_VALID_TRANSITIONS = {
    PaymentStatus.CREATED: {PaymentStatus.CAPTURED, PaymentStatus.FAILED},
    PaymentStatus.CAPTURED: set(),  # Terminal
    PaymentStatus.FAILED: set(),  # Terminal
}


@groove.aggregate
class Payment:
    gateway_order_id = String(required=True, max_length=255, unique=True)
    account_id = Identifier(required=True)
    purpose = String(required=True, choices=PaymentPurpose)
    amount = Float(required=True, min_value=0.01)
    currency = String(max_length=3, default="PLN")
    status = String(choices=PaymentStatus, default=PaymentStatus.CREATED.value)
    order_id = Identifier()
    cart_id = Identifier()
    approval_url = String(max_length=1000)
    capture_id = String(max_length=255)
    failure_reason = String(max_length=500)
    created_at = DateTime()
    captured_at = DateTime()
    failed_at = DateTime()

    @property
    def custom_id(self):
        return CustomId(purpose=self.purpose, amount=self.amount, account_id=self.account_id)

    @property
    def is_settled(self):
        return PaymentStatus(self.status) != PaymentStatus.CREATED

    def _assert_can_transition(self, target):
        current = PaymentStatus(self.status)
        if target not in _VALID_TRANSITIONS[current]:
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target.value}"]})

    @classmethod
    def initiate(
        cls,
        gateway_order_id,
        account_id,
        purpose,
        amount,
        currency,
        approval_url=None,
        order_id=None,
        cart_id=None,
    ):
        if purpose == PaymentPurpose.CART_PAYMENT.value and not order_id:
            raise ValidationError({"order_id": ["Cart payments must reference an order"]})

        now = datetime.now(UTC)
        payment = cls(
            gateway_order_id=gateway_order_id,
            account_id=account_id,
            purpose=purpose,
            amount=round(amount, 2),
            currency=currency,
            status=PaymentStatus.CREATED.value,
            approval_url=approval_url,
            order_id=order_id,
            cart_id=cart_id,
            created_at=now,
        )
        payment.raise_(
            PaymentInitiated(
                payment_id=payment.id,
                gateway_order_id=gateway_order_id,
                account_id=account_id,
                purpose=purpose,
                amount=payment.amount,
                currency=currency,
                order_id=order_id,
                created_at=now,
            )
        )
        return payment

    def record_capture(self, capture_id):
        self._assert_can_transition(PaymentStatus.CAPTURED)

        now = datetime.now(UTC)
        self.status = PaymentStatus.CAPTURED.value
        self.capture_id = capture_id
        self.captured_at = now
        self.raise_(
            PaymentCaptured(
                payment_id=self.id,
                gateway_order_id=self.gateway_order_id,
                capture_id=capture_id,
                purpose=self.purpose,
                amount=self.amount,
                captured_at=now,
            )
        )

    def record_failure(self, reason):
        self._assert_can_transition(PaymentStatus.FAILED)

        now = datetime.now(UTC)
        self.status = PaymentStatus.FAILED.value
        self.failure_reason = reason
        self.failed_at = now
        self.raise_(
            PaymentFailed(
                payment_id=self.id,
                gateway_order_id=self.gateway_order_id,
                reason=reason,
                failed_at=now,
            )
        )
