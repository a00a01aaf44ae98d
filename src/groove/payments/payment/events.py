"""Domain events for the Payment aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from groove.domain import groove


@groove.event(part_of="Payment")
class PaymentInitiated:
    """A PayPal order was created and awaits buyer approval."""

    __version__ = 1

    payment_id = Identifier(required=True)
    gateway_order_id = String(required=True)
    account_id = Identifier(required=True)
    purpose = String(required=True)
    amount = Float(required=True)
    currency = String(required=True)
    order_id = Identifier()
    created_at = DateTime(required=True)


@groove.event(part_of="Payment")
class PaymentCaptured:
    """PayPal captured the approved order; the money is ours."""

    __version__ = 1

    payment_id = Identifier(required=True)
    gateway_order_id = String(required=True)
    capture_id = String()
    purpose = String(required=True)
    amount = Float(required=True)
    captured_at = DateTime(required=True)


@groove.event(part_of="Payment")
class PaymentFailed:
    __version__ = 1

    payment_id = Identifier(required=True)
    gateway_order_id = String(required=True)
    reason = String()
    failed_at = DateTime(required=True)
