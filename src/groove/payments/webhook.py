"""PayPal webhook processing.

Only ``CHECKOUT.ORDER.APPROVED`` changes state: the approved order is
captured, then the top-up is credited or the cart order is confirmed and
the cart closed. Capture notifications are acknowledged and ignored, and
any other event type is rejected.

Redelivery of an approval for a payment that is already captured or
failed is a no-op, so a buyer is never credited or confirmed twice.
"""

from enum import Enum

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from groove.identity.account.balance import CreditBalance
from groove.ordering.cart.cart import CartStatus, ShoppingCart
from groove.ordering.cart.lifecycle import CheckOutCart
from groove.ordering.order.confirmation import ConfirmOrderPayment
from groove.ordering.order.order import Order
from groove.payments.gateway import get_gateway
from groove.payments.payment.capture import RecordCapture, RecordCaptureFailure
from groove.payments.payment.custom_id import CustomId, PaymentPurpose
from groove.payments.payment.initiation import find_payment_by_gateway_order
from groove.utils.logging import get_logger

logger = get_logger(__name__)

ORDER_APPROVED = "CHECKOUT.ORDER.APPROVED"
IGNORED_EVENT_TYPES = frozenset({"PAYMENT.CAPTURE.COMPLETED", "PAYMENT.CAPTURE.REFUNDED"})


class WebhookOutcome(Enum):
    BALANCE_CREDITED = "balance_credited"
    ORDER_CONFIRMED = "order_confirmed"
    CAPTURE_FAILED = "capture_failed"
    ALREADY_PROCESSED = "already_processed"
    IGNORED = "ignored"


def _custom_id_of(resource):
    units = resource.get("purchase_units") or []
    if not units:
        return None
    return units[0].get("custom_id")


def _verify_custom_id(payment, raw_custom_id):
    """Reject an event whose custom id disagrees with the payment we recorded."""
    if not raw_custom_id:
        return

    custom_id = CustomId.parse(raw_custom_id)
    if (
        custom_id.purpose != payment.purpose
        or str(custom_id.account_id) != str(payment.account_id)
        or round(custom_id.amount, 2) != round(payment.amount, 2)
    ):
        raise ValidationError({"custom_id": ["Custom id does not match the recorded payment"]})


def _settle_cart_payment(payment):
    order = current_domain.repository_for(Order).get(payment.order_id)
    if not order.is_paid:
        current_domain.process(ConfirmOrderPayment(order_id=str(order.id)), asynchronous=False)

    if payment.cart_id:
        cart = current_domain.repository_for(ShoppingCart).get(payment.cart_id)
        if CartStatus(cart.status) == CartStatus.ACTIVE:
            current_domain.process(
                CheckOutCart(cart_id=str(cart.id), order_id=str(order.id)),
                asynchronous=False,
            )
        else:
            logger.info("Cart already closed for paid order", cart_id=str(cart.id), order_id=str(order.id))

    return WebhookOutcome.ORDER_CONFIRMED


def _settle_approved_order(resource):
    gateway_order_id = resource.get("id")
    if not gateway_order_id:
        raise ValidationError({"resource": ["Approved order event carries no order id"]})

    payment = find_payment_by_gateway_order(gateway_order_id)
    if payment is None:
        raise ObjectNotFoundError({"_entity": f"No payment recorded for PayPal order {gateway_order_id}"})

    _verify_custom_id(payment, _custom_id_of(resource))

    if payment.is_settled:
        logger.info(
            "Approval already processed",
            gateway_order_id=gateway_order_id,
            payment_id=str(payment.id),
            status=payment.status,
        )
        return WebhookOutcome.ALREADY_PROCESSED

    capture = get_gateway().capture_order(gateway_order_id)
    if not capture.success:
        current_domain.process(
            RecordCaptureFailure(payment_id=str(payment.id), reason=capture.failure_reason),
            asynchronous=False,
        )
        logger.warning(
            "PayPal capture failed",
            gateway_order_id=gateway_order_id,
            reason=capture.failure_reason,
        )
        return WebhookOutcome.CAPTURE_FAILED

    current_domain.process(
        RecordCapture(payment_id=str(payment.id), capture_id=capture.capture_id),
        asynchronous=False,
    )

    if payment.purpose == PaymentPurpose.ADD_BALANCE.value:
        current_domain.process(
            CreditBalance(account_id=str(payment.account_id), amount=payment.amount, reference=gateway_order_id),
            asynchronous=False,
        )
        outcome = WebhookOutcome.BALANCE_CREDITED
    else:
        outcome = _settle_cart_payment(payment)

    logger.info(
        "PayPal payment settled",
        gateway_order_id=gateway_order_id,
        account_id=str(payment.account_id),
        outcome=outcome.value,
    )
    return outcome


def process_webhook_event(event_type, resource) -> WebhookOutcome:
    logger.info("PayPal webhook received", event_type=event_type)

    if event_type in IGNORED_EVENT_TYPES:
        return WebhookOutcome.IGNORED
    if event_type != ORDER_APPROVED:
        raise ValidationError({"event_type": ["Unknown event type."]})

    return _settle_approved_order(resource or {})
