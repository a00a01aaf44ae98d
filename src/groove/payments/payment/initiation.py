"""Payment initiation: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from groove.domain import groove
from groove.payments.payment.custom_id import PaymentPurpose
from groove.payments.payment.payment import Payment


@groove.command(part_of="Payment")
class InitiatePayment:
    """Record a PayPal order that was created for a cart or a balance top-up."""

    gateway_order_id = String(required=True, max_length=255)
    account_id = Identifier(required=True)
    purpose = String(required=True, choices=PaymentPurpose)
    amount = Float(required=True, min_value=0.01)
    currency = String(max_length=3, default="PLN")
    approval_url = String(max_length=1000)
    order_id = Identifier()
    cart_id = Identifier()


def find_payment_by_gateway_order(gateway_order_id):
    results = (
        current_domain.repository_for(Payment)._dao.query.filter(gateway_order_id=gateway_order_id).all()
    )
    if not results or not results.items:
        return None
    return results.first


@groove.command_handler(part_of=Payment)
class InitiatePaymentHandler:
    @handle(InitiatePayment)
    def initiate_payment(self, command):
        if find_payment_by_gateway_order(command.gateway_order_id) is not None:
            raise ValidationError({"gateway_order_id": ["Payment already recorded for this PayPal order"]})

        payment = Payment.initiate(
            gateway_order_id=command.gateway_order_id,
            account_id=command.account_id,
            purpose=command.purpose,
            amount=command.amount,
            currency=command.currency,
            approval_url=command.approval_url,
            order_id=command.order_id,
            cart_id=command.cart_id,
        )
        current_domain.repository_for(Payment).add(payment)
        return str(payment.id)
