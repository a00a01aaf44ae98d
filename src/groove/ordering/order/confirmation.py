"""Order payment confirmation: command and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from groove.domain import groove
from groove.ordering.order.order import Order


@groove.command(part_of="Order")
class ConfirmOrderPayment:
    order_id = Identifier(required=True)


@groove.command_handler(part_of=Order)
class ConfirmOrderPaymentHandler:
    @handle(ConfirmOrderPayment)
    def confirm_order_payment(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.mark_paid()
        repo.add(order)
