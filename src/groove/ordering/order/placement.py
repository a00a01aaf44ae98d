"""Order placement: command and handler.

Placement is idempotent on the order number. Webhook redeliveries and
client retries that reuse a number get the existing order back.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from groove.domain import groove
from groove.ordering.cart.cart import CartStatus, ShoppingCart
from groove.ordering.order.order import Order, PaymentMethod
from groove.utils.logging import get_logger

logger = get_logger(__name__)


@groove.command(part_of="Order")
class PlaceOrder:
    account_id = Identifier(required=True)
    cart_id = Identifier(required=True)
    order_number = String(required=True, max_length=64)
    payment_method = String(required=True, choices=PaymentMethod)
    currency = String(max_length=3, default="PLN")


def find_order_by_number(order_number):
    results = current_domain.repository_for(Order)._dao.query.filter(order_number=order_number).all()
    if not results or not results.items:
        return None
    return results.first


@groove.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        existing = find_order_by_number(command.order_number)
        if existing is not None:
            logger.info(
                "Order already placed for order number",
                order_number=command.order_number,
                order_id=str(existing.id),
            )
            return str(existing.id)

        cart = current_domain.repository_for(ShoppingCart).get(command.cart_id)
        if str(cart.account_id) != str(command.account_id):
            raise ValidationError({"cart_id": ["Cart does not belong to this account"]})
        if CartStatus(cart.status) != CartStatus.ACTIVE:
            raise ValidationError({"cart_id": ["Cart is already checked out"]})
        if cart.is_empty:
            raise ValidationError({"cart": ["The cart is empty."]})

        lines = [
            {
                "item_type": item.item_type,
                "item_id": str(item.item_id),
                "title": item.title,
                "unit_price": item.unit_price,
                "quantity": item.quantity,
            }
            for item in cart.items
        ]

        order = Order.place(
            account_id=command.account_id,
            cart_id=command.cart_id,
            order_number=command.order_number,
            lines=lines,
            payment_method=command.payment_method,
            currency=command.currency,
        )
        current_domain.repository_for(Order).add(order)
        return str(order.id)
