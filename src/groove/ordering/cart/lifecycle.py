"""Closing a cart after its order is paid."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from groove.domain import groove
from groove.ordering.cart.cart import ShoppingCart


@groove.command(part_of="ShoppingCart")
class CheckOutCart:
    cart_id = Identifier(required=True)
    order_id = Identifier()


@groove.command_handler(part_of=ShoppingCart)
class CartLifecycleHandler:
    @handle(CheckOutCart)
    def check_out_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        cart.check_out(order_id=command.order_id)
        repo.add(cart)
