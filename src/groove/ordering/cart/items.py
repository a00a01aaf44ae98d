"""Cart item management: commands and handler.

Carts are addressed by account: the first item added creates the account's
active cart, and later commands act on that cart.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from groove.catalogue.lookup import ItemType, find_purchasable
from groove.domain import groove
from groove.identity.account.account import Account
from groove.ordering.cart.cart import ShoppingCart
from groove.ordering.cart.queries import find_active_cart


@groove.command(part_of="ShoppingCart")
class AddToCart:
    account_id = Identifier(required=True)
    item_type = String(required=True, choices=ItemType)
    item_id = Identifier(required=True)
    quantity = Integer(default=1, min_value=1)


@groove.command(part_of="ShoppingCart")
class RemoveFromCart:
    account_id = Identifier(required=True)
    item_type = String(required=True, choices=ItemType)
    item_id = Identifier(required=True)


@groove.command(part_of="ShoppingCart")
class IncreaseCartItem:
    account_id = Identifier(required=True)
    item_type = String(required=True, choices=ItemType)
    item_id = Identifier(required=True)


@groove.command(part_of="ShoppingCart")
class DecreaseCartItem:
    account_id = Identifier(required=True)
    item_type = String(required=True, choices=ItemType)
    item_id = Identifier(required=True)


def _require_active_cart(account_id):
    cart = find_active_cart(account_id)
    if cart is None:
        raise ValidationError({"cart": ["The cart is empty."]})
    return cart


@groove.command_handler(part_of=ShoppingCart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        current_domain.repository_for(Account).get(command.account_id)
        item = find_purchasable(command.item_type, command.item_id)

        cart = find_active_cart(command.account_id)
        if cart is None:
            cart = ShoppingCart.create(account_id=command.account_id)

        cart.add_item(
            item_type=item.item_type,
            item_id=item.item_id,
            title=item.title,
            unit_price=item.price,
            quantity=command.quantity or 1,
        )
        current_domain.repository_for(ShoppingCart).add(cart)
        return str(cart.id)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        cart = _require_active_cart(command.account_id)
        cart.remove_item(command.item_type, command.item_id)
        current_domain.repository_for(ShoppingCart).add(cart)

    @handle(IncreaseCartItem)
    def increase_cart_item(self, command):
        cart = _require_active_cart(command.account_id)
        cart.increase_quantity(command.item_type, command.item_id)
        current_domain.repository_for(ShoppingCart).add(cart)

    @handle(DecreaseCartItem)
    def decrease_cart_item(self, command):
        cart = _require_active_cart(command.account_id)
        cart.decrease_quantity(command.item_type, command.item_id)
        current_domain.repository_for(ShoppingCart).add(cart)
