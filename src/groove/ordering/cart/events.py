"""Domain events for the ShoppingCart aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from groove.domain import groove


@groove.event(part_of="ShoppingCart")
class CartCreated:
    """The account's first item created a new active cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    account_id = Identifier(required=True)


@groove.event(part_of="ShoppingCart")
class CartItemAdded:
    """A release was added to the cart or its quantity grew by a re-add."""

    __version__ = 1

    cart_id = Identifier(required=True)
    item_type = String(required=True)
    item_id = Identifier(required=True)
    unit_price = Float(required=True)
    quantity = Integer(required=True)


@groove.event(part_of="ShoppingCart")
class CartQuantityChanged:
    __version__ = 1

    cart_id = Identifier(required=True)
    item_type = String(required=True)
    item_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@groove.event(part_of="ShoppingCart")
class CartItemRemoved:
    __version__ = 1

    cart_id = Identifier(required=True)
    item_type = String(required=True)
    item_id = Identifier(required=True)


@groove.event(part_of="ShoppingCart")
class CartCheckedOut:
    """The cart's order was paid and the cart was closed."""

    __version__ = 1

    cart_id = Identifier(required=True)
    account_id = Identifier(required=True)
    order_id = Identifier()
    total = Float(required=True)
    checked_out_at = DateTime(required=True)
