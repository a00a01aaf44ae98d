"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from groove.domain import groove


@groove.event(part_of="Order")
class OrderPlaced:
    """An order was created from a cart and awaits payment."""

    __version__ = 1

    order_id = Identifier(required=True)
    account_id = Identifier(required=True)
    order_number = String(required=True)
    total = Float(required=True)
    currency = String(required=True)
    payment_method = String(required=True)
    placed_at = DateTime(required=True)


@groove.event(part_of="Order")
class OrderPaid:
    """Payment for the order was confirmed; its releases can now be downloaded."""

    __version__ = 1

    order_id = Identifier(required=True)
    account_id = Identifier(required=True)
    order_number = String(required=True)
    total = Float(required=True)
    paid_at = DateTime(required=True)
