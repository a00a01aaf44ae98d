"""Shopping Cart aggregate: one active cart per account, priced from catalogue snapshots.

Each line stores the price and title of the release when it was added, so
later catalogue price changes do not move the total of a cart in progress.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from groove.catalogue.lookup import ItemType
from groove.domain import groove
from groove.ordering.cart.events import (
    CartCheckedOut,
    CartCreated,
    CartItemAdded,
    CartItemRemoved,
    CartQuantityChanged,
)


class CartStatus(Enum):
    ACTIVE = "Active"
    CHECKED_OUT = "CheckedOut"


@groove.entity(part_of="ShoppingCart")
class CartItem:
    item_type = String(required=True, choices=ItemType)
    item_id = Identifier(required=True)
    title = String(max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()

    @property
    def line_total(self):
        return self.unit_price * self.quantity


@groove.aggregate
class ShoppingCart:
    account_id = Identifier(required=True)
    items = HasMany(CartItem)
    status = String(choices=CartStatus, default=CartStatus.ACTIVE.value)
    created_at = DateTime()
    updated_at = DateTime()
    checked_out_at = DateTime()

    @invariant.post
    def checked_out_cart_must_have_items(self):
        if self.status == CartStatus.CHECKED_OUT.value and not self.items:
            raise ValidationError({"cart": ["Cannot check out an empty cart"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, account_id):
        now = datetime.now(UTC)
        cart = cls(
            account_id=account_id,
            status=CartStatus.ACTIVE.value,
            created_at=now,
            updated_at=now,
        )
        cart.raise_(CartCreated(cart_id=cart.id, account_id=account_id))
        return cart

    # -------------------------------------------------------------------
    # Pricing
    # -------------------------------------------------------------------
    @property
    def total(self):
        return round(sum(item.line_total for item in self.items), 2)

    @property
    def is_empty(self):
        return not self.items

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def _assert_active(self, action):
        if CartStatus(self.status) != CartStatus.ACTIVE:
            raise ValidationError({"status": [f"Items can only be {action} an active cart"]})

    def find_item(self, item_type, item_id):
        return next(
            (i for i in self.items if i.item_type == item_type and str(i.item_id) == str(item_id)),
            None,
        )

    def _get_item(self, item_type, item_id):
        item = self.find_item(item_type, item_id)
        if item is None:
            raise ValidationError({"item_id": ["Item not found in cart"]})
        return item

    def add_item(self, item_type, item_id, title, unit_price, quantity=1):
        """Add a release to the cart, or increase its quantity if it is already there."""
        self._assert_active("added to")

        existing = self.find_item(item_type, item_id)
        now = datetime.now(UTC)

        if existing:
            existing.quantity += quantity
            new_quantity = existing.quantity
        else:
            self.add_items(
                CartItem(
                    item_type=item_type,
                    item_id=item_id,
                    title=title,
                    unit_price=unit_price,
                    quantity=quantity,
                    added_at=now,
                )
            )
            new_quantity = quantity

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=self.id,
                item_type=item_type,
                item_id=str(item_id),
                unit_price=unit_price,
                quantity=new_quantity,
            )
        )

    def increase_quantity(self, item_type, item_id):
        self._assert_active("changed in")

        item = self._get_item(item_type, item_id)
        previous_quantity = item.quantity
        item.quantity = previous_quantity + 1
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityChanged(
                cart_id=self.id,
                item_type=item_type,
                item_id=str(item_id),
                previous_quantity=previous_quantity,
                new_quantity=item.quantity,
            )
        )

    def decrease_quantity(self, item_type, item_id):
        """Decrease a line by one; a line at quantity one is removed instead."""
        self._assert_active("changed in")

        item = self._get_item(item_type, item_id)
        if item.quantity <= 1:
            self.remove_item(item_type, item_id)
            return

        previous_quantity = item.quantity
        item.quantity = previous_quantity - 1
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityChanged(
                cart_id=self.id,
                item_type=item_type,
                item_id=str(item_id),
                previous_quantity=previous_quantity,
                new_quantity=item.quantity,
            )
        )

    def remove_item(self, item_type, item_id):
        self._assert_active("removed from")

        item = self._get_item(item_type, item_id)
        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=self.id,
                item_type=item_type,
                item_id=str(item_id),
            )
        )

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def check_out(self, order_id=None):
        """Close the cart once its order has been paid."""
        if CartStatus(self.status) != CartStatus.ACTIVE:
            raise ValidationError({"status": ["Only active carts can be checked out"]})
        if not self.items:
            raise ValidationError({"cart": ["The cart is empty."]})

        now = datetime.now(UTC)
        self.status = CartStatus.CHECKED_OUT.value
        self.checked_out_at = now
        self.updated_at = now

        self.raise_(
            CartCheckedOut(
                cart_id=self.id,
                account_id=self.account_id,
                order_id=order_id,
                total=self.total,
                checked_out_at=now,
            )
        )
