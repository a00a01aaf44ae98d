"""Order aggregate: the purchase history record created at checkout.

State Machine:
    PENDING → PAID

A balance checkout moves the order to PAID immediately after the debit.
A PayPal checkout leaves it PENDING until the approval webhook captures
the payment. Only PAID orders grant download rights.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from groove.catalogue.lookup import ItemType
from groove.domain import groove
from groove.ordering.order.events import OrderPaid, OrderPlaced


class OrderStatus(Enum):
    PENDING = "Pending"
    PAID = "Paid"


class PaymentMethod(Enum):
    BALANCE = "Balance"
    PAYPAL = "PayPal"


_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PAID},
    OrderStatus.PAID: set(),
}


@groove.entity(part_of="Order")
class OrderLine:
    item_type = String(required=True, choices=ItemType)
    item_id = Identifier(required=True)
    title = String(max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)


@groove.aggregate
class Order:
    account_id = Identifier(required=True)
    cart_id = Identifier()
    order_number = String(required=True, max_length=64, unique=True)
    lines = HasMany(OrderLine)
    total = Float(required=True, min_value=0.0)
    currency = String(max_length=3, default="PLN")
    payment_method = String(choices=PaymentMethod, required=True)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    placed_at = DateTime()
    paid_at = DateTime()

    @property
    def is_paid(self):
        return self.status == OrderStatus.PAID.value

    def _assert_can_transition(self, target):
        current = OrderStatus(self.status)
        if target not in _VALID_TRANSITIONS[current]:
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target.value}"]})

    @classmethod
    def place(cls, account_id, order_number, lines, payment_method, currency, cart_id=None):
        """Create a pending order.

        Args:
            lines: dicts with item_type, item_id, title, unit_price and quantity.
                Lines for the same release are merged by summing quantities.
        """
        if not lines:
            raise ValidationError({"lines": ["An order needs at least one line"]})

        merged = {}
        for line in lines:
            key = (line["item_type"], str(line["item_id"]))
            if key in merged:
                merged[key]["quantity"] += line["quantity"]
            else:
                merged[key] = dict(line, item_id=str(line["item_id"]))

        total = round(sum(line["unit_price"] * line["quantity"] for line in merged.values()), 2)
        now = datetime.now(UTC)

        order = cls(
            account_id=account_id,
            cart_id=cart_id,
            order_number=order_number,
            total=total,
            currency=currency,
            payment_method=payment_method,
            status=OrderStatus.PENDING.value,
            placed_at=now,
        )
        for line in merged.values():
            order.add_lines(
                OrderLine(
                    item_type=line["item_type"],
                    item_id=line["item_id"],
                    title=line.get("title"),
                    unit_price=line["unit_price"],
                    quantity=line["quantity"],
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=order.id,
                account_id=account_id,
                order_number=order_number,
                total=total,
                currency=currency,
                payment_method=payment_method,
                placed_at=now,
            )
        )
        return order

    def mark_paid(self):
        self._assert_can_transition(OrderStatus.PAID)

        now = datetime.now(UTC)
        self.status = OrderStatus.PAID.value
        self.paid_at = now
        self.raise_(
            OrderPaid(
                order_id=self.id,
                account_id=self.account_id,
                order_number=self.order_number,
                total=self.total,
                paid_at=now,
            )
        )

    def contains(self, item_type, item_id):
        return any(line.item_type == item_type and str(line.item_id) == str(item_id) for line in self.lines)
