"""Balance checkout: pay for the active cart from the account wallet.

Steps, each a separate command:
    1. PlaceOrder (Pending, numbered with 16 hex characters)
    2. DebitBalance for the order total
    3. ConfirmOrderPayment (Pending → Paid)
    4. CheckOutCart

The funds check runs before anything is written. If the debit still fails,
the order stays Pending and grants nothing.
"""

from dataclasses import dataclass
from uuid import uuid4

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from groove.config import get_settings
from groove.identity.account.account import Account
from groove.identity.account.balance import DebitBalance
from groove.ordering.cart.lifecycle import CheckOutCart
from groove.ordering.cart.queries import find_active_cart
from groove.ordering.order.confirmation import ConfirmOrderPayment
from groove.ordering.order.order import PaymentMethod
from groove.ordering.order.placement import PlaceOrder
from groove.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CheckoutReceipt:
    order_id: str
    order_number: str
    total: float
    remaining_balance: float


def generate_order_number() -> str:
    return uuid4().hex[:16]


def pay_cart_with_balance(account_id) -> CheckoutReceipt:
    cart = find_active_cart(account_id)
    if cart is None or cart.is_empty:
        raise ValidationError({"cart": ["The cart is empty."]})

    account = current_domain.repository_for(Account).get(account_id)
    total = cart.total
    if not account.has_funds_for(total):
        logger.info(
            "Balance checkout rejected for insufficient funds",
            account_id=str(account_id),
            balance=account.balance,
            total=total,
        )
        raise ValidationError({"balance": ["Insufficient balance"]})

    order_number = generate_order_number()
    order_id = current_domain.process(
        PlaceOrder(
            account_id=account_id,
            cart_id=str(cart.id),
            order_number=order_number,
            payment_method=PaymentMethod.BALANCE.value,
            currency=get_settings().currency,
        ),
        asynchronous=False,
    )
    remaining = current_domain.process(
        DebitBalance(account_id=account_id, amount=total, reference=order_number),
        asynchronous=False,
    )
    current_domain.process(ConfirmOrderPayment(order_id=order_id), asynchronous=False)
    current_domain.process(CheckOutCart(cart_id=str(cart.id), order_id=order_id), asynchronous=False)

    logger.info(
        "Balance checkout completed",
        account_id=str(account_id),
        order_id=order_id,
        order_number=order_number,
        total=total,
    )
    return CheckoutReceipt(
        order_id=order_id,
        order_number=order_number,
        total=total,
        remaining_balance=remaining,
    )
