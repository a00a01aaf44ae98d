"""Starting PayPal payments for a cart or a balance top-up.

Both flows create a PayPal order, record a Payment keyed by the PayPal
order id and hand the approval URL back to the client. Nothing is paid
until the approval webhook arrives (see ``groove.payments.webhook``).
"""

from dataclasses import dataclass

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from groove.config import get_settings
from groove.identity.account.account import Account
from groove.ordering.cart.queries import find_active_cart
from groove.ordering.order.order import PaymentMethod
from groove.ordering.order.placement import PlaceOrder
from groove.payments.gateway import get_gateway
from groove.payments.payment.custom_id import CustomId, PaymentPurpose
from groove.payments.payment.initiation import InitiatePayment
from groove.utils.logging import get_logger

logger = get_logger(__name__)

GATEWAY_FAILURE_MESSAGE = "Failed to create or initiate PayPal payment."


@dataclass(frozen=True)
class PaymentSession:
    payment_id: str
    gateway_order_id: str
    approval_url: str | None
    amount: float
    currency: str
    order_id: str | None = None


def _create_gateway_order(purpose, amount, account_id, currency):
    custom_id = CustomId(purpose=purpose.value, amount=amount, account_id=account_id).encode()
    result = get_gateway().create_order(amount=amount, currency=currency, custom_id=custom_id)
    if not result.success:
        logger.warning(
            "PayPal order creation failed",
            account_id=str(account_id),
            purpose=purpose.value,
            reason=result.failure_reason,
        )
        raise ValidationError({"payment": [GATEWAY_FAILURE_MESSAGE]})
    return result


def start_cart_payment(account_id) -> PaymentSession:
    """Create a PayPal order for the active cart and a Pending order numbered with its id."""
    cart = find_active_cart(account_id)
    if cart is None or cart.is_empty:
        raise ValidationError({"cart": ["The cart is empty."]})

    current_domain.repository_for(Account).get(account_id)
    currency = get_settings().currency
    total = cart.total

    gateway_order = _create_gateway_order(PaymentPurpose.CART_PAYMENT, total, account_id, currency)

    order_id = current_domain.process(
        PlaceOrder(
            account_id=account_id,
            cart_id=str(cart.id),
            order_number=gateway_order.gateway_order_id,
            payment_method=PaymentMethod.PAYPAL.value,
            currency=currency,
        ),
        asynchronous=False,
    )
    payment_id = current_domain.process(
        InitiatePayment(
            gateway_order_id=gateway_order.gateway_order_id,
            account_id=account_id,
            purpose=PaymentPurpose.CART_PAYMENT.value,
            amount=total,
            currency=currency,
            approval_url=gateway_order.approval_url,
            order_id=order_id,
            cart_id=str(cart.id),
        ),
        asynchronous=False,
    )

    logger.info(
        "Cart payment started",
        account_id=str(account_id),
        order_id=order_id,
        gateway_order_id=gateway_order.gateway_order_id,
        total=total,
    )
    return PaymentSession(
        payment_id=payment_id,
        gateway_order_id=gateway_order.gateway_order_id,
        approval_url=gateway_order.approval_url,
        amount=total,
        currency=currency,
        order_id=order_id,
    )


def start_balance_top_up(account_id, amount) -> PaymentSession:
    """Create a PayPal order that credits the account balance once captured."""
    if amount is None or amount <= 0:
        raise ValidationError({"amount": ["Top-up amount must be positive"]})

    current_domain.repository_for(Account).get(account_id)
    currency = get_settings().currency
    amount = round(amount, 2)

    gateway_order = _create_gateway_order(PaymentPurpose.ADD_BALANCE, amount, account_id, currency)

    payment_id = current_domain.process(
        InitiatePayment(
            gateway_order_id=gateway_order.gateway_order_id,
            account_id=account_id,
            purpose=PaymentPurpose.ADD_BALANCE.value,
            amount=amount,
            currency=currency,
            approval_url=gateway_order.approval_url,
        ),
        asynchronous=False,
    )

    logger.info(
        "Balance top-up started",
        account_id=str(account_id),
        gateway_order_id=gateway_order.gateway_order_id,
        amount=amount,
    )
    return PaymentSession(
        payment_id=payment_id,
        gateway_order_id=gateway_order.gateway_order_id,
        approval_url=gateway_order.approval_url,
        amount=amount,
        currency=currency,
    )
