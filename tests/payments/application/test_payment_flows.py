"""Application tests for starting PayPal payments and processing webhooks."""

import pytest
from groove.identity.account.account import Account
from groove.ordering.cart.cart import CartStatus, ShoppingCart
from groove.ordering.cart.items import AddToCart
from groove.ordering.cart.lifecycle import CheckOutCart
from groove.ordering.cart.queries import find_active_cart
from groove.ordering.order.order import Order, OrderStatus, PaymentMethod
from groove.payments.checkout import GATEWAY_FAILURE_MESSAGE, start_balance_top_up, start_cart_payment
from groove.payments.payment.payment import Payment, PaymentStatus
from groove.payments.webhook import ORDER_APPROVED, WebhookOutcome, process_webhook_event
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError


def _add(account_id, item_id, item_type="Track", quantity=1):
    return current_domain.process(
        AddToCart(account_id=account_id, item_type=item_type, item_id=item_id, quantity=quantity),
        asynchronous=False,
    )


def _approved(session, fake_gateway, custom_id=None):
    """Build the resource of a CHECKOUT.ORDER.APPROVED event for a payment session."""
    if custom_id is None:
        custom_id = next(
            call["custom_id"]
            for call in fake_gateway.calls
            if call["method"] == "create_order"
        )
    return {
        "id": session.gateway_order_id,
        "status": "APPROVED",
        "purchase_units": [{"custom_id": custom_id}],
    }


def _balance(account_id):
    return current_domain.repository_for(Account).get(account_id).balance


class TestStartCartPayment:
    def test_creates_pending_order_and_payment(self, listener_id, paid_track_id, fake_gateway):
        cart_id = _add(listener_id, paid_track_id, quantity=2)

        session = start_cart_payment(listener_id)

        assert session.amount == 9.98
        assert session.currency == "PLN"
        assert session.approval_url is not None
        assert fake_gateway.calls[0]["custom_id"] == f"CartPayment:9.98:{listener_id}"

        order = current_domain.repository_for(Order).get(session.order_id)
        assert order.status == OrderStatus.PENDING.value
        assert order.payment_method == PaymentMethod.PAYPAL.value
        assert order.order_number == session.gateway_order_id

        payment = current_domain.repository_for(Payment).get(session.payment_id)
        assert payment.status == PaymentStatus.CREATED.value
        assert payment.cart_id == cart_id

        # The cart stays open until PayPal confirms the payment
        assert str(find_active_cart(listener_id).id) == cart_id

    def test_empty_cart(self, listener_id, fake_gateway):
        with pytest.raises(ValidationError) as exc:
            start_cart_payment(listener_id)
        assert exc.value.messages["cart"] == ["The cart is empty."]
        assert fake_gateway.calls == []

    def test_gateway_failure(self, listener_id, paid_track_id, fake_gateway):
        _add(listener_id, paid_track_id)
        fake_gateway.configure(should_succeed=False)

        with pytest.raises(ValidationError) as exc:
            start_cart_payment(listener_id)

        assert exc.value.messages["payment"] == [GATEWAY_FAILURE_MESSAGE]
        assert current_domain.repository_for(Order)._dao.query.all().items == []


class TestStartBalanceTopUp:
    def test_top_up_session(self, listener_id, fake_gateway):
        session = start_balance_top_up(listener_id, 50.0)

        assert session.amount == 50.0
        assert session.order_id is None
        assert fake_gateway.calls[0]["custom_id"] == f"AddBalance:50.00:{listener_id}"
        # Nothing is credited before the webhook
        assert _balance(listener_id) == 1000.0

    @pytest.mark.parametrize("amount", [0, -10.0])
    def test_amount_must_be_positive(self, listener_id, amount):
        with pytest.raises(ValidationError) as exc:
            start_balance_top_up(listener_id, amount)
        assert "amount" in exc.value.messages

    def test_unknown_account(self):
        with pytest.raises(ObjectNotFoundError):
            start_balance_top_up("missing", 10.0)


class TestApprovedTopUp:
    def test_credits_balance(self, listener_id, fake_gateway):
        session = start_balance_top_up(listener_id, 50.0)

        outcome = process_webhook_event(ORDER_APPROVED, _approved(session, fake_gateway))

        assert outcome == WebhookOutcome.BALANCE_CREDITED
        assert _balance(listener_id) == 1050.0
        payment = current_domain.repository_for(Payment).get(session.payment_id)
        assert payment.status == PaymentStatus.CAPTURED.value
        assert payment.capture_id is not None

    def test_redelivery_does_not_credit_twice(self, listener_id, fake_gateway):
        session = start_balance_top_up(listener_id, 50.0)
        resource = _approved(session, fake_gateway)

        process_webhook_event(ORDER_APPROVED, resource)
        outcome = process_webhook_event(ORDER_APPROVED, resource)

        assert outcome == WebhookOutcome.ALREADY_PROCESSED
        assert _balance(listener_id) == 1050.0
        captures = [call for call in fake_gateway.calls if call["method"] == "capture_order"]
        assert len(captures) == 1

    def test_capture_failure(self, listener_id, fake_gateway):
        session = start_balance_top_up(listener_id, 50.0)
        fake_gateway.configure(should_succeed=False, failure_reason="Instrument declined")

        outcome = process_webhook_event(ORDER_APPROVED, _approved(session, fake_gateway))

        assert outcome == WebhookOutcome.CAPTURE_FAILED
        assert _balance(listener_id) == 1000.0
        payment = current_domain.repository_for(Payment).get(session.payment_id)
        assert payment.status == PaymentStatus.FAILED.value
        assert payment.failure_reason == "Instrument declined"


class TestApprovedCartPayment:
    def test_confirms_order_and_closes_cart(self, listener_id, paid_track_id, fake_gateway):
        cart_id = _add(listener_id, paid_track_id)
        session = start_cart_payment(listener_id)

        outcome = process_webhook_event(ORDER_APPROVED, _approved(session, fake_gateway))

        assert outcome == WebhookOutcome.ORDER_CONFIRMED
        order = current_domain.repository_for(Order).get(session.order_id)
        assert order.status == OrderStatus.PAID.value
        cart = current_domain.repository_for(ShoppingCart).get(cart_id)
        assert cart.status == CartStatus.CHECKED_OUT.value
        # PayPal payments never touch the wallet
        assert _balance(listener_id) == 1000.0

    def test_redelivery_does_not_confirm_twice(self, listener_id, paid_track_id, fake_gateway):
        cart_id = _add(listener_id, paid_track_id)
        session = start_cart_payment(listener_id)
        resource = _approved(session, fake_gateway)

        process_webhook_event(ORDER_APPROVED, resource)
        paid_at = current_domain.repository_for(Order).get(session.order_id).paid_at
        outcome = process_webhook_event(ORDER_APPROVED, resource)

        assert outcome == WebhookOutcome.ALREADY_PROCESSED
        captures = [call for call in fake_gateway.calls if call["method"] == "capture_order"]
        assert len(captures) == 1
        order = current_domain.repository_for(Order).get(session.order_id)
        assert order.status == OrderStatus.PAID.value
        assert order.paid_at == paid_at
        cart = current_domain.repository_for(ShoppingCart).get(cart_id)
        assert cart.status == CartStatus.CHECKED_OUT.value

    def test_cart_closed_before_approval(self, listener_id, paid_track_id, fake_gateway):
        cart_id = _add(listener_id, paid_track_id)
        session = start_cart_payment(listener_id)
        current_domain.process(CheckOutCart(cart_id=cart_id, order_id=session.order_id), asynchronous=False)

        outcome = process_webhook_event(ORDER_APPROVED, _approved(session, fake_gateway))

        assert outcome == WebhookOutcome.ORDER_CONFIRMED
        assert current_domain.repository_for(Order).get(session.order_id).status == OrderStatus.PAID.value
        cart = current_domain.repository_for(ShoppingCart).get(cart_id)
        assert cart.status == CartStatus.CHECKED_OUT.value
        assert cart.checked_out_at is not None

    def test_failed_capture_leaves_order_pending(self, listener_id, paid_track_id, fake_gateway):
        _add(listener_id, paid_track_id)
        session = start_cart_payment(listener_id)
        fake_gateway.configure(should_succeed=False)

        process_webhook_event(ORDER_APPROVED, _approved(session, fake_gateway))

        order = current_domain.repository_for(Order).get(session.order_id)
        assert order.status == OrderStatus.PENDING.value
        assert find_active_cart(listener_id) is not None


class TestWebhookRejections:
    @pytest.mark.parametrize("event_type", ["PAYMENT.CAPTURE.COMPLETED", "PAYMENT.CAPTURE.REFUNDED"])
    def test_capture_notifications_are_ignored(self, event_type):
        assert process_webhook_event(event_type, {"id": "CAP-1"}) == WebhookOutcome.IGNORED

    def test_unknown_event_type(self):
        with pytest.raises(ValidationError) as exc:
            process_webhook_event("BILLING.SUBSCRIPTION.CREATED", {})
        assert exc.value.messages["event_type"] == ["Unknown event type."]

    def test_missing_order_id(self):
        with pytest.raises(ValidationError):
            process_webhook_event(ORDER_APPROVED, {})

    def test_unknown_paypal_order(self):
        with pytest.raises(ObjectNotFoundError):
            process_webhook_event(ORDER_APPROVED, {"id": "NEVER-CREATED"})

    def test_mismatched_custom_id(self, listener_id, fake_gateway):
        session = start_balance_top_up(listener_id, 50.0)
        forged = f"AddBalance:5000.00:{listener_id}"

        with pytest.raises(ValidationError) as exc:
            process_webhook_event(ORDER_APPROVED, _approved(session, fake_gateway, custom_id=forged))

        assert "custom_id" in exc.value.messages
        assert _balance(listener_id) == 1000.0
