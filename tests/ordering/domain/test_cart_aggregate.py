"""Tests for the ShoppingCart aggregate."""

import pytest
from groove.ordering.cart.cart import CartStatus, ShoppingCart
from groove.ordering.cart.events import CartCheckedOut, CartItemAdded, CartItemRemoved, CartQuantityChanged
from protean.exceptions import ValidationError


def _make_cart():
    return ShoppingCart.create(account_id="acc-001")


def _add_track(cart, item_id="track-001", price=4.99, quantity=1):
    cart.add_item("Track", item_id, "Night Drive", price, quantity)


class TestAddItem:
    def test_add_item(self):
        cart = _make_cart()
        _add_track(cart, quantity=2)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2
        assert cart.items[0].unit_price == 4.99

    def test_add_item_raises_event(self):
        cart = _make_cart()
        _add_track(cart)
        added = [e for e in cart._events if isinstance(e, CartItemAdded)]
        assert len(added) == 1
        assert added[0].item_id == "track-001"

    def test_adding_same_release_increases_quantity(self):
        cart = _make_cart()
        _add_track(cart)
        _add_track(cart, quantity=2)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 3

    def test_track_and_album_with_same_id_are_separate_lines(self):
        cart = _make_cart()
        _add_track(cart, item_id="rel-001")
        cart.add_item("Album", "rel-001", "Late Hours", 19.9)
        assert len(cart.items) == 2


class TestTotals:
    def test_empty_cart_total_is_zero(self):
        cart = _make_cart()
        assert cart.total == 0.0
        assert cart.is_empty

    def test_total_is_sum_of_price_times_quantity(self):
        cart = _make_cart()
        _add_track(cart, item_id="track-001", price=4.99, quantity=3)
        cart.add_item("Album", "album-001", "Late Hours", 19.9, 1)
        assert cart.total == 34.87

    def test_total_is_rounded_to_cents(self):
        cart = _make_cart()
        _add_track(cart, price=0.1, quantity=3)
        assert cart.total == 0.3


class TestQuantities:
    def test_increase(self):
        cart = _make_cart()
        _add_track(cart)
        cart.increase_quantity("Track", "track-001")
        assert cart.items[0].quantity == 2

        event = cart._events[-1]
        assert isinstance(event, CartQuantityChanged)
        assert (event.previous_quantity, event.new_quantity) == (1, 2)

    def test_decrease(self):
        cart = _make_cart()
        _add_track(cart, quantity=2)
        cart.decrease_quantity("Track", "track-001")
        assert cart.items[0].quantity == 1

    def test_decrease_at_one_removes_line(self):
        cart = _make_cart()
        _add_track(cart)
        cart.decrease_quantity("Track", "track-001")
        assert cart.is_empty
        assert isinstance(cart._events[-1], CartItemRemoved)

    def test_unknown_line(self):
        cart = _make_cart()
        with pytest.raises(ValidationError) as exc:
            cart.increase_quantity("Track", "missing")
        assert exc.value.messages["item_id"] == ["Item not found in cart"]

    def test_remove_item(self):
        cart = _make_cart()
        _add_track(cart)
        cart.remove_item("Track", "track-001")
        assert cart.is_empty


class TestCheckOut:
    def test_check_out(self):
        cart = _make_cart()
        _add_track(cart)
        cart.check_out(order_id="order-001")
        assert cart.status == CartStatus.CHECKED_OUT.value
        assert cart.checked_out_at is not None

        event = cart._events[-1]
        assert isinstance(event, CartCheckedOut)
        assert event.total == 4.99

    def test_empty_cart_cannot_be_checked_out(self):
        with pytest.raises(ValidationError) as exc:
            _make_cart().check_out()
        assert exc.value.messages["cart"] == ["The cart is empty."]

    def test_checked_out_cart_is_frozen(self):
        cart = _make_cart()
        _add_track(cart)
        cart.check_out()
        with pytest.raises(ValidationError):
            _add_track(cart, item_id="track-002")
        with pytest.raises(ValidationError):
            cart.check_out()
