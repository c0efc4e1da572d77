"""Unit tests for the Cart aggregate."""

from decimal import Decimal

import pytest

from core.domain.entities.cart import Cart, CartItem


def _item(product_id="p1", seller_id="s1", price="40", available=10, **kwargs) -> CartItem:
    return CartItem(
        product_id=product_id,
        seller_id=seller_id,
        title=kwargs.pop("title", "Tomatoes"),
        price_per_unit=Decimal(price),
        unit="kg",
        quantity=kwargs.pop("quantity", 0),
        available_quantity=available,
        **kwargs,
    )


class TestAddItem:

    def test_new_line_is_appended(self):
        cart = Cart(user_id="u1")
        cart.add_item(_item(), 3)

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 3

    def test_existing_line_is_merged_and_capped_at_stock(self):
        cart = Cart(user_id="u1")
        cart.add_item(_item(available=5), 3)
        cart.add_item(_item(available=5), 4)

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 5

    def test_first_add_is_capped_at_stock(self):
        cart = Cart(user_id="u1")
        line = cart.add_item(_item(available=2), 7)
        assert line.quantity == 2

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_is_rejected(self, quantity):
        with pytest.raises(ValueError):
            Cart(user_id="u1").add_item(_item(), quantity)

    def test_sold_out_product_is_rejected(self):
        cart = Cart(user_id="u1")
        with pytest.raises(ValueError, match="Out of stock"):
            cart.add_item(_item(available=0), 3)
        assert cart.is_empty()


class TestUpdateQty:

    def test_zero_removes_line(self):
        cart = Cart(user_id="u1")
        cart.add_item(_item(), 2)
        cart.update_qty("p1", 0)
        assert cart.is_empty()

    def test_quantity_is_clamped(self):
        cart = Cart(user_id="u1")
        cart.add_item(_item(available=4), 1)
        line = cart.update_qty("p1", 9)
        assert line.quantity == 4

    def test_unknown_product_is_ignored(self):
        cart = Cart(user_id="u1")
        assert cart.update_qty("missing", 3) is None

    def test_line_without_stock_is_removed(self):
        cart = Cart(user_id="u1", items=[_item(available=0)])
        assert cart.update_qty("p1", 2) is None
        assert cart.is_empty()


def test_drop_unavailable_keeps_purchasable_lines():
    cart = Cart(user_id="u1", items=[_item("p1", available=0), _item("p2", available=5, quantity=2)])

    dropped = cart.drop_unavailable()

    assert [i.product_id for i in dropped] == ["p1"]
    assert [i.product_id for i in cart.items] == ["p2"]


def test_totals_and_seller_grouping():
    cart = Cart(user_id="u1")
    cart.add_item(_item("p1", "s1", price="40"), 2)
    cart.add_item(_item("p2", "s2", price="25.50"), 1)
    cart.add_item(_item("p3", "s1", price="10"), 3)

    assert cart.total_items() == 6
    assert cart.total_amount().amount == Decimal("135.50")

    groups = cart.items_by_seller()
    assert list(groups) == ["s1", "s2"]
    assert [i.product_id for i in groups["s1"]] == ["p1", "p3"]


def test_remove_and_clear():
    cart = Cart(user_id="u1")
    cart.add_item(_item("p1"), 1)
    cart.add_item(_item("p2"), 1)

    cart.remove_item("p1")
    assert [i.product_id for i in cart.items] == ["p2"]

    cart.clear()
    assert cart.total_items() == 0
    assert cart.total_amount().is_zero()
