"""Tests for services.cart_guard."""

import pytest

from storefront.errors import QuantityLimitReached
from storefront.services.cart_guard import check_add_to_cart, ensure_can_add, find_cart_item


class TestCheckAddToCart:
    def test_no_line_is_always_allowed(self, make_cart):
        cart = make_cart((2, 3))
        decision = check_add_to_cart(cart.items, 1, total_stock=0)
        assert decision.allowed
        assert decision.current_quantity == 0

    def test_empty_cart_is_allowed(self, make_cart):
        assert check_add_to_cart(make_cart().items, 1, total_stock=1).allowed

    def test_allowed_below_stock(self, make_cart):
        decision = check_add_to_cart(make_cart((1, 4)).items, 1, total_stock=5)
        assert decision.allowed
        assert decision.current_quantity == 4
        assert decision.message is None

    def test_rejected_at_stock(self, make_cart):
        decision = check_add_to_cart(make_cart((1, 5)).items, 1, total_stock=5)
        assert not decision.allowed
        assert decision.current_quantity == 5
        assert decision.message == "Only 5 quantity can be added for this item"

    @pytest.mark.parametrize("quantity,stock,allowed", [
        (1, 1, False),
        (1, 2, True),
        (3, 2, False),
        (9, 10, True),
    ])
    def test_permits_iff_next_unit_fits(self, make_cart, quantity, stock, allowed):
        decision = check_add_to_cart(make_cart((1, quantity)).items, 1, total_stock=stock)
        assert decision.allowed is allowed

    def test_only_matching_line_counts(self, make_cart):
        cart = make_cart((2, 10), (1, 1))
        assert check_add_to_cart(cart.items, 1, total_stock=2).allowed


class TestEnsureCanAdd:
    def test_raises_with_current_quantity(self, make_cart):
        with pytest.raises(QuantityLimitReached, match="Only 5 quantity") as exc_info:
            ensure_can_add(make_cart((1, 5)).items, 1, total_stock=5)
        assert exc_info.value.current_quantity == 5

    def test_passes_when_allowed(self, make_cart):
        ensure_can_add(make_cart((1, 1)).items, 1, total_stock=5)


def test_find_cart_item(make_cart):
    cart = make_cart((1, 2), (3, 4))
    assert find_cart_item(cart.items, 3).quantity == 4
    assert find_cart_item(cart.items, 9) is None
