"""Unit tests for the Order Total Calculator domain service."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart, LineItem
from storefront.domain.model.coupon import Coupon, CouponKind
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.service.order_total_calculator import OrderTotalCalculator
from storefront.infrastructure.catalog.static_tables import (
    DEFAULT_COUPONS,
    StaticCouponRepository,
    StaticShippingMethodRepository,
)


def _calculator(extra_coupons: list[Coupon] | None = None) -> OrderTotalCalculator:
    coupons = list(DEFAULT_COUPONS) + list(extra_coupons or [])
    return OrderTotalCalculator(
        coupon_repo=StaticCouponRepository(coupons),
        shipping_repo=StaticShippingMethodRepository(),
    )


def _assert_balanced(totals) -> None:
    expected = (
        totals.subtotal.amount
        - totals.item_discount.amount
        - totals.coupon_discount.amount
        + totals.tax.amount
        + totals.shipping_cost.amount
    )
    assert totals.grand_total.amount == expected
    assert totals.grand_total.amount >= 0


class TestSubtotalAndTax:

    def test_no_coupon(self):
        totals = _calculator().compute_totals(
            [LineItem.of("1", "15.00", 3), LineItem.of("2", "25.00", 1)],
            None,
            "express",
        )
        assert totals.subtotal == Money.of("70.00")
        assert totals.item_discount == Money.zero()
        assert totals.coupon_discount == Money.zero()
        assert totals.tax == Money.of("12.60")
        assert totals.shipping_cost == Money.of("9.99")
        assert totals.grand_total == Money.of("92.59")
        _assert_balanced(totals)

    def test_empty_cart_still_charges_flat_shipping(self):
        totals = _calculator().compute_totals([], None, "standard")
        assert totals.subtotal == Money.zero()
        assert totals.tax == Money.zero()
        assert totals.shipping_cost == Money.of("10.00")
        assert totals.grand_total == Money.of("10.00")


class TestFixedCoupon:

    def test_save20_example(self):
        totals = _calculator().compute_totals(
            [LineItem.of("1", "100", 2)], "SAVE20", "express"
        )
        assert totals.subtotal == Money.of("200")
        assert totals.coupon_discount == Money.of("20")
        assert totals.tax == Money.of("32.4")
        assert totals.shipping_cost == Money.of("9.99")
        assert totals.grand_total == Money.of("222.39")
        _assert_balanced(totals)

    def test_save20_with_free_standard_shipping(self):
        totals = _calculator().compute_totals(
            [LineItem.of("1", "100", 2)], "SAVE20", "standard"
        )
        assert totals.shipping_cost == Money.zero()
        assert totals.grand_total == Money.of("212.40")

    def test_code_lookup_is_case_insensitive(self):
        lower = _calculator().compute_totals([LineItem.of("1", "100", 2)], " save20 ", "express")
        assert lower.coupon_discount == Money.of("20")

    def test_below_minimum_gives_no_discount(self):
        totals = _calculator().compute_totals(
            [LineItem.of("1", "99.99", 1)], "SAVE20", "express"
        )
        assert totals.coupon_discount == Money.zero()
        assert totals.tax == Money.of("18.00")

    def test_fixed_value_larger_than_subtotal_is_capped(self):
        big = Coupon("BIGFIX", CouponKind.FIXED, Decimal("50"))
        totals = _calculator([big]).compute_totals(
            [LineItem.of("1", "30", 1)], "BIGFIX", "express"
        )
        assert totals.coupon_discount == Money.of("30")
        assert totals.tax == Money.zero()
        assert totals.grand_total == Money.of("9.99")
        _assert_balanced(totals)


class TestPercentageCoupon:

    def test_welcome10(self):
        totals = _calculator().compute_totals(
            [LineItem.of("1", "30", 2)], "WELCOME10", "standard"
        )
        assert totals.coupon_discount == Money.of("6.00")
        assert totals.tax == Money.of("9.72")
        assert totals.shipping_cost == Money.of("10.00")
        assert totals.grand_total == Money.of("73.72")

    def test_welcome10_below_minimum(self):
        totals = _calculator().compute_totals(
            [LineItem.of("1", "20", 2)], "WELCOME10", "standard"
        )
        assert totals.coupon_discount == Money.zero()
        assert totals.grand_total == Money.of("57.20")

    def test_discount_and_tax_round_half_up_to_cents(self):
        pct = Coupon("PCT15", CouponKind.PERCENTAGE, Decimal("0.15"))
        totals = _calculator([pct]).compute_totals(
            [LineItem.of("1", "33.33", 1)], "PCT15", "express"
        )
        assert totals.coupon_discount.amount == Decimal("5.00")
        assert totals.tax.amount == Decimal("5.10")
        assert totals.grand_total == Money.of("43.42")
        _assert_balanced(totals)


class TestFreeShippingCoupon:

    def test_zero_shipping_regardless_of_subtotal(self):
        totals = _calculator().compute_totals(
            [LineItem.of("1", "20", 1)], "FREESHIP", "same-day"
        )
        assert totals.coupon_discount == Money.zero()
        assert totals.shipping_cost == Money.zero()
        assert totals.grand_total == Money.of("23.60")

    def test_free_shipping_coupon_respects_its_minimum(self):
        gated = Coupon(
            "SHIP50", CouponKind.FREE_SHIPPING, minimum_subtotal=Money.of("50")
        )
        totals = _calculator([gated]).compute_totals(
            [LineItem.of("1", "20", 1)], "SHIP50", "express"
        )
        assert totals.shipping_cost == Money.of("9.99")


class TestShipping:

    def test_free_above_threshold(self):
        totals = _calculator().compute_totals(
            [LineItem.of("1", "75", 2)], None, "standard"
        )
        assert totals.subtotal == Money.of("150")
        assert totals.shipping_cost == Money.zero()

    def test_threshold_uses_subtotal_before_discounts(self):
        totals = _calculator().compute_totals(
            [LineItem.of("1", "100", 1)], "SAVE20", "standard"
        )
        assert totals.coupon_discount == Money.of("20")
        assert totals.shipping_cost == Money.zero()

    def test_unknown_method_rejected(self):
        with pytest.raises(ValidationError, match="Unknown shipping method"):
            _calculator().compute_totals([LineItem.of("1", "10", 1)], None, "teleport")


class TestItemDiscount:

    def test_sale_items_contribute_item_discount(self):
        totals = _calculator().compute_totals(
            [
                LineItem.of("1", "80", 1, original_unit_price="100"),
                LineItem.of("2", "10", 1, original_unit_price="5"),
            ],
            None,
            "standard",
        )
        assert totals.subtotal == Money.of("90")
        assert totals.item_discount == Money.of("20")
        assert totals.tax == Money.of("12.60")
        assert totals.shipping_cost == Money.of("10.00")
        assert totals.grand_total == Money.of("92.60")

    def test_item_discount_capped_at_subtotal(self):
        totals = _calculator().compute_totals(
            [LineItem.of("1", "10", 1, original_unit_price="100")], None, "express"
        )
        assert totals.item_discount == Money.of("10")
        assert totals.tax == Money.zero()
        assert totals.grand_total == Money.of("9.99")
        _assert_balanced(totals)

    def test_item_and_coupon_discounts_combine(self):
        totals = _calculator().compute_totals(
            [LineItem.of("1", "80", 2, original_unit_price="100")], "SAVE20", "standard"
        )
        assert totals.item_discount == Money.of("40")
        assert totals.coupon_discount == Money.of("20")
        assert totals.tax == Money.of("18.00")
        assert totals.grand_total == Money.of("118.00")
        assert totals.total_discount == Money.of("60")

    def test_coupon_capped_at_what_item_discount_leaves(self):
        totals = _calculator().compute_totals(
            [LineItem.of("1", "50", 2, original_unit_price="100")], "SAVE20", "standard"
        )
        assert totals.item_discount == Money.of("100")
        assert totals.coupon_discount == Money.zero()
        assert totals.grand_total == Money.zero()
        _assert_balanced(totals)


class TestCouponResolution:

    def test_unknown_code_is_silently_ignored(self):
        totals = _calculator().compute_totals([LineItem.of("1", "100", 2)], "NOPE99", "express")
        assert totals.coupon_discount == Money.zero()

    @pytest.mark.parametrize("code", [None, "", "   "])
    def test_missing_code(self, code):
        totals = _calculator().compute_totals([LineItem.of("1", "100", 2)], code, "express")
        assert totals.coupon_discount == Money.zero()


class TestValidation:

    def test_non_line_item_rejected(self):
        with pytest.raises(ValidationError, match="Expected a LineItem"):
            _calculator().compute_totals(
                [{"product_id": "1", "unit_price": "-1", "quantity": 1}], None, "express"
            )

    def test_negative_price_never_reaches_calculator(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            LineItem.of("1", "-10", 1)

    def test_negative_quantity_never_reaches_calculator(self):
        with pytest.raises(ValidationError, match="must be positive"):
            LineItem.of("1", "10", -2)

    def test_constructor_rejects_raw_negative_quantity(self):
        with pytest.raises(ValidationError, match="must be positive"):
            LineItem(product_id="1", unit_price=Money.of("10"), quantity=-2)

    def test_constructor_rejects_raw_negative_price(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            LineItem(product_id="1", unit_price=Decimal("-5"), quantity=Quantity(1))

    def test_constructor_rejects_non_numeric_price(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            LineItem(product_id="1", unit_price=None, quantity=1)

    def test_constructor_converts_raw_values(self):
        item = LineItem(
            product_id="1",
            unit_price=Decimal("80"),
            quantity=2,
            original_unit_price="100",
        )
        totals = _calculator().compute_totals([item], None, "express")
        assert totals.subtotal == Money.of("160")
        assert totals.item_discount == Money.of("40")


class TestPurity:

    def test_same_inputs_same_output(self):
        calc = _calculator()
        items = [
            LineItem.of("1", "80", 2, original_unit_price="100"),
            LineItem.of("2", "19.99", 3),
        ]
        first = calc.compute_totals(items, "WELCOME10", "express")
        second = calc.compute_totals(items, "WELCOME10", "express")
        assert first == second

    def test_inputs_are_not_mutated(self):
        cart = Cart(id="c1", items=[LineItem.of("1", "100", 2)], applied_coupon="SAVE20")
        before = list(cart.items)
        _calculator().totals_for_cart(cart, "express")
        assert cart.items == before
        assert cart.applied_coupon == "SAVE20"

    def test_accepts_any_iterable(self):
        items = (LineItem.of(str(i), "10", 1) for i in range(3))
        totals = _calculator().compute_totals(items, None, "express")
        assert totals.subtotal == Money.of("30")

    @pytest.mark.parametrize(
        "items, coupon, method",
        [
            ([LineItem.of("1", "0.01", 1)], "SAVE20", "standard"),
            ([LineItem.of("1", "99.99", 7)], "WELCOME10", "same-day"),
            ([LineItem.of("1", "5", 1, original_unit_price="500")], "FREESHIP", "express"),
            ([LineItem.of("1", "12.34", 3), LineItem.of("2", "0.99", 11)], None, "standard"),
        ],
    )
    def test_grand_total_balances_and_is_never_negative(self, items, coupon, method):
        _assert_balanced(_calculator().compute_totals(items, coupon, method))
