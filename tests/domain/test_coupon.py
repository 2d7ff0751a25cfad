"""Unit tests for coupons and shipping methods."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.coupon import (
    Coupon,
    CouponKind,
    normalize_code,
    validate_code_format,
)
from storefront.domain.model.shipping import ShippingMethod
from storefront.domain.model.value_objects import Money


class TestCouponCode:

    def test_normalize(self):
        assert normalize_code("  welcome10 ") == "WELCOME10"

    def test_valid_format_returns_normalized(self):
        assert validate_code_format("free-ship_2") == "FREE-SHIP_2"

    @pytest.mark.parametrize("code", ["", "   "])
    def test_blank_rejected(self, code):
        with pytest.raises(ValidationError, match="required"):
            validate_code_format(code)

    @pytest.mark.parametrize("code", ["ABC", "A" * 21])
    def test_length_rejected(self, code):
        with pytest.raises(ValidationError, match="between 4 and 20"):
            validate_code_format(code)

    def test_bad_characters_rejected(self):
        with pytest.raises(ValidationError, match="only contain"):
            validate_code_format("SAVE 20")


class TestCouponRules:

    def test_code_is_stored_normalized(self):
        assert Coupon("save20", CouponKind.FIXED, Decimal("20")).code == "SAVE20"

    def test_negative_value_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Coupon("BAD1", CouponKind.FIXED, Decimal("-1"))

    def test_percentage_above_one_rejected(self):
        with pytest.raises(ValidationError, match="fraction"):
            Coupon("BAD2", CouponKind.PERCENTAGE, Decimal("10"))

    def test_float_value_rejected(self):
        with pytest.raises(ValidationError, match="Decimal"):
            Coupon("BAD3", CouponKind.FIXED, 20.0)

    def test_percentage_discount(self):
        coupon = Coupon("PCT10", CouponKind.PERCENTAGE, Decimal("0.10"))
        assert coupon.discount_for(Money.of("60")) == Money.of("6.00")

    def test_fixed_discount_capped_at_subtotal(self):
        coupon = Coupon("FIX50", CouponKind.FIXED, Decimal("50"))
        assert coupon.discount_for(Money.of("30")) == Money.of("30")
        assert coupon.discount_for(Money.of("80")) == Money.of("50")

    def test_free_shipping_has_no_monetary_discount(self):
        coupon = Coupon("SHIPFREE", CouponKind.FREE_SHIPPING)
        assert coupon.discount_for(Money.of("500")) == Money.zero()
        assert coupon.grants_free_shipping

    def test_minimum_subtotal(self):
        coupon = Coupon(
            "SAVE20", CouponKind.FIXED, Decimal("20"), minimum_subtotal=Money.of("100")
        )
        assert not coupon.is_eligible(Money.of("99.99"))
        assert coupon.is_eligible(Money.of("100"))
        assert coupon.discount_for(Money.of("99.99")) == Money.zero()


class TestShippingMethod:

    def test_flat_cost_below_threshold(self):
        method = ShippingMethod("standard", "Standard", Money.of("10"), Money.of("100"))
        assert method.cost_for(Money.of("99.99")) == Money.of("10")

    def test_free_at_threshold(self):
        method = ShippingMethod("standard", "Standard", Money.of("10"), Money.of("100"))
        assert method.cost_for(Money.of("100")) == Money.zero()

    def test_no_threshold_always_charges(self):
        method = ShippingMethod("express", "Express", Money.of("9.99"))
        assert method.cost_for(Money.of("10000")) == Money.of("9.99")
