"""In-process coupon, shipping method and payment method tables.

These are the storefront's fixed catalog data. A production deployment
would read them from a catalog service instead; the repositories accept a
custom table so tests can supply their own.
"""

from __future__ import annotations

from decimal import Decimal

from storefront.domain.model.coupon import Coupon, CouponKind, normalize_code
from storefront.domain.model.payment import PaymentMethod
from storefront.domain.model.shipping import ShippingMethod
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.coupon_repository import CouponRepository
from storefront.domain.repository.payment_method_repository import (
    PaymentMethodRepository,
)
from storefront.domain.repository.shipping_method_repository import (
    ShippingMethodRepository,
)

DEFAULT_COUPONS: tuple[Coupon, ...] = (
    Coupon(
        code="WELCOME10",
        kind=CouponKind.PERCENTAGE,
        value=Decimal("0.10"),
        minimum_subtotal=Money.of("50"),
    ),
    Coupon(
        code="SAVE20",
        kind=CouponKind.FIXED,
        value=Decimal("20"),
        minimum_subtotal=Money.of("100"),
    ),
    Coupon(code="FREESHIP", kind=CouponKind.FREE_SHIPPING),
)

DEFAULT_SHIPPING_METHODS: tuple[ShippingMethod, ...] = (
    ShippingMethod(
        id="standard",
        name="Standard Delivery",
        flat_cost=Money.of("10.00"),
        free_above_subtotal=Money.of("100.00"),
        estimated_days="3-5",
    ),
    ShippingMethod(
        id="express",
        name="Express Delivery",
        flat_cost=Money.of("9.99"),
        estimated_days="1-2",
    ),
    ShippingMethod(
        id="same-day",
        name="Same Day Delivery",
        flat_cost=Money.of("19.99"),
        estimated_days="Same day",
    ),
)

DEFAULT_PAYMENT_METHODS: tuple[PaymentMethod, ...] = (
    PaymentMethod(
        id="card",
        name="Credit/Debit Card",
        description="Pay securely with your card",
    ),
    PaymentMethod(
        id="paypal",
        name="PayPal",
        description="Pay with your PayPal account",
    ),
    PaymentMethod(
        id="mobile-money",
        name="Mobile Money",
        description="MTN Mobile Money or Airtel Money",
    ),
    PaymentMethod(
        id="cash",
        name="Cash on Delivery",
        description="Pay when you receive your order",
    ),
)


class StaticCouponRepository(CouponRepository):

    def __init__(self, coupons: tuple[Coupon, ...] | list[Coupon] = DEFAULT_COUPONS) -> None:
        self._by_code = {c.code: c for c in coupons}

    def get_by_code(self, code: str) -> Coupon | None:
        return self._by_code.get(normalize_code(code))


class StaticShippingMethodRepository(ShippingMethodRepository):

    def __init__(
        self,
        methods: tuple[ShippingMethod, ...] | list[ShippingMethod] = DEFAULT_SHIPPING_METHODS,
    ) -> None:
        # dict keeps declaration order for list_all
        self._by_id = {m.id: m for m in methods}

    def get_by_id(self, method_id: str) -> ShippingMethod | None:
        return self._by_id.get(method_id)

    def list_all(self) -> list[ShippingMethod]:
        return list(self._by_id.values())


class StaticPaymentMethodRepository(PaymentMethodRepository):

    def __init__(
        self,
        methods: tuple[PaymentMethod, ...] | list[PaymentMethod] = DEFAULT_PAYMENT_METHODS,
    ) -> None:
        self._by_id = {m.id: m for m in methods}

    def get_by_id(self, method_id: str) -> PaymentMethod | None:
        return self._by_id.get(method_id)

    def list_all(self) -> list[PaymentMethod]:
        return list(self._by_id.values())
