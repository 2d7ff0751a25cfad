"""Domain service: Order Total Calculator.

Derives subtotal, discounts, VAT, shipping and grand total from a list of
line items, an optional coupon code and a shipping method selection.

The calculator keeps no state between calls. The coupon and shipping
tables are injected as read-only repositories, so the same inputs always
produce the same ``OrderTotals``.

Rules, in order:
  1. subtotal       = sum(unit_price x quantity)
  2. item discount  = sum((original_unit_price - unit_price) x quantity) for
                      lines on sale, capped at the subtotal
  3. coupon         = looked up case-insensitively; unknown codes and
                      subtotals under the coupon minimum give no discount
  4. coupon discount = percentage of subtotal, or the fixed value, capped at
                      what is left after the item discount
  5. tax            = VAT_RATE x (subtotal - item discount - coupon discount)
  6. shipping       = flat cost, zero at or above the method's free threshold,
                      zero for free-shipping coupons
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart, LineItem
from storefront.domain.model.coupon import Coupon
from storefront.domain.model.totals import OrderTotals
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.coupon_repository import CouponRepository
from storefront.domain.repository.shipping_method_repository import (
    ShippingMethodRepository,
)

logger = logging.getLogger(__name__)

VAT_RATE = Decimal("0.18")
DEFAULT_CURRENCY = "USD"


class OrderTotalCalculator:

    def __init__(
        self,
        coupon_repo: CouponRepository,
        shipping_repo: ShippingMethodRepository,
    ) -> None:
        self._coupon_repo = coupon_repo
        self._shipping_repo = shipping_repo

    def compute_totals(
        self,
        items: Iterable[LineItem],
        applied_coupon: str | None,
        shipping_method_id: str,
    ) -> OrderTotals:
        """Compute the full money breakdown for a set of line items.

        Raises ValidationError for anything that is not a valid line item
        and for an unknown shipping method. No partial totals are returned.
        """
        lines = list(items)
        for line in lines:
            if not isinstance(line, LineItem):
                raise ValidationError(
                    f"Expected a LineItem, got {type(line).__name__}"
                )

        method = self._shipping_repo.get_by_id(shipping_method_id)
        if method is None:
            raise ValidationError(f"Unknown shipping method '{shipping_method_id}'")

        currency = lines[0].unit_price.currency if lines else DEFAULT_CURRENCY
        zero = Money.zero(currency)

        subtotal = zero
        item_discount = zero
        for line in lines:
            subtotal = subtotal + line.line_total
            item_discount = item_discount + line.line_discount
        item_discount = min(item_discount, subtotal)

        coupon = self._resolve_coupon(applied_coupon, subtotal)
        coupon_discount = zero
        if coupon is not None:
            coupon_discount = min(
                coupon.discount_for(subtotal), subtotal - item_discount
            )

        taxable = subtotal - item_discount - coupon_discount
        tax = taxable.scaled(VAT_RATE)

        if coupon is not None and coupon.grants_free_shipping:
            shipping_cost = zero
        else:
            shipping_cost = method.cost_for(subtotal)

        grand_total = taxable + tax + shipping_cost

        totals = OrderTotals(
            subtotal=subtotal,
            item_discount=item_discount,
            coupon_discount=coupon_discount,
            tax=tax,
            shipping_cost=shipping_cost,
            grand_total=grand_total,
        )
        logger.debug("Computed totals %s for %d line(s)", totals, len(lines))
        return totals

    def totals_for_cart(self, cart: Cart, shipping_method_id: str) -> OrderTotals:
        """Convenience wrapper reading items and coupon from a cart."""
        return self.compute_totals(cart.items, cart.applied_coupon, shipping_method_id)

    # --- Internal helpers -----------------------------------------------------

    def _resolve_coupon(self, code: str | None, subtotal: Money) -> Coupon | None:
        """Return the coupon if it exists and the subtotal qualifies.

        The minimum is checked against the subtotal before any discount.
        """
        if not code or not code.strip():
            return None
        coupon = self._coupon_repo.get_by_code(code)
        if coupon is None:
            logger.debug("Coupon %r not found; no discount applied", code)
            return None
        if not coupon.is_eligible(subtotal):
            logger.debug(
                "Coupon %s needs a subtotal of %s, cart has %s; no discount applied",
                coupon.code,
                coupon.minimum_subtotal,
                subtotal,
            )
            return None
        return coupon
