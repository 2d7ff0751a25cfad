"""OrderTotals value object — the derived money breakdown of a cart."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class OrderTotals:
    """Recomputed on every cart, coupon or shipping change; never persisted.

    ``grand_total`` always equals
    ``subtotal - item_discount - coupon_discount + tax + shipping_cost``.
    """

    subtotal: Money
    item_discount: Money
    coupon_discount: Money
    tax: Money
    shipping_cost: Money
    grand_total: Money

    @property
    def total_discount(self) -> Money:
        return self.item_discount + self.coupon_discount
