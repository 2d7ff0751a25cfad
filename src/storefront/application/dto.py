"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry display-ready strings out of the application layer so the CLI
never formats money itself.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import Cart, LineItem
from storefront.domain.model.payment import PaymentMethod
from storefront.domain.model.shipping import ShippingMethod
from storefront.domain.model.totals import OrderTotals
from storefront.domain.model.value_objects import Money

FREE_LABEL = "FREE"


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    original_unit_price: str | None
    line_total: str


@dataclass(frozen=True)
class TotalsDTO:
    subtotal: str
    item_discount: str
    coupon_discount: str
    total_discount: str
    tax: str
    shipping: str  # "FREE" when zero
    grand_total: str


@dataclass(frozen=True)
class CartDTO:
    id: str
    items: list[CartLineDTO]
    item_count: int
    applied_coupon: str | None
    shipping_method: str
    totals: TotalsDTO


@dataclass(frozen=True)
class CouponResultDTO:
    """Outcome of trying to apply a coupon; ``applied`` is False when it did not qualify."""

    code: str
    applied: bool
    message: str


@dataclass(frozen=True)
class ShippingMethodDTO:
    id: str
    name: str
    cost: str
    free_above: str | None
    estimated_days: str


@dataclass(frozen=True)
class PaymentMethodDTO:
    id: str
    name: str
    description: str


@dataclass(frozen=True)
class OrderSummaryDTO:
    """What the shopper confirmed at checkout."""

    cart_id: str
    items: list[CartLineDTO]
    item_count: int
    applied_coupon: str | None
    shipping_method: str
    payment_method: str
    totals: TotalsDTO


# --- Mapping ------------------------------------------------------------------


def line_to_dto(item: LineItem) -> CartLineDTO:
    return CartLineDTO(
        product_id=item.product_id,
        product_name=item.product_name,
        quantity=item.quantity.value,
        unit_price=str(item.unit_price),
        original_unit_price=(
            str(item.original_unit_price) if item.original_unit_price is not None else None
        ),
        line_total=str(item.line_total),
    )


def format_shipping(cost: Money) -> str:
    return FREE_LABEL if cost.is_zero else str(cost)


def totals_to_dto(totals: OrderTotals) -> TotalsDTO:
    return TotalsDTO(
        subtotal=str(totals.subtotal),
        item_discount=str(totals.item_discount),
        coupon_discount=str(totals.coupon_discount),
        total_discount=str(totals.total_discount),
        tax=str(totals.tax),
        shipping=format_shipping(totals.shipping_cost),
        grand_total=str(totals.grand_total),
    )


def cart_to_dto(cart: Cart, shipping_method_id: str, totals: OrderTotals) -> CartDTO:
    return CartDTO(
        id=cart.id,
        items=[line_to_dto(item) for item in cart.items],
        item_count=cart.item_count,
        applied_coupon=cart.applied_coupon,
        shipping_method=shipping_method_id,
        totals=totals_to_dto(totals),
    )


def shipping_method_to_dto(method: ShippingMethod) -> ShippingMethodDTO:
    return ShippingMethodDTO(
        id=method.id,
        name=method.name,
        cost=format_shipping(method.flat_cost),
        free_above=(
            str(method.free_above_subtotal)
            if method.free_above_subtotal is not None
            else None
        ),
        estimated_days=method.estimated_days,
    )


def payment_method_to_dto(method: PaymentMethod) -> PaymentMethodDTO:
    return PaymentMethodDTO(id=method.id, name=method.name, description=method.description)
