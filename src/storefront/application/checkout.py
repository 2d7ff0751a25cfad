"""Application service: Checkout use case.

Freezes the cart into an order summary with final totals, then empties
the cart. The chosen payment method is recorded on the summary; charging
it and persisting the order are handled elsewhere.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderSummaryDTO, line_to_dto, totals_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.payment import PaymentMethod
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.payment_method_repository import (
    PaymentMethodRepository,
)
from storefront.domain.service.order_total_calculator import OrderTotalCalculator

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        calculator: OrderTotalCalculator,
        payment_repo: PaymentMethodRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._calculator = calculator
        self._payment_repo = payment_repo

    def handle(
        self, cart_id: str, shipping_method_id: str, payment_method_id: str
    ) -> OrderSummaryDTO:
        cart = self._cart_repo.get(cart_id)
        if cart.is_empty:
            raise ValidationError("Your cart is empty")

        # Everything is validated before the cart is touched.
        payment_method = self._resolve_payment_method(payment_method_id)
        totals = self._calculator.totals_for_cart(cart, shipping_method_id)

        summary = OrderSummaryDTO(
            cart_id=cart.id,
            items=[line_to_dto(item) for item in cart.items],
            item_count=cart.item_count,
            applied_coupon=cart.applied_coupon,
            shipping_method=shipping_method_id,
            payment_method=payment_method.id,
            totals=totals_to_dto(totals),
        )

        cart.clear()
        self._cart_repo.save(cart)
        logger.info(
            "Cart %s checked out: %d item(s), grand total %s, paying by %s",
            cart_id, summary.item_count, totals.grand_total, payment_method.id,
        )
        return summary

    def _resolve_payment_method(self, payment_method_id: str | None) -> PaymentMethod:
        method_id = (payment_method_id or "").strip().lower()
        if not method_id:
            raise ValidationError("Please select a payment method")
        method = self._payment_repo.get_by_id(method_id)
        if method is None:
            raise ValidationError(f"Invalid payment method: {payment_method_id}")
        return method
