"""Application service: Remove Coupon use case."""

from __future__ import annotations

import logging

from storefront.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class RemoveCouponHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, cart_id: str) -> str | None:
        """Drop the applied coupon; returns the code that was removed, if any."""
        cart = self._cart_repo.get(cart_id)
        removed = cart.applied_coupon
        cart.remove_coupon()
        self._cart_repo.save(cart)
        if removed:
            logger.info("Cart %s: removed coupon %s", cart_id, removed)
        return removed
