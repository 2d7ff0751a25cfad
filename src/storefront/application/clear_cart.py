"""Application service: Clear Cart use case."""

from __future__ import annotations

import logging

from storefront.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class ClearCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, cart_id: str) -> None:
        """Empty the cart and drop any applied coupon."""
        cart = self._cart_repo.get(cart_id)
        cart.clear()
        self._cart_repo.save(cart)
        logger.info("Cart %s cleared", cart_id)
