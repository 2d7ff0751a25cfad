"""Application service: Remove From Cart use case."""

from __future__ import annotations

import logging

from storefront.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class RemoveFromCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, cart_id: str, product_name: str) -> None:
        cart = self._cart_repo.get(cart_id)
        line = cart.line_for_name(product_name)
        cart.remove_item(line.product_id)
        self._cart_repo.save(cart)
        logger.info("Cart %s: removed %s", cart_id, line.product_name)
