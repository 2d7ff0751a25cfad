"""Application service: Update Cart Item quantity use case."""

from __future__ import annotations

import logging

from storefront.application.dto import CartLineDTO, line_to_dto
from storefront.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class UpdateCartItemHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, cart_id: str, product_name: str, quantity: int) -> CartLineDTO:
        cart = self._cart_repo.get(cart_id)
        line = cart.line_for_name(product_name)
        updated = cart.update_quantity(line.product_id, quantity)
        self._cart_repo.save(cart)
        logger.info("Cart %s: %s quantity set to %d", cart_id, line.product_name, quantity)
        return line_to_dto(updated)
