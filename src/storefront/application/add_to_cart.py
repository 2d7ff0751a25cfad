"""Application service: Add To Cart use case.

Resolves the product by name and lets the Cart aggregate snapshot its
current prices into a line item.
"""

from __future__ import annotations

import logging

from storefront.application.dto import CartLineDTO, line_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, cart_id: str, product_name: str, quantity: int = 1) -> CartLineDTO:
        product = self._product_repo.get_by_name(product_name)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_name}'")

        cart = self._cart_repo.get(cart_id)
        line = cart.add_item(product, quantity)
        self._cart_repo.save(cart)

        logger.info(
            "Cart %s: %s x%d (line now x%d)",
            cart_id, product.name, quantity, line.quantity.value,
        )
        return line_to_dto(line)
