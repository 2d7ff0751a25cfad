"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        new_price: str | None = None,
        original_price: str | None = None,
        stock: int | None = None,
    ) -> None:
        """Update a product's prices and/or stock level.

        Carts that already hold the product keep the prices they captured.
        Passing a new price without an original price ends any sale.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        if original_price is not None and new_price is None:
            raise ValidationError(
                "An original price can only be set together with a new price"
            )

        if new_price is not None:
            product.update_price(
                Money.of(new_price),
                Money.of(original_price) if original_price is not None else None,
            )
        if stock is not None:
            product.set_stock(stock)

        self._product_repo.save(product)
        logger.info("Updated product #%s", product_id)
