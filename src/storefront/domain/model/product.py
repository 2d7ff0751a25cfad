"""Product aggregate.

Products live independently of carts. Carts copy a product's prices when
it is added, so later catalog changes never rewrite an existing cart line.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    ``original_price`` is the compare-at price shown struck through next to
    a sale price. When it is above ``price`` the difference counts as an
    item-level discount in the cart totals.
    """

    id: str
    name: str
    price: Money
    original_price: Money | None = None
    stock_quantity: int = 0

    def __post_init__(self) -> None:
        if self.stock_quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")

    @property
    def is_on_sale(self) -> bool:
        return self.original_price is not None and self.original_price > self.price

    def update_price(self, new_price: Money, original_price: Money | None = None) -> None:
        """Change the selling price and, optionally, the compare-at price.

        Existing cart lines keep the prices captured when they were added.
        """
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price
        self.original_price = original_price

    def set_stock(self, quantity: int) -> None:
        if quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")
        self.stock_quantity = quantity
