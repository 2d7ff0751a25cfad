"""Cart aggregate.

The Cart owns its line items and the code of the coupon the shopper
applied. It is passed explicitly to whoever needs it; totals are never
stored on it but derived by the order total calculator.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.coupon import normalize_code
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity

MAX_LINE_ITEMS = 50


@dataclass(frozen=True)
class LineItem:
    """One product entry in a cart.

    Prices are a snapshot taken when the product was added.
    ``max_stock`` is the stock level seen at that time and bounds later
    quantity changes; ``None`` means unbounded.
    """

    product_id: str
    unit_price: Money
    quantity: Quantity
    original_unit_price: Money | None = None
    product_name: str = ""
    max_stock: int | None = None

    def __post_init__(self) -> None:
        # Raw numbers are converted; invalid ones raise ValidationError.
        if not isinstance(self.quantity, Quantity):
            object.__setattr__(self, "quantity", Quantity(self.quantity))
        object.__setattr__(self, "unit_price", _as_money(self.unit_price))
        if self.original_unit_price is not None:
            object.__setattr__(
                self, "original_unit_price", _as_money(self.original_unit_price)
            )

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @property
    def line_discount(self) -> Money:
        """Savings against the original price; zero when not on sale."""
        if self.original_unit_price is None or self.original_unit_price <= self.unit_price:
            return Money.zero(self.unit_price.currency)
        return (self.original_unit_price - self.unit_price) * self.quantity.value

    def with_quantity(self, quantity: int) -> LineItem:
        return replace(self, quantity=Quantity(quantity))

    @staticmethod
    def of(
        product_id: str,
        unit_price: str | int | float | Money,
        quantity: int,
        original_unit_price: str | int | float | Money | None = None,
    ) -> LineItem:
        """Build a line item from raw values, rejecting negative input."""
        return LineItem(
            product_id=product_id,
            unit_price=unit_price,
            quantity=quantity,
            original_unit_price=original_unit_price,
        )


def _as_money(value: object) -> Money:
    if isinstance(value, Money):
        return value
    if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
        raise ValidationError(f"Invalid money amount: {value!r}")
    return Money.of(value)


@dataclass
class Cart:
    """Aggregate root for a shopper's cart."""

    id: str
    items: list[LineItem] = field(default_factory=list)
    applied_coupon: str | None = None

    # --- Line items -----------------------------------------------------------

    def add_item(self, product: Product, quantity: int) -> LineItem:
        """Add ``quantity`` units of ``product``, merging with an existing line."""
        qty = Quantity(quantity)
        existing = self._find_index(product.id)

        new_total = qty.value
        if existing is not None:
            new_total += self.items[existing].quantity.value
        if new_total > product.stock_quantity:
            raise ValidationError(
                f"Only {product.stock_quantity} items of {product.name} available in stock"
            )

        line = LineItem(
            product_id=product.id,
            unit_price=product.price,
            quantity=Quantity(new_total),
            original_unit_price=product.original_price,
            product_name=product.name,
            max_stock=product.stock_quantity,
        )
        if existing is not None:
            self.items[existing] = line
        else:
            if len(self.items) >= MAX_LINE_ITEMS:
                raise ValidationError(f"Maximum {MAX_LINE_ITEMS} items per cart")
            self.items.append(line)
        return line

    def update_quantity(self, product_id: str, quantity: int) -> LineItem:
        index = self._require_index(product_id)
        line = self.items[index]
        if line.max_stock is not None and quantity > line.max_stock:
            raise ValidationError(f"Only {line.max_stock} items available in stock")
        updated = line.with_quantity(quantity)
        self.items[index] = updated
        return updated

    def remove_item(self, product_id: str) -> None:
        index = self._require_index(product_id)
        del self.items[index]

    def clear(self) -> None:
        self.items = []
        self.applied_coupon = None

    def line_for_name(self, product_name: str) -> LineItem:
        """Find a line by product name (case-insensitive)."""
        for item in self.items:
            if item.product_name.lower() == product_name.strip().lower():
                return item
        raise EntityNotFoundError(f"Product '{product_name}' is not in the cart")

    # --- Coupon ---------------------------------------------------------------

    def apply_coupon(self, code: str) -> None:
        self.applied_coupon = normalize_code(code)

    def remove_coupon(self) -> None:
        self.applied_coupon = None

    # --- Computed properties --------------------------------------------------

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.items)

    @property
    def subtotal(self) -> Money:
        result = Money.zero(self.items[0].unit_price.currency) if self.items else Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def is_empty(self) -> bool:
        return not self.items

    # --- Internal helpers -----------------------------------------------------

    def _find_index(self, product_id: str) -> int | None:
        for i, item in enumerate(self.items):
            if item.product_id == product_id:
                return i
        return None

    def _require_index(self, product_id: str) -> int:
        index = self._find_index(product_id)
        if index is None:
            raise EntityNotFoundError(f"Product ID '{product_id}' is not in the cart")
        return index
