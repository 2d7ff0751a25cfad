"""JSON-file-backed implementation of CartRepository.

All carts share one file, keyed by cart ID.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.cart import Cart, LineItem
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.cart_repository import CartRepository


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CartRepository interface ---------------------------------------------

    def get(self, cart_id: str) -> Cart:
        raw = self._load_raw().get(cart_id)
        if raw is None:
            return Cart(id=cart_id)
        return self._to_domain(cart_id, raw)

    def save(self, cart: Cart) -> None:
        carts = self._load_raw()
        carts[cart.id] = self._to_raw(cart)
        self._persist_raw(carts)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "applied_coupon": cart.applied_coupon,
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "original_unit_price": (
                        str(item.original_unit_price.amount)
                        if item.original_unit_price is not None
                        else None
                    ),
                    "max_stock": item.max_stock,
                    "currency": item.unit_price.currency,
                }
                for item in cart.items
            ],
        }

    @staticmethod
    def _to_domain(cart_id: str, raw: dict) -> Cart:
        items = []
        for i in raw["items"]:
            currency = i.get("currency", "USD")
            original = i.get("original_unit_price")
            items.append(
                LineItem(
                    product_id=i["product_id"],
                    product_name=i.get("product_name", ""),
                    quantity=Quantity(i["quantity"]),
                    unit_price=Money(Decimal(i["unit_price"]), currency),
                    original_unit_price=(
                        Money(Decimal(original), currency) if original is not None else None
                    ),
                    max_stock=i.get("max_stock"),
                )
            )
        return Cart(id=cart_id, items=items, applied_coupon=raw.get("applied_coupon"))

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, carts: dict[str, dict]) -> None:
        self._file_path.write_text(
            json.dumps(carts, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
