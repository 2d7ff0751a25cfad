"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from storefront.domain.service.order_total_calculator import OrderTotalCalculator
from storefront.infrastructure.catalog.static_tables import (
    StaticCouponRepository,
    StaticPaymentMethodRepository,
    StaticShippingMethodRepository,
)
from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

DATA_DIR_ENV = "STOREFRONT_DATA_DIR"

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(data_dir() / "carts.json")


def coupon_repository() -> StaticCouponRepository:
    return StaticCouponRepository()


def shipping_method_repository() -> StaticShippingMethodRepository:
    return StaticShippingMethodRepository()


def payment_method_repository() -> StaticPaymentMethodRepository:
    return StaticPaymentMethodRepository()


def order_total_calculator() -> OrderTotalCalculator:
    return OrderTotalCalculator(
        coupon_repo=coupon_repository(),
        shipping_repo=shipping_method_repository(),
    )
