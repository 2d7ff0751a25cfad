"""PaymentMethod catalog entity.

Checkout only records which method the shopper chose; charging happens
outside the storefront.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentMethod:
    id: str
    name: str
    description: str = ""
