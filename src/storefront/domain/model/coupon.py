"""Coupon catalog entity.

Coupons are read-only lookup data. A coupon never fails loudly during total
computation; whether it applies is decided by ``discount_for``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

_CODE_PATTERN = re.compile(r"^[A-Z0-9\-_]{4,20}$")


class CouponKind(Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"
    FREE_SHIPPING = "free-shipping"


def normalize_code(code: str) -> str:
    """Canonical form used for case-insensitive lookup."""
    return code.strip().upper()


def validate_code_format(code: str) -> str:
    """Return the normalized code, or raise if it cannot be a coupon code."""
    if not code or not code.strip():
        raise ValidationError("Coupon code is required")
    normalized = normalize_code(code)
    if not 4 <= len(normalized) <= 20:
        raise ValidationError("Coupon code must be between 4 and 20 characters")
    if not _CODE_PATTERN.match(normalized):
        raise ValidationError(
            "Coupon code can only contain letters, numbers, hyphens, and underscores"
        )
    return normalized


@dataclass(frozen=True)
class Coupon:
    """A discount code and its eligibility rule.

    ``value`` is a fraction for PERCENTAGE coupons (0.10 means 10%), an
    amount for FIXED coupons, and ignored for FREE_SHIPPING.
    """

    code: str
    kind: CouponKind
    value: Decimal = Decimal("0")
    minimum_subtotal: Money | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "code", normalize_code(self.code))
        if not isinstance(self.value, Decimal):
            raise ValidationError(
                f"Coupon value must be a Decimal, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValidationError(f"Coupon {self.code} value cannot be negative")
        if self.kind is CouponKind.PERCENTAGE and self.value > 1:
            raise ValidationError(
                f"Coupon {self.code} percentage must be a fraction between 0 and 1"
            )

    @property
    def grants_free_shipping(self) -> bool:
        return self.kind is CouponKind.FREE_SHIPPING

    def is_eligible(self, subtotal: Money) -> bool:
        if self.minimum_subtotal is None:
            return True
        return subtotal >= self.minimum_subtotal

    def discount_for(self, subtotal: Money) -> Money:
        """Monetary discount this coupon grants on ``subtotal``.

        Zero when the subtotal is under the minimum, and always zero for
        free-shipping coupons. Never more than the subtotal itself.
        """
        if not self.is_eligible(subtotal):
            return Money.zero(subtotal.currency)
        if self.kind is CouponKind.PERCENTAGE:
            return subtotal.scaled(self.value)
        if self.kind is CouponKind.FIXED:
            return min(Money(self.value, subtotal.currency), subtotal)
        return Money.zero(subtotal.currency)
