"""Application service: Apply Coupon use case.

A malformed code is an input error. A well-formed code that is unknown,
or whose minimum subtotal the cart does not reach, is not an error: the
cart is left untouched and the result says why.
"""

from __future__ import annotations

import logging

from storefront.application.dto import CouponResultDTO
from storefront.domain.model.coupon import validate_code_format
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.coupon_repository import CouponRepository

logger = logging.getLogger(__name__)


class ApplyCouponHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        coupon_repo: CouponRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._coupon_repo = coupon_repo

    def handle(self, cart_id: str, code: str) -> CouponResultDTO:
        normalized = validate_code_format(code)

        coupon = self._coupon_repo.get_by_code(normalized)
        if coupon is None:
            logger.info("Cart %s: rejected unknown coupon %s", cart_id, normalized)
            return CouponResultDTO(normalized, applied=False, message="Invalid coupon code")

        cart = self._cart_repo.get(cart_id)
        if not coupon.is_eligible(cart.subtotal):
            return CouponResultDTO(
                coupon.code,
                applied=False,
                message=f"Minimum order amount of {coupon.minimum_subtotal} required",
            )

        cart.apply_coupon(coupon.code)
        self._cart_repo.save(cart)
        logger.info("Cart %s: applied coupon %s", cart_id, coupon.code)
        return CouponResultDTO(coupon.code, applied=True, message="Coupon applied successfully!")
