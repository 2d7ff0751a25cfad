"""Application service: Show Cart use case (query).

Totals are derived on every call from the stored cart and the selected
shipping method; nothing computed here is written back.
"""

from __future__ import annotations

from storefront.application.dto import CartDTO, cart_to_dto
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.service.order_total_calculator import OrderTotalCalculator

DEFAULT_SHIPPING_METHOD = "standard"


class ShowCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        calculator: OrderTotalCalculator,
    ) -> None:
        self._cart_repo = cart_repo
        self._calculator = calculator

    def handle(self, cart_id: str, shipping_method_id: str = DEFAULT_SHIPPING_METHOD) -> CartDTO:
        cart = self._cart_repo.get(cart_id)
        totals = self._calculator.totals_for_cart(cart, shipping_method_id)
        return cart_to_dto(cart, shipping_method_id, totals)
