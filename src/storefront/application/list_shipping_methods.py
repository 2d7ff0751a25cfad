"""Application service: List Shipping Methods use case (query)."""

from __future__ import annotations

from storefront.application.dto import ShippingMethodDTO, shipping_method_to_dto
from storefront.domain.repository.shipping_method_repository import (
    ShippingMethodRepository,
)


class ListShippingMethodsHandler:

    def __init__(self, shipping_repo: ShippingMethodRepository) -> None:
        self._shipping_repo = shipping_repo

    def handle(self) -> list[ShippingMethodDTO]:
        return [shipping_method_to_dto(m) for m in self._shipping_repo.list_all()]
