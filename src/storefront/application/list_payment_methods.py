"""Application service: List Payment Methods use case (query)."""

from __future__ import annotations

from storefront.application.dto import PaymentMethodDTO, payment_method_to_dto
from storefront.domain.repository.payment_method_repository import (
    PaymentMethodRepository,
)


class ListPaymentMethodsHandler:

    def __init__(self, payment_repo: PaymentMethodRepository) -> None:
        self._payment_repo = payment_repo

    def handle(self) -> list[PaymentMethodDTO]:
        return [payment_method_to_dto(m) for m in self._payment_repo.list_all()]
