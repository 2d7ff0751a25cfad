"""Read-only lookup of payment methods."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.payment import PaymentMethod


class PaymentMethodRepository(ABC):

    @abstractmethod
    def get_by_id(self, method_id: str) -> PaymentMethod | None:
        """Return the payment method with this ID, or None."""

    @abstractmethod
    def list_all(self) -> list[PaymentMethod]:
        """Return every selectable payment method."""
