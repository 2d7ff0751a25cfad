"""Read-only lookup of shipping methods."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.shipping import ShippingMethod


class ShippingMethodRepository(ABC):

    @abstractmethod
    def get_by_id(self, method_id: str) -> ShippingMethod | None:
        """Return the shipping method with this ID, or None."""

    @abstractmethod
    def list_all(self) -> list[ShippingMethod]:
        """Return every selectable shipping method."""
