"""ShippingMethod catalog entity."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class ShippingMethod:
    id: str
    name: str
    flat_cost: Money
    free_above_subtotal: Money | None = None
    estimated_days: str = ""

    def cost_for(self, subtotal: Money) -> Money:
        """Flat cost, or zero once the subtotal reaches the free threshold."""
        if self.free_above_subtotal is not None and subtotal >= self.free_above_subtotal:
            return Money.zero(subtotal.currency)
        return self.flat_cost
