"""Per-category pricing input for an estimate."""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from windowquote.models.enums import Category, ModifierMode, PricingUnit
from windowquote.models.modifier import AdvancedModifier


class CategoryInput(BaseModel):
    """Count, base price, unit and modifiers for one window category.

    Modifiers are kept in insertion order. Construction and every field
    assignment (``count`` included) clamp each modifier quantity to
    ``[0, count]``, so the bound holds before any total is computed.
    """

    model_config = ConfigDict(validate_assignment=True)

    category: Category
    count: int = Field(default=0, ge=0)
    base_price: Decimal = Decimal("0")
    unit: PricingUnit = PricingUnit.WINDOW
    modifiers: list[AdvancedModifier] = Field(default_factory=list)

    @model_validator(mode="after")
    def quantities_within_count(self) -> CategoryInput:
        from windowquote.engine import clamp_modifier_quantities

        clamp_modifier_quantities(self)
        return self

    def set_count(self, count: int) -> None:
        """Set the window count (floored at 0) and clamp modifier quantities."""
        self.count = max(0, count)

    def increment(self) -> None:
        self.set_count(self.count + 1)

    def decrement(self) -> None:
        self.set_count(self.count - 1)

    def set_modifier_quantity(self, modifier_id: UUID, quantity: int) -> None:
        """Set one modifier's quantity, clamped to ``[0, count]``."""
        modifier = self.get_modifier(modifier_id)
        if modifier is not None:
            modifier.quantity = min(max(quantity, 0), self.count)

    def get_modifier(self, modifier_id: UUID) -> AdvancedModifier | None:
        for modifier in self.modifiers:
            if modifier.id == modifier_id:
                return modifier
        return None

    def add_custom_modifier(
        self,
        name: str = "Custom",
        mode: ModifierMode = ModifierMode.PRICE,
    ) -> AdvancedModifier:
        """Append a user-created modifier to the end of the list."""
        modifier = AdvancedModifier(name=name, is_custom=True, mode=mode)
        self.modifiers.append(modifier)
        return modifier

    def remove_modifier(self, modifier_id: UUID) -> bool:
        """Remove a modifier by id. Returns False if it was not present."""
        for index, modifier in enumerate(self.modifiers):
            if modifier.id == modifier_id:
                del self.modifiers[index]
                return True
        return False
