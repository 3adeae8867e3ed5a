"""Advanced modifier model: a named per-category adjustment."""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from windowquote.models.enums import ModifierMode


class AdvancedModifier(BaseModel):
    """One adjustment line applied to part of a category's counted units.

    In ``price`` mode each applicable unit adds ``price_value`` dollars.
    In ``multiplier`` mode each applicable unit adds the part of the base
    price above 1x (``multiplier_value - 1``). ``quantity`` is how many of
    the category's units the modifier covers; the owning
    :class:`~windowquote.models.category.CategoryInput` keeps it within
    ``[0, count]``.

    Negative values are accepted here and ignored by the engine rather
    than rejected.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: UUID = Field(default_factory=uuid4)
    name: str
    is_custom: bool = False
    mode: ModifierMode = ModifierMode.PRICE
    price_value: Decimal = Decimal("0")
    multiplier_value: Decimal = Decimal("1.0")
    quantity: int = 0
