"""Estimate snapshot and computed-totals models."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from windowquote.models.category import CategoryInput
from windowquote.models.enums import Category, ModifierMode, PricingUnit


class Estimate(BaseModel):
    """Immutable record of an estimate as it was on Save.

    The category inputs are deep copies taken at save time, so later edits
    to a draft never leak into a stored estimate. Frozen covers the
    top-level fields only: read categories through :meth:`category` or
    :meth:`ordered_categories`, which return copies, rather than mutating
    ``categories`` in place.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    created_at: datetime = Field(default_factory=datetime.now)
    job_name: str
    phone_number: str = ""
    job_location: str = ""
    categories: dict[Category, CategoryInput] = Field(default_factory=dict)

    def category(self, category: Category) -> CategoryInput:
        """Return a copy of the stored input for a category (empty if never set)."""
        stored = self.categories.get(category)
        if stored is None:
            return CategoryInput(category=category)
        return stored.model_copy(deep=True)

    def ordered_categories(self) -> list[CategoryInput]:
        return [self.category(c) for c in Category]


class ModifierLine(BaseModel):
    """Contribution of one modifier to its category total."""

    modifier_id: UUID
    name: str
    mode: ModifierMode
    applied_quantity: int
    amount: Decimal


class CategoryTotals(BaseModel):
    """Priced breakdown of one category."""

    category: Category
    count: int
    unit: PricingUnit
    base: Decimal
    lines: list[ModifierLine] = Field(default_factory=list)
    total: Decimal

    @property
    def modifiers_total(self) -> Decimal:
        return sum((line.amount for line in self.lines), Decimal("0"))


class EstimateTotals(BaseModel):
    """Totals for all four categories plus the job-level aggregates."""

    categories: list[CategoryTotals]
    base_subtotal: Decimal
    modifiers_subtotal: Decimal
    grand_total: Decimal

    def for_category(self, category: Category) -> CategoryTotals:
        for totals in self.categories:
            if totals.category == category:
                return totals
        msg = f"No totals computed for category '{category}'"
        raise KeyError(msg)

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce display strings for the breakdown view.

        Every amount is rendered as ``$X.XX``.
        """
        from windowquote.formatting import format_currency

        return {
            "window_total_formatted": format_currency(self.base_subtotal),
            "modifiers_total_formatted": format_currency(self.modifiers_subtotal),
            "grand_total_formatted": format_currency(self.grand_total),
            "categories": [
                {
                    "category": c.category.value,
                    "title": c.category.display_name,
                    "count": c.count,
                    "unit": c.unit.value,
                    "base_formatted": format_currency(c.base),
                    "total_formatted": format_currency(c.total),
                    "lines": [
                        {
                            "name": line.name,
                            "mode": line.mode.display_name,
                            "quantity": line.applied_quantity,
                            "amount_formatted": format_currency(line.amount),
                        }
                        for line in c.lines
                        if line.amount > 0
                    ],
                }
                for c in self.categories
            ],
        }
