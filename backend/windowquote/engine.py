"""Estimate pricing engine for the windowquote library.

The PricingEngine turns per-category window counts, base prices and
advanced modifiers into currency totals:

1. **Guard** — a category with no windows, or a negative base price,
   contributes nothing (modifiers included).
2. **Base** — ``count * base_price``.
3. **Price lines** — each ``price`` modifier adds ``price_value`` for each
   unit it covers, with the covered quantity capped at the count.
4. **Multiplier lines** — each ``multiplier`` modifier adds the part of the
   base price above 1x for each unit it covers. A factor at or below 1.0
   adds nothing and never subtracts.
5. **Aggregation** — the four fixed categories are summed into a base
   subtotal, a modifiers subtotal and a grand total.

Every line is added independently on top of the untouched base, so lines
never compound and the breakdown always sums exactly to the total.
Invalid numbers degrade to a zero or clamped contribution; nothing here
raises.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from windowquote.models.category import CategoryInput
from windowquote.models.enums import Category, ModifierMode
from windowquote.models.estimate import (
    CategoryTotals,
    Estimate,
    EstimateTotals,
    ModifierLine,
)

if TYPE_CHECKING:
    from windowquote.models.modifier import AdvancedModifier

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")
_ONE = Decimal("1")

CategoriesLike = (
    Estimate | Mapping[Category, CategoryInput] | Iterable[CategoryInput]
)


def clamp_modifier_quantities(category_input: CategoryInput) -> int:
    """Restore ``0 <= quantity <= count`` for every modifier of a category.

    Must run after any change to ``category_input.count``.

    Returns:
        The number of modifiers whose quantity was changed.
    """
    count = max(category_input.count, 0)
    changed = 0
    for modifier in category_input.modifiers:
        clamped = min(max(modifier.quantity, 0), count)
        if clamped != modifier.quantity:
            modifier.quantity = clamped
            changed += 1
    if changed:
        logger.debug(
            "Clamped %d modifier quantities to count %d for %s",
            changed,
            count,
            category_input.category,
        )
    return changed


def _as_price(value: Decimal | float | int) -> Decimal | None:
    """Coerce a raw price to Decimal; None when it is not a finite number."""
    try:
        price = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return price if price.is_finite() else None


def _modifier_amount(
    modifier: AdvancedModifier, count: int, safe_base: Decimal
) -> tuple[int, Decimal]:
    """Return ``(applied_quantity, amount)`` for one modifier line."""
    if modifier.quantity <= 0:
        return 0, _ZERO
    applied = min(modifier.quantity, count)

    if modifier.mode == ModifierMode.PRICE:
        if modifier.price_value < 0:
            return applied, _ZERO
        return applied, applied * modifier.price_value

    if modifier.multiplier_value < 0:
        return applied, _ZERO
    delta = max(_ZERO, modifier.multiplier_value - _ONE)
    return applied, applied * safe_base * delta


class PricingEngine:
    """Pure calculator for window-cleaning estimate totals.

    The engine holds no state and never mutates its inputs (except through
    :meth:`clamp_modifier_quantities`, which exists to do exactly that), so
    one instance can be shared freely.

    Example::

        engine = PricingEngine()
        totals = engine.totals(estimate)
        print(totals.grand_total)
    """

    def category_total(
        self,
        count: int,
        base_price: Decimal | float | int,
        modifiers: Iterable[AdvancedModifier] = (),
    ) -> Decimal:
        """Compute one category's subtotal.

        Args:
            count: Number of counted windows or panes.
            base_price: Price per counted unit. Floats are converted through
                ``str`` so ``10.1`` prices as ``Decimal("10.1")``.
            modifiers: The category's advanced modifiers.

        Returns:
            ``base + price adds + multiplier adds``, or 0 when ``count <= 0``
            or ``base_price < 0``. A price that is not a finite number also
            prices as 0.
        """
        price = _as_price(base_price)
        if count <= 0 or price is None or price < 0:
            return _ZERO

        safe_base = max(_ZERO, price)
        base = count * safe_base

        price_adds = _ZERO
        multiplier_adds = _ZERO
        for modifier in modifiers:
            _, amount = _modifier_amount(modifier, count, safe_base)
            if modifier.mode == ModifierMode.PRICE:
                price_adds += amount
            else:
                multiplier_adds += amount

        return base + price_adds + multiplier_adds

    def category_breakdown(self, category_input: CategoryInput) -> CategoryTotals:
        """Price one category with a line per modifier.

        Lines keep the modifier order and include zero-amount lines, so the
        display layer can decide what to hide. ``base`` plus the line
        amounts always equals ``total``.
        """
        count = category_input.count
        price = category_input.base_price
        active = count > 0 and price >= 0
        safe_base = max(_ZERO, price)

        lines: list[ModifierLine] = []
        for modifier in category_input.modifiers:
            if active:
                applied, amount = _modifier_amount(modifier, count, safe_base)
            else:
                applied, amount = 0, _ZERO
            lines.append(
                ModifierLine(
                    modifier_id=modifier.id,
                    name=modifier.name,
                    mode=modifier.mode,
                    applied_quantity=applied,
                    amount=amount,
                )
            )

        base = count * safe_base if active else _ZERO
        total = self.category_total(count, price, category_input.modifiers)
        return CategoryTotals(
            category=category_input.category,
            count=count,
            unit=category_input.unit,
            base=base,
            lines=lines,
            total=total,
        )

    def grand_total(self, categories: CategoriesLike) -> Decimal:
        """Sum of every category's subtotal."""
        return sum(
            (
                self.category_total(c.count, c.base_price, c.modifiers)
                for c in self._normalize(categories)
            ),
            _ZERO,
        )

    def base_subtotal(self, categories: CategoriesLike) -> Decimal:
        """Sum of ``count * price`` across categories, ignoring modifiers."""
        total = _ZERO
        for c in self._normalize(categories):
            if c.count > 0 and c.base_price >= 0:
                total += c.count * c.base_price
        return total

    def modifiers_subtotal(self, categories: CategoriesLike) -> Decimal:
        """Sum of every modifier line across categories, floored at 0."""
        total = _ZERO
        for c in self._normalize(categories):
            total += self.category_breakdown(c).modifiers_total
        return max(_ZERO, total)

    def clamp_modifier_quantities(self, category_input: CategoryInput) -> int:
        return clamp_modifier_quantities(category_input)

    def totals(self, categories: CategoriesLike) -> EstimateTotals:
        """Full breakdown for the four categories plus job aggregates."""
        ordered = self._normalize(categories)
        breakdown = [self.category_breakdown(c) for c in ordered]
        base_subtotal = sum((b.base for b in breakdown), _ZERO)
        modifiers_subtotal = max(
            _ZERO, sum((b.modifiers_total for b in breakdown), _ZERO)
        )
        grand_total = sum((b.total for b in breakdown), _ZERO)
        return EstimateTotals(
            categories=breakdown,
            base_subtotal=base_subtotal,
            modifiers_subtotal=modifiers_subtotal,
            grand_total=grand_total,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _normalize(categories: CategoriesLike) -> list[CategoryInput]:
        """Return inputs in fixed category order, one per category.

        Categories missing from the input are treated as empty. When an
        iterable repeats a category the last occurrence wins.
        """
        if isinstance(categories, Estimate):
            return categories.ordered_categories()

        if isinstance(categories, Mapping):
            by_category = dict(categories)
        else:
            by_category = {c.category: c for c in categories}

        ordered: list[CategoryInput] = []
        for category in Category:
            found = by_category.get(category)
            ordered.append(
                found if found is not None else CategoryInput(category=category)
            )
        return ordered
