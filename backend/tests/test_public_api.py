"""Tests for the top-level windowquote imports and the default engine."""

from __future__ import annotations

from decimal import Decimal

import windowquote
from windowquote import (
    AdvancedModifier,
    Category,
    CategoryInput,
    EstimateDraft,
    EstimateStore,
    EstimatorSource,
    ModifierMode,
    PricingEngine,
    create_default_engine,
    format_currency,
)


class TestPublicApi:
    def test_all_names_importable(self) -> None:
        for name in windowquote.__all__:
            assert hasattr(windowquote, name), name

    def test_default_engine(self) -> None:
        assert isinstance(create_default_engine(), PricingEngine)

    def test_quick_estimate_flow(self) -> None:
        engine = create_default_engine()
        draft = EstimateDraft()
        draft.job_name = "Cedar Ln"

        ground = draft.category(Category.GROUND)
        ground.base_price = Decimal("5.00")
        ground.set_count(10)
        second = draft.category(Category.SECOND_STORY)
        second.base_price = Decimal("6.00")
        second.set_count(4)
        basement = draft.category(Category.BASEMENT)
        basement.base_price = Decimal("4.00")
        basement.set_count(2)
        screens = basement.add_custom_modifier("Screens")
        screens.price_value = Decimal("1.00")
        basement.set_modifier_quantity(screens.id, 2)

        store = EstimateStore()
        estimate = draft.save(store, EstimatorSource.STANDARD)
        totals = engine.totals(estimate)
        assert format_currency(totals.grand_total) == "$84.00"
        assert format_currency(totals.base_subtotal) == "$82.00"
        assert format_currency(totals.modifiers_subtotal) == "$2.00"

    def test_direct_category_input(self) -> None:
        category = CategoryInput(
            category=Category.THREE_PLUS_STORY,
            count=5,
            base_price=Decimal("10.00"),
            modifiers=[
                AdvancedModifier(
                    name="Ladder work",
                    mode=ModifierMode.MULTIPLIER,
                    multiplier_value=Decimal("1.5"),
                    quantity=5,
                )
            ],
        )
        assert create_default_engine().grand_total([category]) == Decimal("75.00")
