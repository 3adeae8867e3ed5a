"""Tests for CategoryInput mutation helpers and the Estimate snapshot."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from windowquote.data.seed import DEFAULT_MODIFIERS, default_modifiers
from windowquote.models.category import CategoryInput
from windowquote.models.enums import Category, ModifierMode, PricingUnit
from windowquote.models.estimate import Estimate
from windowquote.models.modifier import AdvancedModifier


def _ground_with_modifiers(count: int, quantities: list[int]) -> CategoryInput:
    return CategoryInput(
        category=Category.GROUND,
        count=count,
        base_price=Decimal("5.00"),
        modifiers=[
            AdvancedModifier(name=f"m{i}", price_value=Decimal("1"), quantity=q)
            for i, q in enumerate(quantities)
        ],
    )


class TestAdvancedModifier:
    def test_defaults(self) -> None:
        modifier = AdvancedModifier(name="Hard water")
        assert modifier.mode == ModifierMode.PRICE
        assert modifier.price_value == Decimal("0")
        assert modifier.multiplier_value == Decimal("1.0")
        assert modifier.quantity == 0
        assert modifier.is_custom is False

    def test_ids_are_unique(self) -> None:
        assert AdvancedModifier(name="a").id != AdvancedModifier(name="a").id

    def test_name_is_editable(self) -> None:
        modifier = AdvancedModifier(name="Custom", is_custom=True)
        modifier.name = "Gutter check"
        assert modifier.name == "Gutter check"

    def test_mode_display_name(self) -> None:
        assert ModifierMode.PRICE.display_name == "Price"
        assert ModifierMode.MULTIPLIER.display_name == "Multiplier"


class TestCategoryInput:
    def test_reducing_count_clamps_quantities(self) -> None:
        category = _ground_with_modifiers(10, [8, 3, 10])
        category.set_count(4)
        assert category.count == 4
        assert [m.quantity for m in category.modifiers] == [4, 3, 4]

    def test_assigning_count_clamps_quantities(self) -> None:
        category = _ground_with_modifiers(10, [8, 1])
        category.count = 2
        assert [m.quantity for m in category.modifiers] == [2, 1]

    def test_construction_clamps_quantities(self) -> None:
        category = _ground_with_modifiers(3, [10, -2, 3])
        assert [m.quantity for m in category.modifiers] == [3, 0, 3]

    def test_assigning_modifiers_clamps_quantities(self) -> None:
        category = _ground_with_modifiers(2, [])
        category.modifiers = [AdvancedModifier(name="Screens", quantity=9)]
        assert category.modifiers[0].quantity == 2

    def test_increasing_count_keeps_quantities(self) -> None:
        category = _ground_with_modifiers(4, [4, 1])
        category.set_count(9)
        assert [m.quantity for m in category.modifiers] == [4, 1]

    def test_negative_count_floors_at_zero(self) -> None:
        category = _ground_with_modifiers(2, [2])
        category.set_count(-5)
        assert category.count == 0
        assert category.modifiers[0].quantity == 0

    def test_decrement_at_zero_stays_zero(self) -> None:
        category = CategoryInput(category=Category.BASEMENT)
        category.decrement()
        assert category.count == 0

    def test_increment_and_decrement(self) -> None:
        category = _ground_with_modifiers(1, [1])
        category.increment()
        category.increment()
        assert category.count == 3
        category.decrement()
        category.decrement()
        category.decrement()
        assert category.count == 0
        assert category.modifiers[0].quantity == 0

    def test_set_modifier_quantity_is_clamped(self) -> None:
        category = _ground_with_modifiers(3, [0])
        modifier_id = category.modifiers[0].id
        category.set_modifier_quantity(modifier_id, 7)
        assert category.modifiers[0].quantity == 3
        category.set_modifier_quantity(modifier_id, -1)
        assert category.modifiers[0].quantity == 0

    def test_custom_modifier_appended_last(self) -> None:
        category = CategoryInput(category=Category.GROUND, modifiers=default_modifiers())
        added = category.add_custom_modifier("Skylights", ModifierMode.MULTIPLIER)
        assert category.modifiers[-1] is added
        assert added.is_custom is True
        assert added.mode == ModifierMode.MULTIPLIER
        assert [m.name for m in category.modifiers[:-1]] == [
            name for name, _ in DEFAULT_MODIFIERS
        ]

    def test_remove_modifier_preserves_order(self) -> None:
        category = _ground_with_modifiers(5, [1, 2, 3])
        removed = category.remove_modifier(category.modifiers[1].id)
        assert removed is True
        assert [m.name for m in category.modifiers] == ["m0", "m2"]

    def test_remove_unknown_modifier(self) -> None:
        category = _ground_with_modifiers(5, [1])
        assert category.remove_modifier(AdvancedModifier(name="x").id) is False
        assert len(category.modifiers) == 1

    def test_negative_count_rejected_at_construction(self) -> None:
        with pytest.raises(ValidationError):
            CategoryInput(category=Category.GROUND, count=-1)

    def test_negative_price_accepted(self) -> None:
        category = CategoryInput(category=Category.GROUND, base_price=Decimal("-2"))
        assert category.base_price == Decimal("-2")

    def test_default_unit_is_window(self) -> None:
        assert CategoryInput(category=Category.GROUND).unit == PricingUnit.WINDOW


class TestSeed:
    def test_eight_defaults_last_is_custom(self) -> None:
        modifiers = default_modifiers()
        assert len(modifiers) == 8
        assert [m.is_custom for m in modifiers] == [False] * 7 + [True]
        assert modifiers[0].name == "Hard water"
        assert modifiers[1].name == "Large windows"

    def test_each_call_returns_fresh_ids(self) -> None:
        first = {m.id for m in default_modifiers()}
        second = {m.id for m in default_modifiers()}
        assert first.isdisjoint(second)

    def test_category_titles(self) -> None:
        assert [c.display_name for c in Category] == [
            "Ground Level",
            "Second Story",
            "3+ Story",
            "Basement",
        ]


class TestEstimate:
    def test_is_frozen(self) -> None:
        estimate = Estimate(job_name="Oak Ave")
        with pytest.raises(ValidationError):
            estimate.job_name = "Elm Ave"  # type: ignore[misc]

    def test_missing_category_is_empty(self) -> None:
        estimate = Estimate(job_name="Oak Ave")
        basement = estimate.category(Category.BASEMENT)
        assert basement.count == 0
        assert basement.modifiers == []

    def test_category_returns_copy(self) -> None:
        ground = CategoryInput(
            category=Category.GROUND, count=5, modifiers=default_modifiers()
        )
        estimate = Estimate(job_name="Oak Ave", categories={Category.GROUND: ground})
        copy = estimate.category(Category.GROUND)
        copy.set_count(1)
        copy.modifiers[0].name = "Edited"
        stored = estimate.category(Category.GROUND)
        assert stored.count == 5
        assert stored.modifiers[0].name == "Hard water"

    def test_ordered_categories(self) -> None:
        estimate = Estimate(
            job_name="Oak Ave",
            categories={
                Category.BASEMENT: CategoryInput(category=Category.BASEMENT, count=2),
                Category.GROUND: CategoryInput(category=Category.GROUND, count=5),
            },
        )
        ordered = estimate.ordered_categories()
        assert [c.category for c in ordered] == list(Category)
        assert [c.count for c in ordered] == [5, 0, 0, 2]

    def test_json_round_trip_keeps_modifier_order(self) -> None:
        ground = CategoryInput(
            category=Category.GROUND, count=3, modifiers=default_modifiers()
        )
        estimate = Estimate(job_name="Oak Ave", categories={Category.GROUND: ground})
        restored = Estimate.model_validate_json(estimate.model_dump_json())
        assert [m.name for m in restored.category(Category.GROUND).modifiers] == [
            m.name for m in ground.modifiers
        ]
