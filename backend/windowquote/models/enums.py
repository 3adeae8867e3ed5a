"""Enums for the windowquote domain models."""

from enum import StrEnum


class PricingUnit(StrEnum):
    """What one counted unit means for a category's price.

    Informational only: the engine always prices per counted item.
    """

    WINDOW = "window"
    PANE = "pane"


class ModifierMode(StrEnum):
    """How an advanced modifier contributes to a category subtotal."""

    PRICE = "price"
    MULTIPLIER = "multiplier"

    @property
    def display_name(self) -> str:
        return "Price" if self is ModifierMode.PRICE else "Multiplier"


class Category(StrEnum):
    """The four fixed window-location groups, in display order."""

    GROUND = "ground"
    SECOND_STORY = "second_story"
    THREE_PLUS_STORY = "three_plus_story"
    BASEMENT = "basement"

    @property
    def display_name(self) -> str:
        from windowquote.data.seed import CATEGORY_TITLES

        return CATEGORY_TITLES[self]


class EstimatorSource(StrEnum):
    """Which estimator an estimate was created from."""

    STANDARD = "standard"
    PREMIUM = "premium"
