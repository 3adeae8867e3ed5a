"""Domain models for the windowquote pricing library."""

from windowquote.models.category import CategoryInput
from windowquote.models.enums import (
    Category,
    EstimatorSource,
    ModifierMode,
    PricingUnit,
)
from windowquote.models.estimate import (
    CategoryTotals,
    Estimate,
    EstimateTotals,
    ModifierLine,
)
from windowquote.models.modifier import AdvancedModifier
from windowquote.models.schedule import ScheduledJob

__all__ = [
    "AdvancedModifier",
    "Category",
    "CategoryInput",
    "CategoryTotals",
    "Estimate",
    "EstimateTotals",
    "EstimatorSource",
    "ModifierLine",
    "ModifierMode",
    "PricingUnit",
    "ScheduledJob",
]
