"""windowquote: estimate pricing for window-cleaning jobs.

Usage::

    from windowquote import Category, EstimateDraft, create_default_engine

    draft = EstimateDraft()
    draft.category(Category.GROUND).set_count(10)
    totals = draft.totals(create_default_engine())
"""

from windowquote.config import Settings, load_settings
from windowquote.draft import EstimateDraft
from windowquote.engine import PricingEngine, clamp_modifier_quantities
from windowquote.factory import create_default_engine, new_draft
from windowquote.formatting import format_currency
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
from windowquote.store import EstimateStore, JobSchedule, RemovedEstimate

__all__ = [
    "AdvancedModifier",
    "Category",
    "CategoryInput",
    "CategoryTotals",
    "Estimate",
    "EstimateDraft",
    "EstimateStore",
    "EstimateTotals",
    "EstimatorSource",
    "JobSchedule",
    "ModifierLine",
    "ModifierMode",
    "PricingEngine",
    "PricingUnit",
    "RemovedEstimate",
    "ScheduledJob",
    "Settings",
    "clamp_modifier_quantities",
    "create_default_engine",
    "format_currency",
    "load_settings",
    "new_draft",
]
