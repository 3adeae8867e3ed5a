"""Seed content and settings storage for the windowquote library."""

from windowquote.data.seed import CATEGORY_TITLES, DEFAULT_MODIFIERS, default_modifiers
from windowquote.data.standard_pricing import (
    CategoryPricing,
    StandardPricing,
    StandardPricingRepository,
)

__all__ = [
    "CATEGORY_TITLES",
    "DEFAULT_MODIFIERS",
    "CategoryPricing",
    "StandardPricing",
    "StandardPricingRepository",
    "default_modifiers",
]
