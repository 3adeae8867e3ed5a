"""Factory functions for wiring up the pricing engine and new drafts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from windowquote.data.standard_pricing import StandardPricingRepository
from windowquote.draft import EstimateDraft
from windowquote.engine import PricingEngine

if TYPE_CHECKING:
    from windowquote.config import Settings


def create_default_engine() -> PricingEngine:
    """Create the PricingEngine used for live and stored totals."""
    return PricingEngine()


def new_draft(settings: Settings) -> EstimateDraft:
    """Start a new estimate seeded from the user's saved standard pricing.

    Example::

        from windowquote import Category, create_default_engine, load_settings, new_draft

        draft = new_draft(load_settings())
        draft.category(Category.GROUND).set_count(10)
        totals = draft.totals(create_default_engine())
    """
    repository = StandardPricingRepository(settings.standard_pricing_path)
    return EstimateDraft(repository.load())
