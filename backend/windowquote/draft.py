"""Editable estimate form state.

An :class:`EstimateDraft` is what the estimator screen mutates on every
tap and keystroke. Totals are recomputed on demand by calling
:meth:`EstimateDraft.totals` after each edit; saving freezes the draft into
an :class:`~windowquote.models.estimate.Estimate`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from windowquote.data.seed import default_modifiers
from windowquote.data.standard_pricing import StandardPricing
from windowquote.models.category import CategoryInput
from windowquote.models.enums import Category, EstimatorSource
from windowquote.models.estimate import Estimate

if TYPE_CHECKING:
    from uuid import UUID

    from windowquote.engine import PricingEngine
    from windowquote.models.estimate import EstimateTotals
    from windowquote.store import EstimateStore

logger = logging.getLogger(__name__)

UNTITLED_ESTIMATE_NAME = "Untitled Estimate"


def _seeded_categories(pricing: StandardPricing) -> dict[Category, CategoryInput]:
    categories: dict[Category, CategoryInput] = {}
    for category in Category:
        defaults = pricing.for_category(category)
        categories[category] = CategoryInput(
            category=category,
            base_price=defaults.price,
            unit=defaults.unit,
            modifiers=default_modifiers(),
        )
    return categories


class EstimateDraft:
    """Mutable job details and category inputs for one estimate.

    Args:
        pricing: Standard pricing used to seed each category's price and
            unit. Defaults to all-zero pricing.
    """

    def __init__(self, pricing: StandardPricing | None = None) -> None:
        self._pricing = pricing or StandardPricing()
        self.existing_id: UUID | None = None
        self.job_name = ""
        self.phone_number = ""
        self.job_location = ""
        self.categories = _seeded_categories(self._pricing)
        self._initial = self._fingerprint()

    @classmethod
    def from_estimate(
        cls, estimate: Estimate, pricing: StandardPricing | None = None
    ) -> EstimateDraft:
        """Open a saved estimate for editing."""
        draft = cls(pricing)
        draft.existing_id = estimate.id
        draft.job_name = estimate.job_name
        draft.phone_number = estimate.phone_number
        draft.job_location = estimate.job_location
        draft.categories = {c: estimate.category(c) for c in Category}
        draft._initial = draft._fingerprint()
        return draft

    def category(self, category: Category) -> CategoryInput:
        return self.categories[category]

    @property
    def has_unsaved_changes(self) -> bool:
        return self._fingerprint() != self._initial

    def clear(self) -> None:
        """Reset job details and every category back to the seeded state."""
        self.job_name = ""
        self.phone_number = ""
        self.job_location = ""
        self.categories = _seeded_categories(self._pricing)

    def totals(self, engine: PricingEngine) -> EstimateTotals:
        return engine.totals(self.categories)

    def to_estimate(self) -> Estimate:
        """Freeze the draft into an estimate snapshot.

        Job fields are trimmed; an empty name becomes "Untitled Estimate".
        """
        name = self.job_name.strip() or UNTITLED_ESTIMATE_NAME
        return Estimate(
            job_name=name,
            phone_number=self.phone_number.strip(),
            job_location=self.job_location.strip(),
            categories={
                c: self.categories[c].model_copy(deep=True) for c in Category
            },
        )

    def save(self, store: EstimateStore, source: EstimatorSource) -> Estimate:
        """Add a new estimate or update the one being edited."""
        estimate = self.to_estimate()
        if self.existing_id is not None:
            stored = store.update(self.existing_id, estimate, source)
            if stored is not None:
                estimate = stored
        else:
            store.add(estimate, source)
            self.existing_id = estimate.id
        self._initial = self._fingerprint()
        logger.debug("Saved draft as %s estimate %s", source, estimate.id)
        return estimate

    def _fingerprint(self) -> str:
        categories = {
            c.value: self.categories[c].model_dump(mode="json") for c in Category
        }
        return repr(
            (self.job_name, self.phone_number, self.job_location, categories)
        )
