"""Standard pricing settings: default price and unit per category."""

from __future__ import annotations

import logging
from decimal import Decimal
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from windowquote.exceptions import SettingsError
from windowquote.models.enums import Category, PricingUnit

logger = logging.getLogger(__name__)


class CategoryPricing(BaseModel):
    """Default price per unit for one category."""

    price: Decimal = Field(default=Decimal("0"), ge=0)
    unit: PricingUnit = PricingUnit.WINDOW


class StandardPricing(BaseModel):
    """The user's standard pricing, applied to every new estimate."""

    ground: CategoryPricing = Field(default_factory=CategoryPricing)
    second_story: CategoryPricing = Field(default_factory=CategoryPricing)
    three_plus_story: CategoryPricing = Field(default_factory=CategoryPricing)
    basement: CategoryPricing = Field(default_factory=CategoryPricing)

    def for_category(self, category: Category) -> CategoryPricing:
        pricing: CategoryPricing = getattr(self, category.value)
        return pricing

    def with_category(
        self, category: Category, pricing: CategoryPricing
    ) -> StandardPricing:
        """Return a copy with one category's pricing replaced."""
        return self.model_copy(update={category.value: pricing})


class StandardPricingRepository:
    """Loads and saves the single StandardPricing document as JSON.

    A missing file means the user never set standard pricing, so the
    all-zero defaults are returned.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> StandardPricing:
        """Read the settings file.

        Raises:
            SettingsError: If the file exists but cannot be read or parsed.
        """
        if not self._path.exists():
            logger.info("No standard pricing at %s; using defaults", self._path)
            return StandardPricing()
        try:
            raw = self._path.read_text(encoding="utf-8")
            return StandardPricing.model_validate_json(raw)
        except (OSError, ValidationError) as exc:
            msg = f"Could not load standard pricing from {self._path}: {exc}"
            raise SettingsError(msg) from exc

    def save(self, pricing: StandardPricing) -> None:
        """Write the settings file, creating parent directories as needed."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(pricing.model_dump_json(indent=2), encoding="utf-8")
        except OSError as exc:
            msg = f"Could not save standard pricing to {self._path}: {exc}"
            raise SettingsError(msg) from exc
        logger.info("Saved standard pricing to %s", self._path)
