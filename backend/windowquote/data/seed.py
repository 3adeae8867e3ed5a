"""Seed content for new estimates.

The default advanced modifiers are product content: every category of a
new estimate starts with a fresh copy of this list, in this order. The
last entry is a user-editable custom row.
"""

from __future__ import annotations

from windowquote.models.enums import Category
from windowquote.models.modifier import AdvancedModifier

CATEGORY_TITLES: dict[Category, str] = {
    Category.GROUND: "Ground Level",
    Category.SECOND_STORY: "Second Story",
    Category.THREE_PLUS_STORY: "3+ Story",
    Category.BASEMENT: "Basement",
}

# (name, is_custom)
DEFAULT_MODIFIERS: list[tuple[str, bool]] = [
    ("Hard water", False),
    ("Large windows", False),
    ("French panes", False),
    ("Screens", False),
    ("Tracks & sills", False),
    ("Storm windows", False),
    ("Ladder work", False),
    ("Custom", True),
]


def default_modifiers() -> list[AdvancedModifier]:
    """Return a fresh list of the seeded modifiers with new ids."""
    return [
        AdvancedModifier(name=name, is_custom=is_custom)
        for name, is_custom in DEFAULT_MODIFIERS
    ]
