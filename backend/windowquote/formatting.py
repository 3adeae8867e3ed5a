"""Formatting and text-entry helpers for estimate amounts.

Amounts are always displayed as ``$X.XX``: a dollar sign and exactly two
decimals. The parse helpers mirror the forgiving text fields of the
estimate form, where stray characters are dropped instead of rejected.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_CENTS = Decimal("0.01")
_DIGITS = frozenset("0123456789")


def to_cents(amount: Decimal | float | int) -> Decimal:
    """Round an amount to currency precision (half-up)."""
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    return value.quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_currency(amount: Decimal | float | int) -> str:
    """Format an amount as ``$X.XX`` (e.g. ``$58.00``, ``-$3.50``)."""
    cents = to_cents(amount)
    if cents < 0:
        return f"-${-cents:.2f}"
    return f"${cents:.2f}"


def filter_currency_text(text: str) -> str:
    """Normalize raw price input as it is typed.

    Keeps one leading ``$``, digits and the first ``.``; everything else is
    dropped. The result always starts with ``$``; a lone ``$`` or ``$.``
    becomes ``$0``.
    """
    result: list[str] = []
    has_dot = False
    for index, ch in enumerate(text):
        if ch == "$" and index == 0:
            result.append(ch)
        elif ch in _DIGITS:
            result.append(ch)
        elif ch == "." and not has_dot:
            result.append(ch)
            has_dot = True

    filtered = "".join(result)
    if not filtered.startswith("$"):
        filtered = "$" + filtered
    if filtered in ("$", "$."):
        filtered = "$0"
    return filtered


def parse_currency_input(text: str) -> Decimal:
    """Parse price text into a non-negative amount; junk parses as 0."""
    numeric = filter_currency_text(text).removeprefix("$")
    if numeric.endswith("."):
        numeric = numeric[:-1]
    try:
        value = Decimal(numeric) if numeric else Decimal("0")
    except InvalidOperation:
        return Decimal("0")
    return max(Decimal("0"), value)


def parse_count_input(text: str) -> int:
    """Parse count text by keeping digits only; empty parses as 0."""
    digits = "".join(ch for ch in text if ch in _DIGITS)
    return int(digits) if digits else 0
