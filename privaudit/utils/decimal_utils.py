"""Helpers for Decimal normalization."""

from decimal import Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from an API payload or adapter.

    Returns:
        Decimal: Normalized numeric value. Missing values become zero.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def canonical_decimal(value: Decimal) -> str:
    """Render a Decimal without exponent or trailing zeros.

    ``Decimal("1000000.00")`` and ``Decimal("1E+6")`` both render as
    ``"1000000"`` so that commitments do not depend on how a total was
    transported.
    """
    normalized = value.normalize()
    if normalized == 0:
        return "0"
    return format(normalized, "f")


def decimal_to_float(value: Decimal | None) -> float | None:
    """Convert a Decimal to float for JSON payloads."""
    if value is None:
        return None
    return float(value)


__all__ = [
    "coerce_decimal",
    "canonical_decimal",
    "decimal_to_float",
]
