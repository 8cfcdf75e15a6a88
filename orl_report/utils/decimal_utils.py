"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from JSON payloads or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_currency(value) -> Decimal:
    """Round an amount to cents using half-up rounding.

    Args:
        value: Amount accumulated at full precision.

    Returns:
        Decimal: Amount quantized to two decimal places.
    """
    return coerce_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


__all__ = ["coerce_decimal", "round_currency"]
