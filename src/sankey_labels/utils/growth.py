# src/sankey_labels/utils/growth.py

# --- Built Ins  ---
import math
from collections.abc import Sequence

# --- Local  ---
from sankey_labels.config.models import DEFAULT_LABEL_SETTINGS
from sankey_labels.core.exceptions import InvalidArgument
from sankey_labels.utils.constants import GrowthMarkers
from sankey_labels.utils.formatter import format_percent, is_finite_number, is_number


def calculate_yoy_growth(current: float, comparison: float) -> str:
    """
    Calculates year-over-year growth as a signed, one-decimal percentage string.
    Growth is measured against |comparison|, so a smaller loss reads as growth.

    Examples:
        - (120, 100)   -> '+20.0%'
        - (-80, -100)  -> '+20.0%'
        - (100, 0)     -> '+∞%'
        - (0, 0)       -> '0.0%'
    """
    for operand in (current, comparison):
        if not is_number(operand):
            raise InvalidArgument("current and comparison must be numbers")
    if not (is_finite_number(current) and is_finite_number(comparison)):
        raise InvalidArgument("current and comparison must be finite")

    if comparison == 0:
        if current == 0:
            return GrowthMarkers.FLAT_FROM_ZERO
        return GrowthMarkers.POSITIVE_INFINITY if current > 0 else GrowthMarkers.NEGATIVE_INFINITY

    current, comparison = float(current), float(comparison)
    growth_rate = (current - comparison) / abs(comparison) * 100
    if not math.isfinite(growth_rate):
        # overflow on extreme operands
        return GrowthMarkers.POSITIVE_INFINITY if growth_rate > 0 else GrowthMarkers.NEGATIVE_INFINITY
    return format_percent(growth_rate)


def calculate_multiple_yoy_growth(
    current_values: Sequence[float], comparison_values: Sequence[float]
) -> list[str]:
    """Pairwise `calculate_yoy_growth` over two equal-length sequences."""
    for values in (current_values, comparison_values):
        if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
            raise InvalidArgument("current and comparison values must be sequences")
    if len(current_values) != len(comparison_values):
        raise InvalidArgument("current and comparison values must have the same length")

    return [
        calculate_yoy_growth(current, comparison)
        for current, comparison in zip(current_values, comparison_values)
    ]


def is_significant_growth(yoy_growth: str, threshold: float | None = None) -> bool:
    """
    Returns True when the absolute growth in a formatted string such as '+15.2%'
    meets `threshold` (defaults to the configured significance threshold).
    Infinite growth is always significant.
    """
    if not isinstance(yoy_growth, str):
        raise InvalidArgument("yoy_growth must be a formatted string")
    if threshold is None:
        threshold = DEFAULT_LABEL_SETTINGS.significance_threshold

    if GrowthMarkers.INFINITY in yoy_growth:
        return True

    try:
        numeric_value = float(yoy_growth.replace("+", "").replace("%", ""))
    except ValueError:
        raise InvalidArgument(f"invalid yoy growth format: {yoy_growth!r}") from None
    if not is_finite_number(numeric_value):
        raise InvalidArgument(f"invalid yoy growth format: {yoy_growth!r}")

    return abs(numeric_value) >= threshold
