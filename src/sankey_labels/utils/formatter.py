# src/sankey_labels/utils/formatter.py

# --- Built Ins  ---
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from numbers import Real
from typing import Any

# --- Local  ---
from sankey_labels.config.models import DEFAULT_LABEL_SETTINGS, LabelSettings


# --- Helper Functions for Validation ---
def is_number(value: Any) -> bool:
    """True for real numbers and Decimals. Booleans are not numbers here."""
    return not isinstance(value, bool) and isinstance(value, (Real, Decimal))


def is_finite_number(value: Any) -> bool:
    if not is_number(value):
        return False
    try:
        return math.isfinite(float(value))
    except (OverflowError, ValueError):
        # int too large for a float, or a signalling Decimal NaN
        return False


# --- Helper Functions for Formatting ---
def round_half_up(value: float, decimals: int) -> str:
    """
    Rounds on the exact binary value of `value`, ties away from zero.
    Examples: 1.25 -> '1.3', 500.5 -> '501' (decimals=0).
    """
    exact = Decimal(value)
    exponent = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        # quantize needs every integer digit plus the requested decimals
        ctx.prec = max(ctx.prec, exact.adjusted() + decimals + 2)
        return str(exact.quantize(exponent, rounding=ROUND_HALF_UP))


def format_short_scale(value: float, settings: LabelSettings = DEFAULT_LABEL_SETTINGS) -> str:
    """
    Formats the magnitude of `value` with a currency prefix and short-scale suffix.
    The sign is discarded and a trailing '.0' is collapsed.

    Examples:
        - 1_000_000  -> '$1M'
        - 1_500_000  -> '$1.5M'
        - -500       -> '$500'
    """
    magnitude = abs(float(value))
    for tier in settings.tiers:
        if magnitude >= tier.threshold:
            number = round_half_up(magnitude / tier.divisor, tier.decimals)
            if number.endswith(".0"):
                number = number[:-2]
            return f"{settings.currency_symbol}{number}{tier.suffix}"
    # Only reachable with custom tiers that lack a zero-threshold fallback.
    return f"{settings.currency_symbol}{round_half_up(magnitude, 0)}"


def format_percent(value: float) -> str:
    """Signed one-decimal percentage, e.g. 20.0 -> '+20.0%', -4.7 -> '-4.7%'."""
    if value == 0:
        value = 0.0  # normalise -0.0
    return f"{'+' if value >= 0 else ''}{round_half_up(value, 1)}%"
