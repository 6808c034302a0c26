# src/sankey_labels/utils/constants.py


class ScaleSuffix:
    """
    Canonical short-scale suffixes appended to scaled values.
    """
    NONE = ""
    THOUSAND = "k"
    MILLION = "M"
    BILLION = "B"


class GrowthMarkers:
    """Markers used in formatted YoY growth strings."""
    POSITIVE_INFINITY = "+∞%"
    NEGATIVE_INFINITY = "-∞%"
    INFINITY = "∞"
    FLAT_FROM_ZERO = "0.0%"


# Accepts comma-grouped digits, which the formatter itself never emits.
FORMATTED_VALUE_TEMPLATE = r"{symbol}[\d,]+(\.\d+)?[kMB]?"
