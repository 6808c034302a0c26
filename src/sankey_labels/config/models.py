# src/sankey_labels/config/models.py

# --- Installed  ---
from pydantic import BaseModel, ConfigDict, Field

# --- Local  ---
from sankey_labels.utils.constants import ScaleSuffix


class ScaleTier(BaseModel):
    """One short-scale step: values >= threshold are divided and suffixed."""

    model_config = ConfigDict(frozen=True)

    threshold: float
    divisor: float
    suffix: str
    decimals: int = Field(default=1, ge=0)


def _default_tiers() -> tuple[ScaleTier, ...]:
    # Largest unit first; the first tier whose threshold is met wins.
    return (
        ScaleTier(threshold=1e9, divisor=1e9, suffix=ScaleSuffix.BILLION),
        ScaleTier(threshold=1e6, divisor=1e6, suffix=ScaleSuffix.MILLION),
        ScaleTier(threshold=1e3, divisor=1e3, suffix=ScaleSuffix.THOUSAND),
        ScaleTier(threshold=0, divisor=1, suffix=ScaleSuffix.NONE, decimals=0),
    )


class LabelSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    currency_symbol: str = Field(
        default="$",
        description="Fixed prefix symbol for every formatted value."
    )
    tiers: tuple[ScaleTier, ...] = Field(default_factory=_default_tiers)
    significance_threshold: float = Field(
        default=5.0,
        ge=0,
        description="Absolute YoY percentage at or above which growth is significant.",
    )


DEFAULT_LABEL_SETTINGS = LabelSettings()
