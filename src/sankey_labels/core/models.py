# src/sankey_labels/core/models.py

from pydantic import BaseModel, ConfigDict, Field


class AppBaseModel(BaseModel):
    """Base model for all label data contracts."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )


class NodeInput(AppBaseModel):
    """
    The data contract for a single diagram node to be labelled.
    Immutable; lives only for the duration of one formatting call.
    Field types are enforced here, label preconditions (non-blank name,
    finite value) are enforced by the formatter itself.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: float
    yoy_growth: str | None = Field(
        default=None,
        alias="yoyGrowth",
        description="Pre-formatted YoY growth string, e.g. '+15.2%'.",
    )
