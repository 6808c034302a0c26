# tests/conftest.py
"""
Pytest configuration and shared fixtures.
"""

import pytest

from sankey_labels.config.models import LabelSettings, ScaleTier


@pytest.fixture
def income_statement_nodes():
    """A small income statement as batch input, mixing record shapes."""
    return [
        {"name": "Revenue", "value": 1_000_000, "yoy_growth": "+15.2%"},
        {"name": "Expenses", "value": 750_000, "yoyGrowth": "-5.1%"},
        {"name": "Profit", "value": 250_000},
    ]


@pytest.fixture
def euro_settings():
    """Settings with a different prefix and no billion tier."""
    return LabelSettings(
        currency_symbol="€",
        tiers=[
            ScaleTier(threshold=1e6, divisor=1e6, suffix="M"),
            ScaleTier(threshold=1e3, divisor=1e3, suffix="k"),
            ScaleTier(threshold=0, divisor=1, suffix="", decimals=0),
        ],
    )
