# src/sankey_labels/utils/labelling.py

# --- Built Ins  ---
import re
from collections.abc import Mapping, Sequence
from typing import Any

# --- Installed  ---
from loguru import logger as log

# --- Local  ---
from sankey_labels.config.models import DEFAULT_LABEL_SETTINGS, LabelSettings
from sankey_labels.core.exceptions import InvalidArgument
from sankey_labels.core.models import NodeInput
from sankey_labels.utils.constants import FORMATTED_VALUE_TEMPLATE
from sankey_labels.utils.formatter import format_short_scale, is_finite_number


def generate_label(
    name: str,
    value: float,
    yoy_growth: str | None = None,
    settings: LabelSettings = DEFAULT_LABEL_SETTINGS,
) -> str:
    """
    Generates the multi-line label for a diagram node.
    Format: {name}\\n{formatted_value}[\\n({yoy_growth})]

    Example: ('Revenue', 1_200_000, '+15.2%') -> 'Revenue\\n$1.2M\\n(+15.2%)'
    A missing or blank `yoy_growth` drops the third line.
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgument("name must be non-empty")
    if not is_finite_number(value):
        raise InvalidArgument("value must be finite")
    if yoy_growth is not None and not isinstance(yoy_growth, str):
        raise InvalidArgument("yoy_growth must be a string")

    label = f"{name.strip()}\n{format_short_scale(value, settings)}"
    if yoy_growth is not None and yoy_growth.strip():
        label += f"\n({yoy_growth.strip()})"
    return label


def _node_fields(node: Any) -> tuple[Any, Any, Any]:
    if isinstance(node, NodeInput):
        return node.name, node.value, node.yoy_growth
    if isinstance(node, Mapping):
        yoy_growth = node.get("yoy_growth")
        if yoy_growth is None:
            yoy_growth = node.get("yoyGrowth")
        return node.get("name"), node.get("value"), yoy_growth
    raise InvalidArgument("each node must be a record")


def generate_multiple_labels(
    nodes: Sequence[NodeInput | Mapping[str, Any]],
    settings: LabelSettings = DEFAULT_LABEL_SETTINGS,
) -> list[str]:
    """
    Generates one label per node, preserving input order.
    Records may be `NodeInput` instances or mappings with 'name', 'value'
    and 'yoy_growth' (or 'yoyGrowth') keys. Fails on the first invalid node.
    """
    if isinstance(nodes, (str, bytes)) or not isinstance(nodes, Sequence):
        raise InvalidArgument("nodes must be a sequence")

    log.debug(f"Generating labels for {len(nodes)} nodes...")
    labels = []
    for index, node in enumerate(nodes):
        try:
            name, value, yoy_growth = _node_fields(node)
            labels.append(generate_label(name, value, yoy_growth, settings))
        except InvalidArgument as e:
            log.error(f"Invalid node at index {index}: {e}")
            raise
    return labels


def validate_label_completeness(
    label: Any,
    expected_name: str,
    expected_value: float,
    expected_yoy_growth: str | None = None,
    settings: LabelSettings = DEFAULT_LABEL_SETTINGS,
) -> bool:
    """
    Best-effort check that a label carries its expected components.
    This is a containment check, not a parser: `expected_value` is not compared
    and the growth check only looks for a parenthesised percentage.
    Never raises; malformed input yields False.
    """
    if not isinstance(label, str) or not isinstance(expected_name, str):
        log.debug(f"Label completeness check skipped for non-string input: {label!r}")
        return False

    if expected_name not in label:
        return False

    pattern = FORMATTED_VALUE_TEMPLATE.format(symbol=re.escape(settings.currency_symbol))
    if not re.search(pattern, label):
        return False

    if isinstance(expected_yoy_growth, str) and expected_yoy_growth.strip():
        if not ("(" in label and ")" in label and "%" in label):
            return False

    return True
