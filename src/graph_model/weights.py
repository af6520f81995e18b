from __future__ import annotations

import math
from typing import Any

from .models import Node

WEIGHT_FEATURES = ("activity", "interactionCount", "connectionCount")


def _feature(properties: dict[str, Any], key: str) -> float:
    try:
        return float(properties.get(key) or 0.0)
    except (TypeError, ValueError):
        return 0.0


def property_distance(a: Node, b: Node) -> float:
    """Euclidean distance between two nodes in behavioural-property space."""
    return math.sqrt(
        sum((_feature(a.properties, key) - _feature(b.properties, key)) ** 2 for key in WEIGHT_FEATURES)
    )


def property_weight(a: Node, b: Node) -> float:
    # 1/(1+d) maps [0, inf) onto (0, 1]; identical nodes get weight 1.
    return 1.0 / (1.0 + property_distance(a, b))


def is_usable_weight(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value) and value > 0
