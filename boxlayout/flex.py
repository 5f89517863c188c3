"""
Flex Value

Space allotted per unit of flex weight along one axis.
"""

from __future__ import annotations
from typing import Iterable

from .geometry import Axis
from .items import position_item

# Single-precision machine epsilon (FLT_EPSILON)
FLEX_EPSILON = 1.1920929e-07


def compute_flex_value(total: float, items: Iterable, axis: Axis) -> float:
    """
    Share of leftover space per unit of flex weight.

    Args:
        total: Extent available along the axis
        items: Items competing for the space (numbers and framed elements
            are adapted)
        axis: Axis the extents are read on

    Returns:
        (total - sum of item extents) / sum of weights, or 0.0 when the
        weights add up to (practically) nothing. Negative when the items
        overflow, which shrinks flexible items.
    """
    remaining = total
    weights = 0.0
    for item in map(position_item, items):
        weights += item.flex_weight
        remaining -= item.frame_extent(axis)
    if weights < FLEX_EPSILON:
        return 0.0
    return remaining / weights
