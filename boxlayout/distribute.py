"""
Distribution

Position and size distribution along one axis.
"""

from __future__ import annotations
from typing import Callable, Iterable, List, Optional, Sequence

from .flex import compute_flex_value
from .geometry import Axis, Size, parse_size
from .items import PositionItem, SizeItem, position_item, size_item

SizedCallback = Callable[[Optional[Axis], List[float]], None]


def align(
    items: Iterable, axis: Axis, origin: float, extent: float
) -> List[float]:
    """
    Lay out items back to back along an axis.

    Fixed-size items keep their extent, flexible items add their share of
    the leftover space. The cursor starts at ``origin`` and moves forward in
    list order.

    Args:
        items: Position items (numbers and framed elements are adapted)
        axis: Axis to lay out on
        origin: Leading edge of the region
        extent: Length of the region

    Returns:
        Origin assigned to each item, in order
    """
    adapted = [position_item(item) for item in items]
    flex_value = compute_flex_value(extent, adapted, axis)

    positions = []
    pos = origin
    for item in adapted:
        item.set_frame_origin(axis, pos)
        positions.append(pos)
        pos += flex_value * item.flex_weight
        pos += item.frame_extent(axis)
    return positions


class SizeGroup:
    """Items that get the same width and height."""

    def __init__(self, items: Iterable, on_sized: Optional[SizedCallback] = None):
        self.items: List[SizeItem] = [size_item(item) for item in items]
        self.on_sized = on_sized

    def set_value(self, size) -> Size:
        """Assign ``size`` (a Size or a (width, height) tuple) to every item."""
        size = parse_size(size)
        for item in self.items:
            item.set_frame_width(size.width)
            item.set_frame_height(size.height)
        if self.on_sized:
            self.on_sized(None, [size.width, size.height])
        return size


class AxisSizeGroup:
    """
    Items sized along one axis.

    ``total`` is the extent available along the axis, captured when the
    group is created; later changes to the layout bounds do not affect it.
    """

    def __init__(
        self,
        items: Iterable,
        axis: Axis,
        total: float,
        on_sized: Optional[SizedCallback] = None,
    ):
        self.items: List[SizeItem] = [size_item(item) for item in items]
        self.axis = axis
        self.total = total
        self.on_sized = on_sized

    def set_value(self, value: float) -> List[float]:
        """Assign the same extent to every item."""
        for item in self.items:
            item.set_frame_extent(self.axis, value)
        sizes = [value] * len(self.items)
        if self.on_sized:
            self.on_sized(self.axis, sizes)
        return sizes

    def set_values(self, targets: Sequence) -> List[float]:
        """
        Assign per-item extents from a list of position items.

        Each target contributes its own extent plus its share of the space
        left over by the whole target list. Only the first
        min(len(items), len(targets)) items are touched.

        Returns:
            The extents that were applied
        """
        adapted: List[PositionItem] = [position_item(t) for t in targets]
        flex_value = compute_flex_value(self.total, adapted, self.axis)

        sizes = []
        for item, target in zip(self.items, adapted):
            extent = target.frame_extent(self.axis) + flex_value * target.flex_weight
            item.set_frame_extent(self.axis, extent)
            sizes.append(extent)
        if self.on_sized:
            self.on_sized(self.axis, sizes)
        return sizes
