"""
Geometry Primitives

Rectangles, sizes and the two layout axes shared by every layout operation.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Tuple, Union


class Axis(Enum):
    """Layout axis."""

    HORIZONTAL = auto()  # x / width
    VERTICAL = auto()  # y / height


@dataclass(frozen=True)
class Size:
    """Dimensions in logical coordinate space."""

    width: float = 0.0
    height: float = 0.0

    def extent(self, axis: Axis) -> float:
        """Width for the horizontal axis, height for the vertical one."""
        if axis == Axis.HORIZONTAL:
            return self.width
        return self.height


@dataclass(frozen=True)
class Rect:
    """Area with position and dimensions.

    Rectangles are values: every mutation helper returns a new Rect.
    """

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def mid_x(self) -> float:
        return self.x + self.width * 0.5

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def mid_y(self) -> float:
        return self.y + self.height * 0.5

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def origin(self, axis: Axis) -> float:
        if axis == Axis.HORIZONTAL:
            return self.x
        return self.y

    def extent(self, axis: Axis) -> float:
        if axis == Axis.HORIZONTAL:
            return self.width
        return self.height

    def with_origin(self, axis: Axis, value: float) -> "Rect":
        if axis == Axis.HORIZONTAL:
            return replace(self, x=value)
        return replace(self, y=value)

    def with_extent(self, axis: Axis, value: float) -> "Rect":
        if axis == Axis.HORIZONTAL:
            return replace(self, width=value)
        return replace(self, height=value)

    def with_size(self, size: Size) -> "Rect":
        return replace(self, width=size.width, height=size.height)

    def inset(
        self, top: float, left: float, bottom: float, right: float
    ) -> "Rect":
        """Shrink by the four margins. Negative margins grow the rectangle."""
        return Rect(
            self.x + left,
            self.y + top,
            self.width - (left + right),
            self.height - (top + bottom),
        )


def parse_size(size: Union[Size, Tuple[float, float]]) -> Size:
    """
    Parse a size value.

    Accepts:
    - Size instance
    - Tuple: (width, height)

    Returns:
    - Size
    """
    if isinstance(size, Size):
        return size
    elif isinstance(size, tuple) and len(size) == 2:
        return Size(float(size[0]), float(size[1]))
    else:
        raise ValueError(
            f"Invalid size: {size!r}. Use Size or a (width, height) tuple"
        )
