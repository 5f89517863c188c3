"""
Layout Items

The two capabilities an object needs to take part in a layout pass:

- PositionItem: reports its width, height and flex weight, accepts an origin
- SizeItem: accepts a width and a height

Plain numbers, Flexible markers, PlaceHolder slots and any host element
carrying a ``frame`` rectangle are adapted to these interfaces at the call
boundary by position_item() and size_item().
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import singledispatch
from numbers import Real
from typing import Optional

from .geometry import Axis, Rect, Size


class ItemContractError(TypeError):
    """Raised when an object satisfies neither layout item capability."""


class PositionItem(ABC):
    """Something that can be placed along an axis."""

    @property
    @abstractmethod
    def frame_width(self) -> float:
        pass

    @property
    @abstractmethod
    def frame_height(self) -> float:
        pass

    @property
    @abstractmethod
    def flex_weight(self) -> float:
        """Share of leftover space this item absorbs. 0 means fixed size."""
        pass

    @abstractmethod
    def set_frame_origin_x(self, x: float):
        pass

    @abstractmethod
    def set_frame_origin_y(self, y: float):
        pass

    def frame_extent(self, axis: Axis) -> float:
        if axis == Axis.HORIZONTAL:
            return self.frame_width
        return self.frame_height

    def set_frame_origin(self, axis: Axis, value: float):
        if axis == Axis.HORIZONTAL:
            self.set_frame_origin_x(value)
        else:
            self.set_frame_origin_y(value)


class SizeItem(ABC):
    """Something whose width and height can be assigned."""

    @abstractmethod
    def set_frame_width(self, width: float):
        pass

    @abstractmethod
    def set_frame_height(self, height: float):
        pass

    def set_frame_extent(self, axis: Axis, value: float):
        if axis == Axis.HORIZONTAL:
            self.set_frame_width(value)
        else:
            self.set_frame_height(value)


@dataclass(frozen=True)
class Fixed(PositionItem):
    """A fixed amount of space. Origins are ignored."""

    value: float

    @property
    def frame_width(self) -> float:
        return float(self.value)

    @property
    def frame_height(self) -> float:
        return float(self.value)

    @property
    def flex_weight(self) -> float:
        return 0.0

    def set_frame_origin_x(self, x: float):
        pass

    def set_frame_origin_y(self, y: float):
        pass


@dataclass(frozen=True)
class Flexible(PositionItem):
    """
    Zero-size marker that absorbs leftover space in proportion to its weight.

    Scale with multiplication from either side: ``flexible * 2`` and
    ``2 * flexible`` both weigh twice as much.
    """

    weight: float = 1.0

    def __post_init__(self):
        if not self.weight >= 0:
            raise ValueError(f"Flex weight must be non-negative, got {self.weight}")

    def __mul__(self, factor: float) -> "Flexible":
        if not isinstance(factor, Real):
            return NotImplemented
        return Flexible(self.weight * factor)

    __rmul__ = __mul__

    @property
    def frame_width(self) -> float:
        return 0.0

    @property
    def frame_height(self) -> float:
        return 0.0

    @property
    def flex_weight(self) -> float:
        return float(self.weight)

    def set_frame_origin_x(self, x: float):
        pass

    def set_frame_origin_y(self, y: float):
        pass


class PlaceHolder(SizeItem):
    """Takes a slot in a size assignment without touching any element."""

    def set_frame_width(self, width: float):
        pass

    def set_frame_height(self, height: float):
        pass

    def __repr__(self) -> str:
        return "PlaceHolder()"


class FrameItem(PositionItem, SizeItem):
    """
    Adapter for host elements exposing a mutable ``frame`` Rect attribute.

    Every setter reads the current frame, replaces one component and writes
    the whole rectangle back.
    """

    def __init__(self, element):
        self.element = element

    @property
    def frame(self) -> Rect:
        return self.element.frame

    @frame.setter
    def frame(self, rect: Rect):
        self.element.frame = rect

    @property
    def frame_width(self) -> float:
        return self.frame.width

    @property
    def frame_height(self) -> float:
        return self.frame.height

    @property
    def flex_weight(self) -> float:
        return 0.0

    def set_frame_origin_x(self, x: float):
        self.frame = self.frame.with_origin(Axis.HORIZONTAL, x)

    def set_frame_origin_y(self, y: float):
        self.frame = self.frame.with_origin(Axis.VERTICAL, y)

    def set_frame_width(self, width: float):
        self.frame = self.frame.with_extent(Axis.HORIZONTAL, width)

    def set_frame_height(self, height: float):
        self.frame = self.frame.with_extent(Axis.VERTICAL, height)

    def __repr__(self) -> str:
        return f"FrameItem({self.element!r})"


class Box(FrameItem):
    """
    A plain rectangular element.

    Useful on its own for computing geometry without a host toolkit.
    ``fit_size`` is the size size_to_fit() snaps the box to.
    """

    def __init__(
        self,
        frame: Optional[Rect] = None,
        name: str = "",
        fit_size: Optional[Size] = None,
    ):
        super().__init__(self)
        self._frame = frame if frame is not None else Rect()
        self.name = name
        self.fit_size = fit_size

    @property
    def frame(self) -> Rect:
        return self._frame

    @frame.setter
    def frame(self, rect: Rect):
        self._frame = rect

    def size_to_fit(self):
        """Resize to fit_size, keeping the origin. No-op without one."""
        if self.fit_size is not None:
            self._frame = self._frame.with_size(self.fit_size)

    def __repr__(self) -> str:
        return f"Box({self.name!r}, {self._frame})"


def frame_item(obj) -> FrameItem:
    """Adapt an element with a ``frame`` for direct rectangle edits."""
    if isinstance(obj, FrameItem):
        return obj
    if hasattr(obj, "frame"):
        return FrameItem(obj)
    raise ItemContractError(f"{type(obj).__name__} has no frame")


@singledispatch
def position_item(obj) -> PositionItem:
    """Adapt obj to the PositionItem interface."""
    if hasattr(obj, "frame"):
        return FrameItem(obj)
    raise ItemContractError(
        f"{type(obj).__name__} is not a position item: "
        "expected a PositionItem, a number or an element with a frame"
    )


@position_item.register
def _(obj: PositionItem) -> PositionItem:
    return obj


@position_item.register
def _(obj: Real) -> PositionItem:
    return Fixed(obj)


@singledispatch
def size_item(obj) -> SizeItem:
    """Adapt obj to the SizeItem interface."""
    if hasattr(obj, "frame"):
        return FrameItem(obj)
    raise ItemContractError(
        f"{type(obj).__name__} is not a size item: "
        "expected a SizeItem or an element with a frame"
    )


@size_item.register
def _(obj: SizeItem) -> SizeItem:
    return obj
