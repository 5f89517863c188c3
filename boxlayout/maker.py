"""
Layout Maker

The bounds context of a layout pass. A maker holds the active rectangle and
runs every distribution and alignment operation against it.

Example usage:
    from boxlayout import Box, Rect, layout_subviews

    container = Box(Rect(0, 0, 300, 100))
    left, right = Box(Rect(0, 0, 50, 20)), Box(Rect(0, 0, 50, 20))

    def arrange(make):
        make.x_align([left, make.flexible, right])
        make.y_center([left, right])

    layout_subviews(container, arrange)
"""

from __future__ import annotations
import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, List, Optional

from pubsub import pub

from . import topics
from .debug import enable_debug_events
from .distribute import AxisSizeGroup, SizeGroup, align
from .flex import compute_flex_value
from .geometry import Axis, Rect
from .items import (
    Flexible,
    ItemContractError,
    PlaceHolder,
    FrameItem,
    frame_item,
)


def _debug_from_env() -> bool:
    return bool(os.getenv("BOXLAYOUT_DEBUG"))


@dataclass
class LayoutConfig:
    """Layout pass configuration."""

    # Publish layout events on the bus
    publish_events: bool = True

    # Print every published event (defaults to BOXLAYOUT_DEBUG being set)
    debug: bool = field(default_factory=_debug_from_env)


class LayoutMaker:
    """
    Bounds context for one layout pass.

    The active bounds are a value: reset_bounds(), inset_bounds() and
    narrowed() replace them, they never alias a caller's rectangle.
    """

    def __init__(
        self,
        bounds: Rect,
        bus=None,
        config: Optional[LayoutConfig] = None,
    ):
        self._bounds = bounds
        self.bus = bus if bus is not None else pub
        self.config = config or LayoutConfig()

        if self.config.debug:
            enable_debug_events(self.bus)

    def _publish(self, topic: str, **data):
        if self.config.publish_events:
            self.bus.sendMessage(topic, **data)

    def begin_pass(self):
        """Announce the start of a layout pass over the current bounds."""
        self._publish(topics.PASS_STARTED, bounds=self._bounds)

    def _on_sized(self, axis: Optional[Axis], sizes: List[float]):
        self._publish(topics.SIZED, axis=axis, sizes=sizes)

    @property
    def bounds(self) -> Rect:
        return self._bounds

    @property
    def w(self) -> float:
        return self._bounds.width

    @property
    def h(self) -> float:
        return self._bounds.height

    @property
    def flexible(self) -> Flexible:
        """A weight-1 flexible marker. Multiply it for heavier weights."""
        return Flexible(1)

    @property
    def place_holder(self) -> PlaceHolder:
        return PlaceHolder()

    # Bounds

    def reset_bounds(self, bounds: Rect):
        """Replace the active bounds."""
        previous = self._bounds
        self._bounds = bounds
        self._publish(topics.BOUNDS_RESET, bounds=bounds, previous=previous)

    def inset_bounds(
        self, top: float, left: float, bottom: float, right: float
    ) -> Rect:
        """
        Shrink the active bounds by the four margins.

        Returns:
            The bounds as they were before the inset. Keep it to restore
            them later with reset_bounds(); the maker already uses the new
            bounds.
        """
        previous = self._bounds
        self.reset_bounds(previous.inset(top, left, bottom, right))
        return previous

    def inset_edge(self, edge: float) -> Rect:
        """Inset all four sides by ``edge``. Returns the previous bounds."""
        return self.inset_bounds(edge, edge, edge, edge)

    @contextmanager
    def narrowed(self, bounds: Rect) -> Iterator["LayoutMaker"]:
        """Use ``bounds`` inside the block, restoring the old bounds after."""
        saved = self._bounds
        self.reset_bounds(bounds)
        try:
            yield self
        finally:
            self.reset_bounds(saved)

    def ref(self, element) -> "LayoutMaker":
        """A new maker whose bounds are ``element``'s frame."""
        return LayoutMaker(frame_item(element).frame, bus=self.bus, config=self.config)

    # Size

    def size(self, items: Iterable) -> SizeGroup:
        return SizeGroup(items, on_sized=self._on_sized)

    def width(self, items: Iterable) -> AxisSizeGroup:
        """Group sized horizontally against the current bounds width."""
        return AxisSizeGroup(
            items, Axis.HORIZONTAL, self._bounds.width, on_sized=self._on_sized
        )

    def height(self, items: Iterable) -> AxisSizeGroup:
        """Group sized vertically against the current bounds height."""
        return AxisSizeGroup(
            items, Axis.VERTICAL, self._bounds.height, on_sized=self._on_sized
        )

    # Axis alignment

    def _align(self, items: Iterable, axis: Axis) -> List[float]:
        positions = align(
            items, axis, self._bounds.origin(axis), self._bounds.extent(axis)
        )
        self._publish(topics.ALIGNED, axis=axis, positions=positions)
        return positions

    def x_align(self, items: Iterable) -> List[float]:
        """Place items left to right across the bounds."""
        return self._align(items, Axis.HORIZONTAL)

    def y_align(self, items: Iterable) -> List[float]:
        """Place items top to bottom across the bounds."""
        return self._align(items, Axis.VERTICAL)

    def x_align_first_fixed(self, first, items: Iterable) -> List[float]:
        """x_align() between ``first``'s right edge and the bounds' right edge."""
        start = frame_item(first).frame.max_x
        region = Rect(
            start, self._bounds.y, self._bounds.max_x - start, self._bounds.height
        )
        with self.narrowed(region):
            return self.x_align(items)

    def x_align_last_fixed(self, items: Iterable, last) -> List[float]:
        """x_align() between the bounds' left edge and ``last``'s left edge."""
        end = frame_item(last).frame.min_x
        region = self._bounds.with_extent(Axis.HORIZONTAL, end - self._bounds.x)
        with self.narrowed(region):
            return self.x_align(items)

    def y_align_first_fixed(self, first, items: Iterable) -> List[float]:
        start = frame_item(first).frame.max_y
        region = Rect(
            self._bounds.x, start, self._bounds.width, self._bounds.max_y - start
        )
        with self.narrowed(region):
            return self.y_align(items)

    def y_align_last_fixed(self, items: Iterable, last) -> List[float]:
        end = frame_item(last).frame.min_y
        region = self._bounds.with_extent(Axis.VERTICAL, end - self._bounds.y)
        with self.narrowed(region):
            return self.y_align(items)

    # Flexible value

    def x_flexible_value(self, items: Iterable) -> float:
        return compute_flex_value(self._bounds.width, items, Axis.HORIZONTAL)

    def y_flexible_value(self, items: Iterable) -> float:
        return compute_flex_value(self._bounds.height, items, Axis.VERTICAL)

    # Edge alignment and centering

    def x_left(self, views: Iterable):
        min_x = self._bounds.min_x
        for view in map(frame_item, views):
            view.set_frame_origin_x(min_x)

    def x_right(self, views: Iterable):
        max_x = self._bounds.max_x
        for view in map(frame_item, views):
            view.set_frame_origin_x(max_x - view.frame_width)

    def x_center(self, views: Iterable):
        mid_x = self._bounds.mid_x
        for view in map(frame_item, views):
            view.set_frame_origin_x(mid_x - view.frame_width * 0.5)

    def y_top(self, views: Iterable):
        min_y = self._bounds.min_y
        for view in map(frame_item, views):
            view.set_frame_origin_y(min_y)

    def y_bottom(self, views: Iterable):
        max_y = self._bounds.max_y
        for view in map(frame_item, views):
            view.set_frame_origin_y(max_y - view.frame_height)

    def y_center(self, views: Iterable):
        mid_y = self._bounds.mid_y
        for view in map(frame_item, views):
            view.set_frame_origin_y(mid_y - view.frame_height * 0.5)

    def center(self, views: Iterable):
        mid_x = self._bounds.mid_x
        mid_y = self._bounds.mid_y
        for view in map(frame_item, views):
            frame = view.frame
            view.frame = Rect(
                mid_x - frame.width * 0.5,
                mid_y - frame.height * 0.5,
                frame.width,
                frame.height,
            )

    # Fill

    def x_equal(self, views: Iterable):
        """Match the bounds horizontally."""
        for view in map(frame_item, views):
            view.frame = view.frame.with_origin(
                Axis.HORIZONTAL, self._bounds.x
            ).with_extent(Axis.HORIZONTAL, self._bounds.width)

    def y_equal(self, views: Iterable):
        """Match the bounds vertically."""
        for view in map(frame_item, views):
            view.frame = view.frame.with_origin(
                Axis.VERTICAL, self._bounds.y
            ).with_extent(Axis.VERTICAL, self._bounds.height)

    def equal(self, views: Iterable):
        """Give every view exactly the bounds rectangle."""
        for view in map(frame_item, views):
            view.frame = self._bounds

    def size_to_fit(self, views: Iterable):
        """Let each view size itself through its own size_to_fit()."""
        for view in views:
            element = view.element if isinstance(view, FrameItem) else view
            fit = getattr(element, "size_to_fit", None)
            if fit is None:
                raise ItemContractError(
                    f"{type(element).__name__} does not implement size_to_fit()"
                )
            fit()


def layout_subviews(
    container,
    callback: Optional[Callable[[LayoutMaker], None]] = None,
    bus=None,
    config: Optional[LayoutConfig] = None,
) -> LayoutMaker:
    """
    Begin a layout pass inside ``container``.

    The bounds are the container's own coordinate space: its ``bounds``
    attribute when it has one, otherwise its frame moved to the origin.

    Args:
        container: Element whose children are being laid out
        callback: Called with the maker, if given
        bus: Event bus instance (Pypubsub), defaults to pubsub.pub
        config: Layout configuration

    Returns:
        The maker, for callers that prefer to drive it directly
    """
    bounds = getattr(container, "bounds", None)
    if bounds is None:
        frame = frame_item(container).frame
        bounds = Rect(0.0, 0.0, frame.width, frame.height)

    make = LayoutMaker(bounds, bus=bus, config=config)
    make.begin_pass()
    if callback is not None:
        callback(make)
    return make
