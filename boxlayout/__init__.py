"""
boxlayout

One-dimensional box distribution for rectangle layout.

This package provides:
- Rectangle and size values, and the two layout axes
- Position and size item capabilities with adapters for numbers,
  flexible markers, placeholders and framed elements
- Flexbox-style distribution of leftover space along an axis
- A bounds context (LayoutMaker) for alignment, centering and fill
- Layout events on a PyPubSub bus

Example usage:
    from boxlayout import Box, Rect, layout_subviews

    container = Box(Rect(0, 0, 300, 100))
    a, b = Box(Rect(0, 0, 50, 20)), Box(Rect(0, 0, 50, 20))

    make = layout_subviews(container)
    make.x_align([a, make.flexible, b])   # a.x == 0, b.x == 250
    make.height([a, b]).set_value(40)
"""

__version__ = "0.1.0"

from .geometry import Axis, Rect, Size, parse_size

from .items import (
    ItemContractError,
    PositionItem,
    SizeItem,
    Fixed,
    Flexible,
    PlaceHolder,
    FrameItem,
    Box,
    frame_item,
    position_item,
    size_item,
)

from .flex import FLEX_EPSILON, compute_flex_value

from .distribute import align, SizeGroup, AxisSizeGroup

from .maker import LayoutMaker, LayoutConfig, layout_subviews

from .debug import debug_event_logger, enable_debug_events, disable_debug_events

from . import topics

__all__ = [
    # Geometry
    "Axis",
    "Rect",
    "Size",
    "parse_size",
    # Items
    "ItemContractError",
    "PositionItem",
    "SizeItem",
    "Fixed",
    "Flexible",
    "PlaceHolder",
    "FrameItem",
    "Box",
    "frame_item",
    "position_item",
    "size_item",
    # Distribution
    "FLEX_EPSILON",
    "compute_flex_value",
    "align",
    "SizeGroup",
    "AxisSizeGroup",
    # Bounds context
    "LayoutMaker",
    "LayoutConfig",
    "layout_subviews",
    # Events
    "debug_event_logger",
    "enable_debug_events",
    "disable_debug_events",
    "topics",
]
