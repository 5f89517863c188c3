"""
Event Topics for boxlayout

All pub/sub topics published by a layout pass are defined here.
Topic naming convention: <category>.<action>

Every topic is always sent with the same keyword arguments, listed in its
docstring, so listeners can declare them explicitly.
"""

# Layout pass lifecycle
PASS_STARTED = "layout.pass_started"
"""Published when layout_subviews() begins a pass. Params: bounds"""

# Bounds context
BOUNDS_RESET = "layout.bounds_reset"
"""Published whenever the active bounds change. Params: bounds, previous"""

# Distribution results
ALIGNED = "layout.aligned"
"""Published after items were placed along an axis. Params: axis, positions"""

SIZED = "layout.sized"
"""Published after a size assignment. Params: axis, sizes

For a single-axis assignment ``axis`` is the Axis and ``sizes`` holds one
extent per item that was sized. For a uniform size assignment ``axis`` is
None and ``sizes`` is the ``[width, height]`` pair given to every item.
"""
