"""
Unit tests for the layout maker (bounds context).
"""

import pytest
from boxlayout import (
    Box,
    Flexible,
    FrameItem,
    ItemContractError,
    LayoutConfig,
    LayoutMaker,
    PlaceHolder,
    Rect,
    Size,
    layout_subviews,
)


@pytest.mark.unit
class TestBounds:
    """Test bounds context state."""

    def test_dimensions(self, make):
        assert make.w == 300
        assert make.h == 100
        assert make.bounds == Rect(0, 0, 300, 100)

    def test_inset_returns_previous(self, quiet_config):
        make = LayoutMaker(Rect(0, 0, 100, 100), config=quiet_config)

        previous = make.inset_bounds(top=10, left=10, bottom=10, right=10)

        assert previous == Rect(0, 0, 100, 100)
        assert make.bounds == Rect(10, 10, 80, 80)

    def test_inset_edge(self, make):
        previous = make.inset_edge(5)
        assert previous == Rect(0, 0, 300, 100)
        assert make.bounds == Rect(5, 5, 290, 90)

    def test_inset_restore(self, make):
        previous = make.inset_edge(5)
        make.reset_bounds(previous)
        assert make.bounds == Rect(0, 0, 300, 100)

    def test_reset(self, make):
        make.reset_bounds(Rect(1, 2, 3, 4))
        assert make.bounds == Rect(1, 2, 3, 4)

    def test_narrowed_restores_on_error(self, make):
        with pytest.raises(RuntimeError):
            with make.narrowed(Rect(0, 0, 10, 10)):
                assert make.w == 10
                raise RuntimeError("boom")
        assert make.bounds == Rect(0, 0, 300, 100)

    def test_ref(self, make, box):
        panel = box(80, 60, x=10, y=20)

        sub = make.ref(panel)

        assert sub is not make
        assert sub.bounds == Rect(10, 20, 80, 60)
        assert sub.bus is make.bus
        # Parent untouched
        assert make.bounds == Rect(0, 0, 300, 100)

    def test_ref_is_independent(self, make, box):
        sub = make.ref(box(80, 60))
        sub.inset_edge(10)
        assert make.bounds == Rect(0, 0, 300, 100)

    def test_markers(self, make):
        assert make.flexible == Flexible(1)
        assert make.flexible * 2 == Flexible(2)
        assert isinstance(make.place_holder, PlaceHolder)


@pytest.mark.unit
class TestAxisAlign:
    """Test axis alignment against the bounds."""

    def test_x_align(self, make, box):
        a, b = box(50, 10), box(50, 10)

        make.x_align([a, make.flexible, b])

        assert a.frame.x == 0
        assert b.frame.x == 250

    def test_x_align_offset_bounds(self, offset_bounds, quiet_config, box):
        make = LayoutMaker(offset_bounds, config=quiet_config)
        a, b = box(50, 10), box(50, 10)

        make.x_align([a, make.flexible, b])

        assert a.frame.x == 20
        assert b.frame.x == 170

    def test_y_align(self, make, box):
        a, b = box(10, 20), box(10, 20)

        make.y_align([make.flexible, a, b, make.flexible])

        # (100 - 40) / 2 == 30 above and below
        assert a.frame.y == 30
        assert b.frame.y == 50

    def test_after_inset(self, make, box):
        a = box(10, 10)
        make.inset_bounds(0, 10, 0, 10)
        make.x_align([make.flexible, a])
        assert a.frame.x == 280

    def test_first_fixed(self, make, box):
        first = box(100, 10, x=0)
        a, b = box(20, 10), box(20, 10)

        make.x_align_first_fixed(first, [make.flexible, a, b])

        # Region [100, 300), 160 leftover before a
        assert a.frame.x == 260
        assert b.frame.x == 280
        assert make.bounds == Rect(0, 0, 300, 100)

    def test_last_fixed(self, make, box):
        last = box(100, 10, x=200)
        a, b = box(20, 10), box(20, 10)

        make.x_align_last_fixed([a, make.flexible, b], last)

        # Region [0, 200)
        assert a.frame.x == 0
        assert b.frame.x == 180
        assert make.bounds == Rect(0, 0, 300, 100)

    def test_y_first_fixed(self, make, box):
        header = box(300, 30, y=0)
        a = box(10, 10)

        make.y_align_first_fixed(header, [make.flexible, a, make.flexible])

        # Region [30, 100), 60 leftover split in two
        assert a.frame.y == 60
        assert make.bounds == Rect(0, 0, 300, 100)

    def test_y_last_fixed(self, make, box):
        footer = box(300, 20, y=80)
        a = box(10, 10)

        make.y_align_last_fixed([make.flexible, a], footer)

        assert a.frame.y == 70
        assert make.bounds == Rect(0, 0, 300, 100)

    def test_flexible_values(self, make, box):
        assert make.x_flexible_value([50, make.flexible, 50]) == 200
        assert make.y_flexible_value([box(10, 40), make.flexible * 2]) == 30
        assert make.x_flexible_value([50, 50]) == 0


@pytest.mark.unit
class TestSizes:
    """Test size groups created from the maker."""

    def test_size(self, make, box):
        a, b = box(), box()
        make.size([a, b]).set_value((20, 30))
        assert a.frame.size == Size(20, 30)
        assert b.frame.size == Size(20, 30)

    def test_width_values(self, quiet_config, box):
        make = LayoutMaker(Rect(0, 0, 100, 50), config=quiet_config)
        a, b, c = box(), box(), box()

        make.width([a, b, c]).set_values([10, make.flexible, 20])

        assert (a.frame.width, b.frame.width, c.frame.width) == (10, 70, 20)

    def test_height_value(self, make, box):
        a = box(5, 5)
        make.height([a]).set_value(12)
        assert a.frame == Rect(0, 0, 5, 12)

    def test_width_captures_bounds_at_creation(self, make, box):
        a = box()
        group = make.width([a])
        make.inset_edge(50)

        group.set_values([make.flexible])

        assert a.frame.width == 300

    def test_placeholder_slot(self, make, box):
        a = box()
        make.width([make.place_holder, a]).set_values([100, make.flexible])
        assert a.frame.width == 200


@pytest.mark.unit
class TestEdgesAndFill:
    """Test alignment, centering and fill."""

    def test_left_right(self, offset_bounds, quiet_config, box):
        make = LayoutMaker(offset_bounds, config=quiet_config)
        a, b = box(30, 10, x=99), box(30, 10)

        make.x_left([a])
        make.x_right([b])

        assert a.frame.x == 20
        assert b.frame.x == 190

    def test_top_bottom(self, offset_bounds, quiet_config, box):
        make = LayoutMaker(offset_bounds, config=quiet_config)
        a, b = box(30, 10, y=99), box(30, 10)

        make.y_top([a])
        make.y_bottom([b])

        assert a.frame.y == 40
        assert b.frame.y == 150

    def test_centering_is_per_item(self, make, box):
        a, b = box(100, 10), box(50, 30)

        make.x_center([a, b])
        make.y_center([a, b])

        assert (a.frame.x, a.frame.y) == (100, 45)
        assert (b.frame.x, b.frame.y) == (125, 35)

    def test_center(self, make, box):
        a = box(100, 20, x=3, y=4)
        make.center([a])
        assert a.frame == Rect(100, 40, 100, 20)

    def test_equal(self, make, box):
        a = box(1, 1)
        make.equal([a])
        assert a.frame == make.bounds

    def test_x_equal_y_equal(self, offset_bounds, quiet_config, box):
        make = LayoutMaker(offset_bounds, config=quiet_config)
        a, b = box(1, 2, x=3, y=4), box(1, 2, x=3, y=4)

        make.x_equal([a])
        make.y_equal([b])

        assert a.frame == Rect(20, 4, 200, 2)
        assert b.frame == Rect(3, 40, 1, 120)

    def test_host_elements(self, make, mock_view):
        view = mock_view(Rect(0, 0, 100, 20))
        make.center([view])
        assert view.frame == Rect(100, 40, 100, 20)

    def test_size_to_fit(self, make):
        a = Box(Rect(1, 1, 1, 1), fit_size=Size(40, 20))
        make.size_to_fit([a])
        assert a.frame == Rect(1, 1, 40, 20)

    def test_size_to_fit_wrapped_host(self, make):
        class FittingView:
            def __init__(self):
                self.frame = Rect(2, 3, 1, 1)

            def size_to_fit(self):
                self.frame = self.frame.with_size(Size(25, 15))

        view = FittingView()

        make.size_to_fit([FrameItem(view)])

        assert view.frame == Rect(2, 3, 25, 15)

    def test_size_to_fit_wrapped_host_without_support(self, make, mock_view):
        with pytest.raises(ItemContractError):
            make.size_to_fit([FrameItem(mock_view())])

    def test_size_to_fit_requires_support(self, make, mock_view):
        with pytest.raises(ItemContractError):
            make.size_to_fit([mock_view()])

    def test_alignment_rejects_frameless(self, make):
        with pytest.raises(ItemContractError):
            make.x_left([42])


@pytest.mark.unit
class TestLayoutSubviews:
    """Test beginning a layout pass."""

    def test_bounds_from_frame(self, bus, box):
        container = box(300, 100, x=50, y=60)

        make = layout_subviews(container, bus=bus, config=LayoutConfig(debug=False))

        assert make.bounds == Rect(0, 0, 300, 100)

    def test_bounds_attribute_preferred(self, bus):
        class Scrolled:
            frame = Rect(0, 0, 100, 100)
            bounds = Rect(0, 250, 100, 100)

        make = layout_subviews(Scrolled(), bus=bus, config=LayoutConfig(debug=False))

        assert make.bounds == Rect(0, 250, 100, 100)

    def test_callback(self, bus, box):
        container = box(300, 100)
        a, b = box(50, 20), box(50, 20)

        def arrange(make):
            make.x_align([a, make.flexible, b])
            make.y_center([a, b])

        layout_subviews(container, arrange, bus=bus, config=LayoutConfig(debug=False))

        assert a.frame == Rect(0, 40, 50, 20)
        assert b.frame == Rect(250, 40, 50, 20)

    def test_nested_pass(self, bus, box):
        container = box(300, 100)
        sidebar = box(100, 100)
        content = box(0, 0)
        button = box(40, 20)

        def arrange(make):
            make.y_equal([sidebar, content])
            make.width([sidebar, content]).set_values([100, make.flexible])
            make.x_align([sidebar, content])

            inner = make.ref(content)
            inner.inset_edge(10)
            inner.x_right([button])
            inner.y_bottom([button])

        layout_subviews(container, arrange, bus=bus, config=LayoutConfig(debug=False))

        assert content.frame == Rect(100, 0, 200, 100)
        assert button.frame == Rect(250, 70, 40, 20)
