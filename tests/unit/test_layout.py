"""Unit tests for layout geometry."""

import pytest

from brandmark.config import CanvasSize, LayoutConfig
from brandmark.core.layout import canvas_size, compute_geometry, font_size_for
from brandmark.domain import LogoLayout


class TestCanvasSize:
    """Tests for fixed canvas sizes."""

    @pytest.mark.parametrize(
        "layout,expected",
        [
            (LogoLayout.HORIZONTAL, (800, 200)),
            (LogoLayout.VERTICAL, (400, 400)),
            (LogoLayout.ICON_ONLY, (300, 300)),
        ],
    )
    def test_defaults(self, layout, expected):
        size = canvas_size(layout)
        assert (size.width, size.height) == expected


class TestFontSize:
    """Tests for company name font sizes."""

    def test_defaults(self):
        assert font_size_for(LogoLayout.HORIZONTAL) == 48
        assert font_size_for(LogoLayout.VERTICAL) == 36
        assert font_size_for(LogoLayout.ICON_ONLY) == 0

    def test_scales_with_small_canvas(self):
        config = LayoutConfig(horizontal=CanvasSize(width=400, height=100))
        assert font_size_for(LogoLayout.HORIZONTAL, config) == 25


class TestIconOnly:
    """Tests for the icon-only layout."""

    def test_centered_icon(self):
        geometry = compute_geometry(LogoLayout.ICON_ONLY)
        assert geometry.icon.width == geometry.icon.height == pytest.approx(240)
        assert geometry.icon.x == pytest.approx(30)
        assert geometry.icon.y == pytest.approx(30)
        assert not geometry.has_text
        assert geometry.font_size == 0

    def test_ignores_text_width(self):
        assert compute_geometry(LogoLayout.ICON_ONLY, 500) == compute_geometry(
            LogoLayout.ICON_ONLY, 0
        )


class TestHorizontal:
    """Tests for the horizontal layout."""

    def test_ltr(self):
        geometry = compute_geometry(LogoLayout.HORIZONTAL, text_width=200)
        assert geometry.icon.width == pytest.approx(140)
        assert geometry.icon.x == pytest.approx(215)
        assert geometry.icon.y == pytest.approx(30)
        assert geometry.text_x == pytest.approx(385)
        assert geometry.text_y == 100
        assert geometry.text_align == "left"
        assert geometry.text_baseline == "middle"
        assert geometry.font_size == 48

    def test_group_is_centered(self):
        geometry = compute_geometry(LogoLayout.HORIZONTAL, text_width=200)
        span = geometry.text_span()
        assert span is not None
        left_margin = geometry.icon.x
        right_margin = geometry.canvas_width - span[1]
        assert left_margin == pytest.approx(right_margin)

    def test_rtl_mirrors_ltr(self):
        ltr = compute_geometry(LogoLayout.HORIZONTAL, text_width=200)
        rtl = compute_geometry(LogoLayout.HORIZONTAL, text_width=200, is_rtl=True)

        assert rtl.icon.x == pytest.approx(445)
        assert rtl.text_x == pytest.approx(415)
        assert rtl.text_align == "right"
        assert rtl.icon.x == pytest.approx(ltr.canvas_width - ltr.icon.right)

        ltr_span = ltr.text_span()
        rtl_span = rtl.text_span()
        assert ltr_span is not None and rtl_span is not None
        assert rtl_span[0] == pytest.approx(ltr.canvas_width - ltr_span[1])
        assert rtl_span[1] == pytest.approx(ltr.canvas_width - ltr_span[0])

    def test_rtl_icon_right_of_text(self):
        rtl = compute_geometry(LogoLayout.HORIZONTAL, text_width=120, is_rtl=True)
        span = rtl.text_span()
        assert span is not None
        assert span[1] + 30 == pytest.approx(rtl.icon.x)

    def test_empty_name(self):
        geometry = compute_geometry(LogoLayout.HORIZONTAL, text_width=0)
        assert geometry.icon.x == pytest.approx(315)

    def test_wide_name_overflows(self):
        """Test overlong names are not clamped; the group just overflows."""
        geometry = compute_geometry(LogoLayout.HORIZONTAL, text_width=1000)
        assert geometry.icon.x < 0


class TestVertical:
    """Tests for the vertical layout."""

    def test_stacked(self):
        geometry = compute_geometry(LogoLayout.VERTICAL, text_width=150)
        assert geometry.icon.width == pytest.approx(200)
        assert geometry.icon.x == pytest.approx(100)
        assert geometry.icon.y == pytest.approx(60)
        assert geometry.text_x == 200
        assert geometry.text_y == pytest.approx(280)
        assert geometry.text_align == "center"
        assert geometry.text_baseline == "top"
        assert geometry.text_anchor == "mt"

    def test_direction_insensitive(self):
        assert compute_geometry(LogoLayout.VERTICAL, 150) == compute_geometry(
            LogoLayout.VERTICAL, 150, is_rtl=True
        )
