"""Layout geometry for the canonical logo compositions.

Geometry is a pure function of the layout, the canvas size and the measured
width of the company name, so it is recomputed on every render.

Layouts:
- icon-only: icon at 80% of the shorter canvas side, centered
- horizontal: icon at 70% of canvas height beside the name; icon, gutter and
  text are centered as one unit. LTR puts the icon on the left with
  left-anchored text; RTL mirrors it, icon on the right with right-anchored
  text ending at the gutter
- vertical: icon at 50% of canvas width, 15% down from the top, name
  centered below it with a fixed gap
"""

from brandmark.config import CanvasSize, LayoutConfig
from brandmark.domain import Box, LayoutGeometry, LogoLayout


def canvas_size(layout: LogoLayout, config: LayoutConfig | None = None) -> CanvasSize:
    """Fixed canvas size of a layout."""
    config = config or LayoutConfig()
    if layout is LogoLayout.HORIZONTAL:
        return config.horizontal
    if layout is LogoLayout.VERTICAL:
        return config.vertical
    return config.icon_only


def font_size_for(layout: LogoLayout, config: LayoutConfig | None = None) -> float:
    """Company name font size in pixels; 0 for the icon-only layout."""
    config = config or LayoutConfig()
    size = canvas_size(layout, config)
    if layout is LogoLayout.HORIZONTAL:
        return min(config.horizontal_max_font_size, size.height * config.horizontal_font_ratio)
    if layout is LogoLayout.VERTICAL:
        return min(config.vertical_max_font_size, size.width * config.vertical_font_ratio)
    return 0.0


def compute_geometry(
    layout: LogoLayout,
    text_width: float = 0.0,
    is_rtl: bool = False,
    config: LayoutConfig | None = None,
) -> LayoutGeometry:
    """Compute icon and text placement for a layout.

    Args:
        layout: Target layout
        text_width: Company name width measured at font_size_for(layout)
        is_rtl: Right-to-left text direction
        config: Layout constants (defaults when None)

    Returns:
        LayoutGeometry for the layout's fixed canvas
    """
    config = config or LayoutConfig()
    size = canvas_size(layout, config)
    width, height = size.width, size.height

    if layout is LogoLayout.ICON_ONLY:
        icon_size = min(width, height) * config.icon_only_ratio
        icon = Box((width - icon_size) / 2, (height - icon_size) / 2, icon_size, icon_size)
        return LayoutGeometry(layout=layout, canvas_width=width, canvas_height=height, icon=icon)

    font_size = font_size_for(layout, config)

    if layout is LogoLayout.HORIZONTAL:
        icon_size = height * config.horizontal_icon_ratio
        gutter = config.horizontal_gutter
        total_width = icon_size + gutter + text_width
        start_x = (width - total_width) / 2
        icon_y = (height - icon_size) / 2

        if is_rtl:
            icon_x = width - start_x - icon_size
            text_x = icon_x - gutter
            align = "right"
        else:
            icon_x = start_x
            text_x = icon_x + icon_size + gutter
            align = "left"

        return LayoutGeometry(
            layout=layout,
            canvas_width=width,
            canvas_height=height,
            icon=Box(icon_x, icon_y, icon_size, icon_size),
            font_size=font_size,
            text_width=text_width,
            text_x=text_x,
            text_y=height / 2,
            text_align=align,
            text_baseline="middle",
        )

    icon_size = width * config.vertical_icon_ratio
    icon_x = (width - icon_size) / 2
    icon_y = height * config.vertical_top_ratio

    return LayoutGeometry(
        layout=layout,
        canvas_width=width,
        canvas_height=height,
        icon=Box(icon_x, icon_y, icon_size, icon_size),
        font_size=font_size,
        text_width=text_width,
        text_x=width / 2,
        text_y=icon_y + icon_size + config.vertical_gap,
        text_align="center",
        text_baseline="top",
    )
