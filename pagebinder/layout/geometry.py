# pagebinder/layout/geometry.py
# ============================================================
# Layout Calculator
# ============================================================
# Pure functions turning (page size, margins, options) into
# the rectangles and points a page is drawn with:
#   - usable_box:          page minus margins
#   - image_placement:     where the image lands (fit/fill/none)
#   - border_box:          decorative frame around the usable box
#   - page_number_anchor:  reference point for the page number
#
# Coordinates are in points with a TOP-LEFT origin and y
# growing downwards. Rendering surfaces flip them as needed.
#
# Nothing here clamps: margins larger than half the page give
# a box with zero or negative size. Check Box.is_degenerate.
# ============================================================

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from pagebinder.layout.options import (
    Align,
    Margins,
    NumberHorizontal,
    NumberVertical,
    PageSize,
    ScaleMode,
    VAlign,
)


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle; (x, y) is its top-left corner."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0


class TextBaseline(str, Enum):
    """Which edge of the text line sits on the anchor's y."""
    TOP = "top"        # text hangs below the anchor
    BOTTOM = "bottom"  # text sits above the anchor


@dataclass(frozen=True)
class TextAnchor:
    x: float
    y: float
    align: NumberHorizontal
    baseline: TextBaseline


def usable_box(page_size: PageSize, margins: Margins) -> Box:
    """The page area left after subtracting all four margins."""
    width, height = page_size
    return Box(
        x=margins.left,
        y=margins.top,
        width=width - margins.left - margins.right,
        height=height - margins.top - margins.bottom,
    )


def image_placement(
    page_size: PageSize,
    margins: Margins,
    image_size: Tuple[float, float],
    scale: Union[ScaleMode, str] = ScaleMode.FIT,
    align: Union[Align, str] = Align.CENTER,
    valign: Union[VAlign, str] = VAlign.CENTER,
) -> Box:
    """
    Compute the box an image is drawn into.

    Args:
        page_size: Page dimensions in points.
        margins: Page margins in points.
        image_size: Natural image size in pixels (drawn 1 px = 1 pt).
        scale: FIT keeps aspect ratio and aligns inside the usable box,
               FILL stretches to the whole usable box, NONE keeps the
               natural size at the box origin.
        align: Horizontal alignment, FIT only.
        valign: Vertical alignment, FIT only.

    Raises:
        ValueError: If the image has a non-positive dimension.
    """
    scale, align, valign = ScaleMode(scale), Align(align), VAlign(valign)
    img_w, img_h = image_size
    if img_w <= 0 or img_h <= 0:
        raise ValueError(f"Image dimensions must be positive, got {img_w}x{img_h}")

    box = usable_box(page_size, margins)

    if scale is ScaleMode.NONE:
        return Box(box.x, box.y, float(img_w), float(img_h))

    if scale is ScaleMode.FILL:
        return box

    factor = min(box.width / img_w, box.height / img_h)
    width, height = img_w * factor, img_h * factor

    x, y = box.x, box.y
    if align is Align.CENTER:
        x += (box.width - width) / 2
    elif align is Align.RIGHT:
        x += box.width - width

    if valign is VAlign.CENTER:
        y += (box.height - height) / 2
    elif valign is VAlign.BOTTOM:
        y += box.height - height

    return Box(x, y, width, height)


def border_box(page_size: PageSize, margins: Margins, border_margin: float) -> Box:
    """The usable box grown by border_margin on every side."""
    box = usable_box(page_size, margins)
    return Box(
        x=box.x - border_margin,
        y=box.y - border_margin,
        width=box.width + 2 * border_margin,
        height=box.height + 2 * border_margin,
    )


def page_number_anchor(
    page_size: PageSize,
    margins: Margins,
    vertical: Union[NumberVertical, str] = NumberVertical.BOTTOM,
    horizontal: Union[NumberHorizontal, str] = NumberHorizontal.CENTER,
) -> TextAnchor:
    """
    Anchor point for the page number, centred in the top or bottom
    margin band.

    Top numbers sit on the anchor (baseline BOTTOM) and bottom numbers
    hang from it (baseline TOP) so the text stays inside the band.

    Example:
        >>> a = page_number_anchor(PageSize(612, 792), Margins())
        >>> (a.x, a.y)
        (306.0, 767.0)
    """
    vertical, horizontal = NumberVertical(vertical), NumberHorizontal(horizontal)
    width, height = page_size

    if horizontal is NumberHorizontal.CENTER:
        x = width / 2
    elif horizontal is NumberHorizontal.RIGHT:
        x = width - margins.right
    else:
        x = margins.left

    if vertical is NumberVertical.TOP:
        y = margins.top / 2
        baseline = TextBaseline.BOTTOM
    else:
        y = height - margins.bottom / 2
        baseline = TextBaseline.TOP

    return TextAnchor(x=float(x), y=float(y), align=horizontal, baseline=baseline)
