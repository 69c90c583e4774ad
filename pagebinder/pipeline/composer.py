# pagebinder/pipeline/composer.py
# ============================================================
# Page Composer - One Image, One Page
# ============================================================
# Draws a single page, always in the same order:
#   1. background fill (then fill color back to black)
#   2. image bytes resolved and color-filtered (data URIs
#      are decoded but never filtered)
#   3. image placed per scale / align / valign
#   4. border, when border_width > 0
#   5. page number, when numbering is enabled
#
# The composer keeps no state between pages; everything it
# draws goes through the RenderSurface it was given.
# ============================================================

from dataclasses import dataclass
from typing import Optional

from pagebinder.imaging.filters import aapply_filter
from pagebinder.imaging.sources import DataUriSource, ImageSource
from pagebinder.layout.geometry import (
    Box,
    border_box,
    image_placement,
    page_number_anchor,
    usable_box,
)
from pagebinder.layout.numbering import format_page_number
from pagebinder.layout.options import ConversionOptions
from pagebinder.render.surface import RenderSurface
from pagebinder.utils.image import image_size
from pagebinder.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class PageRecord:
    """
    What was drawn on one page.

    Attributes:
        page_num: 1-indexed page number in the output document.
        source: Short label of the image source (file name, byte count...).
        image_size: Natural image size in pixels.
        placement: Box the image was drawn into (top-left origin, points).
        label: Page number text, or None when numbering is off.
    """
    page_num: int
    source: str
    image_size: tuple[int, int]
    placement: Box
    label: Optional[str] = None


class PageComposer:
    """
    Composes pages onto a RenderSurface using one ConversionOptions.

    Example:
        >>> composer = PageComposer(surface, ConversionOptions(page_numbers=True))
        >>> record = await composer.compose(1, PathSource(Path("scan.png")))
        >>> record.label
        '1'
    """

    def __init__(self, surface: RenderSurface, options: ConversionOptions):
        self.surface = surface
        self.options = options

        box = usable_box(surface.page_size, options.margins)
        if box.is_degenerate:
            logger.warning(
                f"Margins leave no usable area on a "
                f"{surface.page_size.width:g}x{surface.page_size.height:g}pt page "
                f"(usable box {box.width:g}x{box.height:g}pt)"
            )

    async def compose(self, page_num: int, source: ImageSource) -> PageRecord:
        """
        Draw one page for one image source.

        Args:
            page_num: 1-indexed page number, used for the page label.
            source: The image to place.

        Returns:
            PageRecord describing the page.

        Raises:
            ValueError: Malformed data URI.
            PIL.UnidentifiedImageError: Unreadable image.
        """
        opts = self.options
        page_size = self.surface.page_size

        # --- Step 1: Background ---
        if opts.background_color:
            self.surface.fill_page(opts.background_color)
            self.surface.reset_fill_color()

        # --- Step 2: Resolve and filter the image ---
        # Data URIs are decoded only; filters apply to paths and buffers
        data = source.read()
        if not isinstance(source, DataUriSource):
            data = await aapply_filter(data, opts.filter)

        # --- Step 3: Place the image ---
        natural_size = image_size(data)
        placement = image_placement(
            page_size,
            opts.margins,
            natural_size,
            scale=opts.scale,
            align=opts.align,
            valign=opts.valign,
        )
        self.surface.draw_image(data, placement)

        # --- Step 4: Border ---
        if opts.border_width > 0:
            self.surface.stroke_rect(
                border_box(page_size, opts.margins, opts.border_margin),
                opts.border_width,
            )

        # --- Step 5: Page number ---
        label = None
        numbering = opts.page_numbers
        if numbering.enabled:
            label = format_page_number(page_num, numbering.format)
            anchor = page_number_anchor(
                page_size, opts.margins, numbering.vertical, numbering.horizontal
            )
            self.surface.draw_text(label, anchor, numbering.font_name, numbering.font_size)

        logger.debug(
            f"  Page {page_num}: {source.label} {natural_size[0]}x{natural_size[1]}px "
            f"-> {placement.width:.0f}x{placement.height:.0f}pt at "
            f"({placement.x:.0f}, {placement.y:.0f})"
        )

        return PageRecord(
            page_num=page_num,
            source=source.label,
            image_size=natural_size,
            placement=placement,
            label=label,
        )
