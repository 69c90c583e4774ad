# pagebinder/layout/__init__.py
# ============================================================
# Layout Package
# ============================================================
# Backend-independent page layout:
#   - options:   enums, Margins, PageSize, ConversionOptions
#   - geometry:  image / border / page-number placement math
#   - numbering: arabic, base-36 and Roman page numbers
# ============================================================

from pagebinder.layout.geometry import (
    Box,
    TextAnchor,
    TextBaseline,
    border_box,
    image_placement,
    page_number_anchor,
    usable_box,
)
from pagebinder.layout.numbering import format_page_number, to_base36, to_roman
from pagebinder.layout.options import (
    Align,
    ConversionOptions,
    ImageFilter,
    Margins,
    NAMED_PAGE_SIZES,
    NumberFormat,
    NumberHorizontal,
    NumberVertical,
    PageNumberSpec,
    PageSize,
    ScaleMode,
    VAlign,
    list_values,
    resolve_page_size,
)

__all__ = [
    "Align",
    "Box",
    "ConversionOptions",
    "ImageFilter",
    "Margins",
    "NAMED_PAGE_SIZES",
    "NumberFormat",
    "NumberHorizontal",
    "NumberVertical",
    "PageNumberSpec",
    "PageSize",
    "ScaleMode",
    "TextAnchor",
    "TextBaseline",
    "VAlign",
    "border_box",
    "format_page_number",
    "image_placement",
    "list_values",
    "page_number_anchor",
    "resolve_page_size",
    "to_base36",
    "to_roman",
    "usable_box",
]
