# pagebinder/__init__.py
# ============================================================
# pagebinder - Images to Multi-Page PDF
# ============================================================
# Root package. Sub-packages:
#   - pagebinder.layout   -> options, geometry, page numbering
#   - pagebinder.imaging  -> image sources and color filters
#   - pagebinder.render   -> ReportLab drawing surface
#   - pagebinder.pipeline -> page composer and document driver
#   - pagebinder.utils    -> logging and Pillow helpers
# ============================================================

from pagebinder.layout.options import ConversionOptions, Margins, PageNumberSpec
from pagebinder.pipeline.driver import DocumentDriver, DocumentResult, aconvert, convert

__version__ = "0.1.0"

__all__ = [
    "ConversionOptions",
    "DocumentDriver",
    "DocumentResult",
    "Margins",
    "PageNumberSpec",
    "aconvert",
    "convert",
]
