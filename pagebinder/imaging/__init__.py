# pagebinder/imaging/__init__.py
# ============================================================
# Imaging Package
# ============================================================
# Everything that touches image bytes before they reach the
# page:
#   - sources: path / bytes / data URI inputs, directory scan
#   - filters: greyscale, sepia and negative via Pillow
# ============================================================

from pagebinder.imaging.filters import aapply_filter, apply_filter, parse_filter
from pagebinder.imaging.sources import (
    BytesSource,
    DataUriSource,
    ImageSource,
    PathSource,
    list_directory_images,
    parse_source,
    resolve_sources,
)

__all__ = [
    "BytesSource",
    "DataUriSource",
    "ImageSource",
    "PathSource",
    "aapply_filter",
    "apply_filter",
    "list_directory_images",
    "parse_filter",
    "parse_source",
    "resolve_sources",
]
