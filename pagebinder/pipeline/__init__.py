# pagebinder/pipeline/__init__.py
# ============================================================
# Pipeline Package
# ============================================================
#   - PageComposer:   draws one page (background, image,
#                     border, page number)
#   - DocumentDriver: iterates sources, breaks pages, saves
#   - convert / aconvert: one-call entry points
# ============================================================

from pagebinder.pipeline.composer import PageComposer, PageRecord
from pagebinder.pipeline.driver import (
    DocumentDriver,
    DocumentResult,
    DriverState,
    aconvert,
    convert,
)

__all__ = [
    "DocumentDriver",
    "DocumentResult",
    "DriverState",
    "PageComposer",
    "PageRecord",
    "aconvert",
    "convert",
]
