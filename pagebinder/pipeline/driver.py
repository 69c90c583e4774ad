# pagebinder/pipeline/driver.py
# ============================================================
# Document Driver - Images In, One PDF Out
# ============================================================
# Ties sources, composer and surface together:
#   input -> list[ImageSource] -> one page each -> save.
#
# Design Decisions:
#   1. Two states only: COLLECTING pages, then FINALIZED. Once
#      saved, the driver refuses further pages.
#   2. Sequential processing: each page (including its awaited
#      filter step) completes before the next one starts.
#   3. Page breaks go between consecutive images only, so N
#      images give N pages and N-1 breaks.
#   4. Nothing is retried; the first error aborts the run.
#
# Usage:
#   from pagebinder.pipeline.driver import convert
#   result = convert("scans/", "A4", page_numbers=True)
#   print(result.page_count, result.output)
# ============================================================

import asyncio
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from pagebinder.imaging.sources import SourceInput, parse_source, resolve_sources
from pagebinder.layout.options import ConversionOptions, PageSize, resolve_page_size
from pagebinder.pipeline.composer import PageComposer, PageRecord
from pagebinder.render.surface import RenderSurface, ReportLabSurface
from pagebinder.utils.logger import get_logger

logger = get_logger(__name__)


# ============================================================
# Data Classes
# ============================================================

class DriverState(str, Enum):
    COLLECTING = "collecting"
    FINALIZED = "finalized"


@dataclass
class DocumentResult:
    """
    Outcome of a finished conversion.

    Attributes:
        pages: One PageRecord per input image, in output order.
        output: Where the PDF was written (path or stream).
        page_size: Page dimensions in points.
        total_latency_ms: Wall time from driver start to save.
        document: The surface the pages were drawn on. It has been
                  saved and must not be drawn on again.
    """
    pages: list[PageRecord] = field(default_factory=list)
    output: Any = None
    page_size: Optional[PageSize] = None
    total_latency_ms: float = 0.0
    document: Optional[RenderSurface] = field(default=None, repr=False)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def summary(self) -> dict:
        """Plain-dict view of the result, for reporting and logs."""
        return {
            "output": str(self.output),
            "page_count": self.page_count,
            "page_size": list(self.page_size) if self.page_size else None,
            "total_latency_ms": round(self.total_latency_ms, 2),
            "pages": [
                {
                    "page_num": page.page_num,
                    "source": page.source,
                    "image_size": list(page.image_size),
                    "placement": [
                        round(page.placement.x, 2),
                        round(page.placement.y, 2),
                        round(page.placement.width, 2),
                        round(page.placement.height, 2),
                    ],
                    "label": page.label,
                }
                for page in self.pages
            ],
        }


# ============================================================
# Document Driver
# ============================================================

class DocumentDriver:
    """
    Builds one document, page by page.

    Flow:
        1. add_page() for each image; a blank page is requested before
           every page but the first
        2. finalize() serializes through the surface and returns a
           DocumentResult

    run() does both for a whole input in one call.

    Example:
        >>> driver = DocumentDriver("LETTER", ConversionOptions(output="out.pdf"))
        >>> result = await driver.run(["a.png", "b.png"])
        >>> result.page_count
        2
    """

    def __init__(
        self,
        page_size: Any,
        options: Optional[ConversionOptions] = None,
        surface: Optional[RenderSurface] = None,
    ):
        """
        Args:
            page_size: Named size ("A4") or (width, height) in points.
            options: Layout options; defaults to ConversionOptions().
            surface: Drawing backend. Defaults to a ReportLabSurface
                     writing to options.output.

        Raises:
            ValueError: If surface was created for a different page size.
        """
        self.page_size = resolve_page_size(page_size)
        if surface is not None and tuple(surface.page_size) != tuple(self.page_size):
            raise ValueError(
                f"Surface page size {surface.page_size[0]:g}x{surface.page_size[1]:g}pt "
                f"does not match requested {self.page_size.width:g}x{self.page_size.height:g}pt"
            )
        self.options = options or ConversionOptions()
        self.surface = surface or ReportLabSurface(
            self.options.output,
            self.page_size,
            title=self.options.title,
            author=self.options.author,
        )
        self.composer = PageComposer(self.surface, self.options)
        self.pages: list[PageRecord] = []
        self.state = DriverState.COLLECTING
        self._start = time.perf_counter()

        logger.debug(
            f"DocumentDriver initialized - page {self.page_size.width:g}x"
            f"{self.page_size.height:g}pt, scale: {self.options.scale.value}"
        )

    def _ensure_collecting(self) -> None:
        if self.state is not DriverState.COLLECTING:
            raise RuntimeError("Document is already finalized; no further changes allowed")

    async def add_page(self, source: SourceInput) -> PageRecord:
        """
        Append one page showing source.

        Raises:
            RuntimeError: If the document was already finalized.
        """
        self._ensure_collecting()
        source = parse_source(source)

        if self.pages:
            self.surface.new_page()

        record = await self.composer.compose(len(self.pages) + 1, source)
        self.pages.append(record)
        return record

    def finalize(self) -> DocumentResult:
        """
        Serialize the document and stop accepting pages.

        Raises:
            RuntimeError: If called twice.
            ValueError: If no page was added.
        """
        self._ensure_collecting()
        if not self.pages:
            raise ValueError("Cannot finalize a document without pages")

        self.surface.save()
        self.state = DriverState.FINALIZED

        total_latency = (time.perf_counter() - self._start) * 1000
        logger.info(
            f"Saved [green]{len(self.pages)}[/green] pages to "
            f"[bold]{self.options.output}[/bold] in {total_latency:.0f}ms"
        )

        return DocumentResult(
            pages=list(self.pages),
            output=self.options.output,
            page_size=self.page_size,
            total_latency_ms=total_latency,
            document=self.surface,
        )

    async def run(self, pages: Any) -> DocumentResult:
        """
        Convert a whole input: resolve sources, compose, finalize.

        Args:
            pages: Directory path, single source, or iterable of sources.
        """
        sources = resolve_sources(pages)
        logger.info(f"Converting [bold]{len(sources)}[/bold] images")

        for source in sources:
            await self.add_page(source)

        return self.finalize()


# ============================================================
# Entry Points
# ============================================================

async def aconvert(
    pages: Any,
    size: Any,
    options: Optional[ConversionOptions] = None,
    surface: Optional[RenderSurface] = None,
    **overrides: Any,
) -> DocumentResult:
    """
    Convert images to a PDF.

    Args:
        pages: Directory path, single source, or iterable of paths,
               bytes and base64 data URIs.
        size: Named page size or (width, height) in points.
        options: Base options; defaults to ConversionOptions().
        surface: Optional drawing backend replacing the ReportLab one.
        **overrides: Individual options applied on top of options,
                     e.g. margins=36, filter="sepia".

    Returns:
        DocumentResult for the written document.
    """
    options = options or ConversionOptions()
    if overrides:
        options = options.with_overrides(**overrides)

    driver = DocumentDriver(size, options, surface=surface)
    return await driver.run(pages)


def convert(
    pages: Any,
    size: Any,
    options: Optional[ConversionOptions] = None,
    surface: Optional[RenderSurface] = None,
    **overrides: Any,
) -> DocumentResult:
    """Blocking wrapper around aconvert()."""
    return asyncio.run(aconvert(pages, size, options, surface=surface, **overrides))
