# pagebinder/render/surface.py
# ============================================================
# Rendering Surface - ReportLab Backend
# ============================================================
# RenderSurface is the narrow set of drawing primitives the
# page composer needs. All coordinates it receives use a
# top-left origin (see pagebinder.layout.geometry);
# ReportLabSurface flips them to PDF's bottom-left origin.
#
# Usage:
#   surface = ReportLabSurface("out.pdf", PageSize(612, 792))
#   surface.draw_image(png_bytes, Box(50, 50, 512, 692))
#   surface.save()
# ============================================================

import io
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

from reportlab.lib import colors
from reportlab.lib.utils import ImageReader
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from pagebinder.layout.geometry import Box, TextAnchor, TextBaseline
from pagebinder.layout.options import NumberHorizontal, PageSize
from pagebinder.utils.logger import get_logger

logger = get_logger(__name__)


class RenderSurface(ABC):
    """
    Drawing primitives for a multi-page document.

    The surface starts on page one. new_page() closes the current page;
    save() serializes the document and ends the surface's life.
    """

    def __init__(self, page_size: PageSize):
        self.page_size = page_size

    @abstractmethod
    def fill_page(self, color: str) -> None:
        """Paint the whole current page with color."""

    @abstractmethod
    def reset_fill_color(self) -> None:
        """Return the fill color to the default (black)."""

    @abstractmethod
    def draw_image(self, data: bytes, box: Box) -> None:
        """Draw encoded image bytes stretched to box."""

    @abstractmethod
    def stroke_rect(self, box: Box, line_width: float) -> None:
        """Outline box with the given line width."""

    @abstractmethod
    def draw_text(self, text: str, anchor: TextAnchor, font_name: str, font_size: float) -> None:
        """Draw a single line of text aligned on anchor."""

    @abstractmethod
    def new_page(self) -> None:
        """Finish the current page and start a blank one."""

    @abstractmethod
    def save(self) -> None:
        """Serialize the document to its output."""


class ReportLabSurface(RenderSurface):
    """RenderSurface drawing onto a reportlab.pdfgen.canvas.Canvas."""

    def __init__(
        self,
        output: Any,
        page_size: PageSize,
        title: Optional[str] = None,
        author: Optional[str] = None,
    ):
        """
        Args:
            output: File path, or a writable binary stream.
            page_size: Size of every page, in points.
            title: Optional PDF title metadata.
            author: Optional PDF author metadata.
        """
        super().__init__(page_size)

        self._path = None
        if isinstance(output, (str, os.PathLike)):
            self._path = Path(output)
            output = str(self._path)

        self._canvas = canvas.Canvas(output, pagesize=tuple(page_size))
        self._canvas.setCreator("pagebinder")
        if title:
            self._canvas.setTitle(title)
        if author:
            self._canvas.setAuthor(author)

    def _flip_y(self, y: float, height: float = 0) -> float:
        return self.page_size.height - y - height

    def fill_page(self, color: str) -> None:
        width, height = self.page_size
        self._canvas.setFillColor(colors.toColor(color))
        self._canvas.rect(0, 0, width, height, stroke=0, fill=1)

    def reset_fill_color(self) -> None:
        self._canvas.setFillColor(colors.black)

    def draw_image(self, data: bytes, box: Box) -> None:
        self._canvas.drawImage(
            ImageReader(io.BytesIO(data)),
            box.x,
            self._flip_y(box.y, box.height),
            width=box.width,
            height=box.height,
            mask="auto",
        )

    def stroke_rect(self, box: Box, line_width: float) -> None:
        self._canvas.setLineWidth(line_width)
        self._canvas.rect(
            box.x,
            self._flip_y(box.y, box.height),
            box.width,
            box.height,
            stroke=1,
            fill=0,
        )

    def draw_text(self, text: str, anchor: TextAnchor, font_name: str, font_size: float) -> None:
        y = self._flip_y(anchor.y)
        if anchor.baseline is TextBaseline.TOP:
            y -= pdfmetrics.getAscent(font_name, font_size)
        else:
            # descent is negative; lift the baseline so descenders clear the anchor
            y -= pdfmetrics.getDescent(font_name, font_size)

        self._canvas.setFont(font_name, font_size)
        if anchor.align is NumberHorizontal.CENTER:
            self._canvas.drawCentredString(anchor.x, y, text)
        elif anchor.align is NumberHorizontal.RIGHT:
            self._canvas.drawRightString(anchor.x, y, text)
        else:
            self._canvas.drawString(anchor.x, y, text)

    def new_page(self) -> None:
        self._canvas.showPage()

    def save(self) -> None:
        # Output directories are created only when the PDF is written
        if self._path is not None:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        self._canvas.save()
        logger.debug("PDF serialized")
