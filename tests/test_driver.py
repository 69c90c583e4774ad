# tests/test_driver.py
# ============================================================
# Unit & Integration Tests - Document Driver
# ============================================================
# Page-break placement and driver state with a recording
# surface; end-to-end PDF output checked with pypdf.
#
# Run:
#   pytest tests/test_driver.py -v
# ============================================================

import asyncio
import io

import pytest
from PIL import UnidentifiedImageError
from pypdf import PdfReader

from pagebinder.layout.options import ConversionOptions, PageSize
from pagebinder.pipeline.driver import (
    DocumentDriver,
    DocumentResult,
    DriverState,
    aconvert,
    convert,
)


# ============================================================
# Page Breaks
# ============================================================

class TestPageBreaks:
    """One page per image, breaks only between images."""

    def test_three_images_two_breaks(self, surface, make_image):
        result = convert([make_image()] * 3, "LETTER", surface=surface)
        assert result.page_count == 3
        assert surface.count("new_page") == 2
        assert surface.names == [
            "draw_image", "stroke_rect",
            "new_page",
            "draw_image", "stroke_rect",
            "new_page",
            "draw_image", "stroke_rect",
            "save",
        ]

    def test_single_image_has_no_break(self, surface, make_image):
        convert(make_image(), "LETTER", surface=surface)
        assert surface.count("new_page") == 0
        assert surface.names[-1] == "save"

    def test_directory_input(self, surface, image_dir):
        result = convert(image_dir, "LETTER", surface=surface)
        assert [p.source for p in result.pages] == [
            "page_001.png", "page_002.png", "page_003.png",
        ]
        assert surface.count("new_page") == 2

    def test_page_numbers_follow_input_order(self, surface, make_image):
        result = convert([make_image()] * 3, "LETTER", surface=surface, page_numbers=True)
        assert [p.label for p in result.pages] == ["1", "2", "3"]
        assert [call[1] for call in surface.find("draw_text")] == ["1", "2", "3"]


# ============================================================
# Driver State
# ============================================================

class TestDriverState:
    """collecting -> finalized, and nothing after that."""

    def test_finalize_transitions_state(self, surface, make_image):
        driver = DocumentDriver("LETTER", surface=surface)
        assert driver.state is DriverState.COLLECTING
        asyncio.run(driver.add_page(make_image()))
        result = driver.finalize()
        assert driver.state is DriverState.FINALIZED
        assert isinstance(result, DocumentResult)
        assert result.document is surface

    def test_add_page_after_finalize_rejected(self, surface, make_image):
        driver = DocumentDriver("LETTER", surface=surface)
        asyncio.run(driver.add_page(make_image()))
        driver.finalize()
        with pytest.raises(RuntimeError, match="finalized"):
            asyncio.run(driver.add_page(make_image()))

    def test_finalize_twice_rejected(self, surface, make_image):
        driver = DocumentDriver("LETTER", surface=surface)
        asyncio.run(driver.add_page(make_image()))
        driver.finalize()
        with pytest.raises(RuntimeError):
            driver.finalize()
        assert surface.count("save") == 1

    def test_finalize_without_pages_rejected(self, surface):
        with pytest.raises(ValueError, match="without pages"):
            DocumentDriver("LETTER", surface=surface).finalize()

    def test_empty_input_rejected(self, surface):
        with pytest.raises(ValueError, match="No images"):
            convert([], "LETTER", surface=surface)

    def test_failure_aborts_before_save(self, surface, make_image):
        with pytest.raises(UnidentifiedImageError):
            convert([make_image(), b"broken"], "LETTER", surface=surface)
        assert surface.count("save") == 0

    def test_page_size_resolved(self, surface):
        assert DocumentDriver("letter", surface=surface).page_size == PageSize(612, 792)

    def test_surface_page_size_mismatch_rejected(self, surface):
        """A surface built for Letter cannot back an A5 document."""
        with pytest.raises(ValueError, match="does not match"):
            DocumentDriver("A5", surface=surface)

    def test_result_page_size_matches_surface(self, surface, make_image):
        result = convert(make_image(), (612, 792), surface=surface)
        assert result.page_size == surface.page_size


# ============================================================
# Options & Results
# ============================================================

class TestOptionsAndResults:
    """Overrides and the DocumentResult summary."""

    def test_overrides_applied_on_top_of_options(self, surface, make_image):
        base = ConversionOptions(border_width=0)
        result = convert(make_image(), "LETTER", base, surface=surface, scale="none")
        assert surface.count("stroke_rect") == 0
        assert result.pages[0].placement.width == 800

    def test_summary(self, surface, make_image):
        result = convert([make_image(size=(400, 300))], "LETTER", surface=surface)
        summary = result.summary()
        assert summary["page_count"] == 1
        assert summary["page_size"] == [612, 792]
        assert summary["output"] == "output.pdf"
        assert summary["pages"][0]["image_size"] == [400, 300]

    def test_aconvert_is_awaitable(self, surface, make_image):
        result = asyncio.run(aconvert([make_image()] * 2, "LETTER", surface=surface))
        assert result.page_count == 2


# ============================================================
# End-to-End PDF Output
# ============================================================

class TestPdfOutput:
    """Real ReportLab output, read back with pypdf."""

    def test_pdf_page_count_matches_inputs(self, tmp_path, image_dir):
        output = tmp_path / "out" / "album.pdf"
        result = convert(image_dir, "LETTER", output=output, page_numbers=True)
        assert output.exists()
        reader = PdfReader(str(output))
        assert len(reader.pages) == result.page_count == 3

    def test_failed_input_leaves_no_directories(self, tmp_path):
        output = tmp_path / "nested" / "album.pdf"
        with pytest.raises(ValueError, match="No images"):
            convert([], "LETTER", output=output)
        assert not (tmp_path / "nested").exists()

    def test_missing_input_leaves_no_directories(self, tmp_path):
        output = tmp_path / "nested" / "album.pdf"
        with pytest.raises(FileNotFoundError):
            convert(tmp_path / "missing", "LETTER", output=output)
        assert not (tmp_path / "nested").exists()

    def test_page_size_written(self, tmp_path, make_image):
        output = tmp_path / "sized.pdf"
        convert([make_image()], (300, 400), output=output)
        box = PdfReader(str(output)).pages[0].mediabox
        assert float(box.width) == pytest.approx(300)
        assert float(box.height) == pytest.approx(400)

    def test_stream_output(self, make_image):
        stream = io.BytesIO()
        convert(
            [make_image(), make_image(fmt="JPEG")],
            "A4",
            output=stream,
            background_color="ivory",
            filter="sepia",
        )
        assert stream.getvalue().startswith(b"%PDF")
        stream.seek(0)
        assert len(PdfReader(stream).pages) == 2

    def test_title_metadata(self, tmp_path, make_image):
        output = tmp_path / "titled.pdf"
        convert(make_image(), "A4", output=output, title="Holiday Album", author="Sam")
        metadata = PdfReader(str(output)).metadata
        assert metadata.title == "Holiday Album"
        assert metadata.author == "Sam"

    def test_page_number_text_in_pdf(self, tmp_path, make_image):
        output = tmp_path / "numbered.pdf"
        convert(
            [make_image()] * 4, "LETTER", output=output,
            page_numbers={"enabled": True, "format": "I"},
        )
        reader = PdfReader(str(output))
        assert "IV" in reader.pages[3].extract_text()
