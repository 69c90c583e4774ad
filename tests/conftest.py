# tests/conftest.py
# ============================================================
# Shared Test Fixtures
# ============================================================
# - make_image: encoded test images built with Pillow
# - image_dir:  a directory with a few PNG pages
# - surface:    a RenderSurface that records draw calls
#               instead of producing a PDF
# ============================================================

import io

import pytest
from PIL import Image

from pagebinder.layout.options import PageSize
from pagebinder.render.surface import RenderSurface

LETTER = PageSize(612, 792)


class RecordingSurface(RenderSurface):
    """RenderSurface fake that keeps every call as (name, *args)."""

    def __init__(self, page_size: PageSize = LETTER):
        super().__init__(page_size)
        self.calls = []

    def fill_page(self, color):
        self.calls.append(("fill_page", color))

    def reset_fill_color(self):
        self.calls.append(("reset_fill_color",))

    def draw_image(self, data, box):
        self.calls.append(("draw_image", data, box))

    def stroke_rect(self, box, line_width):
        self.calls.append(("stroke_rect", box, line_width))

    def draw_text(self, text, anchor, font_name, font_size):
        self.calls.append(("draw_text", text, anchor, font_name, font_size))

    def new_page(self):
        self.calls.append(("new_page",))

    def save(self):
        self.calls.append(("save",))

    @property
    def names(self) -> list:
        return [call[0] for call in self.calls]

    def count(self, name: str) -> int:
        return self.names.count(name)

    def find(self, name: str) -> list:
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def make_image():
    """Factory: encoded image bytes of a given size, color and format."""
    def _make(size=(800, 600), color="white", fmt="PNG", mode="RGB") -> bytes:
        img = Image.new(mode, size, color=color)
        buffer = io.BytesIO()
        img.save(buffer, format=fmt)
        return buffer.getvalue()
    return _make


@pytest.fixture
def image_dir(tmp_path, make_image):
    """Directory with three PNG pages and one non-image file."""
    for i in range(3):
        (tmp_path / f"page_{i + 1:03d}.png").write_bytes(
            make_image(size=(400, 300), color=(i * 80, 100, 200))
        )
    (tmp_path / "notes.txt").write_text("not an image")
    return tmp_path


@pytest.fixture
def surface():
    """A recording surface with a US Letter page."""
    return RecordingSurface()
