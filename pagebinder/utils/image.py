# pagebinder/utils/image.py
# ============================================================
# Image Utility Functions
# ============================================================
# Small Pillow helpers shared by the filters and the page
# composer: opening raw bytes, reading natural size and
# re-encoding a processed image.
#
# Usage:
#   from pagebinder.utils.image import open_image, image_size
#   size = image_size(png_bytes)   # -> (800, 600)
# ============================================================

import io
import time

from PIL import Image

from pagebinder.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_ENCODE_FORMAT = "PNG"


def open_image(data: bytes) -> Image.Image:
    """
    Open encoded image bytes with Pillow.

    Raises:
        PIL.UnidentifiedImageError: If the bytes are not a readable image.
    """
    return Image.open(io.BytesIO(data))


def image_size(data: bytes) -> tuple[int, int]:
    """Natural (width, height) in pixels, read from the image header."""
    with open_image(data) as img:
        return img.size


def encode_image(image: Image.Image, fmt: str = DEFAULT_ENCODE_FORMAT) -> bytes:
    """
    Encode a PIL Image back to bytes.

    JPEG cannot store alpha, so RGBA/LA/P images are flattened to RGB
    when JPEG is requested.
    """
    start = time.perf_counter()
    fmt = (fmt or DEFAULT_ENCODE_FORMAT).upper()
    if fmt in ("JPEG", "JPG") and image.mode not in ("RGB", "L", "CMYK"):
        image = image.convert("RGB")

    buffer = io.BytesIO()
    image.save(buffer, format=fmt)

    duration = (time.perf_counter() - start) * 1000
    logger.debug(f"Image encoding ({fmt}) took {duration:.2f}ms")
    return buffer.getvalue()

