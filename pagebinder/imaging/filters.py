# pagebinder/imaging/filters.py
# ============================================================
# Color Filters
# ============================================================
# Optional per-image color treatment applied before placement:
#   - greyscale: luminance only (mode "L")
#   - sepia:     greyscale tinted towards RGB(112, 66, 20)
#   - negative:  inverted color channels, alpha preserved
#
# A filter name that is not recognized leaves the bytes
# untouched, as does no filter at all.
#
# aapply_filter runs the Pillow work in a worker thread so the
# conversion loop can await it.
# ============================================================

import asyncio
from typing import Optional, Union

from PIL import Image, ImageOps

from pagebinder.layout.options import ImageFilter
from pagebinder.utils.image import encode_image, open_image
from pagebinder.utils.logger import get_logger

logger = get_logger(__name__)

SEPIA_TINT = (112, 66, 20)


def parse_filter(name: Union[ImageFilter, str, None]) -> Optional[ImageFilter]:
    """Map a filter name to ImageFilter, or None when unrecognized."""
    if name is None or isinstance(name, ImageFilter):
        return name
    try:
        return ImageFilter(name.strip().lower())
    except ValueError:
        logger.debug(f"Unknown filter '{name}', image left unchanged")
        return None


def _greyscale(img: Image.Image) -> Image.Image:
    return ImageOps.grayscale(img)


def _sepia(img: Image.Image) -> Image.Image:
    # Mid-grey maps to the tint; black and white stay put
    return ImageOps.colorize(
        ImageOps.grayscale(img),
        black=(0, 0, 0),
        white=(255, 255, 255),
        mid=SEPIA_TINT,
    )


def _negative(img: Image.Image) -> Image.Image:
    if img.mode in ("RGBA", "LA", "P", "PA"):
        img = img.convert("RGBA") if img.mode != "LA" else img
        *channels, alpha = img.split()
        inverted = [ImageOps.invert(channel) for channel in channels]
        return Image.merge(img.mode, (*inverted, alpha))
    if img.mode not in ("RGB", "L"):
        img = img.convert("RGB")
    return ImageOps.invert(img)


_FILTERS = {
    ImageFilter.GREYSCALE: _greyscale,
    ImageFilter.SEPIA: _sepia,
    ImageFilter.NEGATIVE: _negative,
}


def apply_filter(data: bytes, name: Union[ImageFilter, str, None]) -> bytes:
    """
    Apply a color filter to encoded image bytes.

    The result is re-encoded in the source image's format (PNG when the
    format is unknown).

    Args:
        data: Encoded image.
        name: Filter to apply; None or an unknown name returns data as is.

    Raises:
        PIL.UnidentifiedImageError: If data is not a readable image.
    """
    image_filter = parse_filter(name)
    if image_filter is None:
        return data

    with open_image(data) as img:
        fmt = img.format
        img.load()
        filtered = _FILTERS[image_filter](img)

    return encode_image(filtered, fmt)


async def aapply_filter(data: bytes, name: Union[ImageFilter, str, None]) -> bytes:
    """Awaitable apply_filter; identity filters return without a thread hop."""
    if parse_filter(name) is None:
        return data
    return await asyncio.to_thread(apply_filter, data, name)
