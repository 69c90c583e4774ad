# pagebinder/imaging/sources.py
# ============================================================
# Image Sources - Paths, Raw Bytes, Data URIs
# ============================================================
# Each input is classified exactly once, when the job starts,
# into one of three source types:
#   - PathSource:    a file on disk
#   - BytesSource:   an encoded image already in memory
#   - DataUriSource: "data:image/...;base64,..." string
#
# A directory path expands to the .jpg/.jpeg/.png files it
# contains (case-insensitive, flat scan).
#
# Usage:
#   from pagebinder.imaging.sources import resolve_sources
#   sources = resolve_sources("scans/")
#   data = sources[0].read()
# ============================================================

import base64
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from config.settings import settings
from pagebinder.utils.logger import get_logger

logger = get_logger(__name__)

IMAGE_FILE_PATTERN = re.compile(r"\.(jpg|jpeg|png)$", re.IGNORECASE)

_DATA_URI_PREFIX = "data:image"
_BASE64_MARKER = ";base64,"


# ============================================================
# Source Types
# ============================================================

@dataclass(frozen=True)
class PathSource:
    """An image file on disk, read when its page is composed."""
    path: Path

    @property
    def label(self) -> str:
        return self.path.name

    def read(self) -> bytes:
        return self.path.read_bytes()


@dataclass(frozen=True)
class BytesSource:
    """Encoded image bytes supplied by the caller."""
    data: bytes = field(repr=False)

    @property
    def label(self) -> str:
        return f"<{len(self.data)} bytes>"

    def read(self) -> bytes:
        return self.data


@dataclass(frozen=True)
class DataUriSource:
    """A base64 data URI; the payload is decoded on read."""
    mime_type: str
    payload: str = field(repr=False)

    @classmethod
    def parse(cls, uri: str) -> "DataUriSource":
        """
        Split "data:image/png;base64,<payload>" into its parts.

        Raises:
            ValueError: If the URI is not a base64 image data URI.
        """
        if not uri.startswith(_DATA_URI_PREFIX) or _BASE64_MARKER not in uri:
            raise ValueError(f"Not a base64 image data URI: {uri[:40]!r}")
        header, payload = uri.split(_BASE64_MARKER, 1)
        return cls(mime_type=header[len("data:"):], payload=payload)

    @property
    def label(self) -> str:
        return f"<{self.mime_type} data URI>"

    def read(self) -> bytes:
        # binascii.Error (a ValueError) on malformed payloads
        return base64.b64decode(self.payload, validate=True)


ImageSource = Union[PathSource, BytesSource, DataUriSource]

SourceInput = Union[ImageSource, str, os.PathLike, bytes, bytearray, memoryview]


def is_data_uri(value: Any) -> bool:
    return isinstance(value, str) and value.startswith(_DATA_URI_PREFIX)


def parse_source(value: SourceInput) -> ImageSource:
    """
    Classify one input value as an ImageSource.

    Raises:
        TypeError: If the value is none of the supported input kinds.
        ValueError: If a data URI is malformed.
    """
    if isinstance(value, (PathSource, BytesSource, DataUriSource)):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return BytesSource(bytes(value))
    if is_data_uri(value):
        return DataUriSource.parse(value)
    if isinstance(value, (str, os.PathLike)):
        return PathSource(Path(value))
    raise TypeError(
        f"Unsupported image source type: {type(value).__name__}. "
        "Expected a path, bytes or a base64 data URI."
    )


# ============================================================
# Directory Scanning
# ============================================================

def list_directory_images(dir_path: Union[str, os.PathLike], sort: bool = True) -> list[PathSource]:
    """
    List the image files directly inside a directory.

    Files match case-insensitive .jpg/.jpeg/.png extensions;
    subdirectories are not traversed.

    Args:
        dir_path: Directory to scan.
        sort: Sort by file name. When False, the OS listing order is kept,
              which differs between platforms.

    Raises:
        FileNotFoundError: If the directory does not exist.
        NotADirectoryError: If the path is a file.
    """
    dir_path = Path(dir_path)
    names = os.listdir(dir_path)
    if sort:
        names = sorted(names)

    sources = [
        PathSource(dir_path / name)
        for name in names
        if IMAGE_FILE_PATTERN.search(name) and (dir_path / name).is_file()
    ]
    logger.info(f"Found {len(sources)} image files in [bold]{dir_path}[/bold]")
    return sources


def resolve_sources(pages: Any, sort: Optional[bool] = None) -> list[ImageSource]:
    """
    Turn the caller's input into an ordered list of image sources.

    Accepts a directory path, a single file path, bytes, a data URI, or
    an iterable of any of those.

    Args:
        pages: The conversion input.
        sort: Directory listing order, see list_directory_images. Defaults
              to settings.sort_directory_listing.

    Raises:
        FileNotFoundError: If a path given as the whole input does not exist.
        ValueError: If no images were found.
    """
    if sort is None:
        sort = settings.sort_directory_listing

    if isinstance(pages, (str, os.PathLike)) and not is_data_uri(pages):
        path = Path(pages)
        if not path.exists():
            raise FileNotFoundError(f"Input path not found: {path}")
        sources = list_directory_images(path, sort=sort) if path.is_dir() else [PathSource(path)]
    elif isinstance(pages, (str, bytes, bytearray, memoryview, PathSource, BytesSource, DataUriSource)):
        sources = [parse_source(pages)]
    else:
        sources = [parse_source(item) for item in pages]

    if not sources:
        raise ValueError("No images to convert (expected .jpg, .jpeg or .png)")
    return sources
