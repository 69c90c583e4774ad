# pagebinder/layout/options.py
# ============================================================
# Conversion Options - Enums, Margins, Page Sizes
# ============================================================
# Every knob the converter understands is declared here, once,
# with its default. Each layout axis is a closed Enum so an
# unknown value fails at construction instead of silently
# falling through to a default branch.
#
# ConversionOptions is frozen and rejects unknown keys.
#
# Usage:
#   from pagebinder.layout.options import ConversionOptions, ScaleMode
#   opts = ConversionOptions(margins=36, scale=ScaleMode.FILL)
#   opts.margins.left   # -> 36.0
# ============================================================

import os
from enum import Enum
from typing import Any, NamedTuple, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from reportlab.lib import colors, pagesizes


# ============================================================
# Layout Enums
# ============================================================

class ScaleMode(str, Enum):
    """
    How an image is sized inside the usable box.

    - FIT: preserve aspect ratio, as large as the box allows
    - FILL: stretch to exactly the box, aspect ignored
    - NONE: natural size (1 px = 1 pt) at the box origin
    """
    FIT = "fit"
    FILL = "fill"
    NONE = "none"


class Align(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VAlign(str, Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class NumberVertical(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"


class NumberHorizontal(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class NumberFormat(str, Enum):
    """
    Page numbering styles. Values are the short tokens ("1", "a", "A",
    "i", "I"); the descriptive names are accepted as aliases.
    """
    ARABIC = "1"
    ALPHA_LOWER = "a"
    ALPHA_UPPER = "A"
    ROMAN_LOWER = "i"
    ROMAN_UPPER = "I"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            name = value.strip().upper().replace("-", "_")
            if name in cls.__members__:
                return cls.__members__[name]
        return None


class ImageFilter(str, Enum):
    """Color filters applied to an image before it is placed."""
    GREYSCALE = "greyscale"
    SEPIA = "sepia"
    NEGATIVE = "negative"


def list_values(enum_cls: type[Enum]) -> list[str]:
    """All values of an option enum, for CLI help text and validation."""
    return [member.value for member in enum_cls]


# ============================================================
# Page Sizes
# ============================================================

class PageSize(NamedTuple):
    """Page dimensions in points (1/72 inch)."""
    width: float
    height: float


NAMED_PAGE_SIZES: dict[str, PageSize] = {
    name: PageSize(*getattr(pagesizes, name))
    for name in (
        "A0", "A1", "A2", "A3", "A4", "A5", "A6",
        "B0", "B1", "B2", "B3", "B4", "B5", "B6",
        "LETTER", "LEGAL", "TABLOID", "ELEVENSEVENTEEN",
    )
}


def resolve_page_size(size: Union[str, Sequence[float], PageSize]) -> PageSize:
    """
    Normalize a page size given by name or as a (width, height) pair.

    Raises:
        ValueError: Unknown name, wrong arity, or non-positive dimension.
    """
    if isinstance(size, str):
        try:
            return NAMED_PAGE_SIZES[size.strip().upper()]
        except KeyError:
            raise ValueError(
                f"Unknown page size '{size}'. "
                f"Available: {', '.join(NAMED_PAGE_SIZES)}"
            ) from None

    if len(size) != 2:
        raise ValueError(f"Page size must be (width, height), got {size!r}")

    width, height = float(size[0]), float(size[1])
    if width <= 0 or height <= 0:
        raise ValueError(f"Page dimensions must be positive, got {width}x{height}")
    return PageSize(width, height)


# ============================================================
# Option Models
# ============================================================

DEFAULT_MARGIN = 50.0


class Margins(BaseModel):
    """Distance in points between each page edge and the usable box."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    top: float = Field(default=DEFAULT_MARGIN, ge=0)
    bottom: float = Field(default=DEFAULT_MARGIN, ge=0)
    left: float = Field(default=DEFAULT_MARGIN, ge=0)
    right: float = Field(default=DEFAULT_MARGIN, ge=0)

    @classmethod
    def uniform(cls, value: float) -> "Margins":
        return cls(top=value, bottom=value, left=value, right=value)


class PageNumberSpec(BaseModel):
    """Whether, how and where page numbers are printed."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    enabled: bool = False
    format: NumberFormat = NumberFormat.ARABIC
    vertical: NumberVertical = NumberVertical.BOTTOM
    horizontal: NumberHorizontal = NumberHorizontal.CENTER
    font_name: str = "Helvetica"
    font_size: float = Field(default=12, gt=0)

    @field_validator("format", mode="before")
    @classmethod
    def parse_format(cls, value: Any) -> NumberFormat:
        return NumberFormat(value)


class ConversionOptions(BaseModel):
    """
    Immutable set of options applied uniformly to every page.

    Margins may be given as a scalar (same on all sides) or as a
    per-side mapping. page_numbers accepts a bool as a shorthand for
    PageNumberSpec(enabled=...).

    Example:
        >>> opts = ConversionOptions(margins={"top": 72}, page_numbers=True)
        >>> opts.margins.top, opts.margins.left
        (72.0, 50.0)
    """
    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    margins: Margins = Field(default_factory=Margins)
    scale: ScaleMode = ScaleMode.FIT
    align: Align = Align.CENTER
    valign: VAlign = VAlign.CENTER
    output: Any = "output.pdf"
    border_margin: float = 20
    border_width: float = Field(default=1, ge=0)
    page_numbers: PageNumberSpec = Field(default_factory=PageNumberSpec)
    background_color: Optional[str] = None
    filter: Optional[ImageFilter] = None
    title: Optional[str] = None
    author: Optional[str] = None

    @field_validator("margins", mode="before")
    @classmethod
    def parse_margins(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("margins must be a number or a per-side mapping")
        if isinstance(value, (int, float)):
            return {"top": value, "bottom": value, "left": value, "right": value}
        return value

    @field_validator("page_numbers", mode="before")
    @classmethod
    def parse_page_numbers(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return PageNumberSpec(enabled=value)
        return value

    @field_validator("background_color")
    @classmethod
    def check_color(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            # Raises ValueError for anything ReportLab cannot draw with
            colors.toColor(value)
        return value

    @field_validator("output")
    @classmethod
    def check_output(cls, value: Any) -> Any:
        if isinstance(value, (str, os.PathLike)) or hasattr(value, "write"):
            return value
        raise ValueError("output must be a file path or a writable binary stream")

    def with_overrides(self, **overrides: Any) -> "ConversionOptions":
        """Return a validated copy with some options replaced."""
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(overrides)
        return type(self).model_validate(data)
