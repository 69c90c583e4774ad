# tests/test_options.py
# ============================================================
# Unit Tests - Conversion Options, Page Sizes, Settings
# ============================================================
# ConversionOptions defaults and validation, named page sizes,
# and environment-driven Settings.
#
# Run:
#   pytest tests/test_options.py -v
# ============================================================

import io

import pytest
from pydantic import ValidationError
from reportlab.lib import pagesizes

from config.settings import Settings
from pagebinder.layout.options import (
    Align,
    ConversionOptions,
    ImageFilter,
    Margins,
    NumberFormat,
    NumberHorizontal,
    NumberVertical,
    PageSize,
    ScaleMode,
    VAlign,
    list_values,
    resolve_page_size,
)


# ============================================================
# Defaults
# ============================================================

class TestDefaults:
    """Every option has a documented default."""

    def test_layout_defaults(self):
        opts = ConversionOptions()
        assert opts.margins == Margins(top=50, bottom=50, left=50, right=50)
        assert opts.scale is ScaleMode.FIT
        assert opts.align is Align.CENTER
        assert opts.valign is VAlign.CENTER
        assert opts.output == "output.pdf"

    def test_decoration_defaults(self):
        opts = ConversionOptions()
        assert opts.border_margin == 20
        assert opts.border_width == 1
        assert opts.background_color is None
        assert opts.filter is None

    def test_page_number_defaults(self):
        spec = ConversionOptions().page_numbers
        assert spec.enabled is False
        assert spec.format is NumberFormat.ARABIC
        assert spec.vertical is NumberVertical.BOTTOM
        assert spec.horizontal is NumberHorizontal.CENTER
        assert spec.font_size == 12


# ============================================================
# Validation
# ============================================================

class TestValidation:
    """Parsing shorthands and rejecting bad values."""

    def test_scalar_margin_is_uniform(self):
        assert ConversionOptions(margins=36).margins == Margins.uniform(36)

    def test_partial_margin_mapping_keeps_defaults(self):
        margins = ConversionOptions(margins={"top": 72}).margins
        assert margins.top == 72
        assert margins.bottom == margins.left == margins.right == 50

    def test_negative_margin_rejected(self):
        with pytest.raises(ValidationError):
            ConversionOptions(margins=-1)

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            ConversionOptions(marginz=10)

    @pytest.mark.parametrize("field, value", [
        ("scale", "stretch"),
        ("align", "middle"),
        ("valign", "left"),
        ("filter", "vintage"),
        ("border_width", -1),
    ])
    def test_invalid_values_rejected(self, field, value):
        with pytest.raises(ValidationError):
            ConversionOptions(**{field: value})

    def test_options_are_frozen(self):
        opts = ConversionOptions()
        with pytest.raises(ValidationError):
            opts.scale = ScaleMode.FILL

    def test_page_numbers_bool_shorthand(self):
        assert ConversionOptions(page_numbers=True).page_numbers.enabled is True

    def test_page_number_format_alias(self):
        opts = ConversionOptions(page_numbers={"enabled": True, "format": "roman-upper"})
        assert opts.page_numbers.format is NumberFormat.ROMAN_UPPER

    @pytest.mark.parametrize("color", ["red", "#fdf6e3", "lightgrey"])
    def test_background_colors_accepted(self, color):
        assert ConversionOptions(background_color=color).background_color == color

    def test_invalid_background_rejected(self):
        with pytest.raises(ValidationError):
            ConversionOptions(background_color="notacolor")

    def test_stream_output_accepted(self):
        stream = io.BytesIO()
        assert ConversionOptions(output=stream).output is stream

    def test_invalid_output_rejected(self):
        with pytest.raises(ValidationError):
            ConversionOptions(output=42)

    def test_filter_parsed_to_enum(self):
        assert ConversionOptions(filter="sepia").filter is ImageFilter.SEPIA

    def test_with_overrides_validates(self):
        opts = ConversionOptions().with_overrides(margins=10, scale="none")
        assert opts.margins == Margins.uniform(10)
        assert opts.scale is ScaleMode.NONE
        with pytest.raises(ValidationError):
            opts.with_overrides(scale="bogus")

    def test_list_values(self):
        assert list_values(ScaleMode) == ["fit", "fill", "none"]


# ============================================================
# Page Sizes
# ============================================================

class TestPageSizes:
    """Named sizes and explicit (width, height) pairs."""

    def test_named_size_case_insensitive(self):
        assert resolve_page_size("a4") == PageSize(*pagesizes.A4)
        assert resolve_page_size(" Letter ") == PageSize(612, 792)

    def test_pair_is_normalized(self):
        assert resolve_page_size([300, 400]) == PageSize(300.0, 400.0)

    def test_unknown_name_rejected(self):
        with pytest.raises(ValueError, match="Unknown page size"):
            resolve_page_size("postcard")

    @pytest.mark.parametrize("size", [(0, 100), (100, -1), (1, 2, 3)])
    def test_invalid_pairs_rejected(self, size):
        with pytest.raises(ValueError):
            resolve_page_size(size)


# ============================================================
# Settings
# ============================================================

class TestSettings:
    """Process-wide settings loaded from the environment."""

    def test_defaults(self, monkeypatch):
        for var in ("LOG_LEVEL", "DEFAULT_PAGE_SIZE", "SORT_DIRECTORY_LISTING"):
            monkeypatch.delenv(var, raising=False)
        s = Settings(_env_file=None)
        assert s.default_page_size == "A4"
        assert s.default_output == "output.pdf"
        assert s.sort_directory_listing is True
        assert s.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("SORT_DIRECTORY_LISTING", "false")
        s = Settings(_env_file=None)
        assert s.log_level == "DEBUG"
        assert s.sort_directory_listing is False
