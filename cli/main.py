# cli/main.py
# ============================================================
# pagebinder - Command Line Interface
# ============================================================
# Typer-based CLI for turning images into a PDF.
#
# Usage:
#   pagebinder convert scans/ --size A4 -o album.pdf
#   pagebinder convert a.png b.jpg --page-numbers --number-format i
#   pagebinder convert scans/ --filter sepia --background "#fdf6e3"
#   pagebinder sizes
#
#   python -m cli.main convert scans/
# ============================================================

import asyncio
from typing import List, Optional

import typer
from PIL import UnidentifiedImageError
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from config.settings import settings
from pagebinder.layout.options import (
    Align,
    ConversionOptions,
    ImageFilter,
    NAMED_PAGE_SIZES,
    NumberFormat,
    NumberHorizontal,
    NumberVertical,
    ScaleMode,
    VAlign,
    list_values,
    resolve_page_size,
)
from pagebinder.pipeline.driver import DocumentResult, aconvert
from pagebinder.utils.logger import get_logger, set_log_level

logger = get_logger(__name__)

# ============================================================
# CLI App Setup
# ============================================================

app = typer.Typer(
    name="pagebinder",
    help=(
        "📄 pagebinder - Images to Multi-Page PDF\n\n"
        "One image per page, with scaling, alignment, borders,\n"
        "backgrounds, page numbers and color filters."
    ),
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


# ============================================================
# Commands
# ============================================================

@app.command()
def convert(
    inputs: List[str] = typer.Argument(
        ...,
        help="Image files (.jpg, .jpeg, .png) or a single directory of images.",
    ),
    size: Optional[str] = typer.Option(
        None,
        "--size", "-s",
        help="Named page size (A4, LETTER, ...) or WIDTHxHEIGHT in points. Default: from settings.",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output", "-o",
        help="Output PDF path. Default: from settings.",
    ),
    margin: float = typer.Option(50, "--margin", "-m", help="Margin on every side, in points."),
    margin_top: Optional[float] = typer.Option(None, "--margin-top", help="Override the top margin."),
    margin_bottom: Optional[float] = typer.Option(None, "--margin-bottom", help="Override the bottom margin."),
    margin_left: Optional[float] = typer.Option(None, "--margin-left", help="Override the left margin."),
    margin_right: Optional[float] = typer.Option(None, "--margin-right", help="Override the right margin."),
    scale: str = typer.Option(
        ScaleMode.FIT.value, "--scale",
        help=f"Scale mode: {', '.join(list_values(ScaleMode))}.",
    ),
    align: str = typer.Option(
        Align.CENTER.value, "--align",
        help=f"Horizontal alignment: {', '.join(list_values(Align))}.",
    ),
    valign: str = typer.Option(
        VAlign.CENTER.value, "--valign",
        help=f"Vertical alignment: {', '.join(list_values(VAlign))}.",
    ),
    border_margin: float = typer.Option(20, "--border-margin", help="Gap between usable area and border."),
    border_width: float = typer.Option(1, "--border-width", help="Border line width; 0 disables the border."),
    page_numbers: bool = typer.Option(False, "--page-numbers/--no-page-numbers", help="Print page numbers."),
    number_format: str = typer.Option(
        NumberFormat.ARABIC.value, "--number-format",
        help=f"Numbering style: {', '.join(list_values(NumberFormat))} (or arabic, roman-lower, ...).",
    ),
    number_vertical: str = typer.Option(
        NumberVertical.BOTTOM.value, "--number-vertical",
        help=f"Page number band: {', '.join(list_values(NumberVertical))}.",
    ),
    number_horizontal: str = typer.Option(
        NumberHorizontal.CENTER.value, "--number-horizontal",
        help=f"Page number position: {', '.join(list_values(NumberHorizontal))}.",
    ),
    background: Optional[str] = typer.Option(
        None, "--background", "-b",
        help="Page background color (name or #rrggbb).",
    ),
    image_filter: Optional[str] = typer.Option(
        None, "--filter", "-f",
        help=f"Color filter: {', '.join(list_values(ImageFilter))}.",
    ),
    title: Optional[str] = typer.Option(None, "--title", help="PDF title metadata."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log per-page details (DEBUG)."),
):
    """
    📄 Convert images into a single PDF, one image per page.

    Examples:
        convert scans/ -o scans.pdf
        convert cover.png p1.jpg p2.jpg --size LETTER --scale fill
        convert scans/ --page-numbers --number-format I --number-vertical top
    """
    if verbose:
        set_log_level("DEBUG")

    output = output or settings.default_output

    try:
        page_size = _parse_page_size(size or settings.default_page_size)
        margins = {
            "top": margin if margin_top is None else margin_top,
            "bottom": margin if margin_bottom is None else margin_bottom,
            "left": margin if margin_left is None else margin_left,
            "right": margin if margin_right is None else margin_right,
        }
        options = ConversionOptions(
            margins=margins,
            scale=scale,
            align=align,
            valign=valign,
            output=output,
            border_margin=border_margin,
            border_width=border_width,
            page_numbers={
                "enabled": page_numbers,
                "format": number_format,
                "vertical": number_vertical,
                "horizontal": number_horizontal,
            },
            background_color=background,
            filter=image_filter,
            title=title,
        )
    except (ValidationError, ValueError) as e:
        console.print(f"[red]Error:[/red] Invalid options:\n{e}")
        raise typer.Exit(code=1)

    pages = inputs[0] if len(inputs) == 1 else inputs

    console.print(Panel(
        f"[bold blue]pagebinder[/bold blue] - Images to PDF\n"
        f"Input:  {', '.join(inputs)}\n"
        f"Page:   {page_size.width:g} x {page_size.height:g} pt\n"
        f"Scale:  {options.scale.value} ({options.align.value}/{options.valign.value})\n"
        f"Output: {output}",
        title="📄 Convert",
        border_style="blue",
    ))

    try:
        result = asyncio.run(aconvert(pages, page_size, options))
    except (FileNotFoundError, ValueError, UnidentifiedImageError) as e:
        logger.debug(f"Conversion failed: {e!r}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    _print_results_table(result)


@app.command()
def sizes():
    """
    📐 List the named page sizes accepted by --size.
    """
    table = Table(title="Page Sizes")
    table.add_column("Name", style="bold")
    table.add_column("Width (pt)", justify="right")
    table.add_column("Height (pt)", justify="right")

    for name, page_size in NAMED_PAGE_SIZES.items():
        table.add_row(name, f"{page_size.width:.1f}", f"{page_size.height:.1f}")

    console.print(table)


# ============================================================
# Helper Functions
# ============================================================

def _parse_page_size(text: str):
    """Accept a named size or WIDTHxHEIGHT in points."""
    width, sep, height = text.lower().partition("x")
    if sep:
        try:
            return resolve_page_size((float(width), float(height)))
        except ValueError:
            pass
    return resolve_page_size(text)


def _print_results_table(result: DocumentResult) -> None:
    """Print a summary table of the pages written."""
    table = Table(title="Conversion Summary")
    table.add_column("Page", justify="center")
    table.add_column("Source")
    table.add_column("Image (px)", justify="right")
    table.add_column("Placed (pt)", justify="right")
    table.add_column("Label", justify="center")

    for page in result.pages:
        table.add_row(
            str(page.page_num),
            page.source,
            f"{page.image_size[0]}x{page.image_size[1]}",
            f"{page.placement.width:.0f}x{page.placement.height:.0f}",
            page.label or "-",
        )

    table.add_section()
    table.add_row(
        "[bold]Total[/bold]",
        f"[bold]{result.page_count} pages[/bold]",
        "",
        f"[bold]{result.total_latency_ms:.0f}ms[/bold]",
        "",
    )

    console.print(table)
    console.print(f"\n[bold green]Saved:[/bold green] {result.output}")


# ============================================================
# Entry Point
# ============================================================

if __name__ == "__main__":
    app()
