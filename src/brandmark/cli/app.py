"""CLI application entry point for brandmark.

This module provides the developer CLI using Typer.
"""

import asyncio
import time
from pathlib import Path
from typing import Annotated

import typer

from brandmark import __version__
from brandmark.cli.output import (
    console,
    print_compose_summary,
    print_error,
    print_font_table,
    print_header,
    print_image_info,
    print_layout_result,
    print_step,
    print_trace_result,
)
from brandmark.config import BrandmarkSettings, FontConfig, LoggingConfig, TraceConfig
from brandmark.core import LogoCompositor, LogoVariationOrchestrator, vectorize
from brandmark.domain import LogoAsset, LogoLayout, VariationSet
from brandmark.exceptions import BrandmarkError, CompositionError, DecodeError
from brandmark.io import FontLoader, FontRegistry, ImageReader, get_bundled_fonts, save_svg
from brandmark.io.writer import save_data_url
from brandmark.utils import CompositionLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="brandmark",
    help="Composite logo layouts and trace logo rasters into SVG.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Brandmark[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Brandmark developer tools."""


@app.command()
def trace(
    image: Annotated[
        str,
        typer.Argument(help="Image path, http(s) URL or data URL", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output SVG path (default: {name}.svg)"),
    ] = None,
    threshold: Annotated[
        int,
        typer.Option(
            "--threshold",
            "-t",
            help="Luminance cutoff (0-255); darker pixels are traced",
            min=0,
            max=255,
        ),
    ] = 128,
    color: Annotated[
        str | None,
        typer.Option("--color", "-c", help="Fill colour for traced paths"),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Trace a raster logo into a run-length SVG document.

    Example:
        brandmark trace logo.png -o logo.svg --color "#1E40AF"
    """
    if not quiet:
        print_header(__version__)
        print_step("Decoding image")

    try:
        sample = ImageReader().read_sample(image)
    except DecodeError as e:
        print_error("Could not load image", details=e.reason)
        raise typer.Exit(code=1)

    if not quiet:
        print_image_info(image, sample.width, sample.height)
        print_step("Tracing")

    config = TraceConfig(threshold=threshold)
    svg = vectorize(sample, config, fill=color)

    if output is None:
        stem = Path(image).stem if not image.startswith("data:") else "traced"
        output = Path(f"{stem}.svg")

    try:
        save_svg(svg, output)
    except OSError as e:
        print_error(f"Could not write {output}", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_trace_result(str(output), svg.count("<path "), len(svg.encode("utf-8")))


@app.command()
def compose(
    icon: Annotated[
        str,
        typer.Argument(help="Icon-only image path, http(s) URL or data URL", show_default=False),
    ],
    company_name: Annotated[
        str,
        typer.Argument(help="Company name to set beside the icon", show_default=False),
    ],
    font: Annotated[
        str,
        typer.Option("--font", "-f", help="Header font family"),
    ] = "Inter",
    color: Annotated[
        str,
        typer.Option("--color", "-c", help="Company name colour"),
    ] = "#000000",
    rtl: Annotated[
        bool,
        typer.Option("--rtl", help="Right-to-left text direction"),
    ] = False,
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", "-d", help="Directory for the PNG layouts"),
    ] = Path("."),
    font_dir: Annotated[
        Path | None,
        typer.Option("--font-dir", help="Directory of bundled {Family}-{Weight}.ttf files"),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Composite horizontal, vertical and icon-only logo layouts.

    Example:
        brandmark compose icon.png "Acme Labs" --font Inter --color "#1E40AF"
    """
    settings = BrandmarkSettings(
        fonts=FontConfig(font_dir=font_dir),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)
        print_step(f"Compositing '{company_name}' in {font}")

    compositor = LogoCompositor(
        font_loader=FontLoader(FontRegistry(), settings.fonts),
        config=settings.layout,
    )
    composition_logger = CompositionLogger(logger)
    orchestrator = LogoVariationOrchestrator(compositor, composition_logger)
    asset = LogoAsset(
        icon=icon,
        company_name=company_name,
        font_family=font,
        primary_color=color,
        is_rtl=rtl,
    )

    failures: dict[LogoLayout, CompositionError] = {}
    started = time.time()
    try:
        variations = asyncio.run(
            orchestrator.generate(
                asset,
                on_failure=lambda layout, error: failures.__setitem__(layout, error),
            )
        )
    except BrandmarkError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if variations is None:
        print_error("No icon given, nothing to composite")
        raise typer.Exit(code=1)

    _write_variations(variations, failures, output_dir, quiet)

    stats = composition_logger.stats
    if not quiet:
        print_compose_summary(stats.completed_count, stats.failed_count, time.time() - started)
    if failures:
        raise typer.Exit(code=1)


@app.command()
def fonts(
    language: Annotated[
        str | None,
        typer.Option("--language", "-l", help="Filter by script (latin|arabic)"),
    ] = None,
) -> None:
    """List the fonts known to the font registry."""
    if language is not None and language not in ("latin", "arabic"):
        print_error(f"Invalid language: {language}", details="Valid values: latin, arabic")
        raise typer.Exit(code=1)
    print_font_table(get_bundled_fonts(language))


def _write_variations(
    variations: VariationSet,
    failures: dict[LogoLayout, CompositionError],
    output_dir: Path,
    quiet: bool,
) -> None:
    for layout in LogoLayout:
        data_url = variations.get(layout)
        if data_url is None:
            if not quiet:
                error = failures.get(layout)
                print_layout_result(layout.value, None, error.reason if error else "not rendered")
            continue

        path = output_dir / f"{layout.value}.png"
        try:
            save_data_url(data_url, path)
        except OSError as e:
            print_error(f"Could not write {path}", details=str(e))
            raise typer.Exit(code=1)
        if not quiet:
            print_layout_result(layout.value, str(path))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
