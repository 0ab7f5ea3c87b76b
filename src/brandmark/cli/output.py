"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from brandmark.io.fonts import FontInfo

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Brandmark[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_image_info(source: str, width: int, height: int) -> None:
    """Print decoded image information.

    Args:
        source: Image path or URL
        width: Image width in pixels
        height: Image height in pixels
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(source)
    console.print(line)
    console.print(f"  {width:,} {SYM_DOT} {height:,} px")


def print_trace_result(output_path: str, paths: int, size_bytes: int) -> None:
    """Print the result of a trace run."""
    console.print(f"\n[bold green]{SYM_OK} Traced[/bold green] {paths} regions")
    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({_format_size(size_bytes)})")
    console.print(line)


def print_layout_result(layout: str, output_path: str | None, error: str | None = None) -> None:
    """Print one line per composited layout."""
    if error is not None:
        console.print(f"  [red]{SYM_ERR}[/red] {layout:<10} {error}")
        return
    line = Text(f"  {SYM_OK} {layout:<10} ")
    line.append(output_path or "", style="bold")
    console.print(line)


def print_compose_summary(completed: int, failed: int, total_time_s: float) -> None:
    """Print compose run summary."""
    style = "red" if failed else "green"
    console.print(
        f"\n[bold {style}]{completed} layouts[/bold {style}] {SYM_DOT} "
        f"{failed} failed {SYM_DOT} {_format_time(total_time_s)}"
    )


def print_font_table(fonts: list[FontInfo]) -> None:
    """Print the font registry as a table."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Family")
    table.add_column("Category")
    table.add_column("Script")
    table.add_column("Weights", justify="right")
    for info in fonts:
        table.add_row(
            info.name,
            info.category,
            info.language,
            ", ".join(str(w) for w in info.weights),
        )
    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def _format_size(size_bytes: int) -> str:
    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    return f"{size_bytes / (1024 * 1024):.1f} MB"
