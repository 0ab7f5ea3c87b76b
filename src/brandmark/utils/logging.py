"""Logging utilities for Brandmark."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class RunStats:
    """Statistics from a compositing or tracing run."""

    completed_count: int = 0
    failed_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    timings_ms: dict[str, float] = field(default_factory=dict)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("brandmark")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class CompositionLogger:
    """Logger for tracking per-layout compositing and run statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("brandmark")
        self._stats = RunStats()

    def log_layout_start(self, layout: str, generation: int) -> None:
        """Log start of a layout composite."""
        self._logger.debug("Compositing layout", layout=layout, generation=generation)

    def log_layout_complete(self, layout: str, duration_ms: float) -> None:
        """Log a finished layout export."""
        self._logger.info(
            "Layout composited",
            layout=layout,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.completed_count += 1
        self._stats.timings_ms[layout] = duration_ms

    def log_layout_failed(self, layout: str, error: Exception) -> None:
        """Log a failed layout."""
        self._logger.error(
            "Layout composite failed",
            layout=layout,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.failed_count += 1
        self._stats.errors.append((layout, str(error)))

    def log_stale(self, layout: str, generation: int, current: int) -> None:
        """Log an export that arrived after a newer request started."""
        self._logger.debug(
            "Discarding stale export",
            layout=layout,
            generation=generation,
            current=current,
        )

    def log_variations_complete(self, generation: int) -> None:
        self._logger.info("Logo variations complete", generation=generation)

    @property
    def stats(self) -> RunStats:
        """Get current run statistics."""
        return self._stats
