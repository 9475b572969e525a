"""snaplocate structured logging system.

Importing this module adds no sinks and removes none, so a host application
keeps its own loguru setup. Call :func:`configure_logging` to install the
snaplocate console and file sinks.
"""

from __future__ import annotations

import contextlib
import os
import sys
from typing import Any, Sequence

from loguru import logger

from .config import Config, config

# Sink ids added by configure_logging, replaced on the next call.
_sink_ids: list[int] = []


def configure_logging(settings: Config | None = None, remove_existing: bool = False) -> list[int]:
    """Install the console sink and, when enabled, the rotating file sinks.

    Args:
        settings: Logging settings; the global ``config`` is used when omitted.
        remove_existing: Drop every loguru sink first, including loguru's
            default stderr handler. Only standalone programs should set this.

    Returns:
        The loguru ids of the sinks that were added.

    """
    settings = settings or config

    if remove_existing:
        logger.remove()
    for sink_id in _sink_ids:
        # Already gone if the host removed it or called logger.remove().
        with contextlib.suppress(ValueError):
            logger.remove(sink_id)
    _sink_ids.clear()

    # ------------------------------------------------------------------
    # Console handler
    # ------------------------------------------------------------------
    console_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level:<8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )

    _sink_ids.append(
        logger.add(
            sys.stderr,
            format=console_format,
            level=settings.log_level,
            colorize=True,
        )
    )

    if settings.log_to_file:
        # ------------------------------------------------------------------
        # File handlers
        # ------------------------------------------------------------------
        os.makedirs(settings.log_dir, exist_ok=True)
        file_format = (
            "{time:YYYY-MM-DD HH:mm:ss} | {level:<8} | "
            "{name}:{function}:{line} | {message}"
        )

        _sink_ids.append(
            logger.add(
                os.path.join(settings.log_dir, "snaplocate_{time:YYYY-MM-DD}.log"),
                format=file_format,
                level="DEBUG",
                rotation="1 day",
                retention="30 days",
                compression="zip",
            )
        )

        # Separate error log
        _sink_ids.append(
            logger.add(
                os.path.join(settings.log_dir, "errors_{time:YYYY-MM-DD}.log"),
                format=file_format,
                level="ERROR",
                rotation="1 day",
                retention="90 days",
                compression="zip",
            )
        )

    return list(_sink_ids)


class Logger:
    """Structured logging system for the text locator."""

    def __init__(self, name: str = "snaplocate") -> None:
        """Bind a *Loguru* logger to ``name`` without touching its sinks."""
        self.name = name
        self._logger = logger.bind(component=name)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        self._logger.info(f"[{self.name}] {message}", **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._logger.debug(f"[{self.name}] {message}", **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._logger.warning(f"[{self.name}] {message}", **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message."""
        self._logger.error(f"[{self.name}] {message}", **kwargs)

    def success(self, message: str, **kwargs: Any) -> None:
        """Log success message."""
        self._logger.success(f"[{self.name}] {message}", **kwargs)

    def log_variant_result(
        self,
        variant: str,
        lines: Sequence[Any],
        candidates: Sequence[Any],
    ) -> None:
        """Log how many lines and candidates one preprocessing variant produced."""
        self.debug(
            f"VARIANT {variant}: {len(lines)} lines recognized, "
            f"{len(candidates)} candidates"
        )

    def log_performance(self, operation: str, duration_ms: float) -> None:
        """Log performance metrics."""
        self.debug(f"PERFORMANCE: {operation} took {duration_ms:.2f}ms")


# Global logger instance
log = Logger()
