"""Entry point for the SwiftRemit health check demo."""

from __future__ import annotations

import asyncio
import logging
import sys

from rich.console import Console

from src.config import settings
from src.health.engine import RandomDelay
from src.health.report import run_report

logger = logging.getLogger(__name__)

console = Console()


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def run_demo() -> None:
    """Run the full probe-and-report cycle with the configured settings."""
    asyncio.run(
        run_report(
            console=console,
            iterations=settings.iterations,
            delay=RandomDelay(max_ms=settings.max_delay_ms),
            slow_threshold_ms=settings.slow_threshold_ms,
            service_name=settings.service_name,
        )
    )


def main() -> None:
    configure_logging()
    try:
        run_demo()
    except Exception:
        logger.exception("Health check demo failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
