"""Console report — runs probes sequentially and prints one block per check."""

from __future__ import annotations

import json
import logging
import time
from typing import Any

from rich.console import Console

from .engine import (
    DEFAULT_SLOW_THRESHOLD_MS,
    Clock,
    Delay,
    Performance,
    ResultEnvelope,
    Status,
    performance,
    probe,
)

logger = logging.getLogger(__name__)

RULE = "=" * 50

# Documented shape of a successful response. Literal values, never derived from a run.
EXPECTED_RESPONSE: dict[str, Any] = {
    "success": True,
    "data": {
        "operational": True,
        "timestamp": 1708545351,
        "initialized": True,
    },
    "error": None,
}

_STATUS_LABELS = {
    Status.HEALTHY: "✅ HEALTHY",
    Status.UNHEALTHY: "❌ UNHEALTHY",
}

_PERFORMANCE_LABELS = {
    Performance.PASS: "✅ PASS",
    Performance.SLOW: "⚠️  SLOW",
}


def _fmt(value: Any) -> str:
    if value is None:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_result(
    index: int,
    result: ResultEnvelope,
    slow_threshold_ms: int = DEFAULT_SLOW_THRESHOLD_MS,
) -> list[str]:
    """Render one probe result as report lines (no I/O)."""
    data = result.data
    verdict = performance(result.latency_ms, slow_threshold_ms)
    return [
        f"Check #{index}:",
        f"  Status: {_STATUS_LABELS[result.status]}",
        f"  Operational: {_fmt(data.operational if data else None)}",
        f"  Initialized: {_fmt(data.initialized if data else None)}",
        f"  Timestamp: {_fmt(data.timestamp if data else None)}",
        f"  Latency: {result.latency_ms}ms",
        f"  Performance: {_PERFORMANCE_LABELS[verdict]} (<{slow_threshold_ms}ms)",
    ]


def expected_response_json() -> str:
    return json.dumps(EXPECTED_RESPONSE, indent=2)


def _emit(console: Console, text: str = "") -> None:
    # soft_wrap keeps the rule and JSON lines intact on narrow terminals
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


async def run_report(
    console: Console | None = None,
    iterations: int = 5,
    delay: Delay | None = None,
    slow_threshold_ms: int = DEFAULT_SLOW_THRESHOLD_MS,
    service_name: str = "SwiftRemit",
    clock: Clock = time.perf_counter,
    now: Clock = time.time,
) -> list[ResultEnvelope]:
    """Probe `iterations` times in sequence, print each result, then the example payload.

    Returns the envelopes in the order they were reported.
    """
    console = console or Console()
    results: list[ResultEnvelope] = []

    _emit(console, f"{service_name} Health Check Demo\n")
    _emit(console, RULE)

    for i in range(1, iterations + 1):
        result = await probe(delay=delay, clock=clock, now=now)
        results.append(result)
        logger.info("Check #%d: %s (%dms)", i, result.status.value, result.latency_ms)
        logger.debug("Check #%d payload: %s", i, json.dumps(result.to_dict()))

        _emit(console)
        for line in format_result(i, result, slow_threshold_ms):
            _emit(console, line)

    _emit(console, "\n" + RULE)
    _emit(console, "\n✅ Health check demo complete!")
    _emit(console, "\nExpected Response Structure:")
    _emit(console, expected_response_json())

    return results
