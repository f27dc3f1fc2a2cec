"""Simulated health probe for the SwiftRemit contract.

There is no contract to talk to yet, so a probe builds a mocked health
record after a random delay standing in for network latency. The result is
wrapped in a ResultEnvelope carrying success/error and the measured latency.
"""

from __future__ import annotations

import asyncio
import logging
import random
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_MAX_DELAY_MS = 50.0
DEFAULT_SLOW_THRESHOLD_MS = 100

Delay = Callable[[], Awaitable[None]]
Clock = Callable[[], float]


# ── Models ───────────────────────────────────────────────────────────────────


class Status(str, Enum):
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


class Performance(str, Enum):
    PASS = "pass"
    SLOW = "slow"


@dataclass(frozen=True)
class HealthRecord:
    """Mocked contract health payload."""

    operational: bool
    timestamp: int  # unix seconds
    initialized: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "operational": self.operational,
            "timestamp": self.timestamp,
            "initialized": self.initialized,
        }


@dataclass(frozen=True)
class ResultEnvelope:
    """Outcome of a single probe: either data or an error, plus latency."""

    success: bool
    latency_ms: int
    data: HealthRecord | None = None
    error: str | None = None

    @property
    def status(self) -> Status:
        return Status.HEALTHY if self.success else Status.UNHEALTHY

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "data": self.data.to_dict() if self.data else None,
            "error": self.error,
            "latency_ms": self.latency_ms,
        }


def performance(latency_ms: float, threshold_ms: int = DEFAULT_SLOW_THRESHOLD_MS) -> Performance:
    """PASS when latency is strictly under the threshold, SLOW otherwise."""
    return Performance.PASS if latency_ms < threshold_ms else Performance.SLOW


# ── Delay sources ────────────────────────────────────────────────────────────


class RandomDelay:
    """Sleeps for a duration drawn uniformly from [0, max_ms)."""

    def __init__(self, max_ms: float = DEFAULT_MAX_DELAY_MS, rng: random.Random | None = None) -> None:
        self.max_ms = max_ms
        self._rng = rng or random.Random()

    def next_ms(self) -> float:
        # random() is in [0, 1), so the upper bound is never reached
        return self._rng.random() * self.max_ms

    async def __call__(self) -> None:
        await asyncio.sleep(self.next_ms() / 1000)


async def no_delay() -> None:
    """Zero-duration delay, used to make probes deterministic."""
    return None


# ── Probe ────────────────────────────────────────────────────────────────────


def mock_contract_health(now: Clock = time.time) -> HealthRecord:
    """Build the health payload a live contract would report."""
    return HealthRecord(operational=True, timestamp=int(now()), initialized=True)


async def probe(
    delay: Delay | None = None,
    clock: Clock = time.perf_counter,
    now: Clock = time.time,
) -> ResultEnvelope:
    """Run one simulated health check.

    The delay is the only suspension point. Any exception it raises is
    reported as an unsuccessful envelope rather than propagated.
    """
    delay = delay or RandomDelay()
    t0 = clock()
    try:
        await delay()
        health = mock_contract_health(now)
        latency = int((clock() - t0) * 1000)
        logger.debug("Probe ok (%dms)", latency)
        return ResultEnvelope(success=True, data=health, latency_ms=latency)
    except Exception as e:
        latency = int((clock() - t0) * 1000)
        logger.warning("Probe failed after %dms: %s", latency, e)
        return ResultEnvelope(success=False, error=str(e), latency_ms=latency)
