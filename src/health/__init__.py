"""Health subsystem — simulated probe engine and console report."""

from .engine import HealthRecord, Performance, RandomDelay, ResultEnvelope, Status, probe
from .report import EXPECTED_RESPONSE, format_result, run_report
