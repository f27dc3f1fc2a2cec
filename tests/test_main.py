"""Tests for the demo entry point."""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from src import main as entry

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _run_demo() -> subprocess.CompletedProcess[str]:
    env = {**os.environ, "PYTHONIOENCODING": "utf-8"}
    env = {k: v for k, v in env.items() if not k.startswith("HEALTH_DEMO_")}
    return subprocess.run(
        [sys.executable, "-m", "src.main"],
        capture_output=True,
        text=True,
        encoding="utf-8",
        timeout=30,
        cwd=str(PROJECT_ROOT),
        env=env,
    )


class TestEndToEnd:
    def test_demo_runs(self) -> None:
        result = _run_demo()
        assert result.returncode == 0, result.stderr
        out = result.stdout

        assert "SwiftRemit Health Check Demo" in out
        assert out.count("Check #") == 5
        assert out.count("✅ PASS") == 5
        assert out.count("Operational: true") == 5

        payload = out[out.index("Expected Response Structure:") + len("Expected Response Structure:"):]
        assert json.loads(payload) == {
            "success": True,
            "data": {"operational": True, "timestamp": 1708545351, "initialized": True},
            "error": None,
        }

    def test_runs_share_shape_and_payload(self) -> None:
        first = _run_demo().stdout
        second = _run_demo().stdout
        shape = lambda text: [line.split(":")[0] for line in text.splitlines()]  # noqa: E731
        assert shape(first) == shape(second)
        tail = "Expected Response Structure:"
        assert first[first.index(tail):] == second[second.index(tail):]


class TestMain:
    def test_top_level_error_exits_nonzero(self) -> None:
        with patch.object(entry, "run_demo", side_effect=RuntimeError("boom")):
            with pytest.raises(SystemExit) as exc:
                entry.main()
        assert exc.value.code == 1

    def test_success_returns_normally(self) -> None:
        with patch.object(entry, "run_demo") as mock_run:
            entry.main()
        mock_run.assert_called_once()
