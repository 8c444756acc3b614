"""Structured JSON event log for table builds and evaluations.

Writes one JSON line per event to a configurable log file. Nothing is written
until `set_log_path` has been called.
"""
from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


_LOG_PATH: Path | None = None
_LOCK = threading.Lock()


def set_log_path(path: str | Path | None) -> None:
    global _LOG_PATH  # noqa: PLW0603
    if path is None:
        _LOG_PATH = None
        return
    _LOG_PATH = Path(path)
    _LOG_PATH.parent.mkdir(parents=True, exist_ok=True)


def _emit(event: dict[str, Any]) -> None:
    if _LOG_PATH is None:
        return
    event.setdefault("ts", datetime.now(timezone.utc).isoformat())
    line = json.dumps(event, default=str)
    with _LOCK:
        with open(_LOG_PATH, "a", encoding="utf-8") as f:
            f.write(line + "\n")


# ---------------------------------------------------------------------------
# Table lifecycle
# ---------------------------------------------------------------------------
def log_table_built(
    *,
    resolution: int,
    lower: float,
    upper: float,
    total_mass: float,
    elapsed_ms: float,
) -> None:
    _emit({
        "event": "table_built",
        "resolution": resolution,
        "lower": lower,
        "upper": upper,
        "total_mass": total_mass,
        "elapsed_ms": round(elapsed_ms, 1),
    })


def log_self_check(*, center_score: float, passed: bool) -> None:
    _emit({"event": "self_check", "center_score": center_score, "passed": passed})


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------
def log_evaluation(x: float, score: float, *, in_range: bool) -> None:
    _emit({"event": "evaluation", "x": x, "score": score, "in_range": in_range})


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------
def generate_report(log_path: str | Path) -> dict[str, Any]:
    """Parse the JSONL log and summarise builds, checks and evaluations."""
    path = Path(log_path)
    if not path.exists():
        return {"error": "Log file not found", "path": str(path)}

    report: dict[str, Any] = {
        "tables_built": 0,
        "total_build_ms": 0.0,
        "self_check_failures": 0,
        "evaluations": 0,
        "out_of_range": 0,
        "score_sum": 0.0,
        "last_total_mass": None,
    }

    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                entry = json.loads(line)
            except json.JSONDecodeError:
                continue

            event = entry.get("event")
            if event == "table_built":
                report["tables_built"] += 1
                report["total_build_ms"] += entry.get("elapsed_ms", 0)
                report["last_total_mass"] = entry.get("total_mass")
            elif event == "self_check":
                if not entry.get("passed"):
                    report["self_check_failures"] += 1
            elif event == "evaluation":
                report["evaluations"] += 1
                report["score_sum"] += entry.get("score", 0.0)
                if not entry.get("in_range"):
                    report["out_of_range"] += 1

    total = report["evaluations"]
    report["mean_score"] = round(report.pop("score_sum") / total, 6) if total else 0
    report["out_of_range_rate"] = round(report["out_of_range"] / total, 3) if total else 0
    report["total_build_ms"] = round(report["total_build_ms"], 1)
    return report
