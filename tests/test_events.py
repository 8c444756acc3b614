"""Tests for gaussconf.core.events — structured event logging and report."""
from __future__ import annotations

import json

import pytest

from gaussconf.core.events import (
    generate_report,
    log_evaluation,
    log_self_check,
    log_table_built,
    set_log_path,
)
from gaussconf.modeling.cumulative import CumulativeTable
from gaussconf.modeling.types import IntegrationLimits


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "logs" / "events.jsonl"
    set_log_path(path)
    yield path
    set_log_path(None)


class TestLogEvents:
    def test_table_built(self, log_file):
        log_table_built(resolution=100, lower=-1.0, upper=1.0, total_mass=0.999, elapsed_ms=12.34)
        entry = json.loads(log_file.read_text().strip())
        assert entry["event"] == "table_built"
        assert entry["resolution"] == 100
        assert entry["elapsed_ms"] == 12.3
        assert "ts" in entry

    def test_evaluation(self, log_file):
        log_evaluation(0.05, 0.79, in_range=True)
        entry = json.loads(log_file.read_text().strip())
        assert entry["event"] == "evaluation"
        assert entry["x"] == 0.05
        assert entry["in_range"] is True

    def test_build_emits_event(self, log_file):
        CumulativeTable.build(lambda _x: 0.5, IntegrationLimits(lower=0.0, upper=2.0), 8)
        entry = json.loads(log_file.read_text().strip())
        assert entry["event"] == "table_built"
        assert entry["total_mass"] == pytest.approx(1.0)

    def test_disabled_without_path(self, tmp_path):
        set_log_path(None)
        log_evaluation(0.0, 1.0, in_range=True)
        assert list(tmp_path.iterdir()) == []


class TestReport:
    def test_missing_file(self, tmp_path):
        report = generate_report(tmp_path / "missing.jsonl")
        assert "error" in report

    def test_summary(self, log_file):
        log_table_built(resolution=10, lower=0.0, upper=1.0, total_mass=1.0, elapsed_ms=5.0)
        log_self_check(center_score=0.9999, passed=True)
        log_self_check(center_score=0.5, passed=False)
        log_evaluation(0.0, 1.0, in_range=True)
        log_evaluation(0.5, 0.5, in_range=True)
        log_evaluation(9.0, 0.0, in_range=False)
        with open(log_file, "a", encoding="utf-8") as f:
            f.write("not json\n\n")

        report = generate_report(log_file)
        assert report["tables_built"] == 1
        assert report["total_build_ms"] == 5.0
        assert report["self_check_failures"] == 1
        assert report["evaluations"] == 3
        assert report["out_of_range"] == 1
        assert report["mean_score"] == pytest.approx(0.5)
        assert report["out_of_range_rate"] == pytest.approx(0.333)
        assert report["last_total_mass"] == 1.0
