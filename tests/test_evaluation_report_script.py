from __future__ import annotations

import json
import sys

import pytest

from gaussconf.core.events import log_evaluation, set_log_path
from scripts import evaluation_report


def test_report_prints_summary(monkeypatch, tmp_path, capsys):
    path = tmp_path / "events.jsonl"
    set_log_path(path)
    try:
        log_evaluation(0.043, 1.0, in_range=True)
    finally:
        set_log_path(None)

    monkeypatch.setattr(sys, "argv", ["evaluation_report", "--log-path", str(path)])
    evaluation_report.main()

    report = json.loads(capsys.readouterr().out)
    assert report["evaluations"] == 1
    assert report["mean_score"] == pytest.approx(1.0)


def test_missing_log_exits_nonzero(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "argv", ["evaluation_report", "--log-path", str(tmp_path / "none.jsonl")])
    with pytest.raises(SystemExit) as exc:
        evaluation_report.main()
    assert exc.value.code == 1
