"""Summarise the structured event log.

Usage:
    python -m scripts.evaluation_report [--log-path logs/events.jsonl]
"""
from __future__ import annotations

import argparse
import json
import sys

from gaussconf.core.config import settings
from gaussconf.core.events import generate_report


def main() -> None:
    parser = argparse.ArgumentParser(description="Confidence event report")
    parser.add_argument("--log-path", default=settings.event_log_path or "logs/events.jsonl")
    args = parser.parse_args()

    report = generate_report(args.log_path)
    print(json.dumps(report, indent=2))

    if "error" in report:
        sys.exit(1)

    if report.get("self_check_failures", 0) > 0:
        print(f"WARNING: {report['self_check_failures']} failed self checks", file=sys.stderr)


if __name__ == "__main__":
    main()
