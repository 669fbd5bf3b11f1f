"""
Run Report
==========
Summarise a pick-place run directory written by CycleLogger.

Run: python -m blockpick.eval.report runs/20260115_001234 [--json]
"""

import argparse
import json
import sys
from pathlib import Path

from .metrics import load_cycles, load_events, compute_metrics, format_metrics


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Summarise a pick-place run")
    parser.add_argument("run_dir", type=Path, help="Directory holding cycles.csv and events.jsonl")
    parser.add_argument("--json", action="store_true", help="Print metrics as JSON")
    args = parser.parse_args(argv)

    cycles_path = args.run_dir / "cycles.csv"
    if not cycles_path.is_file():
        print(f"[REPORT] No cycles.csv in {args.run_dir}")
        return 1

    cycles = load_cycles(str(cycles_path))
    events = load_events(str(args.run_dir / "events.jsonl"))
    metrics = compute_metrics(cycles, events)

    if args.json:
        print(json.dumps(metrics, indent=2))
    else:
        print(f"[REPORT] {args.run_dir}: {len(cycles)} cycles, {len(events)} events")
        print(format_metrics(metrics))
    return 0


if __name__ == "__main__":
    sys.exit(main())
