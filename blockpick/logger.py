"""
Cycle Logger: Event and cycle logging
=====================================
Logs state transitions and attempts to JSONL and one row per cycle to CSV.
"""

import csv
import json
import os
import time
from datetime import datetime
from typing import Any, Dict, Optional

import numpy as np


CYCLE_COLUMNS = [
    'cycle_id',
    'block_name',
    'success',
    'picked',
    'placed',
    'aborted_stage',
    'pick_attempts',
    'place_attempts',
    'duration_s',
    'start_x',
    'start_y',
    'start_z',
    'goal_x',
    'goal_y',
    'goal_z',
]


def _to_native(value: Any) -> Any:
    """Convert numpy types to JSON-serializable Python types."""
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, np.floating):
        return float(value)
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, dict):
        return {k: _to_native(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_native(v) for v in value]
    return value


class CycleLogger:
    """Logger for pick-place cycles and their events."""

    def __init__(self, run_dir: Optional[str] = None):
        """
        Initialize logger with run directory.

        Args:
            run_dir: Directory for this run (default: runs/<timestamp>)
        """
        if run_dir is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            run_dir = f"runs/{timestamp}"

        self.run_dir = run_dir
        os.makedirs(self.run_dir, exist_ok=True)

        self.cycles_csv_path = os.path.join(self.run_dir, "cycles.csv")
        self.events_jsonl_path = os.path.join(self.run_dir, "events.jsonl")

        # Line buffered so events survive a killed process
        self._events_fh = open(self.events_jsonl_path, 'a', buffering=1)

        with open(self.cycles_csv_path, 'w', newline='') as f:
            csv.writer(f).writerow(CYCLE_COLUMNS)

        self.current_cycle: Optional[Dict[str, Any]] = None
        self.cycle_count = 0

        print(f"[LOGGER] Logging to: {self.run_dir}")

    def close(self):
        """Close the events file."""
        if self._events_fh is not None:
            self._events_fh.flush()
            self._events_fh.close()
            self._events_fh = None

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def start_cycle(self, block) -> int:
        """Start logging a new cycle for block; returns its id."""
        self.cycle_count += 1
        self.current_cycle = {
            'cycle_id': self.cycle_count,
            'block': block,
            'start_time': time.time(),
        }
        self.log_event('cycle_start', {'block': block.to_dict()})
        return self.cycle_count

    def log_event(self, event_type: str, data: Optional[Dict[str, Any]] = None):
        """Append one event to events.jsonl."""
        if self._events_fh is None:
            return
        event = {
            'cycle_id': self.current_cycle['cycle_id'] if self.current_cycle else None,
            'event_type': event_type,
            'time': time.time(),
            'data': _to_native(data or {}),
        }
        self._events_fh.write(json.dumps(event) + '\n')

    def end_cycle(self, result):
        """Write the cycle summary row."""
        if self.current_cycle is None:
            return

        block = self.current_cycle['block']
        duration = time.time() - self.current_cycle['start_time']
        start = block.start_pose.position
        goal = block.goal_pose.position if block.goal_pose is not None else np.zeros(3)

        with open(self.cycles_csv_path, 'a', newline='') as f:
            csv.writer(f).writerow([
                self.current_cycle['cycle_id'],
                block.name,
                result.success,
                result.picked,
                result.placed,
                result.aborted_stage or '',
                result.pick_attempts,
                result.place_attempts,
                duration,
                float(start[0]), float(start[1]), float(start[2]),
                float(goal[0]), float(goal[1]), float(goal[2]),
            ])

        self.log_event('cycle_end', dict(result.to_dict(), duration=duration))

        print(f"[LOGGER] Cycle {self.current_cycle['cycle_id']} complete: "
              f"success={result.success}, duration={duration:.2f}s")

        self.current_cycle = None
