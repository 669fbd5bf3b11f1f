"""
Evaluation Metrics
==================
Success rates, attempt counts and abort stages from a run directory.
"""

import json
from typing import Dict, List

import pandas as pd


def load_cycles(csv_path: str) -> pd.DataFrame:
    """Load cycles CSV."""
    df = pd.read_csv(csv_path)
    if 'aborted_stage' in df.columns:
        df['aborted_stage'] = df['aborted_stage'].fillna('').astype(str)
    return df


def load_events(jsonl_path: str) -> List[dict]:
    """Load events JSONL."""
    events = []
    try:
        with open(jsonl_path, 'r') as f:
            for line in f:
                line = line.strip()
                if line:
                    events.append(json.loads(line))
    except FileNotFoundError:
        pass
    return events


def compute_metrics(cycles_df: pd.DataFrame, events: List[dict]) -> Dict:
    """
    Compute evaluation metrics from cycles and events.

    Returns:
        Dictionary of metrics
    """
    if len(cycles_df) == 0:
        return {
            'total_cycles': 0,
            'success_rate': 0.0,
            'pick_success_rate': 0.0,
            'mean_pick_attempts': 0.0,
            'mean_place_attempts': 0.0,
            'max_pick_attempts': 0,
            'max_place_attempts': 0,
            'pick_aborts': 0,
            'place_aborts': 0,
            'mean_cycle_duration': 0.0,
            'scene_resets': 0,
            'rejected_triggers': 0,
        }

    aborted = cycles_df['aborted_stage'] if 'aborted_stage' in cycles_df.columns else pd.Series([''] * len(cycles_df))
    # Place attempts only exist for cycles that got past the pick
    picked = cycles_df[cycles_df['picked'].astype(bool)]

    return {
        'total_cycles': int(len(cycles_df)),
        'success_rate': float(cycles_df['success'].astype(bool).mean()),
        'pick_success_rate': float(cycles_df['picked'].astype(bool).mean()),
        'mean_pick_attempts': float(cycles_df['pick_attempts'].mean()),
        'mean_place_attempts': float(picked['place_attempts'].mean()) if len(picked) else 0.0,
        'max_pick_attempts': int(cycles_df['pick_attempts'].max()),
        'max_place_attempts': int(cycles_df['place_attempts'].max()),
        'pick_aborts': int((aborted == 'pick').sum()),
        'place_aborts': int((aborted == 'place').sum()),
        'mean_cycle_duration': float(cycles_df['duration_s'].mean()),
        'scene_resets': sum(1 for e in events if e.get('event_type') == 'scene_reset'),
        'rejected_triggers': sum(1 for e in events if e.get('event_type') == 'trigger_rejected'),
    }


def format_metrics(metrics: Dict) -> str:
    """Format metrics as a readable string."""
    lines = []
    lines.append("=" * 70)
    lines.append("PICK-PLACE METRICS")
    lines.append("=" * 70)
    lines.append(f"Total cycles:                {metrics['total_cycles']}")
    lines.append(f"Success rate:                {metrics['success_rate']:.1%}")
    lines.append(f"Pick success rate:           {metrics['pick_success_rate']:.1%}")
    lines.append("")

    lines.append("ATTEMPTS:")
    lines.append(f"  Mean pick attempts:        {metrics['mean_pick_attempts']:.2f}")
    lines.append(f"  Mean place attempts:       {metrics['mean_place_attempts']:.2f}")
    lines.append(f"  Max pick attempts:         {metrics['max_pick_attempts']}")
    lines.append(f"  Max place attempts:        {metrics['max_place_attempts']}")
    lines.append(f"  Scene resets:              {metrics['scene_resets']}")
    lines.append("")

    lines.append("ABORTS:")
    lines.append(f"  During pick:               {metrics['pick_aborts']}")
    lines.append(f"  During place:              {metrics['place_aborts']}")
    lines.append(f"  Rejected triggers:         {metrics['rejected_triggers']}")
    lines.append("")

    lines.append(f"Mean cycle duration:         {metrics['mean_cycle_duration']:.2f} s")
    lines.append("=" * 70)
    return "\n".join(lines)
