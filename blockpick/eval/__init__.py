"""Run evaluation: summary metrics over logged pick-place cycles."""
