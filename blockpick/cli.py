"""
Pick-Place Dry Run
==================
Runs the pick-place node against scripted planning/scene services.

Run: blockpick --grasp-data config/grasp_data.yaml --cycles 3 --pick-failures 1 --auto
"""

import argparse
import sys

from .adapters.scripted import RecordingScene, ScriptedPlanner
from .config import load_config
from .context import build_context
from .errors import ConfigError, GraspDataError
from .grasp.grasp_data import load_grasp_data
from .logger import CycleLogger
from .transport import PickPlaceNode, SignalBus


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Block pick-place dry run")
    parser.add_argument("--config", type=str, default=None,
                        help="Node config YAML (default: built-in defaults)")
    parser.add_argument("--grasp-data", type=str, default="config/grasp_data.yaml",
                        help="Grasp parameter YAML")
    parser.add_argument("--auto", action="store_true",
                        help="Retry failed attempts automatically instead of prompting")
    parser.add_argument("--auto-delay", type=int, default=None,
                        help="Seconds to wait before an automatic retry")
    parser.add_argument("--max-attempts", type=int, default=None,
                        help="Give up after this many failed attempts per stage")
    parser.add_argument("--cycles", type=int, default=1,
                        help="Number of trigger signals to send")
    parser.add_argument("--pick-failures", type=int, default=0,
                        help="Scripted planner rejects this many picks first")
    parser.add_argument("--place-failures", type=int, default=0,
                        help="Scripted planner rejects this many places first")
    parser.add_argument("--run-dir", type=str, default=None,
                        help="Run directory (default: auto-generate)")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        if args.auto:
            config.auto_reset = True
        if args.auto_delay is not None:
            config.auto_reset_sec = args.auto_delay
        if args.max_attempts is not None:
            config.max_attempts = args.max_attempts
        config.validate()
        grasp_data = load_grasp_data(args.grasp_data, config.ee_group_name)
    except (ConfigError, GraspDataError) as e:
        print(f"[PICK_PLACE] Startup failed: {e}")
        return 1

    planner = ScriptedPlanner(
        pick_results=[False] * args.pick_failures,
        place_results=[False] * args.place_failures,
    )
    scene = RecordingScene()
    bus = SignalBus()

    with CycleLogger(args.run_dir) as logger:
        context = build_context(config, grasp_data, planner, scene, logger=logger)
        node = PickPlaceNode(context, bus)
        bus.subscribe(config.done_topic, lambda: print(f"[NODE] Received {config.done_topic}"))

        try:
            for _ in range(args.cycles):
                bus.publish(config.trigger_topic)
        except KeyboardInterrupt:
            node.shutdown()

    succeeded = sum(1 for r in node.results if r.success)
    print(f"[PICK_PLACE] {succeeded}/{len(node.results)} cycles succeeded "
          f"({bus.publish_counts[config.done_topic]} completion signals)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
