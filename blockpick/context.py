"""
Orchestration Context
=====================
Everything a pick-place cycle needs, built once at startup and passed
explicitly to the orchestrator.
"""

import threading
from dataclasses import dataclass, field
from typing import Callable, Optional

from .adapters.base import GraspGenerator, MotionPlanner, SceneVisualizer
from .config import PickPlaceConfig
from .executor import AttemptExecutor
from .grasp.grasp_data import GraspData
from .grasp.grasp_generator import BlockGraspGenerator
from .logger import CycleLogger
from .retry import RetryController


@dataclass
class OrchestrationContext:
    """Service handles and settings shared by the cycle components."""
    config: PickPlaceConfig
    grasp_data: GraspData
    planner: MotionPlanner
    scene: SceneVisualizer
    grasp_generator: GraspGenerator
    executor: AttemptExecutor
    retry: RetryController
    shutdown_event: threading.Event = field(default_factory=threading.Event)
    logger: Optional[CycleLogger] = None

    def log_event(self, event_type: str, data: Optional[dict] = None) -> None:
        if self.logger is not None:
            self.logger.log_event(event_type, data)


def build_context(config: PickPlaceConfig, grasp_data: GraspData,
                  planner: MotionPlanner, scene: SceneVisualizer,
                  grasp_generator: Optional[GraspGenerator] = None,
                  logger: Optional[CycleLogger] = None,
                  shutdown_event: Optional[threading.Event] = None,
                  read_response: Optional[Callable[[], str]] = None) -> OrchestrationContext:
    """
    Perform one-time service setup and assemble the context.

    Sets the planning time, floor offset and end-effector marker, then waits
    config.settle_time seconds for the services to come up.
    """
    shutdown_event = shutdown_event or threading.Event()

    print(f"[PICK_PLACE] End Effector: {config.ee_group_name}")
    print(f"[PICK_PLACE] Planning Group: {config.planning_group_name}")

    planner.set_planning_time(config.planning_time)
    scene.set_floor_to_base_height(config.floor_offset)
    scene.load_ee_marker(grasp_data.ee_group, config.planning_group_name)

    retry = RetryController(
        mode=config.retry_mode,
        auto_delay_sec=config.auto_reset_sec,
        max_attempts=config.max_attempts,
        shutdown_event=shutdown_event,
        read_response=read_response,
    )
    executor = AttemptExecutor(planner, scene, grasp_data,
                               place_planner_id=config.place_planner_id)

    if config.settle_time > 0:
        shutdown_event.wait(config.settle_time)

    return OrchestrationContext(
        config=config,
        grasp_data=grasp_data,
        planner=planner,
        scene=scene,
        grasp_generator=grasp_generator or BlockGraspGenerator(),
        executor=executor,
        retry=retry,
        shutdown_event=shutdown_event,
        logger=logger,
    )
