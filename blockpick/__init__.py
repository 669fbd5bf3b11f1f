"""
blockpick: Block Pick-Place Orchestration
==========================================

Drives a manipulator through pick-then-place cycles on a tabletop block:
- Grasp candidates swept around the block, tagged with allowed-touch objects
- Four yaw-sampled placement candidates at the goal
- Batch pick/place attempts through an external planning service
- Auto or operator-confirmed retries
- One completion signal per cycle

Quick Start:
    from blockpick import (
        load_config, load_grasp_data, build_context,
        ScriptedPlanner, RecordingScene, PickPlaceOrchestrator,
    )

    config = load_config("config/pick_place.yaml")
    grasp_data = load_grasp_data("config/grasp_data.yaml", config.ee_group_name)
    ctx = build_context(config, grasp_data, ScriptedPlanner(), RecordingScene())
    result = PickPlaceOrchestrator(ctx).run()
"""

from .geometry import Pose, PoseStamped, yaw_quaternion, axis_angle_quaternion
from .block import BLOCK_SIZE, Block, create_block
from .errors import BlockPickError, ConfigError, GraspDataError, PlanningServiceError
from .grasp import (
    GraspCandidate,
    PlaceLocation,
    GripperTranslation,
    GripperPosture,
    GraspData,
    load_grasp_data,
    BlockGraspGenerator,
    generate_grasp_candidates,
    generate_placement_candidates,
)
from .adapters import MotionPlanner, SceneVisualizer, GraspGenerator, ScriptedPlanner, RecordingScene
from .executor import AttemptExecutor, AttemptOutcome
from .retry import RetryController
from .config import PickPlaceConfig, load_config
from .logger import CycleLogger
from .context import OrchestrationContext, build_context
from .orchestrator import PickPlaceOrchestrator, CycleResult
from .transport import SignalBus, PickPlaceNode

__version__ = "0.1.0"
__all__ = [
    # Geometry and block model
    "Pose",
    "PoseStamped",
    "yaw_quaternion",
    "axis_angle_quaternion",
    "BLOCK_SIZE",
    "Block",
    "create_block",

    # Errors
    "BlockPickError",
    "ConfigError",
    "GraspDataError",
    "PlanningServiceError",

    # Candidates
    "GraspCandidate",
    "PlaceLocation",
    "GripperTranslation",
    "GripperPosture",
    "GraspData",
    "load_grasp_data",
    "BlockGraspGenerator",
    "generate_grasp_candidates",
    "generate_placement_candidates",

    # External services
    "MotionPlanner",
    "SceneVisualizer",
    "GraspGenerator",
    "ScriptedPlanner",
    "RecordingScene",

    # Orchestration
    "AttemptExecutor",
    "AttemptOutcome",
    "RetryController",
    "PickPlaceConfig",
    "load_config",
    "CycleLogger",
    "OrchestrationContext",
    "build_context",
    "PickPlaceOrchestrator",
    "CycleResult",
    "SignalBus",
    "PickPlaceNode",
]
