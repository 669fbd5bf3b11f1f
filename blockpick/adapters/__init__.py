"""External service adapters (planning, scene, grasp generation)."""

from .base import MotionPlanner, SceneVisualizer, GraspGenerator
from .scripted import ScriptedPlanner, RecordingScene

__all__ = [
    "MotionPlanner",
    "SceneVisualizer",
    "GraspGenerator",
    "ScriptedPlanner",
    "RecordingScene",
]
