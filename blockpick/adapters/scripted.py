"""
Scripted Adapters (Dry Run)
===========================
In-process stand-ins for the planning and scene services. They record
every call so a cycle can be replayed and inspected without a robot.
"""

from collections import deque
from typing import Any, Iterable, List, Optional, Tuple

from .base import MotionPlanner, SceneVisualizer


class ScriptedPlanner(MotionPlanner):
    """
    Planner that answers pick/place requests from queued verdicts.

    Once a queue is empty, `default` is returned.
    """

    def __init__(self, pick_results: Optional[Iterable[Any]] = None,
                 place_results: Optional[Iterable[Any]] = None,
                 default: bool = True):
        self.pick_results = deque(pick_results or [])
        self.place_results = deque(place_results or [])
        self.default = default

        self.pick_calls: List[Tuple[str, list]] = []
        self.place_calls: List[Tuple[str, list]] = []
        self.planning_time: Optional[float] = None
        self.planner_id: Optional[str] = None
        self.planner_ids_at_place: List[Optional[str]] = []

    def pick(self, object_name: str, grasps: List[Any]) -> Any:
        self.pick_calls.append((object_name, list(grasps)))
        return self._next(self.pick_results)

    def place(self, object_name: str, locations: List[Any]) -> Any:
        self.place_calls.append((object_name, list(locations)))
        self.planner_ids_at_place.append(self.planner_id)
        return self._next(self.place_results)

    def set_planning_time(self, seconds: float) -> None:
        self.planning_time = seconds

    def set_planner_id(self, planner_id: str) -> None:
        self.planner_id = planner_id

    def _next(self, queue: deque) -> Any:
        if not queue:
            return self.default
        result = queue.popleft()
        if isinstance(result, BaseException):
            raise result
        return result


class RecordingScene(SceneVisualizer):
    """Scene service that keeps collision objects in a dict and logs calls."""

    def __init__(self):
        self.calls: List[Tuple[str, tuple]] = []
        self.collision_objects = {}
        self.attached_objects = set()
        self.muted = True
        self.floor_offset = 0.0
        self.ee_marker = None

    def publish_collision_block(self, pose, name: str, size: float) -> None:
        self.calls.append(("publish_collision_block", (name, size)))
        self.collision_objects[name] = pose

    def cleanup_collision_object(self, name: str) -> None:
        self.calls.append(("cleanup_collision_object", (name,)))
        self.collision_objects.pop(name, None)

    def cleanup_attached_object(self, name: str) -> None:
        self.calls.append(("cleanup_attached_object", (name,)))
        self.attached_objects.discard(name)

    def publish_block(self, pose, color: str, size: float) -> None:
        self.calls.append(("publish_block", (color, size)))

    def publish_grasps(self, grasps: List[Any], ee_parent_link: str) -> None:
        self.calls.append(("publish_grasps", (len(grasps), ee_parent_link)))

    def set_muted(self, muted: bool) -> None:
        self.calls.append(("set_muted", (muted,)))
        self.muted = muted

    def set_floor_to_base_height(self, offset: float) -> None:
        self.calls.append(("set_floor_to_base_height", (offset,)))
        self.floor_offset = offset

    def load_ee_marker(self, ee_group: str, planning_group: str) -> None:
        self.calls.append(("load_ee_marker", (ee_group, planning_group)))
        self.ee_marker = (ee_group, planning_group)

    def count(self, method: str) -> int:
        """Number of recorded calls to method."""
        return sum(1 for name, _ in self.calls if name == method)
