"""
Adapter Contract (External Services)
====================================
The planning service, scene/visualization service and grasp generator
MUST implement these exactly. The orchestration core only talks to them
through these interfaces.
"""

from abc import ABC, abstractmethod
from typing import Any, List


class MotionPlanner(ABC):
    """
    Motion-planning and execution service.

    A pick or place call submits a whole candidate batch and yields one
    verdict for it.
    """

    @abstractmethod
    def pick(self, object_name: str, grasps: List[Any]) -> Any:
        """
        Plan and execute a pick of object_name using any of the grasps.

        Returns:
            bool or AttemptOutcome. Raises PlanningServiceError if the
            request could not be processed at all.
        """
        raise NotImplementedError

    @abstractmethod
    def place(self, object_name: str, locations: List[Any]) -> Any:
        """Plan and execute a place of the held object at any of the locations."""
        raise NotImplementedError

    @abstractmethod
    def set_planning_time(self, seconds: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_planner_id(self, planner_id: str) -> None:
        raise NotImplementedError


class SceneVisualizer(ABC):
    """
    Visualization and collision-scene service.

    Not authoritative over physical state; the core only appends or
    overwrites scene content.
    """

    @abstractmethod
    def publish_collision_block(self, pose, name: str, size: float) -> None:
        """Add or replace a cube collision object."""
        raise NotImplementedError

    @abstractmethod
    def cleanup_collision_object(self, name: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def cleanup_attached_object(self, name: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def publish_block(self, pose, color: str, size: float) -> None:
        """Draw a block marker (no collision geometry)."""
        raise NotImplementedError

    @abstractmethod
    def publish_grasps(self, grasps: List[Any], ee_parent_link: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_muted(self, muted: bool) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_floor_to_base_height(self, offset: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def load_ee_marker(self, ee_group: str, planning_group: str) -> None:
        raise NotImplementedError


class GraspGenerator(ABC):
    """Computes grasp geometry for an object pose."""

    @abstractmethod
    def generate_block_grasps(self, pose, grasp_data) -> List[Any]:
        """
        Args:
            pose: Object pose
            grasp_data: GraspData for the gripper in use

        Returns:
            List of GraspCandidate (possibly empty)
        """
        raise NotImplementedError
