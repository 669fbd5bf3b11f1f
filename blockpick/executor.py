"""
Attempt Executor
================
Submits one candidate batch to the planning service and reports a single
verdict for it. No retries, no filtering.
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from .adapters.base import MotionPlanner, SceneVisualizer
from .block import BLOCK_SIZE
from .errors import PlanningServiceError
from .grasp.candidates import GraspCandidate, PlaceLocation
from .grasp.grasp_data import GraspData


DEFAULT_PLACE_PLANNER_ID = "RRTConnectkConfigDefault"


@dataclass
class AttemptOutcome:
    """Verdict for one pick or place attempt."""
    success: bool
    failed_candidate_index: Optional[int] = None
    reason: str = ""

    def __bool__(self):
        return self.success

    @classmethod
    def from_result(cls, result: Any) -> "AttemptOutcome":
        """Wrap a planner result (bool or AttemptOutcome)."""
        if isinstance(result, AttemptOutcome):
            return result
        success = bool(result)
        return cls(success=success, reason="" if success else "planner_rejected")

    def to_dict(self):
        return {
            'success': self.success,
            'failed_candidate_index': self.failed_candidate_index,
            'reason': self.reason,
        }


class AttemptExecutor:
    """Adapter between candidate batches and the planning service."""

    def __init__(self, planner: MotionPlanner, scene: SceneVisualizer,
                 grasp_data: GraspData,
                 place_planner_id: str = DEFAULT_PLACE_PLANNER_ID):
        self.planner = planner
        self.scene = scene
        self.grasp_data = grasp_data
        self.place_planner_id = place_planner_id

    def execute_pick(self, object_name: str, candidates: List[GraspCandidate]) -> AttemptOutcome:
        """
        Submit all grasps for object_name in one pick request.

        Args:
            object_name: Object handle known to the planning scene
            candidates: Grasp batch (must be non-empty)

        Returns:
            Aggregate outcome
        """
        if not candidates:
            raise ValueError("execute_pick called with no grasp candidates")

        self.scene.publish_grasps(candidates, self.grasp_data.ee_parent_link)
        try:
            result = self.planner.pick(object_name, candidates)
        except PlanningServiceError as e:
            print(f"[EXECUTOR] Pick request for '{object_name}' failed: {e}")
            return AttemptOutcome(success=False, reason=str(e))
        return AttemptOutcome.from_result(result)

    def execute_place(self, object_name: str, candidates: List[PlaceLocation]) -> AttemptOutcome:
        """
        Submit all place locations for the held object in one place request.

        Publishes one marker per location before selecting the place planner.
        """
        if not candidates:
            raise ValueError("execute_place called with no place locations")

        print(f"[EXECUTOR] Placing '{object_name}' ({len(candidates)} locations)")
        for location in candidates:
            self.scene.publish_block(location.place_pose.pose, "blue", BLOCK_SIZE)

        self.planner.set_planner_id(self.place_planner_id)
        try:
            result = self.planner.place(object_name, candidates)
        except PlanningServiceError as e:
            print(f"[EXECUTOR] Place request for '{object_name}' failed: {e}")
            return AttemptOutcome(success=False, reason=str(e))
        return AttemptOutcome.from_result(result)
