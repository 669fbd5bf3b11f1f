"""
Candidate Types
===============
Grasp and placement candidates handed to the motion-planning service.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import List, Optional

from ..geometry import PoseStamped


@dataclass
class GripperPosture:
    """Joint positions for the end-effector (open or closed)."""
    joint_names: List[str]
    positions: List[float]

    def __post_init__(self):
        if len(self.joint_names) != len(self.positions):
            raise ValueError(
                f"{len(self.joint_names)} joint names but {len(self.positions)} positions"
            )

    def copy(self) -> "GripperPosture":
        return GripperPosture(list(self.joint_names), list(self.positions))


@dataclass
class GripperTranslation:
    """Straight-line end-effector motion before or after contact."""
    direction: np.ndarray  # shape (3,)
    frame_id: str
    desired_distance: float
    min_distance: float
    stamp: Optional[float] = None

    def __post_init__(self):
        self.direction = np.asarray(self.direction, dtype=float)
        if self.direction.shape != (3,):
            raise ValueError(f"direction shape {self.direction.shape} != (3,)")


@dataclass
class GraspCandidate:
    """One way to approach, close on and lift an object."""
    id: str
    grasp_pose: PoseStamped
    pre_grasp_approach: GripperTranslation
    post_grasp_retreat: GripperTranslation
    pre_grasp_posture: GripperPosture
    grasp_posture: GripperPosture
    # Objects the gripper may touch while executing this grasp
    allowed_touch_objects: List[str] = field(default_factory=list)


@dataclass
class PlaceLocation:
    """One pose at which to release an object, plus approach and retreat."""
    id: str
    place_pose: PoseStamped
    pre_place_approach: GripperTranslation
    post_place_retreat: GripperTranslation
    post_place_posture: GripperPosture
