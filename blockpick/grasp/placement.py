"""
Placement Candidate Generation
==============================
Samples yaw rotations of the goal pose. A cube looks the same every
quarter turn, so four yaws cover every distinct placement.
"""

import numpy as np
from typing import List, Optional

from ..geometry import Pose, PoseStamped, UNIT_Z, yaw_quaternion
from .candidates import GripperTranslation, PlaceLocation
from .grasp_data import GraspData


# Lower the object into place, then withdraw upward
PLACE_APPROACH_DIRECTION = -UNIT_Z
PLACE_RETREAT_DIRECTION = UNIT_Z

DEFAULT_YAW_STEP = np.pi / 2


def generate_placement_candidates(goal_pose: Pose, grasp_data: Optional[GraspData],
                                  frame_id: str,
                                  yaw_step: float = DEFAULT_YAW_STEP) -> List[PlaceLocation]:
    """
    Build place locations at the goal position for yaw = 0, step, ... < 2*pi.

    Args:
        goal_pose: Goal pose of the block (orientation is replaced)
        grasp_data: Gripper parameters (distances and open posture)
        frame_id: Reference frame of the place poses
        yaw_step: Yaw increment in radians

    Returns:
        Place locations, four for the default step

    Raises:
        ValueError: Missing frame or gripper parameters, or non-positive step
    """
    if not frame_id:
        raise ValueError("Placement requires a reference frame")
    if grasp_data is None:
        raise ValueError("Placement requires gripper parameters")
    if yaw_step <= 0:
        raise ValueError(f"yaw_step must be positive, got {yaw_step}")

    locations = []
    angle = 0.0
    while angle < 2 * np.pi - 1e-9:
        place_pose = PoseStamped(goal_pose.with_orientation(yaw_quaternion(angle)), frame_id)
        locations.append(PlaceLocation(
            id=f"place_{np.rad2deg(angle):.0f}",
            place_pose=place_pose,
            pre_place_approach=GripperTranslation(
                direction=PLACE_APPROACH_DIRECTION.copy(),
                frame_id=frame_id,
                desired_distance=grasp_data.approach_retreat_desired_dist,
                min_distance=grasp_data.approach_retreat_min_dist,
                stamp=place_pose.stamp,
            ),
            post_place_retreat=GripperTranslation(
                direction=PLACE_RETREAT_DIRECTION.copy(),
                frame_id=frame_id,
                desired_distance=grasp_data.approach_retreat_desired_dist,
                min_distance=grasp_data.approach_retreat_min_dist,
                stamp=place_pose.stamp,
            ),
            # Release with the open posture
            post_place_posture=grasp_data.pre_grasp_posture.copy(),
        ))
        angle += yaw_step
    return locations
