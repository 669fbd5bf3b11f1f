"""
Grasp Candidate Generation
==========================
Sweeps gripper orientations around a block and prepares the batch for
the planning service.

The generator proposes geometry only; the planning service decides which
candidate (if any) is executed.
"""

import numpy as np
from typing import Iterable, List

from ..adapters.base import GraspGenerator
from ..geometry import (
    Pose, PoseStamped, UNIT_X, UNIT_Y, UNIT_Z,
    axis_angle_quaternion, quat_multiply, rotate_vector,
)
from .candidates import GraspCandidate, GripperTranslation
from .grasp_data import GraspData


# Gripper z axis pointing straight down (rotation of pi about x)
TOP_DOWN_QUAT = np.array([0.0, 1.0, 0.0, 0.0])


class BlockGraspGenerator(GraspGenerator):
    """
    Default grasp generator for cube-shaped blocks.

    Tilts a top-down grasp about the block's X and Y axes in steps of the
    gripper's angle_resolution, outward from zero and no further than 90
    degrees either way. The top-down grasp is always included.
    """

    def generate_block_grasps(self, pose: Pose, grasp_data: GraspData) -> List[GraspCandidate]:
        steps = int(np.floor(90.0 / grasp_data.angle_resolution + 1e-9))
        angles = np.deg2rad(grasp_data.angle_resolution) * np.arange(-steps, steps + 1)

        grasps = []
        for axis_name, axis in (("x", UNIT_X), ("y", UNIT_Y)):
            for theta in angles:
                # Both sweeps contain the same top-down grasp
                if axis_name == "y" and abs(theta) < 1e-9:
                    continue
                grasps.append(self._make_grasp(pose, grasp_data, axis_name, axis, theta, len(grasps)))
        return grasps

    def _make_grasp(self, pose: Pose, grasp_data: GraspData, axis_name: str,
                    axis: np.ndarray, theta: float, index: int) -> GraspCandidate:
        tilt = axis_angle_quaternion(axis, theta)
        orientation = quat_multiply(pose.orientation, quat_multiply(tilt, TOP_DOWN_QUAT))
        orientation = orientation / np.linalg.norm(orientation)

        # Approach runs along the gripper z axis; the palm sits grasp_depth back from the center
        approach = rotate_vector(orientation, UNIT_Z)
        position = pose.position - approach * grasp_data.grasp_depth

        grasp_pose = PoseStamped(Pose(position, orientation), grasp_data.base_link)
        return GraspCandidate(
            id=f"grasp_{index}_{axis_name}_{np.rad2deg(theta):.0f}",
            grasp_pose=grasp_pose,
            pre_grasp_approach=GripperTranslation(
                direction=approach,
                frame_id=grasp_data.base_link,
                desired_distance=grasp_data.approach_retreat_desired_dist,
                min_distance=grasp_data.approach_retreat_min_dist,
                stamp=grasp_pose.stamp,
            ),
            post_grasp_retreat=GripperTranslation(
                direction=UNIT_Z.copy(),
                frame_id=grasp_data.base_link,
                desired_distance=grasp_data.approach_retreat_desired_dist,
                min_distance=grasp_data.approach_retreat_min_dist,
                stamp=grasp_pose.stamp,
            ),
            pre_grasp_posture=grasp_data.pre_grasp_posture.copy(),
            grasp_posture=grasp_data.grasp_posture.copy(),
        )


def generate_grasp_candidates(generator: GraspGenerator, object_pose: Pose,
                              grasp_data: GraspData,
                              allowed_touch_objects: Iterable[str]) -> List[GraspCandidate]:
    """
    Generate grasps and attach the allowed-touch list to each one.

    The planner rejects otherwise valid plans in which the gripper brushes a
    neighbouring block unless that block is listed, so every candidate gets
    the full list.

    Args:
        generator: Grasp geometry collaborator
        object_pose: Pose of the block to pick
        grasp_data: Gripper parameters
        allowed_touch_objects: Object handles that may be contacted

    Returns:
        Candidate list, empty if the generator found none
    """
    touch = list(dict.fromkeys(allowed_touch_objects))
    grasps = list(generator.generate_block_grasps(object_pose, grasp_data))
    for grasp in grasps:
        grasp.allowed_touch_objects = list(touch)
    return grasps
