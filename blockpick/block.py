"""
Block Model
===========
A named tabletop block with start and goal poses for one pick-place cycle.
"""

import numpy as np
from dataclasses import dataclass, replace
from typing import Optional

from .geometry import Pose, yaw_quaternion


# Edge length of the cube (m); the start pose sits half of this above the table.
BLOCK_SIZE = 0.04


@dataclass(frozen=True)
class Block:
    """
    Block tracked by name for a single cycle.

    The name doubles as the object handle used by the planning and scene
    services.
    """
    name: str
    start_pose: Pose
    goal_pose: Optional[Pose] = None

    def with_goal_offset(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> "Block":
        """Return a copy whose goal is the start pose translated by (dx, dy, dz)."""
        return replace(self, goal_pose=self.start_pose.translated([dx, dy, dz]))

    def to_dict(self):
        return {
            'name': self.name,
            'start_pose': self.start_pose.to_dict(),
            'goal_pose': self.goal_pose.to_dict() if self.goal_pose is not None else None,
        }


def create_block(x: float, y: float, name: str, yaw: float = 0.0) -> Block:
    """
    Create a block resting on the table at (x, y).

    Args:
        x: Table x position (m)
        y: Table y position (m)
        name: Object handle, must be non-empty
        yaw: Rotation about vertical (rad)

    Returns:
        Block with start pose set and no goal pose
    """
    if not name:
        raise ValueError("Block name must be non-empty")
    start = Pose(np.array([x, y, BLOCK_SIZE / 2.0]), yaw_quaternion(yaw))
    return Block(name=name, start_pose=start)
