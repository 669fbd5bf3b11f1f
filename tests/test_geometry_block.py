"""
Pose and Block Model Tests
==========================
"""

import numpy as np
import pytest


def test_yaw_quaternion_is_unit_and_rotates_x_axis():
    """A yaw of 90 degrees maps x onto y."""
    from blockpick.geometry import yaw_quaternion, rotate_vector, yaw_of

    q = yaw_quaternion(np.pi / 2)
    assert np.isclose(np.linalg.norm(q), 1.0)
    assert np.allclose(rotate_vector(q, [1.0, 0.0, 0.0]), [0.0, 1.0, 0.0])
    assert np.isclose(yaw_of(q), np.pi / 2)


def test_pose_rejects_non_unit_orientation():
    from blockpick.geometry import Pose

    with pytest.raises(ValueError):
        Pose(np.zeros(3), np.array([1.0, 1.0, 0.0, 0.0]))
    with pytest.raises(ValueError):
        Pose(np.zeros(2))


def test_pose_copies_its_arrays():
    from blockpick.geometry import Pose

    position = np.array([0.1, 0.2, 0.3])
    pose = Pose(position)
    position[0] = 9.0
    assert pose.position[0] == pytest.approx(0.1)


def test_create_block_rests_on_table():
    """Start pose sits half a block above the table with identity yaw."""
    from blockpick.block import BLOCK_SIZE, create_block

    block = create_block(0.35, 0.1, "Block1")
    assert block.name == "Block1"
    assert np.allclose(block.start_pose.position, [0.35, 0.1, BLOCK_SIZE / 2])
    assert np.allclose(block.start_pose.orientation, [1.0, 0.0, 0.0, 0.0])
    assert block.goal_pose is None


def test_create_block_requires_name():
    from blockpick.block import create_block

    with pytest.raises(ValueError):
        create_block(0.0, 0.0, "")


def test_goal_offset_returns_new_block():
    """Goal is the start moved by the offset; the source block is untouched."""
    from blockpick.block import create_block

    block = create_block(0.35, 0.1, "Block1")
    moved = block.with_goal_offset(0.0, 0.2, 0.0)

    assert block.goal_pose is None
    assert np.allclose(moved.goal_pose.position, [0.35, 0.3, 0.02])
    assert np.allclose(moved.goal_pose.orientation, [1.0, 0.0, 0.0, 0.0])
    assert np.allclose(moved.start_pose.position, [0.35, 0.1, 0.02])
