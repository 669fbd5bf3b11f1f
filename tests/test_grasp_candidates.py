"""
Grasp Candidate Tests
=====================
"""

import numpy as np


class EmptyGenerator:
    def generate_block_grasps(self, pose, grasp_data):
        return []


def test_block_grasps_cover_both_axes(grasp_data):
    """45 degree resolution: 5 tilts about x, 4 more about y (top-down shared)."""
    from blockpick.block import create_block
    from blockpick.grasp.grasp_generator import BlockGraspGenerator

    block = create_block(0.35, 0.1, "Block1")
    grasps = BlockGraspGenerator().generate_block_grasps(block.start_pose, grasp_data)

    assert len(grasps) == 9
    assert len({g.id for g in grasps}) == 9
    for g in grasps:
        assert np.isclose(np.linalg.norm(g.grasp_pose.pose.orientation), 1.0)
        assert g.grasp_pose.frame_id == "base_link"
        assert g.pre_grasp_posture.positions == [0.0]
        assert g.grasp_posture.positions == [0.7]
        assert np.allclose(g.post_grasp_retreat.direction, [0.0, 0.0, 1.0])


def test_top_down_grasp_sits_above_block(grasp_data):
    from blockpick.block import create_block
    from blockpick.grasp.grasp_generator import BlockGraspGenerator

    block = create_block(0.35, 0.1, "Block1")
    grasps = BlockGraspGenerator().generate_block_grasps(block.start_pose, grasp_data)

    top_down = [g for g in grasps if np.allclose(g.pre_grasp_approach.direction, [0.0, 0.0, -1.0])]
    assert len(top_down) == 1
    expected = block.start_pose.position + np.array([0.0, 0.0, grasp_data.grasp_depth])
    assert np.allclose(top_down[0].grasp_pose.pose.position, expected)


def test_every_grasp_gets_allowed_touch_objects(grasp_data):
    """Each candidate carries every known block name."""
    from blockpick.block import create_block
    from blockpick.grasp.grasp_generator import BlockGraspGenerator, generate_grasp_candidates

    known = ["Block1", "Block2", "Block3", "Block4"]
    block = create_block(0.35, 0.1, "Block1")
    grasps = generate_grasp_candidates(BlockGraspGenerator(), block.start_pose, grasp_data, known + ["Block1"])

    assert grasps
    for g in grasps:
        assert g.allowed_touch_objects == known
    # Lists are independent copies
    grasps[0].allowed_touch_objects.append("Table")
    assert "Table" not in grasps[1].allowed_touch_objects


def test_empty_generator_yields_no_candidates(grasp_data):
    from blockpick.block import create_block
    from blockpick.grasp.grasp_generator import generate_grasp_candidates

    block = create_block(0.35, 0.1, "Block1")
    assert generate_grasp_candidates(EmptyGenerator(), block.start_pose, grasp_data, ["Block1"]) == []


def test_shipped_resolution_keeps_top_down_grasp():
    """16 degree steps: 11 tilts about x (-80..80), 10 more about y."""
    from conftest import CONFIG_DIR
    from blockpick.block import create_block
    from blockpick.grasp.grasp_data import load_grasp_data
    from blockpick.grasp.grasp_generator import BlockGraspGenerator

    data = load_grasp_data(CONFIG_DIR / "grasp_data.yaml", "gripper_group")
    block = create_block(0.35, 0.1, "Block1")
    grasps = BlockGraspGenerator().generate_block_grasps(block.start_pose, data)

    assert len(grasps) == 21
    top_down = [g for g in grasps if np.allclose(g.pre_grasp_approach.direction, [0.0, 0.0, -1.0])]
    assert len(top_down) == 1

    x_ids = [g.id for g in grasps if "_x_" in g.id]
    assert [int(i.rsplit("_", 1)[1]) for i in x_ids] == list(range(-80, 81, 16))
