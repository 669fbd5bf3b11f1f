"""
Configuration and Grasp Parameter Tests
=======================================
"""

import pytest

from conftest import CONFIG_DIR, GRASP_PARAMS


def test_defaults_match_shipped_config():
    from blockpick.config import load_config

    shipped = load_config(CONFIG_DIR / "pick_place.yaml")
    defaults = load_config()
    assert shipped.to_dict() == defaults.to_dict()
    assert shipped.block_name == "Block1"
    assert shipped.goal_offset == [0.0, 0.2, 0.0]
    assert shipped.retry_mode == "manual"
    assert shipped.max_attempts is None


def test_config_from_yaml(tmp_path):
    from blockpick.config import load_config

    path = tmp_path / "node.yaml"
    path.write_text("auto_reset: true\nauto_reset_sec: 2\nmax_attempts: 5\nblock_x: 0.4\n")
    config = load_config(path)
    assert config.retry_mode == "auto"
    assert config.auto_reset_sec == 2
    assert config.max_attempts == 5
    assert config.block_x == pytest.approx(0.4)


@pytest.mark.parametrize("text", [
    "not_a_key: 1\n",
    "auto_reset_sec: -1\n",
    "max_attempts: 0\n",
    "goal_offset: [0.0, 0.2]\n",
    "planning_time: fast\n",
    "settle_time: [1, 2]\n",
    "max_attempts: three\n",
    "auto_reset: \"false\"\n",
    "auto_reset: 1\n",
    "- just\n- a list\n",
])
def test_bad_config_rejected(tmp_path, text):
    from blockpick.config import load_config
    from blockpick.errors import ConfigError

    path = tmp_path / "node.yaml"
    path.write_text(text)
    with pytest.raises(ConfigError):
        load_config(path)


def test_missing_config_file_rejected(tmp_path):
    from blockpick.config import load_config
    from blockpick.errors import ConfigError

    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")


def test_grasp_data_from_shipped_file():
    from blockpick.grasp.grasp_data import load_grasp_data

    data = load_grasp_data(CONFIG_DIR / "grasp_data.yaml", "gripper_group")
    assert data.ee_group == "gripper_group"
    assert data.base_link == "base_link"
    assert data.ee_parent_link == "gripper_roll_link"
    assert data.pre_grasp_posture.joint_names == ["l_gripper_aft_joint"]
    assert data.approach_retreat_desired_dist == pytest.approx(0.1)
    assert data.approach_retreat_min_dist == pytest.approx(0.05)


def test_unknown_gripper_group_is_fatal():
    from blockpick.errors import GraspDataError
    from blockpick.grasp.grasp_data import load_grasp_data

    with pytest.raises(GraspDataError):
        load_grasp_data(GRASP_PARAMS, "other_gripper")


@pytest.mark.parametrize("override", [
    {"base_link": None},
    {"ee_parent_link": ""},
    {"approach_retreat_min_dist": 0.5},
    {"angle_resolution": 0},
    {"grasp_posture": [0.7, 0.1]},
])
def test_invalid_grasp_parameters_rejected(override):
    from blockpick.errors import GraspDataError
    from blockpick.grasp.grasp_data import load_grasp_data

    params = dict(GRASP_PARAMS["gripper_group"])
    params.update(override)
    with pytest.raises(GraspDataError):
        load_grasp_data({"gripper_group": params}, "gripper_group")


def test_missing_grasp_parameter_rejected():
    from blockpick.errors import GraspDataError
    from blockpick.grasp.grasp_data import load_grasp_data

    params = dict(GRASP_PARAMS["gripper_group"])
    del params["joints"]
    with pytest.raises(GraspDataError):
        load_grasp_data({"gripper_group": params}, "gripper_group")


def test_build_context_configures_services(grasp_data):
    from blockpick.adapters.scripted import RecordingScene, ScriptedPlanner
    from blockpick.config import config_from_dict
    from blockpick.context import build_context

    planner = ScriptedPlanner()
    scene = RecordingScene()
    config = config_from_dict({"settle_time": 0.0, "planning_time": 12.0, "floor_offset": -0.5})
    ctx = build_context(config, grasp_data, planner, scene)

    assert planner.planning_time == pytest.approx(12.0)
    assert scene.floor_offset == pytest.approx(-0.5)
    assert scene.ee_marker == ("gripper_group", "arm")
    assert ctx.retry.mode == "manual"
    assert ctx.retry.shutdown_event is ctx.shutdown_event


def test_numeric_strings_coerced():
    from blockpick.config import config_from_dict

    config = config_from_dict({"max_attempts": "3", "planning_time": "12.5", "block_y": 0})
    assert config.max_attempts == 3
    assert config.planning_time == pytest.approx(12.5)
    assert isinstance(config.block_y, float)
