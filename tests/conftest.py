"""Shared fixtures for blockpick tests."""

from pathlib import Path

import pytest

from blockpick.adapters.scripted import RecordingScene, ScriptedPlanner
from blockpick.config import config_from_dict
from blockpick.context import build_context
from blockpick.grasp.grasp_data import load_grasp_data


CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"

GRASP_PARAMS = {
    "gripper_group": {
        "base_link": "base_link",
        "ee_parent_link": "gripper_roll_link",
        "joints": ["l_gripper_aft_joint"],
        "pregrasp_posture": [0.0],
        "grasp_posture": [0.7],
        "grasp_depth": 0.02,
        "angle_resolution": 45,
        "approach_retreat_desired_dist": 0.1,
        "approach_retreat_min_dist": 0.05,
    }
}


class Responses:
    """Operator responses consumed in order; '' (EOF) once exhausted."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.asked = 0

    def __call__(self):
        self.asked += 1
        return self.answers.pop(0) if self.answers else ""


@pytest.fixture
def grasp_data():
    return load_grasp_data(GRASP_PARAMS, "gripper_group")


@pytest.fixture
def make_context(grasp_data):
    """Factory building a context on scripted services with no settle delay."""

    def _make(planner=None, scene=None, responses=None, **config_overrides):
        options = {"auto_reset": True, "auto_reset_sec": 0, "settle_time": 0.0}
        options.update(config_overrides)
        config = config_from_dict(options)
        return build_context(
            config,
            grasp_data,
            planner or ScriptedPlanner(),
            scene or RecordingScene(),
            read_response=responses,
        )

    return _make
