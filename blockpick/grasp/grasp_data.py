"""
Grasp Parameters
================
End-effector geometry and postures for one gripper configuration.

Parameters are stored per end-effector group, e.g.::

    gripper_group:
      base_link: base_link
      ee_parent_link: gripper_roll_link
      joints: [l_gripper_aft_joint]
      pregrasp_posture: [0.0]
      grasp_posture: [0.7]
      grasp_depth: 0.02
      angle_resolution: 16
      approach_retreat_desired_dist: 0.1
      approach_retreat_min_dist: 0.05
"""

import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

from .candidates import GripperPosture
from ..errors import GraspDataError


@dataclass
class GraspData:
    """Gripper parameters for grasp and placement generation."""
    ee_group: str
    base_link: str
    ee_parent_link: str
    pre_grasp_posture: GripperPosture  # open
    grasp_posture: GripperPosture      # closed
    approach_retreat_desired_dist: float = 0.1
    approach_retreat_min_dist: float = 0.05
    grasp_depth: float = 0.02
    angle_resolution: float = 16.0  # degrees

    def validate(self) -> None:
        if not self.base_link:
            raise GraspDataError(f"{self.ee_group}: base_link is empty")
        if not self.ee_parent_link:
            raise GraspDataError(f"{self.ee_group}: ee_parent_link is empty")
        if self.approach_retreat_min_dist < 0 or self.approach_retreat_desired_dist < self.approach_retreat_min_dist:
            raise GraspDataError(
                f"{self.ee_group}: need 0 <= approach_retreat_min_dist <= approach_retreat_desired_dist"
            )
        if not 0.0 < self.angle_resolution <= 180.0:
            raise GraspDataError(f"{self.ee_group}: angle_resolution must be in (0, 180]")


def _parse_group(ee_group: str, data: Dict[str, Any]) -> GraspData:
    try:
        joints = list(data['joints'])
        grasp_data = GraspData(
            ee_group=data.get('ee_group', ee_group),
            base_link=data['base_link'],
            ee_parent_link=data['ee_parent_link'],
            pre_grasp_posture=GripperPosture(joints, [float(p) for p in data['pregrasp_posture']]),
            grasp_posture=GripperPosture(joints, [float(p) for p in data['grasp_posture']]),
            approach_retreat_desired_dist=float(data.get('approach_retreat_desired_dist', 0.1)),
            approach_retreat_min_dist=float(data.get('approach_retreat_min_dist', 0.05)),
            grasp_depth=float(data.get('grasp_depth', 0.02)),
            angle_resolution=float(data.get('angle_resolution', 16.0)),
        )
    except KeyError as e:
        raise GraspDataError(f"{ee_group}: missing grasp parameter {e}") from e
    except (TypeError, ValueError) as e:
        raise GraspDataError(f"{ee_group}: invalid grasp parameters: {e}") from e
    grasp_data.validate()
    return grasp_data


def load_grasp_data(source: Union[str, Path, Dict[str, Any]], ee_group_name: str) -> GraspData:
    """
    Load gripper parameters for an end-effector group.

    Args:
        source: YAML file path or already-parsed mapping of group -> params
        ee_group_name: End-effector group to load

    Returns:
        Validated GraspData

    Raises:
        GraspDataError: File unreadable, group missing or parameters invalid
    """
    if isinstance(source, (str, Path)):
        try:
            with open(source, 'r') as f:
                source = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise GraspDataError(f"Cannot read grasp data file: {e}") from e

    if not isinstance(source, dict):
        raise GraspDataError("Grasp data must be a mapping of end-effector groups")
    if ee_group_name not in source:
        raise GraspDataError(
            f"No grasp data for end-effector group '{ee_group_name}' "
            f"(available: {sorted(source)})"
        )
    return _parse_group(ee_group_name, source[ee_group_name])
