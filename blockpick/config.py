"""
Node Configuration
==================
Startup parameters for the pick-place node, loaded from YAML.
"""

import yaml
from dataclasses import dataclass, field, fields, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .errors import ConfigError


@dataclass
class PickPlaceConfig:
    """Configuration for the pick-place node."""

    # Robot groups
    ee_group_name: str = "gripper_group"
    planning_group_name: str = "arm"

    # Retry behaviour
    auto_reset: bool = False
    auto_reset_sec: int = 4
    max_attempts: Optional[int] = None  # None = retry forever

    # Planning
    planning_time: float = 30.0
    place_planner_id: str = "RRTConnectkConfigDefault"

    # Scene
    floor_offset: float = -0.9
    settle_time: float = 1.0  # seconds to let services come up

    # Transport
    trigger_topic: str = "/turtle/done"
    done_topic: str = "/arm/done"

    # Block handled on each trigger
    block_name: str = "Block1"
    block_x: float = 0.35
    block_y: float = 0.1
    goal_offset: List[float] = field(default_factory=lambda: [0.0, 0.2, 0.0])
    known_blocks: List[str] = field(default_factory=lambda: ["Block1", "Block2", "Block3", "Block4"])

    def validate(self) -> None:
        if not self.ee_group_name or not self.planning_group_name:
            raise ConfigError("ee_group_name and planning_group_name must be set")
        if self.auto_reset_sec < 0:
            raise ConfigError(f"auto_reset_sec must be >= 0, got {self.auto_reset_sec}")
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ConfigError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.planning_time <= 0:
            raise ConfigError(f"planning_time must be positive, got {self.planning_time}")
        if len(self.goal_offset) != 3:
            raise ConfigError(f"goal_offset needs 3 values, got {self.goal_offset}")
        if not self.block_name:
            raise ConfigError("block_name must be set")

    @property
    def retry_mode(self) -> str:
        return "auto" if self.auto_reset else "manual"

    def to_dict(self) -> dict:
        return asdict(self)


def config_from_dict(data: Dict[str, Any]) -> PickPlaceConfig:
    """Build a validated config; unknown keys are rejected."""
    known = {f.name for f in fields(PickPlaceConfig)}
    unknown = set(data) - known
    if unknown:
        raise ConfigError(f"Unknown config keys: {sorted(unknown)}")
    if not isinstance(data.get('auto_reset', False), bool):
        raise ConfigError(f"auto_reset must be true or false, got {data['auto_reset']!r}")
    try:
        config = PickPlaceConfig(**data)
        config.auto_reset_sec = int(config.auto_reset_sec)
        if config.max_attempts is not None:
            config.max_attempts = int(config.max_attempts)
        for name in ('planning_time', 'floor_offset', 'settle_time', 'block_x', 'block_y'):
            setattr(config, name, float(getattr(config, name)))
        config.goal_offset = [float(v) for v in config.goal_offset]
        config.known_blocks = [str(b) for b in config.known_blocks]
        config.validate()
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid config value: {e}") from e
    return config


def load_config(path: Union[str, Path, None] = None) -> PickPlaceConfig:
    """
    Load node configuration.

    Args:
        path: YAML file; None returns the defaults

    Returns:
        Validated PickPlaceConfig
    """
    if path is None:
        return config_from_dict({})
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return config_from_dict(data)
