"""
Error Types
===========
Startup errors are fatal; planning errors are recoverable attempt failures.
"""


class BlockPickError(Exception):
    """Base class for blockpick errors."""


class ConfigError(BlockPickError):
    """Invalid or unreadable node configuration."""


class GraspDataError(BlockPickError):
    """Gripper parameters could not be loaded for an end-effector group."""


class PlanningServiceError(BlockPickError):
    """The motion-planning service could not process a request."""
