"""
Pose Geometry
=============
Quaternion helpers and pose types. Quaternions are [w, x, y, z].
"""

import time
import numpy as np
from dataclasses import dataclass, field
from typing import Optional


UNIT_TOLERANCE = 1e-6

IDENTITY_QUAT = np.array([1.0, 0.0, 0.0, 0.0])
UNIT_X = np.array([1.0, 0.0, 0.0])
UNIT_Y = np.array([0.0, 1.0, 0.0])
UNIT_Z = np.array([0.0, 0.0, 1.0])


def quat_normalize(q: np.ndarray) -> np.ndarray:
    """Return q scaled to unit length."""
    q = np.asarray(q, dtype=float)
    norm = np.linalg.norm(q)
    if norm < 1e-12:
        raise ValueError("Cannot normalize a zero quaternion")
    return q / norm


def quat_multiply(q1: np.ndarray, q2: np.ndarray) -> np.ndarray:
    """Hamilton product q1 * q2."""
    w1, x1, y1, z1 = q1
    w2, x2, y2, z2 = q2
    w = w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2
    x = w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2
    y = w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2
    z = w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2
    return np.array([w, x, y, z])


def quat_conjugate(q: np.ndarray) -> np.ndarray:
    return np.array([q[0], -q[1], -q[2], -q[3]])


def axis_angle_quaternion(axis: np.ndarray, theta: float) -> np.ndarray:
    """
    Quaternion for a rotation of theta radians about axis.

    Args:
        axis: Rotation axis (3,), need not be unit length
        theta: Angle in radians

    Returns:
        Unit quaternion [w, x, y, z]
    """
    axis = np.asarray(axis, dtype=float)
    norm = np.linalg.norm(axis)
    if norm < 1e-12:
        raise ValueError("Rotation axis must be non-zero")
    axis = axis / norm
    half = 0.5 * theta
    q = np.concatenate([[np.cos(half)], np.sin(half) * axis])
    return quat_normalize(q)


def yaw_quaternion(theta: float) -> np.ndarray:
    """Pure rotation of theta radians about the vertical axis."""
    return axis_angle_quaternion(UNIT_Z, theta)


def rotate_vector(q: np.ndarray, v: np.ndarray) -> np.ndarray:
    """Rotate vector v by quaternion q."""
    qv = np.concatenate([[0.0], np.asarray(v, dtype=float)])
    return quat_multiply(quat_multiply(q, qv), quat_conjugate(q))[1:]


def yaw_of(q: np.ndarray) -> float:
    """Yaw angle (rotation about z) of q, in [-pi, pi]."""
    w, x, y, z = q
    return float(np.arctan2(2.0 * (w * z + x * y), 1.0 - 2.0 * (y * y + z * z)))


@dataclass
class Pose:
    """Position in meters plus unit quaternion orientation."""

    position: np.ndarray  # shape (3,)
    orientation: np.ndarray = field(default_factory=lambda: IDENTITY_QUAT.copy())  # shape (4,) [w, x, y, z]

    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=float).copy()
        self.orientation = np.asarray(self.orientation, dtype=float).copy()
        if self.position.shape != (3,):
            raise ValueError(f"position shape {self.position.shape} != (3,)")
        if self.orientation.shape != (4,):
            raise ValueError(f"orientation shape {self.orientation.shape} != (4,)")
        norm = np.linalg.norm(self.orientation)
        if abs(norm - 1.0) > UNIT_TOLERANCE:
            raise ValueError(f"orientation is not a unit quaternion (norm={norm:.6f})")

    def translated(self, offset) -> "Pose":
        """Return a copy moved by offset (3,) in the reference frame."""
        return Pose(self.position + np.asarray(offset, dtype=float), self.orientation.copy())

    def with_orientation(self, orientation: np.ndarray) -> "Pose":
        return Pose(self.position.copy(), orientation)

    def to_dict(self):
        """Convert to dictionary for logging."""
        return {
            'position': self.position.tolist(),
            'orientation': self.orientation.tolist(),
        }


@dataclass
class PoseStamped:
    """Pose tagged with a reference frame and a wall-clock stamp."""

    pose: Pose
    frame_id: str
    stamp: Optional[float] = None

    def __post_init__(self):
        if self.stamp is None:
            self.stamp = time.time()
