"""Matrix and vector helpers for 3D transforms, following right-handed GL conventions.

Matrices are 4x4 numpy arrays in mathematical layout: a point ``p`` is
transformed as ``matrix @ [x, y, z, 1]``. Angles are in radians.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def _vec3(vector: Sequence[float]) -> np.ndarray:
    array = np.asarray(vector, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {array.shape}")
    return array


def normalize(vector: Sequence[float]) -> np.ndarray:
    """Unit vector in the direction of ``vector``; a zero vector raises ValueError."""
    array = np.asarray(vector, dtype=float)
    length = float(np.linalg.norm(array))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return array / length


def clamp(value: float, low: float, high: float) -> float:
    """Limit ``value`` to the closed range [low, high]."""
    if low > high:
        raise ValueError("low must not be greater than high")
    return min(max(value, low), high)


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Perspective projection with depth mapped to [-1, 1]."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    half = math.tan(fovy / 2.0)
    if half == 0:
        raise ValueError("field of view must be non-zero")
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * half)
    matrix[1, 1] = 1.0 / half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """Orthographic projection with depth mapped to [-1, 1]."""
    if left == right or bottom == top or near == far:
        raise ValueError("orthographic bounds must not be degenerate")
    matrix = np.identity(4)
    matrix[0, 0] = 2.0 / (right - left)
    matrix[1, 1] = 2.0 / (top - bottom)
    matrix[2, 2] = -2.0 / (far - near)
    matrix[0, 3] = -(right + left) / (right - left)
    matrix[1, 3] = -(top + bottom) / (top - bottom)
    matrix[2, 3] = -(far + near) / (far - near)
    return matrix


def look_at(
    eye: Sequence[float], center: Sequence[float], up: Sequence[float]
) -> np.ndarray:
    """View matrix looking from ``eye`` towards ``center`` with ``up`` as up."""
    eye_v = _vec3(eye)
    forward = normalize(_vec3(center) - eye_v)
    side = normalize(np.cross(forward, _vec3(up)))
    true_up = np.cross(side, forward)
    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = true_up
    matrix[2, :3] = -forward
    matrix[0, 3] = -float(np.dot(side, eye_v))
    matrix[1, 3] = -float(np.dot(true_up, eye_v))
    matrix[2, 3] = float(np.dot(forward, eye_v))
    return matrix


def translation(offset: Sequence[float]) -> np.ndarray:
    """Matrix moving points by ``offset``."""
    matrix = np.identity(4)
    matrix[:3, 3] = _vec3(offset)
    return matrix


def scaling(factors: Sequence[float]) -> np.ndarray:
    """Matrix scaling each axis by the matching factor."""
    matrix = np.identity(4)
    matrix[:3, :3] = np.diag(_vec3(factors))
    return matrix


def euler_rotation(angles: Sequence[float]) -> np.ndarray:
    """Rotation from Euler angles (x, y, z), applied X first, then Y, then Z."""
    ax, ay, az = _vec3(angles)
    cx, sx = math.cos(ax), math.sin(ax)
    cy, sy = math.cos(ay), math.sin(ay)
    cz, sz = math.cos(az), math.sin(az)
    rot_x = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]])
    rot_y = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]])
    rot_z = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]])
    matrix = np.identity(4)
    matrix[:3, :3] = rot_z @ rot_y @ rot_x
    return matrix