"""Fly camera driven by keyboard state and mouse movement."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Collection, Sequence

import numpy as np

from .transforms import clamp, look_at, normalize, perspective, translation

DEFAULT_RESOLUTION = (1280, 720)
"""Window size assumed for the initial projection of a default camera."""

_WORLD_UP = (0.0, 1.0, 0.0)
_PITCH_LIMIT = 89.0


class Key(IntEnum):
    """Keyboard keys the camera and scripts react to, by GLFW key code."""

    A = 65
    D = 68
    S = 83
    W = 87
    RIGHT = 262
    LEFT = 263
    LEFT_ALT = 342


def _direction_from_angles(yaw: float, pitch: float) -> np.ndarray:
    yaw_r = math.radians(yaw)
    pitch_r = math.radians(pitch)
    return normalize(
        (
            math.cos(yaw_r) * math.cos(pitch_r),
            math.sin(pitch_r),
            math.sin(yaw_r) * math.cos(pitch_r),
        )
    )


def _aspect(resolution: Sequence[float]) -> float:
    width, height = resolution
    if height == 0:
        raise ValueError("resolution height must be non-zero")
    return float(width) / float(height)


class Camera:
    """Perspective camera with yaw/pitch look and Alt-gated WASD movement.

    Called with no matrices it starts at the origin looking along +Z with a
    default projection; called with both matrices it starts at (0, 0, 3)
    looking down -Z and uses the matrices given.
    """

    def __init__(
        self,
        projection: np.ndarray | None = None,
        view: np.ndarray | None = None,
    ) -> None:
        if (projection is None) != (view is None):
            raise TypeError("give both projection and view matrices, or neither")

        self.pitch = 0.0
        self.yaw = -90.0
        self.fov = 45.0
        self.near = 0.05
        self.far = 1000.0
        self.up = np.array(_WORLD_UP)

        if projection is None:
            self.movement_speed = 5.0
            self.sensitivity = 0.1
            self.position = np.zeros(3)
            self.direction = np.array([0.0, 0.0, 1.0])
            self.right = np.cross(self.direction, _WORLD_UP)
            self.projection = perspective(
                math.radians(self.fov),
                _aspect(DEFAULT_RESOLUTION),
                self.near,
                self.far,
            )
            self.view = translation(self.direction * 3.0)
        else:
            self.movement_speed = 20.0
            self.sensitivity = 0.2
            self.position = np.array([0.0, 0.0, 3.0])
            self.direction = _direction_from_angles(self.yaw, self.pitch)
            self.right = np.cross(self.direction, self.up)
            self.projection = np.array(projection, dtype=float)
            self.view = np.array(view, dtype=float)

    def update(
        self,
        delta_time: float,
        pressed_keys: Collection[Key] = (),
        mouse_delta: Sequence[float] = (0.0, 0.0),
        resolution: Sequence[float] = DEFAULT_RESOLUTION,
    ) -> None:
        """Advance one frame: move, turn, and rebuild the projection and view."""
        aspect = _aspect(resolution)
        self.right = normalize(np.cross(self.up, self.direction))

        if Key.LEFT_ALT in pressed_keys:
            step = self.movement_speed * delta_time
            if Key.W in pressed_keys:
                self.position = self.position + self.direction * step
            if Key.S in pressed_keys:
                self.position = self.position - self.direction * step
            if Key.A in pressed_keys:
                self.position = self.position + self.right * step
            if Key.D in pressed_keys:
                self.position = self.position - self.right * step

            dx, dy = mouse_delta
            self.yaw += dx * self.sensitivity
            self.pitch -= dy * self.sensitivity

        self.pitch = clamp(self.pitch, -_PITCH_LIMIT, _PITCH_LIMIT)
        self.direction = _direction_from_angles(self.yaw, self.pitch)

        self.projection = perspective(
            math.radians(self.fov), aspect, self.near, self.far
        )
        self.view = look_at(self.position, self.position + self.direction, self.up)

    def view_projection(self) -> np.ndarray:
        """Projection matrix multiplied by the view matrix."""
        return self.projection @ self.view