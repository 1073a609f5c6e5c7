"""Free-flying spectator camera and the matrices it produces."""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def look_at(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Right-handed view matrix, applied as ``matrix @ [x, y, z, 1]``."""
    eye = np.asarray(eye, dtype=float)
    f = _normalize(np.asarray(center, dtype=float) - eye)
    s = _normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye)
    m[1, 3] = -np.dot(u, eye)
    m[2, 3] = np.dot(f, eye)
    return m


def perspective(fov_y: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection to clip space with depth in [-1, 1]."""
    if aspect == 0:
        raise ValueError("aspect must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fov_y / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


class SpectatorCamera:
    """Camera steered by yaw/pitch with movement kept on the horizontal plane."""

    def __init__(
        self,
        position: Optional[Sequence[float]] = None,
        yaw: float = -90.0,
        pitch: float = 0.0,
        fov: float = 70.0,
        aspect: float = 4.0 / 3.0,
        near_plane: float = 0.1,
        far_plane: float = 500.0,
    ) -> None:
        self.position = np.array(
            (16.0, 24.0, 48.0) if position is None else position, dtype=float
        )
        self.yaw = yaw
        self.pitch = pitch
        self.fov = fov
        self.aspect = aspect
        self.near_plane = near_plane
        self.far_plane = far_plane
        self.movement_speed = 20.0
        self.mouse_sensitivity = 0.1
        self.world_up = np.array((0.0, 1.0, 0.0))
        self._update_camera_vectors()

    def process_keyboard(
        self,
        delta_time: float,
        forward: bool = False,
        backward: bool = False,
        left: bool = False,
        right: bool = False,
        up: bool = False,
        down: bool = False,
        speed_multiplier: float = 1.0,
    ) -> None:
        """Move along the horizontal facing direction and world up."""
        velocity = self.movement_speed * delta_time * speed_multiplier
        horizontal_front = _normalize(np.array((self.front[0], 0.0, self.front[2])))
        horizontal_right = _normalize(np.cross(horizontal_front, self.world_up))
        if forward:
            self.position = self.position + horizontal_front * velocity
        if backward:
            self.position = self.position - horizontal_front * velocity
        if left:
            self.position = self.position - horizontal_right * velocity
        if right:
            self.position = self.position + horizontal_right * velocity
        if up:
            self.position = self.position + self.world_up * velocity
        if down:
            self.position = self.position - self.world_up * velocity

    def process_mouse(self, xoffset: float, yoffset: float, constrain_pitch: bool = True) -> None:
        """Turn by mouse movement scaled by sensitivity."""
        self.yaw += xoffset * self.mouse_sensitivity
        self.pitch += yoffset * self.mouse_sensitivity
        if constrain_pitch:
            self.pitch = min(max(self.pitch, -89.0), 89.0)
        self._update_camera_vectors()

    def update_aspect(self, aspect: float) -> None:
        self.aspect = aspect

    def view_matrix(self) -> np.ndarray:
        return look_at(self.position, self.position + self.front, self.up)

    def projection_matrix(self) -> np.ndarray:
        return perspective(math.radians(self.fov), self.aspect, self.near_plane, self.far_plane)

    def _update_camera_vectors(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        f = np.array(
            (
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            )
        )
        self.front = _normalize(f)
        self.right = _normalize(np.cross(self.front, self.world_up))
        self.up = _normalize(np.cross(self.right, self.front))