"""Cameras producing view and projection matrices."""

from __future__ import annotations

import math

import numpy as np

from lzrender.transforms import look_at, ortho, perspective


class Camera:
    """Camera defined by a position and orthonormal up/right vectors."""

    def __init__(self) -> None:
        self.position = np.array([0.0, 0.0, 5.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.right = np.array([1.0, 0.0, 0.0])
        self.near = 0.0
        self.far = 0.0

    @property
    def front(self) -> np.ndarray:
        return np.cross(self.up, self.right)

    def view_matrix(self) -> np.ndarray:
        return look_at(self.position, self.position + self.front, self.up)

    def projection_matrix(self) -> np.ndarray:
        return np.identity(4)

    def scale(self, delta_scale: float) -> None:
        """Zoom the camera; the base camera does nothing."""

    def set_position(self, position) -> None:
        self.position = np.array(position, dtype=float).reshape(3)


class OrthographicCamera(Camera):
    """Orthographic camera zoomed by powers of two."""

    def __init__(
        self, left: float, right: float, bottom: float, top: float, near: float, far: float
    ) -> None:
        super().__init__()
        self.left_bound = left
        self.right_bound = right
        self.bottom_bound = bottom
        self.top_bound = top
        self.near = near
        self.far = far
        self.scale_level = 0.0

    def projection_matrix(self) -> np.ndarray:
        factor = 2.0**self.scale_level
        return ortho(
            self.left_bound * factor,
            self.right_bound * factor,
            self.bottom_bound * factor,
            self.top_bound * factor,
            self.near,
            self.far,
        )

    def scale(self, delta_scale: float) -> None:
        self.scale_level += delta_scale


class PerspectiveCamera(Camera):
    """Perspective camera; ``fovy`` is in degrees."""

    def __init__(self, fovy: float, aspect: float, near: float, far: float) -> None:
        super().__init__()
        self.fovy = fovy
        self.aspect = aspect
        self.near = near
        self.far = far

    def projection_matrix(self) -> np.ndarray:
        return perspective(math.radians(self.fovy), self.aspect, self.near, self.far)

    def scale(self, delta_scale: float) -> None:
        """Move the camera along its viewing direction."""
        self.position = self.position + self.front * delta_scale