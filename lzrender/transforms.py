"""4x4 homogeneous transform helpers (right-handed, OpenGL clip-space conventions)."""

from __future__ import annotations

import itertools
import math
from typing import NamedTuple, Sequence

import numpy as np

ArrayLike = Sequence[float] | np.ndarray


class Decomposition(NamedTuple):
    """Translation, XYZ Euler angles in degrees and scale of an affine matrix."""

    position: np.ndarray
    euler_degrees: np.ndarray
    scale: np.ndarray


def _vec3(value: ArrayLike) -> np.ndarray:
    vec = np.array(value, dtype=float).reshape(-1)
    if vec.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {vec.shape}")
    return vec


def _normalize(vec: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(vec))
    if length == 0.0:
        raise ValueError("cannot normalise a zero-length vector")
    return vec / length


def look_at(eye: ArrayLike, center: ArrayLike, up: ArrayLike) -> np.ndarray:
    """View matrix looking from ``eye`` towards ``center``."""
    eye_v, center_v, up_v = _vec3(eye), _vec3(center), _vec3(up)
    f = _normalize(center_v - eye_v)
    s = _normalize(np.cross(f, up_v))
    u = np.cross(s, f)
    result = np.identity(4)
    result[0, :3] = s
    result[1, :3] = u
    result[2, :3] = -f
    result[0, 3] = -np.dot(s, eye_v)
    result[1, 3] = -np.dot(u, eye_v)
    result[2, 3] = np.dot(f, eye_v)
    return result


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Perspective projection; ``fovy`` is in radians, depth maps to [-1, 1]."""
    if aspect == 0 or far == near:
        raise ValueError("degenerate perspective frustum")
    tan_half = math.tan(fovy / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[3, 2] = -1.0
    result[2, 3] = -(2.0 * far * near) / (far - near)
    return result


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """Orthographic projection mapping the box to the [-1, 1] cube."""
    if right == left or top == bottom or far == near:
        raise ValueError("degenerate orthographic box")
    result = np.identity(4)
    result[0, 0] = 2.0 / (right - left)
    result[1, 1] = 2.0 / (top - bottom)
    result[2, 2] = -2.0 / (far - near)
    result[0, 3] = -(right + left) / (right - left)
    result[1, 3] = -(top + bottom) / (top - bottom)
    result[2, 3] = -(far + near) / (far - near)
    return result


def rotation(angle: float, axis: ArrayLike) -> np.ndarray:
    """Rotation by ``angle`` radians about ``axis`` (normalised first)."""
    x, y, z = _normalize(_vec3(axis))
    c, s = math.cos(angle), math.sin(angle)
    t = 1.0 - c
    result = np.identity(4)
    result[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return result


def translation(offset: ArrayLike) -> np.ndarray:
    """Translation by ``offset``."""
    result = np.identity(4)
    result[:3, 3] = _vec3(offset)
    return result


def scaling(factors: ArrayLike) -> np.ndarray:
    """Axis-aligned scale by ``factors``."""
    result = np.identity(4)
    result[:3, :3] = np.diag(_vec3(factors))
    return result


def decompose(matrix: ArrayLike) -> Decomposition:
    """Split an affine matrix into position, XYZ Euler angles (degrees) and scale."""
    m = np.array(matrix, dtype=float)
    if m.shape != (4, 4):
        raise ValueError("expected a 4x4 matrix")
    if m[3, 3] == 0.0:
        raise ValueError("matrix cannot be decomposed")
    m = m / m[3, 3]

    position = m[:3, 3].copy()
    c0, c1, c2 = (m[:3, i].copy() for i in range(3))

    sx = float(np.linalg.norm(c0))
    c0 = _normalize(c0)
    c1 = c1 - c0 * np.dot(c0, c1)
    sy = float(np.linalg.norm(c1))
    c1 = _normalize(c1)
    c2 = c2 - c0 * np.dot(c0, c2)
    c2 = c2 - c1 * np.dot(c1, c2)
    sz = float(np.linalg.norm(c2))
    c2 = _normalize(c2)

    scale = np.array([sx, sy, sz])
    if np.dot(c0, np.cross(c1, c2)) < 0:
        scale = -scale
        c0, c1, c2 = -c0, -c1, -c2

    r = np.column_stack([c0, c1, c2])
    t1 = math.atan2(r[1, 2], r[2, 2])
    c2_len = math.hypot(r[0, 0], r[0, 1])
    t2 = math.atan2(-r[0, 2], c2_len)
    s1, k1 = math.sin(t1), math.cos(t1)
    t3 = math.atan2(s1 * r[2, 0] - k1 * r[1, 0], k1 * r[1, 1] - s1 * r[2, 1])
    euler = np.degrees(np.array([-t1, -t2, -t3]))
    return Decomposition(position, euler, scale)


def frustum_corners_world_space(proj_view: ArrayLike) -> list[np.ndarray]:
    """The eight corners of the clip-space cube mapped back to world space."""
    inverse = np.linalg.inv(np.asarray(proj_view, dtype=float))
    corners = []
    for x, y, z in itertools.product((0, 1), repeat=3):
        ndc = np.array([2.0 * x - 1.0, 2.0 * y - 1.0, 2.0 * z - 1.0, 1.0])
        point = inverse @ ndc
        corners.append(point / point[3])
    return corners