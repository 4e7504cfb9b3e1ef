import math

import numpy as np
import pytest

from lzrender.transforms import (
    decompose,
    frustum_corners_world_space,
    look_at,
    ortho,
    perspective,
    rotation,
    scaling,
    translation,
)


def _apply(matrix, point):
    result = matrix @ np.append(np.asarray(point, dtype=float), 1.0)
    return result[:3] / result[3]


def test_look_at_moves_eye_to_origin():
    eye = np.array([1.0, 2.0, 3.0])
    view = look_at(eye, [4.0, 2.0, -1.0], [0.0, 1.0, 0.0])
    assert np.allclose(_apply(view, eye), np.zeros(3))


def test_look_at_puts_center_on_negative_z():
    eye = np.array([1.0, 2.0, 3.0])
    center = np.array([4.0, 2.0, -1.0])
    view = look_at(eye, center, [0.0, 1.0, 0.0])
    dist = np.linalg.norm(center - eye)
    assert np.allclose(_apply(view, center), [0.0, 0.0, -dist])


def test_look_at_rotation_is_orthonormal():
    view = look_at([3.0, -1.0, 2.0], [0.0, 0.0, 0.0], [0.0, 1.0, 0.0])
    r = view[:3, :3]
    assert np.allclose(r @ r.T, np.identity(3))
    assert np.linalg.det(r) == pytest.approx(1.0)


def test_look_at_rejects_same_eye_and_center():
    with pytest.raises(ValueError):
        look_at([1.0, 1.0, 1.0], [1.0, 1.0, 1.0], [0.0, 1.0, 0.0])


def test_perspective_maps_near_and_far_planes():
    near, far = 0.1, 50.0
    proj = perspective(math.radians(90.0), 1.0, near, far)
    assert _apply(proj, [0.0, 0.0, -near])[2] == pytest.approx(-1.0)
    assert _apply(proj, [0.0, 0.0, -far])[2] == pytest.approx(1.0)
    assert proj[3, 2] == -1.0


def test_ortho_maps_box_to_cube():
    proj = ortho(-2.0, 6.0, -1.0, 3.0, 0.5, 10.0)
    assert np.allclose(_apply(proj, [-2.0, -1.0, -0.5]), -np.ones(3))
    assert np.allclose(_apply(proj, [6.0, 3.0, -10.0]), np.ones(3))


def test_ortho_rejects_degenerate_box():
    with pytest.raises(ValueError):
        ortho(1.0, 1.0, 0.0, 1.0, 0.0, 1.0)


def test_rotation_is_proper_and_keeps_axis():
    axis = np.array([1.0, 2.0, -0.5])
    rot = rotation(0.7, axis)
    r = rot[:3, :3]
    assert np.allclose(r @ r.T, np.identity(3))
    assert np.linalg.det(r) == pytest.approx(1.0)
    assert np.allclose(r @ axis, axis)


def test_rotation_inverse_and_axis_normalisation():
    axis = [0.3, -0.4, 1.2]
    assert np.allclose(rotation(1.1, axis) @ rotation(-1.1, axis), np.identity(4))
    assert np.allclose(rotation(1.1, axis), rotation(1.1, np.multiply(axis, 3.0)))


def test_rotation_rejects_zero_axis():
    with pytest.raises(ValueError):
        rotation(1.0, [0.0, 0.0, 0.0])


def test_translation_and_scaling_apply_to_points():
    point = np.array([1.5, -2.0, 4.0])
    offset = np.array([3.0, 1.0, -2.0])
    factors = np.array([2.0, 0.5, 3.0])
    assert np.allclose(_apply(translation(offset), point), point + offset)
    assert np.allclose(_apply(scaling(factors), point), point * factors)


def test_decompose_round_trip():
    angles = np.array([20.0, -35.0, 50.0])
    position = np.array([1.0, -2.0, 3.5])
    factors = np.array([2.0, 0.5, 1.5])
    matrix = (
        translation(position)
        @ rotation(math.radians(angles[0]), [1, 0, 0])
        @ rotation(math.radians(angles[1]), [0, 1, 0])
        @ rotation(math.radians(angles[2]), [0, 0, 1])
        @ scaling(factors)
    )
    result = decompose(matrix)
    assert np.allclose(result.position, position)
    assert np.allclose(result.euler_degrees, angles)
    assert np.allclose(result.scale, factors)


def test_decompose_rejects_zero_w():
    matrix = np.identity(4)
    matrix[3, 3] = 0.0
    with pytest.raises(ValueError):
        decompose(matrix)


def test_frustum_corners_of_ortho_box():
    left, right, bottom, top, near, far = -3.0, 5.0, -2.0, 4.0, 1.0, 9.0
    corners = frustum_corners_world_space(ortho(left, right, bottom, top, near, far))
    assert len(corners) == 8
    assert np.allclose(corners[0], [left, bottom, -near, 1.0])
    assert np.allclose(corners[-1], [right, top, -far, 1.0])
    for corner in corners:
        assert min(abs(corner[0] - left), abs(corner[0] - right)) < 1e-9
        assert min(abs(corner[1] - bottom), abs(corner[1] - top)) < 1e-9
        assert min(abs(corner[2] + near), abs(corner[2] + far)) < 1e-9
    assert len({tuple(np.round(c, 6)) for c in corners}) == 8


def test_frustum_corners_of_perspective_near_closer_than_far():
    eye = np.array([0.0, 1.0, 5.0])
    proj_view = perspective(math.radians(60.0), 1.5, 0.5, 20.0) @ look_at(
        eye, [0.0, 1.0, 0.0], [0.0, 1.0, 0.0]
    )
    corners = frustum_corners_world_space(proj_view)
    near_dist = [np.linalg.norm(c[:3] - eye) for c in corners[0::2]]
    far_dist = [np.linalg.norm(c[:3] - eye) for c in corners[1::2]]
    assert max(near_dist) < min(far_dist)