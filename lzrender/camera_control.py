"""Input handlers that steer a camera from mouse and keyboard events."""

from __future__ import annotations

import enum
import math

import numpy as np

from lzrender.camera import Camera
from lzrender.transforms import rotation

_WORLD_UP = np.array([0.0, 1.0, 0.0])


class MouseButton(enum.IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class Action(enum.IntEnum):
    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class Key(enum.IntEnum):
    A = 65
    D = 68
    S = 83
    W = 87


def _rotate(vec: np.ndarray, angle_degrees: float, axis) -> np.ndarray:
    return rotation(math.radians(angle_degrees), axis)[:3, :3] @ vec


class CameraControl:
    """Tracks mouse and key state; subclasses turn it into camera motion."""

    def __init__(self, camera: Camera) -> None:
        self.camera = camera
        self.left_mouse_down = False
        self.right_mouse_down = False
        self.middle_mouse_down = False
        self.current_x = 0.0
        self.current_y = 0.0
        self.sensitivity = 0.2
        self.scale_speed = 0.2
        self.keys: dict[int, bool] = {}

    def on_mouse(self, button: int, action: int, xpos: float, ypos: float) -> None:
        pressed = action == Action.PRESS
        if pressed:
            self.current_x = xpos
            self.current_y = ypos
        if button == MouseButton.LEFT:
            self.left_mouse_down = pressed
        elif button == MouseButton.RIGHT:
            self.right_mouse_down = pressed
        elif button == MouseButton.MIDDLE:
            self.middle_mouse_down = pressed

    def on_cursor(self, xpos: float, ypos: float) -> None:
        """Handle cursor motion; the base control ignores it."""

    def on_key(self, key: int, action: int, mods: int) -> None:
        if action == Action.REPEAT:
            return
        self.keys[key] = action == Action.PRESS

    def on_scroll(self, offset: float) -> None:
        """Handle scrolling; the base control ignores it."""

    def update(self) -> None:
        """Per-frame update; the base control does nothing."""


class GameCameraControl(CameraControl):
    """First-person control: right-drag to look, WASD to move."""

    def __init__(self, camera: Camera) -> None:
        super().__init__(camera)
        self.pitch_angle = 0.0
        self.speed = 0.1
        self.auto_yaw_angle = 0.0

    def on_cursor(self, xpos: float, ypos: float) -> None:
        delta_x = (xpos - self.current_x) * self.sensitivity
        delta_y = (ypos - self.current_y) * self.sensitivity
        if self.right_mouse_down:
            self._pitch(-delta_y)
            self._yaw(-delta_x)
        self.current_x = xpos
        self.current_y = ypos

    def _pitch(self, angle: float) -> None:
        self.pitch_angle += angle
        if self.pitch_angle > 89.0 or self.pitch_angle < -89.0:
            self.pitch_angle -= angle
            return
        self.camera.up = _rotate(self.camera.up, angle, self.camera.right)

    def _yaw(self, angle: float) -> None:
        self.camera.up = _rotate(self.camera.up, angle, _WORLD_UP)
        self.camera.right = _rotate(self.camera.right, angle, _WORLD_UP)

    def update(self) -> None:
        front = np.cross(self.camera.up, self.camera.right)
        right = self.camera.right
        direction = np.zeros(3)
        if self.keys.get(Key.W, False):
            direction += front
        if self.keys.get(Key.S, False):
            direction -= front
        if self.keys.get(Key.A, False):
            direction -= right
        if self.keys.get(Key.D, False):
            direction += right
        length = np.linalg.norm(direction)
        if length != 0:
            self.camera.position = self.camera.position + direction / length * self.speed

    def auto_yaw(self, delta_time: float) -> None:
        """Orbit the camera around the Y axis at 20 degrees per second."""
        self.auto_yaw_angle += 20.0 * delta_time
        angle = math.radians(self.auto_yaw_angle)
        radius = float(np.linalg.norm(self.camera.position))
        position = self.camera.position.copy()
        position[0] = radius * math.sin(angle)
        position[2] = radius * math.cos(angle)
        self.camera.position = position

        target = np.array([0.0, position[1], 0.0])
        front = target - position
        front = front / np.linalg.norm(front)
        right = np.cross(front, _WORLD_UP)
        self.camera.right = right / np.linalg.norm(right)
        up = np.cross(self.camera.right, front)
        self.camera.up = up / np.linalg.norm(up)


class TrackBallCameraControl(CameraControl):
    """Orbit around the origin with left-drag, pan with middle-drag, zoom with scroll."""

    def __init__(self, camera: Camera) -> None:
        super().__init__(camera)
        self.move_speed = 0.01

    def on_cursor(self, xpos: float, ypos: float) -> None:
        if self.left_mouse_down:
            delta_x = (xpos - self.current_x) * self.sensitivity
            delta_y = (ypos - self.current_y) * self.sensitivity
            self._pitch(delta_y)
            self._yaw(delta_x)
        elif self.middle_mouse_down:
            delta_x = (xpos - self.current_x) * self.move_speed
            delta_y = (ypos - self.current_y) * self.move_speed
            self.camera.position = (
                self.camera.position + self.camera.up * delta_y - self.camera.right * delta_x
            )
        self.current_x = xpos
        self.current_y = ypos

    def _pitch(self, angle: float) -> None:
        axis = self.camera.right
        self.camera.up = _rotate(self.camera.up, angle, axis)
        self.camera.position = _rotate(self.camera.position, angle, axis)

    def _yaw(self, angle: float) -> None:
        self.camera.up = _rotate(self.camera.up, angle, _WORLD_UP)
        self.camera.right = _rotate(self.camera.right, angle, _WORLD_UP)
        self.camera.position = _rotate(self.camera.position, angle, _WORLD_UP)

    def on_scroll(self, offset: float) -> None:
        self.camera.scale(self.scale_speed * offset)