"""Scene-graph nodes with a local transform and parent/child links."""

from __future__ import annotations

import enum
import math

import numpy as np

from lzrender.transforms import rotation, scaling, translation

_X_AXIS = (1.0, 0.0, 0.0)
_Y_AXIS = (0.0, 1.0, 0.0)
_Z_AXIS = (0.0, 0.0, 1.0)


class ObjectType(enum.Enum):
    """Kind of scene-graph node."""

    OBJECT = "object"
    MESH = "mesh"
    INSTANCED_MESH = "instanced_mesh"
    SCENE = "scene"


class Object:
    """A node in the scene graph; angles are kept in degrees."""

    def __init__(self) -> None:
        self.object_type = ObjectType.OBJECT
        self.position = np.zeros(3)
        self.angle_x = 0.0
        self.angle_y = 0.0
        self.angle_z = 0.0
        self.scale = np.ones(3)
        self._children: list[Object] = []
        self.parent: Object | None = None

    def set_position(self, position) -> None:
        self.position = np.array(position, dtype=float).reshape(3)

    def rotate_x(self, angle: float) -> None:
        self.angle_x += angle

    def rotate_y(self, angle: float) -> None:
        self.angle_y += angle

    def rotate_z(self, angle: float) -> None:
        self.angle_z += angle

    def set_angle_x(self, angle: float) -> None:
        self.angle_x = angle

    def set_angle_y(self, angle: float) -> None:
        self.angle_y = angle

    def set_angle_z(self, angle: float) -> None:
        self.angle_z = angle

    def set_scale(self, scale) -> None:
        self.scale = np.array(scale, dtype=float).reshape(3)

    def model_matrix(self) -> np.ndarray:
        """World transform: parent * translate * scale * Rx * Ry * Rz."""
        parent_matrix = self.parent.model_matrix() if self.parent is not None else np.identity(4)
        local = (
            scaling(self.scale)
            @ rotation(math.radians(self.angle_x), _X_AXIS)
            @ rotation(math.radians(self.angle_y), _Y_AXIS)
            @ rotation(math.radians(self.angle_z), _Z_AXIS)
        )
        return parent_matrix @ translation(self.position) @ local

    def direction(self) -> np.ndarray:
        """Unit vector along the node's local -Z axis in world space."""
        forward = -self.model_matrix()[:3, 2]
        return forward / np.linalg.norm(forward)

    def add_child(self, obj: Object) -> None:
        """Attach ``obj`` as a child; raises ValueError if it is already one."""
        if any(child is obj for child in self._children):
            raise ValueError("duplicated child added")
        self._children.append(obj)
        obj.parent = self

    @property
    def children(self) -> list[Object]:
        return list(self._children)


class Scene(Object):
    """Root node of a scene graph."""

    def __init__(self) -> None:
        super().__init__()
        self.object_type = ObjectType.SCENE