"""Light sources and the shadow settings attached to them."""

from __future__ import annotations

import abc
from dataclasses import dataclass

import numpy as np

from lzrender.camera import Camera, PerspectiveCamera
from lzrender.scene import Object
from lzrender.transforms import look_at

_CUBE_FACES = (
    ((1.0, 0.0, 0.0), (0.0, -1.0, 0.0)),
    ((-1.0, 0.0, 0.0), (0.0, -1.0, 0.0)),
    ((0.0, 1.0, 0.0), (0.0, 0.0, 1.0)),
    ((0.0, -1.0, 0.0), (0.0, 0.0, -1.0)),
    ((0.0, 0.0, 1.0), (0.0, -1.0, 0.0)),
    ((0.0, 0.0, -1.0), (0.0, -1.0, 0.0)),
)
"""View direction and up vector for the +X, -X, +Y, -Y, +Z, -Z cube faces."""


@dataclass(frozen=True)
class RenderTarget:
    """Size of the off-screen target a shadow map is rendered into."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("render target size must be positive")


class Shadow(abc.ABC):
    """Shadow-mapping parameters shared by every kind of light."""

    def __init__(self) -> None:
        self.camera: Camera | None = None
        self.render_target: RenderTarget | None = None
        self.bias = 0.0003
        self.pcf_radius = 0.01
        self.disk_tightness = 1.0
        self.light_size = 0.04

    @abc.abstractmethod
    def set_render_target_size(self, width: int, height: int) -> None:
        """Replace the render target with one of the given size."""


class PointLightShadow(Shadow):
    """Omnidirectional shadow rendered into the six faces of a cube map."""

    def __init__(self) -> None:
        super().__init__()
        self.camera = PerspectiveCamera(90.0, 1.0, 0.1, 50.0)
        self.render_target = RenderTarget(1024, 1024)

    def set_render_target_size(self, width: int, height: int) -> None:
        self.render_target = RenderTarget(width, height)

    def light_matrices(self, light_position) -> list[np.ndarray]:
        """Projection-view matrices for the cube faces, in +X, -X, +Y, -Y, +Z, -Z order."""
        projection = self.camera.projection_matrix()
        eye = np.array(light_position, dtype=float).reshape(3)
        return [
            projection @ look_at(eye, eye + np.array(direction), up)
            for direction, up in _CUBE_FACES
        ]


class Light(Object):
    """Base light: a scene node with colour, intensities and an optional shadow."""

    def __init__(self) -> None:
        super().__init__()
        self.color = np.ones(3)
        self.specular_intensity = 1.0
        self.intensity = 1.0
        self.shadow: Shadow | None = None


class AmbientLight(Light):
    """Uniform light reaching every surface equally."""


class DirectionalLight(Light):
    """Light arriving from a single direction, such as sunlight."""


class PointLight(Light):
    """Light radiating from a point, with quadratic attenuation and a cube shadow."""

    def __init__(self) -> None:
        super().__init__()
        self.shadow = PointLightShadow()
        self.k2 = 1.0
        self.k1 = 1.0
        self.kc = 1.0


class SpotLight(Light):
    """Cone-shaped light bounded by inner and outer angles."""

    def __init__(self) -> None:
        super().__init__()
        self.inner_angle = 0.0
        self.outer_angle = 0.0