# lzrender

This package is the CPU side of a small real-time renderer. It needs no GPU. It provides:

- 4×4 transform helpers: look-at, perspective, orthographic, rotation, translation, scaling, decomposition, frustum corners
- a scene graph with hierarchical model matrices
- perspective and orthographic cameras
- game-style (WASD plus mouse look) and trackball camera controls
- lights, and point-light shadow cube-face matrices
- GLSL source loading with recursive `#include "file"` expansion
- planning of the framebuffers and passes for mip-chain bloom
- a skyline rectangle packer for texture atlases, with bottom-left and best-fit heuristics

All matrix work uses `numpy`. Matrices are 4×4 and act on column vectors, so a point `p` transforms as `M @ p`. Angles given to scene nodes and cameras are in degrees. Angles given to the functions in `lzrender.transforms` are in radians.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install .[test]
```

## Modules

| Module | Contents |
| --- | --- |
| `lzrender.transforms` | `look_at`, `perspective`, `ortho`, `rotation`, `translation`, `scaling`, `decompose` (returns a `Decomposition`), `frustum_corners_world_space` |
| `lzrender.scene` | `ObjectType`, `Object`, `Scene` |
| `lzrender.camera` | `Camera`, `PerspectiveCamera`, `OrthographicCamera` |
| `lzrender.camera_control` | `CameraControl`, `GameCameraControl`, `TrackBallCameraControl`, `MouseButton`, `Action`, `Key` |
| `lzrender.lights` | `Light`, `AmbientLight`, `DirectionalLight`, `PointLight`, `SpotLight`, `Shadow`, `PointLightShadow`, `RenderTarget` |
| `lzrender.shader_source` | `load_shader` |
| `lzrender.bloom` | `Bloom`, `BloomPass`, `PassKind`, `Target`, `TargetRole` |
| `lzrender.rectpack` | `Heuristic`, `Rect`, `RectPacker`, `MAX_COORD` |

## Examples

### Scene graph

A child's model matrix includes its parent's transform. `add_child` raises `ValueError` when the object is already a child of that node.

```python
from lzrender.scene import Scene, Object

scene = Scene()
parent = Object()
parent.set_position((1.0, 0.0, 0.0))
child = Object()
child.set_position((0.0, 2.0, 0.0))
child.rotate_y(45.0)

scene.add_child(parent)
parent.add_child(child)

world = child.model_matrix() @ (0.0, 0.0, 0.0, 1.0)   # [1, 2, 0, 1]
forward = child.direction()                           # unit vector along local -Z
```

### Cameras

```python
from lzrender.camera import PerspectiveCamera, OrthographicCamera

camera = PerspectiveCamera(60.0, 16 / 9, 0.1, 1000.0)   # fovy in degrees
camera.set_position((0.0, 0.0, 5.0))
view = camera.view_matrix()
projection = camera.projection_matrix()
camera.scale(1.0)          # moves the camera one unit along its view direction

ortho_cam = OrthographicCamera(-10, 10, -10, 10, 0.1, 100)
ortho_cam.scale(1.0)       # doubles the visible extent (2 ** scale_level)
```

### Camera controls

A control is fed window events and updates the camera it holds.

```python
from lzrender.camera_control import GameCameraControl, MouseButton, Action, Key

control = GameCameraControl(camera)
control.on_key(Key.W, Action.PRESS, 0)
control.update()           # steps camera.position forward by control.speed

control.on_mouse(MouseButton.RIGHT, Action.PRESS, 100.0, 100.0)
control.on_cursor(120.0, 100.0)   # right-drag turns the camera
```

`TrackBallCameraControl` orbits about the origin while the left button is held. It pans while the middle button is held. On scroll it calls `camera.scale(scale_speed * offset)`.

### Point-light shadows

```python
from lzrender.lights import PointLight

light = PointLight()
light.set_position((0.0, 3.0, 0.0))
matrices = light.shadow.light_matrices(light.position)   # +X, -X, +Y, -Y, +Z, -Z
light.shadow.set_render_target_size(2048, 2048)
```

### Shader sources

```python
from lzrender.shader_source import load_shader

source = load_shader("shaders/pbr/pbr.frag")
```

Each `#include "name"` line is replaced by the text of `name`. The name is resolved relative to the including file's directory. A missing file raises `FileNotFoundError`. A malformed or circular include raises `ValueError`.

### Bloom planning

```python
from lzrender.bloom import Bloom

bloom = Bloom(1920, 1080)          # min_resolution defaults to 32
for step in bloom.passes():
    print(step.kind, step.target.size, [t.size for t in step.inputs], step.uniforms)
```

The passes run in this order:

1. A copy of the source into an origin target.
2. Bright-pass extraction into the first down-sample target.
3. Successive down-samples.
4. Up-samples that blend each lower-resolution result with the matching down-sample.
5. A final merge back into the source.

`passes()` raises `ValueError` when the size allows fewer than two mip levels.

### Rectangle packing

`Rect` is immutable. `pack` returns new rectangles in input order, with positions filled in. A rectangle that does not fit has `was_packed=False`, and `x` and `y` set to `MAX_COORD`.

```python
from lzrender.rectpack import RectPacker, Rect, Heuristic

packer = RectPacker(256, 256, 256)
packer.set_heuristic(Heuristic.SKYLINE_BF_SORT_HEIGHT)
packed = packer.pack([Rect(id=0, w=64, h=32), Rect(id=1, w=100, h=100)])
for rect in packed:
    print(rect.id, rect.was_packed, rect.x, rect.y)
```

## What this package does not do

lzrender does not draw anything. It has no:

- OpenGL context
- shader compilation
- vertex buffers or textures
- mesh geometry generators
- material types
- draw loop

It produces the matrices, scene structure, pass plans and atlas layouts that a drawing layer would consume. Issuing the GPU calls is left to the caller.

## Running the tests

```
pytest
```