"""Scene graph, cameras, lights, transforms, shader loading, bloom planning and rectangle packing."""

__version__ = "0.1.0"

__all__ = [
    "bloom",
    "camera",
    "camera_control",
    "lights",
    "rectpack",
    "scene",
    "shader_source",
    "transforms",
]