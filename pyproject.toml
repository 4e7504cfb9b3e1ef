[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lzrender"
version = "0.1.0"
description = "Scene graph, cameras, lights, transforms, bloom planning and rectangle packing for a small real-time renderer"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "rendering",
    "3d",
    "scene-graph",
    "camera",
    "transforms",
    "shadow-mapping",
    "bloom",
    "glsl",
    "rectangle-packing",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["lzrender"]

[tool.pytest.ini_options]
addopts = "-ra"
