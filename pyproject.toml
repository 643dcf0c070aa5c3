[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphicslab"
version = "0.1.0"
description = "Software rasterizers, shaders, OBJ face parsing, Bezier curves and ray-tracing scene primitives"
requires-python = ">=3.10"
keywords = [
    "graphics",
    "rasterizer",
    "shading",
    "bezier",
    "obj",
    "ray tracing",
    "rendering",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Education",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
graphicslab-wireframe = "graphicslab.wireframe:main"
graphicslab-triangles = "graphicslab.trianglefill:main"
graphicslab-bezier = "graphicslab.bezier:main"

[tool.hatch.build.targets.wheel]
packages = ["graphicslab"]

[tool.pytest.ini_options]
addopts = "-ra"
