"""Rasterizers, shaders, OBJ face parsing, Bezier curves and ray-tracing scene primitives."""

__version__ = "0.1.0"

__all__ = [
    "bezier",
    "objparse",
    "scene",
    "shaders",
    "texture",
    "transforms",
    "triangle",
    "trianglefill",
    "vecmath",
    "wireframe",
]