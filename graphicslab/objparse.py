"""String helpers and face decoding for Wavefront OBJ files."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import List, Sequence, TypeVar

from graphicslab.vecmath import Vec2, Vec3, cross

__all__ = [
    "Vertex",
    "split",
    "tail",
    "first_token",
    "get_element",
    "vertices_from_face",
]

T = TypeVar("T")

_BLANKS = " \t"
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Vertex:
    """A model vertex: position, normal and texture coordinate."""

    position: Vec3 = Vec3()
    normal: Vec3 = Vec3()
    texture_coordinate: Vec2 = Vec2()


def split(text: str, token: str) -> List[str]:
    """Split ``text`` at ``token``.

    A token directly after another token (or at the start) yields an empty
    field; a trailing token yields none.
    """
    out: List[str] = []
    temp = ""
    size = len(token)
    i = 0
    while i < len(text):
        if text[i:i + size] == token:
            if temp:
                out.append(temp)
                temp = ""
                i += size - 1
            else:
                out.append("")
        elif i + size >= len(text):
            temp += text[i:i + size]
            out.append(temp)
            break
        else:
            temp += text[i]
        i += 1
    return out


def _first_blank(text: str) -> int:
    positions = [p for p in (text.find(" "), text.find("\t")) if p >= 0]
    return min(positions) if positions else -1


def tail(text: str) -> str:
    """Everything after the first token, without surrounding spaces or tabs."""
    body = text.strip(_BLANKS)
    pos = _first_blank(body)
    if pos < 0:
        return ""
    return body[pos:].lstrip(_BLANKS)


def first_token(text: str) -> str:
    """The first space- or tab-delimited token of ``text``."""
    body = text.lstrip(_BLANKS)
    pos = _first_blank(body)
    return body if pos < 0 else body[:pos]


def _parse_index(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid index {text!r}")
    return int(match.group(1))


def get_element(elements: Sequence[T], index: str) -> T:
    """Element named by a one-based OBJ index; negative indices count from the end."""
    idx = _parse_index(index)
    idx = len(elements) + idx if idx < 0 else idx - 1
    if not 0 <= idx < len(elements):
        raise IndexError(f"index {index!r} is out of range")
    return elements[idx]


def vertices_from_face(
    positions: Sequence[Vec3],
    tex_coords: Sequence[Vec2],
    normals: Sequence[Vec3],
    line: str,
) -> List[Vertex]:
    """Vertices of a face line such as ``f 1/2/3 4/5/6 7/8/9``.

    When any corner lacks a normal, every vertex gets the cross-product
    normal of the first three corners.
    """
    vertices: List[Vertex] = []
    no_normal = False
    for corner in split(tail(line), " "):
        fields = split(corner, "/")
        if len(fields) == 1:
            vertices.append(Vertex(position=get_element(positions, fields[0])))
            no_normal = True
        elif len(fields) == 2:
            vertices.append(Vertex(
                position=get_element(positions, fields[0]),
                texture_coordinate=get_element(tex_coords, fields[1]),
            ))
            no_normal = True
        elif len(fields) == 3:
            tex = get_element(tex_coords, fields[1]) if fields[1] else Vec2()
            vertices.append(Vertex(
                position=get_element(positions, fields[0]),
                normal=get_element(normals, fields[2]),
                texture_coordinate=tex,
            ))

    if no_normal:
        if len(vertices) < 3:
            raise ValueError("a face without normals needs at least three vertices")
        a = vertices[0].position - vertices[1].position
        b = vertices[2].position - vertices[1].position
        normal = cross(a, b)
        vertices = [replace(v, normal=normal) for v in vertices]
    return vertices