import numpy as np
import pytest

from graphicslab.shaders import (
    Light,
    bump_fragment_shader,
    displacement_fragment_shader,
    normal_fragment_shader,
    phong_fragment_shader,
    reflect,
    texture_fragment_shader,
    vertex_shader,
)
from graphicslab.texture import FragmentPayload, Texture, VertexPayload


def _uniform_texture(value):
    return Texture(np.full((4, 4, 3), value, dtype=np.uint8))


def _payload(**kwargs):
    defaults = dict(
        color=np.array([0.5, 0.6, 0.7]),
        normal=np.array([0.0, 0.0, 1.0]),
        tex_coords=np.array([0.5, 0.5]),
        view_pos=np.array([0.0, 0.0, 0.0]),
    )
    defaults.update(kwargs)
    return FragmentPayload(**defaults)


def test_vertex_shader_passes_position():
    pos = np.array([1.0, 2.0, 3.0])
    np.testing.assert_array_equal(vertex_shader(VertexPayload(position=pos)), pos)


def test_light_holds_values():
    light = Light(np.array([1.0, 2.0, 3.0]), np.array([4.0, 4.0, 4.0]))
    np.testing.assert_array_equal(light.position, [1.0, 2.0, 3.0])


def test_reflect_is_unit_and_symmetric():
    vec = np.array([1.0, 1.0, 0.0]) / np.sqrt(2)
    axis = np.array([0.0, 1.0, 0.0])
    result = reflect(vec, axis)
    assert np.isclose(np.linalg.norm(result), 1.0)
    assert np.isclose(result @ axis, vec @ axis)


def test_normal_shader_ignores_normal_length():
    a = normal_fragment_shader(_payload(normal=np.array([0.0, 0.0, 1.0])))
    b = normal_fragment_shader(_payload(normal=np.array([0.0, 0.0, 2.0])))
    np.testing.assert_allclose(a, b)
    np.testing.assert_allclose(a, [127.5, 127.5, 255.0])


def test_normal_shader_range():
    result = normal_fragment_shader(_payload(normal=np.array([-0.3, 0.8, -0.5])))
    assert np.all(result >= 0) and np.all(result <= 255)


def test_texture_shader_without_texture_matches_black_phong():
    payload = _payload()
    black = _payload(color=np.zeros(3))
    np.testing.assert_allclose(texture_fragment_shader(payload), phong_fragment_shader(black))


def test_texture_shader_uses_texture_colour():
    texture = _uniform_texture(200)
    textured = texture_fragment_shader(_payload(texture=texture))
    phong = phong_fragment_shader(_payload(color=np.full(3, 200 / 255.0)))
    np.testing.assert_allclose(textured, phong)


def test_phong_backfacing_gives_only_ambient():
    n = np.array([0.0, 0.0, -1.0])
    dark = phong_fragment_shader(_payload(color=np.array([0.1, 0.2, 0.3]), normal=n))
    bright = phong_fragment_shader(_payload(color=np.array([0.9, 0.8, 0.7]), normal=n))
    np.testing.assert_allclose(dark, bright)
    assert np.allclose(dark, dark[0])


def test_phong_brighter_diffuse_colour():
    dim = phong_fragment_shader(_payload(color=np.array([0.1, 0.1, 0.1])))
    bright = phong_fragment_shader(_payload(color=np.array([0.9, 0.9, 0.9])))
    assert np.all(bright > dim)


def test_bump_uniform_texture_keeps_normal():
    normal = np.array([0.0, 0.0, 1.0])
    result = bump_fragment_shader(_payload(normal=normal, texture=_uniform_texture(90)))
    np.testing.assert_allclose(result, normal * 255.0, atol=1e-9)


def test_displacement_black_texture_matches_phong():
    payload = _payload(texture=_uniform_texture(0))
    np.testing.assert_allclose(
        displacement_fragment_shader(payload), phong_fragment_shader(payload), atol=1e-9
    )


def test_bump_requires_texture():
    with pytest.raises(ValueError):
        bump_fragment_shader(_payload())


def test_displacement_requires_texture():
    with pytest.raises(ValueError):
        displacement_fragment_shader(_payload())