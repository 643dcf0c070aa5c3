import numpy as np
import pytest
from PIL import Image

from graphicslab.texture import FragmentPayload, Texture, VertexPayload


@pytest.fixture
def pixels():
    return np.arange(4 * 4 * 3, dtype=np.uint8).reshape(4, 4, 3)


def test_dimensions(pixels):
    tex = Texture(pixels[:, :3])
    assert tex.width == 3
    assert tex.height == 4


def test_top_left_sample(pixels):
    tex = Texture(pixels)
    assert np.array_equal(tex.get_color(0.0, 1.0), pixels[0, 0])


def test_center_sample(pixels):
    tex = Texture(pixels)
    assert np.array_equal(tex.get_color(0.5, 0.5), pixels[2, 2])


def test_bottom_right_sample(pixels):
    tex = Texture(pixels)
    assert np.array_equal(tex.get_color(0.99, 0.01), pixels[3, 3])


def test_edges_stay_in_image(pixels):
    tex = Texture(pixels)
    assert np.array_equal(tex.get_color(1.0, 0.0), pixels[3, 3])
    assert np.array_equal(tex.get_color(-0.5, 2.0), pixels[0, 0])


def test_rejects_bad_shape():
    with pytest.raises(ValueError):
        Texture(np.zeros((4, 4)))
    with pytest.raises(ValueError):
        Texture(np.zeros((0, 4, 3)))


def test_from_file_round_trip(tmp_path, pixels):
    path = tmp_path / "tex.png"
    Image.fromarray(pixels).save(path)
    tex = Texture.from_file(path)
    assert (tex.width, tex.height) == (4, 4)
    assert np.array_equal(tex.get_color(0.5, 0.5), pixels[2, 2])


def test_from_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        Texture.from_file(tmp_path / "absent.png")


def test_payload_defaults(pixels):
    tex = Texture(pixels)
    payload = FragmentPayload(texture=tex)
    assert payload.texture is tex
    assert np.array_equal(payload.view_pos, np.zeros(3))
    assert np.array_equal(VertexPayload().position, np.zeros(3))