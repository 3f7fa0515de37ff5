# tests/test_ground_scene.py
# Scene setup against a recording collaborator instead of the GL scene.

import numpy as np
import pytest

from core.drawable import Material
from core.lighting import PointLight
from world.ground_scene import (
    populate_scene,
    setup_camera,
    setup_lighting,
    setup_plane,
)
from world.tiled_ground import MapParams, build_ground_mesh


class RecordingCollaborator:
    def __init__(self):
        self.calls = []
        self.meshes = []
        self.cameras = []
        self.lights = []

    def spawn_mesh(self, positions, uvs, material):
        self.calls.append("mesh")
        handle = {"positions": positions, "uvs": uvs, "material": material}
        self.meshes.append(handle)
        return handle

    def spawn_camera(self, eye, target):
        self.calls.append("camera")
        self.cameras.append((tuple(eye), tuple(target)))
        return self.cameras[-1]

    def spawn_point_light(self, light):
        self.calls.append("light")
        self.lights.append(light)
        return light


@pytest.fixture
def collaborator():
    return RecordingCollaborator()


def test_setup_camera(collaborator):
    setup_camera(collaborator)
    assert collaborator.cameras == [((-10.0, 10.0, 0.0), (2.5, 0.0, -2.5))]


def test_setup_lighting(collaborator):
    light = setup_lighting(collaborator)
    assert collaborator.lights == [light]
    assert isinstance(light, PointLight)
    assert light.position == (2.5, 10.0, -2.5)
    assert light.color == (1.0, 0.2, 1.0)
    assert light.intensity == 2000.0
    assert light.range == 11.0
    assert light.radius == 10.0


def test_setup_plane_submits_ground_buffer(collaborator):
    handle = setup_plane(collaborator)
    assert collaborator.meshes == [handle]

    expected = build_ground_mesh()
    np.testing.assert_array_equal(handle["positions"], expected.positions)
    np.testing.assert_array_equal(handle["uvs"], expected.uvs)

    material = handle["material"]
    assert isinstance(material, Material)
    assert material.color == (1.0, 1.0, 1.0)
    assert material.wireframe is True


def test_setup_plane_with_custom_map(collaborator):
    params = MapParams(map_side_len=20.0, min_x=-10.0)
    handle = setup_plane(collaborator, params)
    np.testing.assert_array_equal(handle["positions"], build_ground_mesh(params).positions)


def test_populate_scene_order(collaborator, capsys):
    ground = populate_scene(collaborator)
    assert collaborator.calls == ["camera", "light", "mesh"]
    assert ground is collaborator.meshes[0]
    assert "Scene initialization complete." in capsys.readouterr().out


def test_point_light_validation():
    with pytest.raises(ValueError):
        PointLight(range=0.0)
    with pytest.raises(ValueError):
        PointLight(intensity=-1.0)
    with pytest.raises(ValueError):
        PointLight(radius=-0.5)


def test_point_light_diffuse_scales_with_intensity():
    full = PointLight(color=(1.0, 0.2, 1.0), intensity=2000.0)
    assert full.diffuse() == pytest.approx((1.0, 0.2, 1.0, 1.0))
    half = PointLight(color=(1.0, 0.2, 1.0), intensity=1000.0)
    assert half.diffuse() == pytest.approx((0.5, 0.1, 0.5, 1.0))
    # Capped at full strength
    bright = PointLight(color=(1.0, 1.0, 1.0), intensity=8000.0)
    assert bright.diffuse() == pytest.approx((1.0, 1.0, 1.0, 1.0))


@pytest.mark.parametrize("radius", [0.0, 10.0, 50.0])
def test_point_light_fades_to_one_percent_at_range(radius):
    light = PointLight(range=11.0, radius=radius)
    constant, linear, quadratic = light.attenuation()
    d = light.range
    factor = 1.0 / (constant + linear * d + quadratic * d * d)
    assert factor == pytest.approx(1.0 / 101.0)
