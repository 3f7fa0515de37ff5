from typing import List, Optional
from dataclasses import dataclass, field

from OpenGL.GL import (
    glEnable,
    glDisable,
    glLightModelfv,
    GL_LIGHTING,
    GL_LIGHT0,
    GL_LIGHT_MODEL_AMBIENT,
    GL_NORMALIZE,
)

from camera import Camera
from core.drawable import Drawable, Material
from core.lighting import PointLight
from core.mesh import TriangleMesh
from config import AMBIENT_LIGHT

# Fixed-function pipelines guarantee at least eight lights
MAX_LIGHTS = 8


@dataclass
class GLScene:
    """Scene that renders what scene setup registers on it.

    Implements :class:`core.drawable.SceneCollaborator`. Meshes are uploaded
    on registration, so a GL context must already exist.
    """

    camera: Optional[Camera] = None
    static_meshes: List[Drawable] = field(default_factory=list)
    lights: List[PointLight] = field(default_factory=list)

    def spawn_mesh(self, positions, uvs, material: Material) -> TriangleMesh:
        mesh = TriangleMesh.from_arrays(positions, uvs, material)
        self.static_meshes.append(mesh)
        return mesh

    def spawn_camera(self, eye, target) -> Camera:
        self.camera = Camera(eye=eye, target=target)
        return self.camera

    def spawn_point_light(self, light: PointLight) -> PointLight:
        if len(self.lights) >= MAX_LIGHTS:
            raise ValueError(f"at most {MAX_LIGHTS} point lights are supported")
        self.lights.append(light)
        return light

    def render(self):  # pragma: no cover - visual
        if self.camera is None:
            return
        self.camera.apply()

        if self.lights:
            glEnable(GL_LIGHTING)
            glEnable(GL_NORMALIZE)
            glLightModelfv(GL_LIGHT_MODEL_AMBIENT, AMBIENT_LIGHT)
            for i, light in enumerate(self.lights):
                light.apply(GL_LIGHT0 + i)
        else:
            glDisable(GL_LIGHTING)

        for m in self.static_meshes:
            m.draw()

    def release(self):
        for m in self.static_meshes:
            if hasattr(m, "release"):
                m.release()
        self.static_meshes.clear()
