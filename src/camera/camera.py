from pygame.math import Vector3
from OpenGL.GL import glMatrixMode, glLoadIdentity, GL_PROJECTION, GL_MODELVIEW
from OpenGL.GLU import gluPerspective, gluLookAt

from config import WIDTH, HEIGHT, FOV, NEAR_PLANE, FAR_PLANE


class Camera:
    """Look-at camera: an eye position aimed at a fixed target."""

    def __init__(self, eye=None, target=None, up=None, width=WIDTH, height=HEIGHT, fov=FOV):
        self.eye = Vector3(eye) if eye is not None else Vector3(0, 0, 10)
        self.target = Vector3(target) if target is not None else Vector3(0, 0, 0)
        self.up = Vector3(up) if up is not None else Vector3(0, 1, 0)
        self.aspect = width / height
        self.fov = fov

        if (self.target - self.eye).length_squared() == 0:
            raise ValueError("camera eye and target must differ")

    def apply(self):  # pragma: no cover - visual
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        gluPerspective(self.fov, self.aspect, NEAR_PLANE, FAR_PLANE)

        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()
        gluLookAt(
            self.eye.x, self.eye.y, self.eye.z,
            self.target.x, self.target.y, self.target.z,
            self.up.x, self.up.y, self.up.z,
        )
