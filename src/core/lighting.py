"""Point light for the fixed-function pipeline.

OpenGL is imported inside :meth:`PointLight.apply` so lights can be described
before a GL context exists.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# Intensity that maps to a full-strength diffuse term
REFERENCE_INTENSITY = 2000.0


@dataclass
class PointLight:
    position: Tuple[float, float, float] = (0.0, 10.0, 0.0)
    color: Tuple[float, float, float] = (1.0, 1.0, 1.0)
    intensity: float = 800.0  # lumens
    range: float = 20.0
    radius: float = 0.0

    def __post_init__(self):
        if self.intensity < 0:
            raise ValueError(f"intensity must be >= 0, got {self.intensity}")
        if self.range <= 0:
            raise ValueError(f"range must be > 0, got {self.range}")
        if self.radius < 0:
            raise ValueError(f"radius must be >= 0, got {self.radius}")

    def diffuse(self) -> Tuple[float, float, float, float]:
        scale = min(1.0, self.intensity / REFERENCE_INTENSITY)
        r, g, b = self.color
        return (r * scale, g * scale, b * scale, 1.0)

    def attenuation(self) -> Tuple[float, float, float]:
        """(constant, linear, quadratic) factors for glLightf.

        The quadratic term drops the light to roughly 1% at ``range``. A
        larger ``radius`` (a bigger emitter) softens the falloff by moving
        part of it into the linear term.
        """
        soft = self.radius / (self.radius + self.range)
        quadratic = (1.0 - soft) * 100.0 / (self.range * self.range)
        linear = soft * 100.0 / self.range
        return 1.0, linear, quadratic

    def apply(self, light_id: int) -> None:  # pragma: no cover - visual
        from OpenGL.GL import (
            glEnable,
            glLightfv,
            glLightf,
            GL_LIGHTING,
            GL_POSITION,
            GL_DIFFUSE,
            GL_SPECULAR,
            GL_CONSTANT_ATTENUATION,
            GL_LINEAR_ATTENUATION,
            GL_QUADRATIC_ATTENUATION,
        )

        glEnable(GL_LIGHTING)
        glEnable(light_id)
        # w = 1 makes it a positional light; must be set with the view matrix loaded
        glLightfv(light_id, GL_POSITION, (*self.position, 1.0))
        glLightfv(light_id, GL_DIFFUSE, self.diffuse())
        glLightfv(light_id, GL_SPECULAR, self.diffuse())
        constant, linear, quadratic = self.attenuation()
        glLightf(light_id, GL_CONSTANT_ATTENUATION, constant)
        glLightf(light_id, GL_LINEAR_ATTENUATION, linear)
        glLightf(light_id, GL_QUADRATIC_ATTENUATION, quadratic)
